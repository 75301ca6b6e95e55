"""CLI entrypoint: report the version and available precisions."""

from __future__ import annotations

import argparse
import logging

from . import __version__
from .core.precision import PRESETS, get_precision
from .core.vector import vector_type


LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="glvec")
    parser.add_argument("--precision", default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(message)s")

    if args.precision is None:
        presets = list(PRESETS.values())
    else:
        try:
            presets = [get_precision(args.precision)]
        except ValueError as exc:
            LOGGER.error("%s", exc)
            return 2

    print(f"glvec v{__version__}")
    for preset in presets:
        cls = vector_type(preset)
        print(f"{cls.__name__}: {preset.name} bits={preset.bits} eps={preset.eps} max={preset.max}")
    LOGGER.debug("listed %d precision(s)", len(presets))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
