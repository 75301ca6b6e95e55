"""Trace one ray through a glass slab and off a mirror below it."""

from __future__ import annotations

import argparse
import math

from glvec.core.vector import vector_type


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--precision", default="f32")
    parser.add_argument("--eta", type=float, default=1.5)
    args = parser.parse_args()

    vec = vector_type(args.precision)
    up = vec(0.0, 1.0, 0.0)
    ray = vec(1.0, -1.0, 0.0).normalized()

    # Entering: ray and normal point opposite ways, so 1/eta is used.
    inside = ray.refract(up, args.eta)
    # Exiting through the bottom face with the normal pointing down.
    outside = inside.refract(-up, args.eta)
    bounced = outside.reflect(up)

    print("incident:", ray)
    print("inside glass:", inside, "angle from normal (deg):", math.degrees(inside.angle(-up)))
    print("exit:", outside)
    print("after mirror:", bounced)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
