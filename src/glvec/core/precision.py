"""Scalar precision presets for the vector types."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Precision:
    name: str
    dtype: type[np.floating]
    bits: int

    @property
    def max(self) -> np.floating:
        """Largest finite value of the scalar type."""
        return np.finfo(self.dtype).max

    @property
    def eps(self) -> np.floating:
        return np.finfo(self.dtype).eps

    def scalar(self, value: object) -> np.floating:
        """Coerce a real number to this precision."""
        return self.dtype(value)


F32 = Precision("f32", np.float32, 32)
F64 = Precision("f64", np.float64, 64)

PRESETS: dict[str, Precision] = {
    "f32": F32,
    "f64": F64,
}


def precision_names() -> list[str]:
    return list(PRESETS.keys())


def get_precision(name: str) -> Precision:
    key = str(name).lower()
    if key not in PRESETS:
        raise ValueError(f"unknown precision: {name}")
    return PRESETS[key]


def default_precision() -> Precision:
    return F32
