"""Three-component vector value types (mimicking GLM's vec3/dvec3).

Conventions:
- Components are NumPy scalars of the variant's dtype (float32 for Vec3,
  float64 for DVec3), so single-precision rounding is real.
- Instances are frozen; every operation returns a new vector.
- Zero lengths, overflow and NaN propagate as IEEE values. Nothing here
  raises or warns on numeric edge cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .precision import F32, F64, Precision, get_precision


V = TypeVar("V", bound="Vector3")

_SCALARS = (int, float, np.integer, np.floating)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Vector3:
    """Precision-agnostic base; use :class:`Vec3` or :class:`DVec3`."""

    x: np.floating
    y: np.floating
    z: np.floating

    precision: ClassVar[Precision]

    # NumPy scalars on the left of ``*`` defer to __rmul__.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        scalar = self.precision.dtype
        with np.errstate(all="ignore"):
            object.__setattr__(self, "x", scalar(self.x))
            object.__setattr__(self, "y", scalar(self.y))
            object.__setattr__(self, "z", scalar(self.z))

    @classmethod
    def zero(cls: type[V]) -> V:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_sequence(cls: type[V], values: ArrayLike) -> V:
        """Build a vector from exactly three ordered scalars.

        Any other length is a caller bug and raises ``ValueError``; the
        input is never padded or truncated.
        """
        with np.errstate(all="ignore"):
            arr = np.asarray(values, dtype=cls.precision.dtype)
        if arr.ndim != 1:
            raise ValueError(f"expected a flat sequence, got shape {arr.shape}")
        if arr.shape[0] != 3:
            raise ValueError(f"expected 3 values, got {arr.shape[0]}")
        return cls(arr[0], arr[1], arr[2])

    @classmethod
    def from_dict(cls: type[V], data: dict[str, Any]) -> V:
        return cls(data["x"], data["y"], data["z"])

    def to_dict(self) -> dict[str, float]:
        return {"x": float(self.x), "y": float(self.y), "z": float(self.z)}

    def to_array(self) -> NDArray[np.floating]:
        return np.array([self.x, self.y, self.z], dtype=self.precision.dtype)

    def is_zero(self) -> bool:
        return bool(self.x == 0.0 and self.y == 0.0 and self.z == 0.0)

    def __iter__(self) -> Iterator[np.floating]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({float(self.x)!r}, "
            f"{float(self.y)!r}, {float(self.z)!r})"
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)

    def __hash__(self) -> int:
        return hash((type(self).__name__, float(self.x), float(self.y), float(self.z)))

    def _check(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    def __add__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(all="ignore"):
            return type(self)(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(all="ignore"):
            return type(self)(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self: V) -> V:
        return type(self)(-self.x, -self.y, -self.z)

    def __mul__(self: V, scalar: float) -> V:
        # Scalars only; there is no vector-by-vector product.
        if not isinstance(scalar, _SCALARS):
            return NotImplemented
        with np.errstate(all="ignore"):
            s = self.precision.scalar(scalar)
            return type(self)(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def dot(self: V, other: V) -> np.floating:
        self._check(other)
        with np.errstate(all="ignore"):
            return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self: V, other: V) -> V:
        self._check(other)
        with np.errstate(all="ignore"):
            return type(self)(
                self.y * other.z - self.z * other.y,
                self.z * other.x - self.x * other.z,
                self.x * other.y - self.y * other.x,
            )

    def length(self) -> np.floating:
        with np.errstate(all="ignore"):
            return np.sqrt(self.dot(self))

    def normalized(self: V) -> V:
        """Return the unit vector in the same direction.

        A zero-length vector yields NaN components (0/0); callers that need
        finite output must check the length first.
        """
        length = self.length()
        with np.errstate(all="ignore"):
            return type(self)(self.x / length, self.y / length, self.z / length)

    def reflect(self: V, normal: V) -> V:
        """Reflect about a surface with the given normal.

        ``normal`` is expected to be unit length and is used as given.
        """
        self._check(normal)
        return self - (normal * self.dot(normal)) * 2

    def refract(self: V, normal: V, eta: float) -> V:
        """Refract through a surface, following GLM's refract formula.

        The index is inverted when entering the material (incident vector
        and normal pointing opposite ways). On total internal reflection the
        result is ``self * eta``; both branches are renormalized.
        """
        self._check(normal)
        scalar = self.precision.dtype
        one = scalar(1)
        with np.errstate(all="ignore"):
            eta = scalar(eta)
            dot_ni = self.dot(normal)
            eta = eta if dot_ni > 0 else one / eta

            k = one - eta * eta * (one - dot_ni * dot_ni)
            if k < 0:
                refracted = self * eta
            else:
                refracted = self * eta - normal * (eta * dot_ni + np.sqrt(k))
        return refracted.normalized()

    def angle(self: V, other: V) -> np.floating:
        """Angle between two vectors in radians.

        The cosine is clamped to [-1, 1] so rounding on (anti)parallel inputs
        gives 0 or pi instead of NaN. Zero-length inputs still give NaN.
        """
        self._check(other)
        scalar = self.precision.dtype
        cos = self.normalized().dot(other.normalized())
        with np.errstate(all="ignore"):
            return np.arccos(np.clip(cos, scalar(-1), scalar(1)))


class Vec3(Vector3):
    """Single-precision vector."""

    __slots__ = ()
    precision = F32


class DVec3(Vector3):
    """Double-precision vector."""

    __slots__ = ()
    precision = F64


MAX_VECTOR3 = Vec3(F32.max, F32.max, F32.max)
MAX_DVECTOR3 = DVec3(F64.max, F64.max, F64.max)

_VARIANTS: dict[str, type[Vector3]] = {
    F32.name: Vec3,
    F64.name: DVec3,
}


def vector_type(precision: str | Precision) -> type[Vector3]:
    """Return the vector class for a precision preset or its name."""
    if not isinstance(precision, Precision):
        precision = get_precision(precision)
    if precision.name not in _VARIANTS:
        raise ValueError(f"unknown precision: {precision.name}")
    return _VARIANTS[precision.name]
