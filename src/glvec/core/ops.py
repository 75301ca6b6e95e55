"""Free-function forms of the vector operations.

Each function delegates to the operator or method of the same meaning.
"""

from __future__ import annotations

import numpy as np

from .vector import V


def add(a: V, b: V) -> V:
    return a + b


def subtract(a: V, b: V) -> V:
    return a - b


def negate(a: V) -> V:
    return -a


def scale(a: V, s: float) -> V:
    return a * s


def dot(a: V, b: V) -> np.floating:
    return a.dot(b)


def cross(a: V, b: V) -> V:
    """Right-handed cross product."""
    return a.cross(b)


def length(a: V) -> np.floating:
    return a.length()


def normalized(a: V) -> V:
    return a.normalized()


def reflect(a: V, normal: V) -> V:
    return a.reflect(normal)


def refract(a: V, normal: V, eta: float) -> V:
    return a.refract(normal, eta)


def angle(a: V, b: V) -> np.floating:
    """Angle between ``a`` and ``b`` in radians."""
    return a.angle(b)
