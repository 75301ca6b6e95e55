from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from glvec.core.vector import MAX_DVECTOR3, MAX_VECTOR3, DVec3, Vec3


def test_components_use_variant_dtype() -> None:
    v = Vec3(1, 2.5, -3)
    d = DVec3(1, 2.5, -3)
    for c in v:
        assert isinstance(c, np.float32)
    for c in d:
        assert isinstance(c, np.float64)
    assert v.x == 1.0 and v.y == 2.5 and v.z == -3.0


def test_single_precision_rounds() -> None:
    v = Vec3(0.1, 0.0, 0.0)
    assert v.x == np.float32(0.1)
    assert float(v.x) != 0.1
    assert DVec3(0.1, 0.0, 0.0).x == 0.1


def test_from_sequence() -> None:
    assert Vec3.from_sequence([1.0, 2.0, 3.0]) == Vec3(1.0, 2.0, 3.0)
    assert DVec3.from_sequence((4, 5, 6)) == DVec3(4.0, 5.0, 6.0)
    arr = np.array([0.5, -0.5, 2.0], dtype=np.float64)
    assert Vec3.from_sequence(arr) == Vec3(0.5, -0.5, 2.0)


@pytest.mark.parametrize("values", [[], [1.0], [1.0, 2.0], [1.0, 2.0, 3.0, 4.0]])
def test_from_sequence_rejects_wrong_length(values: list[float]) -> None:
    with pytest.raises(ValueError, match=f"expected 3 values, got {len(values)}"):
        _ = Vec3.from_sequence(values)


def test_from_sequence_rejects_nested() -> None:
    with pytest.raises(ValueError, match="flat sequence"):
        _ = DVec3.from_sequence([[1.0, 2.0, 3.0]])


def test_zero_and_max_constants() -> None:
    assert Vec3.zero() == Vec3(0.0, 0.0, 0.0)
    assert Vec3.zero().is_zero()
    assert DVec3.zero().is_zero()
    assert not Vec3(0.0, 0.0, 1e-30).is_zero()

    f32_max = np.finfo(np.float32).max
    f64_max = np.finfo(np.float64).max
    assert tuple(MAX_VECTOR3) == (f32_max, f32_max, f32_max)
    assert tuple(MAX_DVECTOR3) == (f64_max, f64_max, f64_max)
    assert np.all(np.isfinite(MAX_VECTOR3.to_array()))


def test_frozen_and_replace() -> None:
    v = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0  # type: ignore[misc]
    w = dataclasses.replace(v, y=7.0)
    assert isinstance(w, Vec3)
    assert w == Vec3(1.0, 7.0, 3.0)
    assert v == Vec3(1.0, 2.0, 3.0)


def test_equality_is_exact() -> None:
    assert Vec3(1.0, 2.0, 3.0) == Vec3(1.0, 2.0, 3.0)
    assert Vec3(1.0, 2.0, 3.0) != Vec3(1.0, 2.0, 3.0000005)
    assert Vec3(0.0, 0.0, 0.0) == Vec3(-0.0, -0.0, -0.0)
    nan = Vec3(float("nan"), 0.0, 0.0)
    assert nan != nan
    assert Vec3(1.0, 2.0, 3.0) != DVec3(1.0, 2.0, 3.0)
    assert Vec3(1.0, 2.0, 3.0) != (1.0, 2.0, 3.0)


def test_hashable() -> None:
    seen = {Vec3(1.0, 2.0, 3.0), Vec3(1.0, 2.0, 3.0), Vec3(3.0, 2.0, 1.0)}
    assert len(seen) == 2


def test_raw_component_access() -> None:
    v = DVec3(1.5, -2.0, 0.25)
    assert tuple(v) == (1.5, -2.0, 0.25)
    assert len(v) == 3

    arr = Vec3(1.5, -2.0, 0.25).to_array()
    assert arr.dtype == np.float32
    assert np.array_equal(arr, [1.5, -2.0, 0.25])

    d = v.to_dict()
    assert d == {"x": 1.5, "y": -2.0, "z": 0.25}
    assert all(type(c) is float for c in d.values())
    assert DVec3.from_dict(d) == v
    with pytest.raises(KeyError):
        _ = DVec3.from_dict({"x": 1.0, "y": 2.0})


def test_repr() -> None:
    assert repr(Vec3(1, 2, 3)) == "Vec3(1.0, 2.0, 3.0)"
    assert repr(DVec3(0.5, -1, 0)) == "DVec3(0.5, -1.0, 0.0)"
