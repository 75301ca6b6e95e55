"""Core vector types and precision presets."""

from .precision import (  # noqa: F401
    F32,
    F64,
    PRESETS,
    Precision,
    default_precision,
    get_precision,
    precision_names,
)
from .vector import (  # noqa: F401
    MAX_DVECTOR3,
    MAX_VECTOR3,
    DVec3,
    Vec3,
    Vector3,
    vector_type,
)
