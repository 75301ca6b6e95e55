"""3D vector value types for rendering and physics code."""

from .core import (  # noqa: F401
    F32,
    F64,
    MAX_DVECTOR3,
    MAX_VECTOR3,
    DVec3,
    Precision,
    Vec3,
    Vector3,
    get_precision,
    precision_names,
    vector_type,
)

__version__ = "0.1.0"
