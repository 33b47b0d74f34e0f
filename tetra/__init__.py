"""Tetra - generic four-component numeric vectors as JAX pytrees."""

import jax.numpy as jnp

from tetra.core.primitives import (
    DEFAULT_SCALAR,
    EPS,
    FLOAT_DTYPE,
    INT_DTYPE,
    one_like,
    zero_like,
)
from tetra.core.scalar import Ring, ScalarType, SignedRing
from tetra.core.vec4 import (
    Vec4,
    add,
    add_assign,
    div,
    div_assign,
    equals,
    from_array,
    mul,
    mul_assign,
    neg,
    sub,
    sub_assign,
    to_array,
)


# Convenience functions
def vec4(x, y, z, w) -> Vec4:
    """Shorthand for `Vec4.make`."""
    return Vec4.make(x, y, z, w)


def vec4_f32(x: float, y: float, z: float, w: float) -> Vec4:
    """Create a vector of float32 JAX scalars, ready for jit/vmap."""
    return Vec4.make(*(jnp.asarray(value, dtype=FLOAT_DTYPE) for value in (x, y, z, w)))


__all__ = [
    # Precision settings
    "DEFAULT_SCALAR",
    "EPS",
    "FLOAT_DTYPE",
    "INT_DTYPE",
    # Scalar capabilities
    "Ring",
    "SignedRing",
    "ScalarType",
    "zero_like",
    "one_like",
    # Vector type and operations
    "Vec4",
    "add",
    "add_assign",
    "sub",
    "sub_assign",
    "mul",
    "mul_assign",
    "div",
    "div_assign",
    "neg",
    "equals",
    # Array interop
    "to_array",
    "from_array",
    # Convenience functions
    "vec4",
    "vec4_f32",
]
