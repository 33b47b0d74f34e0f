"""
Primitives module for precision settings, array aliases, and scalar identity helpers.
"""

from typing import Any, Union

import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Bool, Float, Scalar

# Project precision settings
FLOAT_DTYPE = jnp.float32
INT_DTYPE = jnp.int32
EPS = 1e-8
DEFAULT_SCALAR = float

# Project type aliases
Scalar = Scalar
BoolScalar = Bool[Array, ""]
FloatScalar = Float[Array, ""]
Vector4 = Float[Array, "4"]
Vector4Batch = Float[Array, "*batch 4"]
Array = Array


def zero_like(value: Any) -> Any:
    """
    Return the additive identity of a value's own scalar type.

    Parameters
    ----------
    value : Any
        A JAX array, a NumPy array, or a plain scalar whose type can be
        built from the integer ``0``.

    Returns
    -------
    zero : Any
        Zero with the same type (and, for arrays, the same shape and dtype).
    """
    if isinstance(value, jax.Array):
        return jnp.zeros_like(value)
    if isinstance(value, np.ndarray):
        return np.zeros_like(value)
    return type(value)(0)


def one_like(value: Any) -> Any:
    """
    Return the multiplicative identity of a value's own scalar type.

    Parameters
    ----------
    value : Any
        A JAX array, a NumPy array, or a plain scalar whose type can be
        built from the integer ``1``.

    Returns
    -------
    one : Any
        One with the same type (and, for arrays, the same shape and dtype).
    """
    if isinstance(value, jax.Array):
        return jnp.ones_like(value)
    if isinstance(value, np.ndarray):
        return np.ones_like(value)
    return type(value)(1)


def all_true(*flags: Any) -> Union[bool, BoolScalar]:
    """
    Conjunction of per-field comparison results.

    Array flags are reduced over all their elements first. The result is a
    JAX boolean scalar when any flag is a JAX array (so it stays traceable
    under ``jax.jit``) and a Python ``bool`` otherwise.
    """
    if any(isinstance(flag, jax.Array) for flag in flags):
        return jnp.all(jnp.stack([jnp.all(flag) for flag in flags]))
    return all(bool(np.all(flag)) for flag in flags)


def any_true(*flags: Any) -> Union[bool, BoolScalar]:
    """Disjunction counterpart of `all_true`."""
    if any(isinstance(flag, jax.Array) for flag in flags):
        return jnp.any(jnp.stack([jnp.any(flag) for flag in flags]))
    return any(bool(np.any(flag)) for flag in flags)
