"""Tests for package-level convenience functions."""

import jax.numpy as jnp

import tetra
from tetra import FLOAT_DTYPE, Vec4, vec4, vec4_f32


def test_vec4() -> None:
    """Test the make shorthand."""
    v = vec4(1, 2, 3, 4)
    assert isinstance(v, Vec4)
    assert v == Vec4.make(1, 2, 3, 4)


def test_vec4_f32(jit_mode: str) -> None:
    """Test float32 construction."""
    v = vec4_f32(1.5, 2.0, 3.0, 4.0)
    assert all(field.dtype == FLOAT_DTYPE for field in v)
    assert bool(tetra.mul(v, v) == vec4_f32(2.25, 4.0, 9.0, 16.0))
    assert jnp.allclose(tetra.to_array(v), jnp.array([1.5, 2.0, 3.0, 4.0]))


def test_public_api() -> None:
    """Test every exported name resolves."""
    for name in tetra.__all__:
        assert hasattr(tetra, name)
