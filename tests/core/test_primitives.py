"""Tests for primitives module."""

from decimal import Decimal
from fractions import Fraction

import jax
import jax.numpy as jnp
import numpy as np

from tetra.core.primitives import (
    FLOAT_DTYPE,
    INT_DTYPE,
    all_true,
    any_true,
    one_like,
    zero_like,
)


def test_zero_like() -> None:
    """Test additive identity lookup for each supported value kind."""
    # Standard case 1 - python scalars keep their type
    assert zero_like(7) == 0 and type(zero_like(7)) is int
    assert zero_like(2.5) == 0.0 and type(zero_like(2.5)) is float

    # Standard case 2 - exact numeric types
    assert zero_like(Fraction(3, 4)) == Fraction(0)
    assert isinstance(zero_like(Fraction(3, 4)), Fraction)
    assert isinstance(zero_like(Decimal("1.5")), Decimal)

    # Standard case 3 - jax arrays keep shape and dtype
    a = jnp.ones((3,), dtype=FLOAT_DTYPE)
    result_3 = zero_like(a)
    assert isinstance(result_3, jax.Array)
    assert result_3.shape == (3,)
    assert result_3.dtype == FLOAT_DTYPE
    assert jnp.all(result_3 == 0.0)

    # Edge case 1 - numpy arrays stay numpy arrays
    result_4 = zero_like(np.full((2, 2), 5, dtype=np.int64))
    assert isinstance(result_4, np.ndarray)
    assert result_4.dtype == np.int64
    assert np.all(result_4 == 0)

    # Edge case 2 - numpy scalars keep their scalar type
    assert type(zero_like(np.float64(3.0))) is np.float64


def test_one_like() -> None:
    """Test multiplicative identity lookup for each supported value kind."""
    # Standard case 1 - python scalars
    assert one_like(7) == 1 and type(one_like(7)) is int
    assert one_like(-2.5) == 1.0

    # Standard case 2 - exact numeric types
    assert one_like(Fraction(1, 3)) == Fraction(1)
    assert one_like(Decimal("0.1")) == Decimal(1)

    # Standard case 3 - jax integer arrays
    a = jnp.zeros((4,), dtype=INT_DTYPE)
    result_3 = one_like(a)
    assert result_3.dtype == INT_DTYPE
    assert jnp.all(result_3 == 1)

    # Edge case 1 - numpy arrays
    result_4 = one_like(np.zeros(3))
    assert isinstance(result_4, np.ndarray)
    assert np.all(result_4 == 1.0)


def test_all_true(jit_mode: str) -> None:
    """Test conjunction of comparison flags."""
    # Standard case 1 - python booleans give a python bool
    assert all_true(True, True, True, True) is True
    assert all_true(True, False, True, True) is False

    # Standard case 2 - numpy flag arrays are reduced
    assert all_true(np.array([True, True]), True) is True
    assert all_true(np.array([True, False]), True) is False

    # Standard case 3 - any jax flag gives a jax boolean
    result_3 = all_true(jnp.array(True), True)
    assert isinstance(result_3, jax.Array)
    assert bool(result_3)

    # Edge case 1 - batched jax flags reduce over every element
    assert not bool(all_true(jnp.array([True, False, True]), jnp.array(True)))

    # Test under jit
    all_equal = jax.jit(lambda a, b: all_true(*(a == b)))
    assert bool(all_equal(jnp.arange(4), jnp.arange(4)))
    assert not bool(all_equal(jnp.arange(4), jnp.zeros(4, dtype=jnp.int32)))


def test_any_true(jit_mode: str) -> None:
    """Test disjunction of comparison flags."""
    # Standard case 1 - python booleans
    assert any_true(False, False, True, False) is True
    assert any_true(False, False, False, False) is False

    # Standard case 2 - jax flags
    result_2 = any_true(jnp.array([False, True]), False)
    assert isinstance(result_2, jax.Array)
    assert bool(result_2)

    # Test under jit
    any_equal = jax.jit(lambda a, b: any_true(*(a == b)))
    assert bool(any_equal(jnp.arange(4), jnp.array([9, 9, 2, 9])))
    assert not bool(any_equal(jnp.arange(4), jnp.full(4, 9)))
