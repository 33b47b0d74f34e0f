"""
Generic four-component numeric container with elementwise arithmetic.

Fields are stored in [x, y, z, w] order and may hold any scalar type that
supports the `Ring` capabilities: Python numbers, ``Fraction``, ``Decimal``,
NumPy scalars, or JAX arrays. No coordinate-space meaning is attached to any
field; every operation is the scalar operation applied to each field pair.

`Vec4` is an immutable JAX pytree. Compound ("assign") operations return the
updated value to rebind, so ``a += b`` and ``a = add_assign(a, b)`` are
equivalent to ``a = a + b``.
"""

import logging
import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Union

import jax
import jax.numpy as jnp

from .primitives import (
    DEFAULT_SCALAR,
    BoolScalar,
    Vector4Batch,
    all_true,
    any_true,
    one_like,
    zero_like,
)
from .scalar import N, ScalarType, T

logger = logging.getLogger(__name__)


@jax.tree_util.register_dataclass
@dataclass(frozen=True, eq=False)
class Vec4(Generic[T]):
    """Four independent scalars of one numeric type."""

    x: T
    """First component."""

    y: T
    """Second component."""

    z: T
    """Third component."""

    w: T
    """Fourth component."""

    @classmethod
    def default(cls, scalar_type: ScalarType = DEFAULT_SCALAR) -> "Vec4":
        """Return a vector with every field set to the scalar type's zero."""
        return cls.zero(scalar_type)

    @classmethod
    def make(cls, x: T, y: T, z: T, w: T) -> "Vec4[T]":
        """Return a vector holding the given values verbatim (no validation)."""
        return cls(x, y, z, w)

    @classmethod
    def zero(cls, scalar_type: ScalarType = DEFAULT_SCALAR) -> "Vec4":
        """
        Additive identity.

        Parameters
        ----------
        scalar_type : ScalarType
            Callable building the field scalar from ``0``, e.g. ``float``,
            ``Fraction`` or ``jnp.float32``.

        Returns
        -------
        Vec4
            Vector with all four fields equal to ``scalar_type(0)``.
        """
        value = scalar_type(0)
        return cls(value, value, value, value)

    @classmethod
    def one(cls, scalar_type: ScalarType = DEFAULT_SCALAR) -> "Vec4":
        """
        Multiplicative identity.

        Parameters
        ----------
        scalar_type : ScalarType
            Callable building the field scalar from ``1``.

        Returns
        -------
        Vec4
            Vector with all four fields equal to ``scalar_type(1)``.
        """
        value = scalar_type(1)
        return cls(value, value, value, value)

    @classmethod
    def from_iter(cls, values: Iterable[T]) -> "Vec4[T]":
        """Build a vector from exactly four values in [x, y, z, w] order."""
        components = tuple(values)
        if len(components) != 4:
            raise ValueError(f"Vec4 requires exactly 4 components, got {len(components)}")
        return cls(*components)

    def is_zero(self) -> Union[bool, BoolScalar]:
        """True iff every field equals the zero of its own scalar type."""
        return all_true(*_lift(lambda field: field == zero_like(field), self))

    def is_one(self) -> Union[bool, BoolScalar]:
        """True iff every field equals the one of its own scalar type."""
        return all_true(*_lift(lambda field: field == one_like(field), self))

    def set_zero(self) -> "Vec4[T]":
        """Return this vector reset to zero, keeping each field's scalar type."""
        return _lift(zero_like, self)

    def set_one(self) -> "Vec4[T]":
        """Return this vector reset to one, keeping each field's scalar type."""
        return _lift(one_like, self)

    def __iter__(self) -> Iterator[T]:
        return iter((self.x, self.y, self.z, self.w))

    def __add__(self, other: Any) -> "Vec4[T]":
        if not isinstance(other, Vec4):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Any) -> "Vec4[T]":
        if not isinstance(other, Vec4):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, other: Any) -> "Vec4[T]":
        if not isinstance(other, Vec4):
            return NotImplemented
        return mul(self, other)

    def __truediv__(self, other: Any) -> "Vec4[T]":
        if not isinstance(other, Vec4):
            return NotImplemented
        return div(self, other)

    def __neg__(self) -> "Vec4[T]":
        return neg(self)

    def __eq__(self, other: object) -> Any:
        if not isinstance(other, Vec4):
            return NotImplemented
        return equals(self, other)

    def __ne__(self, other: object) -> Any:
        if not isinstance(other, Vec4):
            return NotImplemented
        return any_true(*_lift(operator.ne, self, other))


def _lift(op: Callable[..., Any], *operands: Vec4) -> Vec4:
    """Apply a scalar operation to each field, failing as a whole on any field error."""
    try:
        return jax.tree_util.tree_map(op, *operands)
    except ArithmeticError as e:
        logger.debug(f"Elementwise {getattr(op, '__name__', op)!s} failed: {e!r}")
        raise


def add(a: Vec4[T], b: Vec4[T]) -> Vec4[T]:
    """
    Elementwise sum.

    Parameters
    ----------
    a : Vec4
        Left operand.
    b : Vec4
        Right operand.

    Returns
    -------
    Vec4
        [a.x + b.x, a.y + b.y, a.z + b.z, a.w + b.w].
    """
    return _lift(operator.add, a, b)


def sub(a: Vec4[T], b: Vec4[T]) -> Vec4[T]:
    """
    Elementwise difference.

    Parameters
    ----------
    a : Vec4
        Minuend.
    b : Vec4
        Subtrahend.

    Returns
    -------
    Vec4
        [a.x - b.x, a.y - b.y, a.z - b.z, a.w - b.w].
    """
    return _lift(operator.sub, a, b)


def mul(a: Vec4[T], b: Vec4[T]) -> Vec4[T]:
    """
    Elementwise (Hadamard) product.

    Parameters
    ----------
    a : Vec4
        Left operand.
    b : Vec4
        Right operand.

    Returns
    -------
    Vec4
        [a.x * b.x, a.y * b.y, a.z * b.z, a.w * b.w].

    Notes
    -----
    This is not a dot product: the result is a vector, fields never mix.
    """
    return _lift(operator.mul, a, b)


def div(a: Vec4[T], b: Vec4[T]) -> Vec4[T]:
    """
    Elementwise quotient.

    Parameters
    ----------
    a : Vec4
        Dividend.
    b : Vec4
        Divisor.

    Returns
    -------
    Vec4
        [a.x / b.x, a.y / b.y, a.z / b.z, a.w / b.w].

    Notes
    -----
    Zero divisors behave as the scalar type's own division does. JAX and
    NumPy floats produce inf/NaN. Python ``int``, ``float``, ``Fraction`` and
    ``Decimal`` raise ``ZeroDivisionError``, and no partial result is returned.

    Python ``int`` fields follow ``int.__truediv__``: the quotient fields are
    ``float`` even when every division is exact.
    """
    return _lift(operator.truediv, a, b)


def neg(a: Vec4[N]) -> Vec4[N]:
    """
    Elementwise negation, [-a.x, -a.y, -a.z, -a.w].

    Unlike the other operators this needs the scalar type to support unary
    minus (`SignedRing`); a field type without it raises ``TypeError``.
    """
    return _lift(operator.neg, a)


def equals(a: Vec4[T], b: Vec4[T]) -> Union[bool, BoolScalar]:
    """
    Structural equality: every corresponding field pair compares equal.

    Floating NaN fields compare unequal, including to themselves.
    """
    return all_true(*_lift(operator.eq, a, b))


def add_assign(a: Vec4[T], b: Vec4[T]) -> Vec4[T]:
    """Compound add; rebind the result to ``a``."""
    return add(a, b)


def sub_assign(a: Vec4[T], b: Vec4[T]) -> Vec4[T]:
    """Compound subtract; rebind the result to ``a``."""
    return sub(a, b)


def mul_assign(a: Vec4[T], b: Vec4[T]) -> Vec4[T]:
    """Compound Hadamard multiply; rebind the result to ``a``."""
    return mul(a, b)


def div_assign(a: Vec4[T], b: Vec4[T]) -> Vec4[T]:
    """Compound divide; rebind the result to ``a``."""
    return div(a, b)


def to_array(v: Vec4, dtype=None) -> Vector4Batch:
    """
    Stack the fields into an array with a trailing axis of 4.

    Parameters
    ----------
    v : Vec4
        Vector whose fields are scalars or equally shaped arrays.
    dtype : dtype, optional
        Output dtype. ``None`` infers it from the fields, so integer and
        float32 fields keep their precision. Pass a dtype to cast explicitly.

    Returns
    -------
    (..., 4) Vector4Batch
        [x, y, z, w] along the last axis.

    Notes
    -----
    Exact scalar types (``Fraction``, ``Decimal``) have no array dtype and
    raise ``TypeError`` unless a dtype is given.
    """
    return jnp.stack([jnp.asarray(field, dtype=dtype) for field in v], axis=-1)


def from_array(array: Vector4Batch) -> Vec4:
    """
    Split an array with a trailing axis of 4 into a vector of array fields.

    Parameters
    ----------
    array : (..., 4) Vector4Batch
        Values in [x, y, z, w] order along the last axis.

    Returns
    -------
    Vec4
        Vector whose fields are ``array[..., i]``.
    """
    array = jnp.asarray(array)
    if array.ndim == 0 or array.shape[-1] != 4:
        raise ValueError(f"Expected an array with trailing dimension 4, got shape {array.shape}")
    return Vec4(array[..., 0], array[..., 1], array[..., 2], array[..., 3])
