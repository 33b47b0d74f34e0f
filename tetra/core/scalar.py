"""
Scalar capability protocols.

A `Vec4` field type only needs the handful of operations the container lifts.
Each capability is its own protocol so bounds can be composed; negation is
kept out of `Ring` and only required by `neg`.
"""

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class SupportsAdd(Protocol):
    def __add__(self, other: Any, /) -> Any: ...


@runtime_checkable
class SupportsSub(Protocol):
    def __sub__(self, other: Any, /) -> Any: ...


@runtime_checkable
class SupportsMul(Protocol):
    def __mul__(self, other: Any, /) -> Any: ...


@runtime_checkable
class SupportsTrueDiv(Protocol):
    def __truediv__(self, other: Any, /) -> Any: ...


@runtime_checkable
class SupportsNeg(Protocol):
    def __neg__(self) -> Any: ...


@runtime_checkable
class Ring(SupportsAdd, SupportsSub, SupportsMul, SupportsTrueDiv, Protocol):
    """Add, subtract, multiply, divide and compare for equality."""

    def __eq__(self, other: object, /) -> Any: ...


@runtime_checkable
class SignedRing(Ring, SupportsNeg, Protocol):
    """A `Ring` that can also be negated."""


T = TypeVar("T", bound=Ring)
N = TypeVar("N", bound=SignedRing)

ScalarType = Callable[[int], Any]
"""Anything that builds a scalar from the integers 0 and 1 (``float``, ``Fraction``, ``jnp.float32``)."""
