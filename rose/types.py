"""
Capability interfaces for rose trees.

Types:
    Mappable      - Element-wise transformation preserving shape (functor)
    Combinable    - Combination with a structure of functions (applicative)
    Sequenceable  - Dependent sequencing with grafting (monad)

These are explicit protocols: callers pass the structure and the function
directly, nothing is resolved implicitly.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
U = TypeVar("U")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Mappable(Protocol[T_co]):
    """Structures whose values can be transformed one by one."""

    def map(self, f: Callable[[Any], Any]) -> Mappable[Any]:
        """Applies `f` to every value, keeping the shape."""
        ...


@runtime_checkable
class Combinable(Protocol[T_co]):
    """Structures that can be combined with a structure of functions."""

    def ap(self, funcs: Any) -> Combinable[Any]:
        """Applies the functions held by `funcs` to the values held by `self`."""
        ...


@runtime_checkable
class Sequenceable(Protocol[T_co]):
    """Structures whose values can each continue into a new structure."""

    def bind(self, f: Callable[[Any], Any]) -> Sequenceable[Any]:
        """Feeds every value to `f` and grafts the resulting structures together."""
        ...


__all__ = [
    "T",
    "U",
    "Mappable",
    "Combinable",
    "Sequenceable",
]
