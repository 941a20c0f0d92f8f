"""Specification pattern: composable boolean rules over catalog records.

The in-memory catalog turns every listing predicate into a specification
and folds them with :func:`all_of`::

    published = LambdaSpecification(lambda p: p.is_published, name="published")
    kids = LambdaSpecification(lambda p: p.gender == "kids", name="kids")
    visible_kids = published & kids
"""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """A rule a candidate either satisfies or not; combine with ``&``, ``|``, ``~``."""

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __and__(self, other: "BaseSpecification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "BaseSpecification[T]") -> "OrSpecification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)


class _Junction(BaseSpecification[T]):
    """N-ary combination; nested junctions of the same kind are flattened."""

    def __init__(self, *parts: BaseSpecification[T]) -> None:
        flat: list[BaseSpecification[T]] = []
        for part in parts:
            flat.extend(part.parts if type(part) is type(self) else (part,))  # type: ignore[attr-defined]
        self.parts: tuple[BaseSpecification[T], ...] = tuple(flat)


class AndSpecification(_Junction[T]):
    """Satisfied when every part is (short-circuits left to right)."""

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(part.is_satisfied_by(candidate) for part in self.parts)


class OrSpecification(_Junction[T]):
    """Satisfied when any part is (short-circuits left to right)."""

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(part.is_satisfied_by(candidate) for part in self.parts)


class NotSpecification(BaseSpecification[T]):
    def __init__(self, spec: BaseSpecification[T]) -> None:
        self._spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._spec.is_satisfied_by(candidate)


class LambdaSpecification(BaseSpecification[T]):
    """A plain callable used as a specification; ``name`` shows up in ``repr``."""

    def __init__(self, predicate: Callable[[T], bool], *, name: str = "") -> None:
        self._predicate = predicate
        self.name: str = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))

    def __repr__(self) -> str:
        return f"LambdaSpecification({self.name!r})"


def all_of(specs: Iterable[BaseSpecification[T]]) -> BaseSpecification[T]:
    """Conjunction of *specs*; with none given, every candidate passes."""
    parts = tuple(specs)
    if not parts:
        return LambdaSpecification(lambda _: True, name="always")
    return parts[0] if len(parts) == 1 else AndSpecification(*parts)


def any_of(specs: Iterable[BaseSpecification[T]]) -> BaseSpecification[T]:
    """Disjunction of *specs*; with none given, no candidate passes."""
    parts = tuple(specs)
    if not parts:
        return LambdaSpecification(lambda _: False, name="never")
    return parts[0] if len(parts) == 1 else OrSpecification(*parts)


__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
    "all_of",
    "any_of",
]
