"""Unit tests for value objects and composable specifications."""

from __future__ import annotations

import dataclasses

import pytest

from catalog_query.kernel.ddd import (
    AndSpecification,
    BaseSpecification,
    LambdaSpecification,
    NotSpecification,
    OrSpecification,
    ValueObject,
    all_of,
    any_of,
)


class _Even(BaseSpecification[int]):
    def is_satisfied_by(self, candidate: int) -> bool:
        return candidate % 2 == 0


_positive = LambdaSpecification(lambda n: n > 0, name="positive")


@dataclasses.dataclass(frozen=True)
class _Money(ValueObject):
    amount: int
    currency: str = "USD"


class TestOperators:
    def test_and(self) -> None:
        spec = _Even() & _positive
        assert isinstance(spec, AndSpecification)
        assert spec.is_satisfied_by(4)
        assert not spec.is_satisfied_by(-4)
        assert not spec.is_satisfied_by(3)

    def test_or(self) -> None:
        spec = _Even() | _positive
        assert isinstance(spec, OrSpecification)
        assert spec.is_satisfied_by(-4)
        assert spec.is_satisfied_by(3)
        assert not spec.is_satisfied_by(-3)

    def test_not(self) -> None:
        spec = ~_Even()
        assert isinstance(spec, NotSpecification)
        assert spec.is_satisfied_by(3)

    def test_lambda_name(self) -> None:
        assert _positive.name == "positive"
        assert repr(_positive) == "LambdaSpecification('positive')"

    def test_nested_conjunctions_flatten(self) -> None:
        small = LambdaSpecification(lambda n: n < 10)
        spec = (_Even() & _positive) & small
        assert isinstance(spec, AndSpecification)
        assert len(spec.parts) == 3
        assert spec.is_satisfied_by(8)
        assert not spec.is_satisfied_by(12)

    def test_mixed_junctions_do_not_flatten(self) -> None:
        spec = (_Even() | _positive) & _positive
        assert len(spec.parts) == 2


class TestFolds:
    def test_all_of(self) -> None:
        spec = all_of([_Even(), _positive])
        assert [n for n in range(-4, 5) if spec.is_satisfied_by(n)] == [2, 4]

    def test_all_of_empty_is_always(self) -> None:
        assert all_of([]).is_satisfied_by(object())

    def test_any_of(self) -> None:
        spec = any_of([_Even(), _positive])
        assert [n for n in range(-3, 3) if spec.is_satisfied_by(n)] == [-2, 0, 1, 2]

    def test_any_of_empty_is_never(self) -> None:
        assert not any_of([]).is_satisfied_by(object())


class TestValueObject:
    def test_copy_with(self) -> None:
        money = _Money(10)
        assert money.copy_with(amount=20) == _Money(20)
        assert money.amount == 10

    def test_value_equality_and_hash(self) -> None:
        assert _Money(10) == _Money(10)
        assert len({_Money(10), _Money(10, "USD")}) == 1

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            _Money(10).amount = 5  # type: ignore[misc]
