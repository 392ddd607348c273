"""Unit tests for the Option type."""

from __future__ import annotations

import pytest

from easy_excel.kernel.types import Nothing, Some, option_of


class TestSome:
    def test_unwrap(self) -> None:
        assert Some(3).unwrap() == 3

    def test_value_property(self) -> None:
        assert Some("x").value == "x"

    def test_flags(self) -> None:
        assert Some(1).is_some()
        assert not Some(1).is_none()

    def test_unwrap_or_ignores_default(self) -> None:
        assert Some(1).unwrap_or(9) == 1

    def test_map(self) -> None:
        assert Some(2).map(lambda v: v * 10) == Some(20)

    def test_iter(self) -> None:
        assert list(Some("a")) == ["a"]

    def test_equality_and_hash(self) -> None:
        assert Some(1) == Some(1)
        assert Some(1) != Some(2)
        assert len({Some(1), Some(1)}) == 1

    def test_repr(self) -> None:
        assert repr(Some("a")) == "Some('a')"


class TestNothing:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError):
            Nothing().unwrap()

    def test_flags(self) -> None:
        assert Nothing().is_none()
        assert not Nothing().is_some()

    def test_unwrap_or(self) -> None:
        assert Nothing().unwrap_or(5) == 5

    def test_map_stays_nothing(self) -> None:
        assert Nothing().map(lambda v: v + 1) == Nothing()

    def test_iter_empty(self) -> None:
        assert list(Nothing()) == []

    def test_not_equal_to_some_none(self) -> None:
        assert Nothing() != Some(None)


class TestOptionOf:
    def test_none_is_nothing(self) -> None:
        assert option_of(None) == Nothing()

    def test_value_is_some(self) -> None:
        assert option_of(0) == Some(0)
