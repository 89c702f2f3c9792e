"""Tests for Either."""

import pytest

import pyosafe as ps


def test_left_only_maps_left() -> None:
    """`map_left` changes a `Left`, `map` leaves it untouched."""
    calls: list[object] = []
    value = ps.left("a")
    assert value.map_left(str.upper) == ps.Left("A")
    assert value.map(calls.append) is value
    assert calls == []


def test_right_only_maps_right() -> None:
    """`map` changes a `Right`, `map_left` leaves it untouched."""
    calls: list[object] = []
    value = ps.right(2)
    assert value.map(lambda x: x * 10) == ps.Right(20)
    assert value.map_left(calls.append) is value
    assert calls == []


def test_sides_are_distinct() -> None:
    """Equal payloads on different sides are not equal."""
    assert ps.Left(1) != ps.Right(1)
    assert ps.Left(1) == ps.left(1)


def test_unwrap_sides() -> None:
    """Each side unwraps only its own value."""
    assert ps.Right(1).unwrap() == 1
    assert ps.Left("l").unwrap_left() == "l"
    with pytest.raises(ps.WrongSideAccess) as exc_info:
        ps.Left("l").unwrap()
    assert exc_info.value.value == "l"
    with pytest.raises(ps.WrongSideAccess):
        ps.Right(1).unwrap_left()


def test_match_and_fold() -> None:
    """`match` and `fold` run exactly one handler."""
    assert ps.Left(2).match(left=lambda x: x - 1, right=lambda x: x + 1) == 1
    assert ps.Right(2).match(left=lambda x: x - 1, right=lambda x: x + 1) == 3
    assert ps.Right("r").fold(len, str.upper) == "R"


def test_swap() -> None:
    """Swapping twice gives back the original."""
    assert ps.Left(1).swap() == ps.Right(1)
    assert ps.Right(1).swap().swap() == ps.Right(1)


def test_mapping_errors_propagate() -> None:
    """Either is not an exception boundary."""
    with pytest.raises(KeyError):
        ps.Right({}).map(lambda d: d["missing"])
