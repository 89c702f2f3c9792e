"""Tests for slot usage in pyosafe classes."""

import pyosafe as ps


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ps.Some(42))
    assert _check_slots(ps.NONE)
    assert _check_slots(ps.Err[int, object](42))
    assert _check_slots(ps.Ok[int, object](42))
    assert _check_slots(ps.Left(1))
    assert _check_slots(ps.Right(1))
    assert _check_slots(ps.Success(1))
    assert _check_slots(ps.Failure(ValueError()))
    assert _check_slots(ps.sequence)
    assert _check_slots(ps.traverse)


def test_hashable_payloads() -> None:
    """Containers of hashable payloads can be used as keys."""
    seen = {ps.Some(1): "a", ps.Ok(1): "b", ps.NONE: "c"}
    assert seen[ps.Some(1)] == "a"
    assert seen[ps.Ok(1)] == "b"
    assert seen[ps.none()] == "c"
