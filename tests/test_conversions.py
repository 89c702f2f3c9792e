"""Tests for conversions between containers."""

import pytest

import pyosafe as ps

VALUES = [0, "text", None, [1, 2], {"k": "v"}]


@pytest.mark.parametrize("value", VALUES)
def test_option_result_round_trip(value: object) -> None:
    """A present value survives a trip through `Result`."""
    assert ps.some(value).to_result("missing").ok() == ps.some(value)


def test_none_to_result() -> None:
    """The supplied error is only used for `NONE`."""
    assert ps.none().to_result("missing") == ps.err("missing")


def test_option_to_try() -> None:
    """`NONE` becomes a failure holding the supplied exception."""
    error = LookupError("missing")
    assert ps.some(1).to_try(error) == ps.success(1)
    converted = ps.none().to_try(error)
    assert converted.is_failure()
    assert converted.error is error


def test_option_to_try_normalizes_plain_errors() -> None:
    """A plain error value is wrapped in `OpaqueFailure`."""
    converted = ps.NONE.to_try("missing")
    assert isinstance(converted.error, ps.OpaqueFailure)
    assert converted.error.value == "missing"


def test_option_to_either() -> None:
    """`Some` goes right, `NONE` goes left."""
    assert ps.some(1).to_either("empty") == ps.right(1)
    assert ps.none().to_either("empty") == ps.left("empty")


def test_unused_fallbacks_are_ignored() -> None:
    """Converting a `Some` never looks at the fallback."""
    sentinel = object()
    assert ps.Some(1).to_result(sentinel) == ps.Ok(1)
    assert ps.Some(1).to_either(sentinel) == ps.Right(1)


def test_result_conversions() -> None:
    """Results convert to `Try` and `Either`."""
    assert ps.Ok(1).to_try() == ps.Success(1)
    assert ps.Ok(1).to_either() == ps.Right(1)
    assert ps.Err("e").to_either() == ps.Left("e")
    error = ValueError("e")
    converted = ps.Err(error).to_try()
    assert converted.is_failure()
    assert converted.error is error


def test_try_conversions() -> None:
    """Tries convert to `Option`, `Result` and `Either`."""
    error = ValueError("e")
    assert ps.Success(1).ok() == ps.Some(1)
    assert ps.Failure(error).ok() is ps.NONE
    assert ps.Success(1).to_result() == ps.Ok(1)
    assert ps.Failure(error).to_result() == ps.Err(error)
    assert ps.Success(1).to_either() == ps.Right(1)
    assert ps.Failure(error).to_either() == ps.Left(error)


def test_chained_conversions() -> None:
    """Conversions compose with the other combinators."""
    result = (
        ps.Option.from_({"port": "8080"}.get("port"))
        .to_try(KeyError("port"))
        .map(int)
        .to_result()
        .map(lambda port: port + 1)
    )
    assert result == ps.Ok(8081)
