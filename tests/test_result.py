"""Tests for Result combinators."""

import pytest

import pyosafe as ps


class TestTransformations:
    """`map` and `map_err` each touch one side only."""

    def test_identity_law(self) -> None:
        """Mapping the identity leaves the result unchanged."""
        assert ps.ok(5).map(lambda x: x) == ps.ok(5)
        assert ps.err("e").map(lambda x: x) == ps.err("e")

    def test_map_skips_err(self) -> None:
        """The success function is never called on `Err`."""
        calls: list[object] = []
        error = ps.Err[int, str]("boom")
        assert error.map(calls.append) is error
        assert error.flat_map(lambda x: ps.Ok(calls.append(x))) is error
        assert calls == []

    def test_map_err_skips_ok(self) -> None:
        """The error function is never called on `Ok`."""
        calls: list[object] = []
        success = ps.Ok[int, str](1)
        assert success.map_err(calls.append) is success
        assert calls == []

    def test_map_err_transforms_error(self) -> None:
        """The error payload is replaced, the variant kept."""
        assert ps.Err("boom").map_err(len) == ps.Err(4)

    def test_error_payload_is_opaque(self) -> None:
        """Any object can be an error, and is passed through untouched."""
        payload = {"code": 404, "path": "/missing"}
        result = ps.Err(payload).map(lambda x: x * 2)
        assert result.unwrap_err() is payload

    def test_mapping_errors_propagate(self) -> None:
        """Exceptions raised by mapping functions are not captured."""
        with pytest.raises(ZeroDivisionError):
            ps.Ok(1).map(lambda x: x / 0)

    def test_or_else_recovers(self) -> None:
        """`or_else` only runs on `Err`."""
        assert ps.Err("x").or_else(lambda e: ps.Ok(len(e))) == ps.Ok(1)
        assert ps.Ok(3).or_else(lambda e: ps.Ok(0)) == ps.Ok(3)


class TestUnwrap:
    """Extracting values and errors."""

    def test_unwrap_ok(self) -> None:
        """`Ok` yields its value."""
        assert ps.Ok("v").unwrap() == "v"
        assert ps.Ok("v").unwrap_or("d") == "v"

    def test_unwrap_err_with_plain_payload(self) -> None:
        """A non-exception error is carried by `WrongSideAccess`."""
        with pytest.raises(ps.WrongSideAccess) as exc_info:
            ps.err("boom").unwrap()
        assert exc_info.value.value == "boom"

    def test_unwrap_err_with_exception_payload(self) -> None:
        """An exception error is raised itself, not wrapped."""
        error = PermissionError("denied")
        with pytest.raises(PermissionError) as exc_info:
            ps.Err(error).unwrap()
        assert exc_info.value is error

    def test_unwrap_err_on_ok(self) -> None:
        """`unwrap_err` on `Ok` is a wrong side access."""
        with pytest.raises(ps.WrongSideAccess):
            ps.Ok(1).unwrap_err()

    def test_unwrap_or(self) -> None:
        """Defaults are only used for `Err`."""
        assert ps.Err("e").unwrap_or(0) == 0
        assert ps.Err("abc").unwrap_or_else(len) == 3

    def test_expect(self) -> None:
        """`expect` prefixes the caller message."""
        with pytest.raises(ps.WrongSideAccess, match="loading user"):
            ps.Err("timeout").expect("loading user")


def test_match() -> None:
    """`match` dispatches on the variant."""
    handlers = {"ok": lambda v: ("ok", v), "err": lambda e: ("err", e)}
    assert ps.Ok(1).match(**handlers) == ("ok", 1)
    assert ps.Err("x").match(**handlers) == ("err", "x")


def test_ok_and_err_accessors() -> None:
    """Results convert to options of either side."""
    assert ps.Ok(1).ok() == ps.Some(1)
    assert ps.Err("e").ok() is ps.NONE
    assert ps.Err("e").err() == ps.Some("e")
    assert ps.Ok(1).err() is ps.NONE


def test_constructors_are_independent() -> None:
    """Two errors with equal payloads are equal, but distinct instances."""
    first, second = ps.err("e"), ps.err("e")
    assert first == second
    assert first is not second
    assert ps.Ok(1) != ps.Err(1)
