"""Tests for Try and its boundary constructors."""

import asyncio
import logging

import pytest

import pyosafe as ps


class TestCapture:
    """Exceptions raised inside combinators become failures."""

    def test_identity_law(self) -> None:
        """Mapping the identity leaves the try unchanged."""
        assert ps.success(5).map(lambda x: x) == ps.success(5)

    def test_map_captures_exact_exception(self) -> None:
        """The failure holds the very exception that was raised."""
        error = IndexError("x")

        def boom(_: int) -> int:
            raise error

        result = ps.success(5).map(boom)
        assert result.is_failure()
        assert result.error is error

    def test_flat_map_captures(self) -> None:
        """An exception raised while computing the next try is captured."""
        result = ps.Success({}).flat_map(lambda d: ps.Success(d["key"]))
        assert isinstance(result, ps.Failure)
        assert isinstance(result.error, KeyError)

    def test_flat_map_passes_result_through(self) -> None:
        """The try returned by the function is returned as-is."""
        inner = ps.Failure(ValueError("inner"))
        assert ps.Success(1).flat_map(lambda _: inner) is inner

    def test_failure_short_circuits(self) -> None:
        """Functions are never called on a failure."""
        calls: list[object] = []
        failed = ps.failure(RuntimeError("stop"))
        assert failed.map(calls.append) is failed
        assert failed.flat_map(calls.append) is failed
        assert calls == []

    def test_base_exceptions_escape(self) -> None:
        """Only `Exception` subclasses are captured by default."""

        def interrupt(_: int) -> int:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            ps.Success(1).map(interrupt)

    def test_capture_is_configurable(self) -> None:
        """Exceptions outside the configured classes propagate."""
        with ps.config_context(capture=(ValueError,)):
            assert ps.Success("x").map(int).is_failure()
            with pytest.raises(KeyError):
                ps.Success({}).map(lambda d: d["k"])

    def test_configuration_is_local_to_a_task(self) -> None:
        """A `config_context` block in one task does not narrow capture in another."""

        async def main() -> tuple[tuple[type[Exception], ...], ps.Try[object]]:
            entered = asyncio.Event()
            released = asyncio.Event()

            async def narrowed() -> tuple[type[Exception], ...]:
                with ps.config_context(capture=(ValueError,)):
                    entered.set()
                    await released.wait()
                    return ps.get_config().capture

            async def default() -> ps.Try[object]:
                await entered.wait()
                try:
                    return ps.Success({}).map(lambda d: d["k"])
                finally:
                    released.set()

            return await asyncio.gather(narrowed(), default())

        capture, result = asyncio.run(main())
        assert capture == (ValueError,)
        assert result.is_failure()
        assert isinstance(result.error, KeyError)
        assert ps.get_config().capture == (Exception,)


class TestRecover:
    """`recover` turns failures back into successes."""

    def test_recover_failure(self) -> None:
        """The handler receives the captured exception."""
        result = ps.Failure(KeyError("id")).recover(lambda e: type(e).__name__)
        assert result == ps.Success("KeyError")

    def test_recover_success_is_noop(self) -> None:
        """A success is returned unchanged."""
        value = ps.Success(1)
        assert value.recover(lambda _: 0) is value

    def test_recover_captures_handler_errors(self) -> None:
        """A failing handler produces a new failure instead of raising."""
        error = OSError("still broken")

        def handler(_: Exception) -> int:
            raise error

        result = ps.Failure(ValueError("broken")).recover(handler)
        assert result.is_failure()
        assert result.error is error


class TestUnwrap:
    """Extracting the value re-raises the original exception."""

    def test_unwrap_reraises_same_exception(self) -> None:
        """The exception is not wrapped again."""
        error = ConnectionError("reset")
        with pytest.raises(ConnectionError) as exc_info:
            ps.failure(error).unwrap()
        assert exc_info.value is error

    def test_defaults(self) -> None:
        """Defaults are only used for failures."""
        assert ps.Failure(ValueError()).unwrap_or(0) == 0
        assert ps.Success(1).unwrap_or(0) == 1
        assert ps.Failure(ValueError("abc")).unwrap_or_else(str) == "abc"

    def test_match(self) -> None:
        """`match` dispatches on the variant."""
        handlers = {"success": lambda v: v * 2, "failure": lambda e: str(e)}
        assert ps.Success(2).match(**handlers) == 4
        assert ps.Failure(ValueError("bad")).match(**handlers) == "bad"


class TestNormalization:
    """Failures always hold an exception."""

    def test_non_exception_is_wrapped(self) -> None:
        """Plain values become `OpaqueFailure`."""
        result = ps.failure(404)
        assert isinstance(result.error, ps.OpaqueFailure)
        assert result.error.value == 404
        assert str(result.error) == "404"

    def test_exception_is_kept(self) -> None:
        """Exceptions are stored unchanged."""
        error = ValueError("v")
        assert ps.Failure(error).error is error


class TestBoundaries:
    """`sync_try` and `async_try`."""

    def test_sync_try(self) -> None:
        """A thunk's value or exception is wrapped."""
        assert ps.sync_try(lambda: 1 + 1) == ps.Success(2)
        assert ps.sync_try(int, "10") == ps.Success(10)
        assert isinstance(ps.sync_try(int, "ten").error, ValueError)

    def test_async_try_success(self) -> None:
        """The result is produced once the coroutine settles."""

        async def compute() -> int:
            await asyncio.sleep(0)
            return 42

        assert asyncio.run(ps.async_try(compute())) == ps.Success(42)

    def test_async_try_failure(self) -> None:
        """A raising coroutine becomes a failure."""
        error = TimeoutError("slow")

        async def compute() -> int:
            await asyncio.sleep(0)
            raise error

        result = asyncio.run(ps.async_try(compute()))
        assert result.is_failure()
        assert result.error is error

    def test_async_try_accepts_futures(self) -> None:
        """Any awaitable works, not only coroutines."""

        async def main() -> ps.Try[str]:
            future: asyncio.Future[str] = asyncio.get_running_loop().create_future()
            future.set_result("done")
            return await ps.async_try(future)

        assert asyncio.run(main()) == ps.Success("done")

    def test_async_try_does_not_capture_cancellation(self) -> None:
        """Cancellation belongs to the underlying computation."""

        async def main() -> None:
            task = asyncio.create_task(asyncio.sleep(10))
            wrapped = asyncio.create_task(ps.async_try(task))
            await asyncio.sleep(0)
            task.cancel()
            await wrapped

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(main())


def test_captures_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Captured exceptions are logged at debug level."""

    def parse(s: str) -> int:
        return int(s)

    with caplog.at_level(logging.DEBUG, logger="pyosafe"):
        ps.Success("nope").map(parse)
    assert any(
        "ValueError" in record.getMessage() and "parse" in record.getMessage()
        for record in caplog.records
    )


def test_capture_logging_can_be_disabled(caplog: pytest.LogCaptureFixture) -> None:
    """No record is emitted when `log_captured` is off."""
    with (
        ps.config_context(log_captured=False),
        caplog.at_level(logging.DEBUG, logger="pyosafe"),
    ):
        ps.sync_try(int, "nope")
    assert not caplog.records
