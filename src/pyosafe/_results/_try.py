from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Concatenate, Never, TypeIs, cast

from .._core import Container, get_config
from .._errors import as_exception
from ._option import NONE, Option, Some

if TYPE_CHECKING:
    from ._either import Either
    from ._result import Result

logger = logging.getLogger(__name__)


class Try[T](Container):
    """Represents the outcome of a computation that may raise: a `Success` value or a `Failure` exception.

    Unlike `Result`, the failure channel always holds an exception, and exceptions raised by the functions given to `map`, `flat_map` and `recover` are captured into a new `Failure` instead of propagating.

    The captured exception classes are set by `Config.capture`, `Exception` by default, so `KeyboardInterrupt`, `SystemExit` or `asyncio.CancelledError` always propagate.

    Example:
    ```python
    >>> import pyosafe as ps
    >>> ps.Success("42").map(int).map(lambda x: x + 1)
    Success(value=43)
    >>> ps.Success("forty-two").map(int).map(lambda x: x + 1)
    Failure(error=ValueError("invalid literal for int() with base 10: 'forty-two'"))

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_success(self) -> TypeIs[Success[T]]:  # type: ignore[misc]
        """Returns `True` if the try is a `Success`."""
        ...

    @abstractmethod
    def is_failure(self) -> TypeIs[Failure[T]]:  # type: ignore[misc]
        """Returns `True` if the try is a `Failure`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the `Success` value, or re-raises the captured exception itself.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Success(1).unwrap()
        1
        >>> ps.Failure(KeyError("id")).unwrap()
        Traceback (most recent call last):
            ...
        KeyError: 'id'

        ```
        """
        ...

    def unwrap_or(self, default: T) -> T:
        """Returns the `Success` value or a provided default."""
        return self.value if self.is_success() else default

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        """Returns the `Success` value or computes it from the exception with **f**."""
        return self.value if self.is_success() else f(cast(Failure[T], self).error)

    def map[**P, U](
        self, f: Callable[Concatenate[T, P], U], *args: P.args, **kwargs: P.kwargs
    ) -> Try[U]:
        """Applies **f** to a `Success` value, capturing any exception it raises into a `Failure`.

        A `Failure` is returned unchanged, and **f** is not called.

        Args:
            f (Callable[Concatenate[T, P], U]): The function to apply to the `Success` value.
            *args (P.args): Additional positional arguments to pass to **f**.
            **kwargs (P.kwargs): Additional keyword arguments to pass to **f**.

        Returns:
            Try[U]: `Success` of the mapped value, or a `Failure`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Success("10").map(int)
        Success(value=10)
        >>> ps.Success("ten").map(int).is_failure()
        True

        ```
        """
        if self.is_success():
            return _capture(f, self.value, *args, **kwargs)
        return cast(Try[U], self)

    def flat_map[**P, U](
        self,
        f: Callable[Concatenate[T, P], Try[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Try[U]:
        """Calls **f** with the `Success` value and returns its result, capturing any exception it raises into a `Failure`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> def parse(s: str) -> ps.Try[int]:
        ...     return ps.sync_try(int, s)
        >>> ps.Success("4").flat_map(parse)
        Success(value=4)
        >>> ps.Success("four").flat_map(parse).ok()
        NONE

        ```
        """
        if self.is_success():
            try:
                return f(self.value, *args, **kwargs)
            except get_config().capture as exc:
                return _captured(exc, f)
        return cast(Try[U], self)

    def recover[**P](
        self,
        f: Callable[Concatenate[Exception, P], T],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Try[T]:
        """Turns a `Failure` into a `Success` of **f** applied to its exception.

        An exception raised by **f** produces a new `Failure`. A `Success` is returned unchanged.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Failure(KeyError("id")).recover(lambda e: f"default for {e}")
        Success(value="default for 'id'")
        >>> ps.Success(1).recover(lambda e: 0)
        Success(value=1)

        ```
        """
        if self.is_failure():
            return _capture(f, self.error, *args, **kwargs)
        return self

    def match[U](
        self, *, success: Callable[[T], U], failure: Callable[[Exception], U]
    ) -> U:
        """Exhaustive case dispatch, exactly one of the handlers runs."""
        match self:
            case Success(value):
                return success(value)
            case Failure(error):
                return failure(error)
            case _:
                raise RuntimeError("unreachable")

    def ok(self) -> Option[T]:
        """Converts the try into an `Option`, discarding the exception.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Success(3).ok()
        Some(value=3)
        >>> ps.Failure(ValueError()).ok()
        NONE

        ```
        """
        if self.is_success():
            return Some(self.value)
        return NONE

    def to_result(self) -> Result[T, Exception]:
        """Converts the try into a `Result` whose error is the captured exception."""
        from ._result import Err, Ok

        if self.is_success():
            return Ok(self.value)
        return Err(cast(Failure[T], self).error)

    def to_either(self) -> Either[Exception, T]:
        """Converts the try into an `Either`, the captured exception going to the `Left` side."""
        from ._either import Left, Right

        if self.is_success():
            return Right(self.value)
        return Left(cast(Failure[T], self).error)


@dataclass(slots=True, frozen=True)
class Success[T](Try[T]):
    """Try variant holding the value of a computation that completed."""

    tag: ClassVar[str] = "Success"
    value: T

    def is_success(self) -> TypeIs[Success[T]]:  # type: ignore[misc]
        return True

    def is_failure(self) -> TypeIs[Failure[T]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class Failure[T](Try[T]):
    """Try variant holding the exception of a computation that raised.

    A value which is not an `Exception` is wrapped in an `OpaqueFailure` on construction.
    """

    tag: ClassVar[str] = "Failure"
    error: Exception

    def __post_init__(self) -> None:
        object.__setattr__(self, "error", as_exception(self.error))

    def is_success(self) -> TypeIs[Success[T]]:  # type: ignore[misc]
        return False

    def is_failure(self) -> TypeIs[Failure[T]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise self.error


def success[T](value: T) -> Try[T]:
    """Build a `Success` holding **value**."""
    return Success(value)


def failure(error: object) -> Try[Any]:
    """Build a `Failure` holding **error**, normalized into an exception."""
    return Failure(as_exception(error))


def _captured(exc: Exception, source: object) -> Try[Any]:
    if get_config().log_captured:
        name = getattr(source, "__qualname__", None) or repr(source)
        logger.debug("Captured %s raised by %s: %s", type(exc).__name__, name, exc)
    return Failure(exc)


def _capture[**P, U](f: Callable[P, U], *args: P.args, **kwargs: P.kwargs) -> Try[U]:
    try:
        return Success(f(*args, **kwargs))
    except get_config().capture as exc:
        return _captured(exc, f)


def sync_try[**P, U](
    thunk: Callable[P, U], *args: P.args, **kwargs: P.kwargs
) -> Try[U]:
    """Run **thunk** and wrap its outcome, capturing any exception it raises into a `Failure`.

    Args:
        thunk (Callable[P, U]): The computation to run, usually without arguments.
        *args (P.args): Positional arguments to pass to **thunk**.
        **kwargs (P.kwargs): Keyword arguments to pass to **thunk**.

    Returns:
        Try[U]: `Success` of the returned value, or `Failure` of the raised exception.

    Example:
    ```python
    >>> import pyosafe as ps
    >>> ps.sync_try(lambda: int("12"))
    Success(value=12)
    >>> ps.sync_try(int, "twelve").is_failure()
    True

    ```
    """
    return _capture(thunk, *args, **kwargs)


async def async_try[T](pending: Awaitable[T]) -> Try[T]:
    """Await **pending** and wrap its outcome, capturing any exception it raises into a `Failure`.

    The result is only produced once the underlying computation settles. Timeouts and cancellation belong to that computation: `asyncio.CancelledError` is never captured.

    Example:
    ```python
    >>> import asyncio
    >>> import pyosafe as ps
    >>> async def fetch(n: int) -> int:
    ...     if n < 0:
    ...         raise ValueError("negative")
    ...     return n * 2
    >>> asyncio.run(ps.async_try(fetch(21)))
    Success(value=42)
    >>> asyncio.run(ps.async_try(fetch(-1)))
    Failure(error=ValueError('negative'))

    ```
    """
    try:
        value = await pending
    except get_config().capture as exc:
        return _captured(exc, pending)
    return Success(value)
