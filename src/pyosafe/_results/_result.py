from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Concatenate, Never, TypeIs, cast

from .._core import Container
from .._errors import WrongSideAccess
from ._option import NONE, Option, Some

if TYPE_CHECKING:
    from ._either import Either
    from ._try import Try


class Result[T, E](Container):
    """Represents either success (`Ok`) or failure (`Err`) with a caller-chosen error type.

    The error type is never inspected nor constrained.

    Example:
    ```python
    >>> import pyosafe as ps
    >>> def parse(s: str) -> ps.Result[int, str]:
    ...     return ps.Ok(int(s)) if s.isdigit() else ps.Err(f"not a number: {s!r}")
    >>> parse("21").map(lambda x: x * 2)
    Ok(value=42)
    >>> parse("x").map(lambda x: x * 2)
    Err(error="not a number: 'x'")

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Ok`."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Err`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Ok` value.

        On `Err`, the stored error is propagated: an exception is raised as-is, any other payload is raised as a `WrongSideAccess` holding it in `value`.

        Raises:
            WrongSideAccess: If the result is `Err` and the error is not an exception.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Ok(2).unwrap()
        2
        >>> ps.Err(ValueError("bad input")).unwrap()
        Traceback (most recent call last):
            ...
        ValueError: bad input
        >>> ps.Err("boom").unwrap()
        Traceback (most recent call last):
            ...
        pyosafe._errors.WrongSideAccess: called `unwrap` on Err: 'boom'

        ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained `Err` value.

        Raises:
            WrongSideAccess: If the result is `Ok`.
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Ok` value, or raises `WrongSideAccess` with a custom message.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Err("timeout").expect("fetch failed")
        Traceback (most recent call last):
            ...
        pyosafe._errors.WrongSideAccess: fetch failed: 'timeout'

        ```
        """
        if self.is_ok():
            return self.value
        raise WrongSideAccess(f"{msg}: {self.error!r}", self.error)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Ok` value or a provided default.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Ok(9).unwrap_or(2)
        9
        >>> ps.Err("error").unwrap_or(2)
        2

        ```
        """
        return self.value if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Returns the contained `Ok` value or computes it from the error with **f**."""
        return self.value if self.is_ok() else f(self.error)

    def map[**P, U](
        self, f: Callable[Concatenate[T, P], U], *args: P.args, **kwargs: P.kwargs
    ) -> Result[U, E]:
        """Maps a `Result[T, E]` to `Result[U, E]` by applying **f** to a contained `Ok` value.

        `Err` is returned unchanged, and **f** is not called.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Ok(2).map(lambda x: x + 1)
        Ok(value=3)
        >>> ps.Err("nope").map(lambda x: x + 1)
        Err(error='nope')

        ```
        """
        if self.is_ok():
            return Ok(f(self.value, *args, **kwargs))
        return cast(Result[U, E], self)

    def map_err[**P, F](
        self, f: Callable[Concatenate[E, P], F], *args: P.args, **kwargs: P.kwargs
    ) -> Result[T, F]:
        """Maps a `Result[T, E]` to `Result[T, F]` by applying **f** to a contained `Err` value.

        `Ok` is returned unchanged, and **f** is not called.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Err("nope").map_err(str.upper)
        Err(error='NOPE')
        >>> ps.Ok(1).map_err(str.upper)
        Ok(value=1)

        ```
        """
        if self.is_err():
            return Err(f(self.error, *args, **kwargs))
        return cast(Result[T, F], self)

    def flat_map[**P, U](
        self,
        f: Callable[Concatenate[T, P], Result[U, E]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[U, E]:
        """Calls **f** with the `Ok` value and returns its result, otherwise returns the `Err` unchanged.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> def positive(x: int) -> ps.Result[int, str]:
        ...     return ps.Ok(x) if x > 0 else ps.Err("must be positive")
        >>> ps.Ok(5).flat_map(positive).map(lambda x: x * 2)
        Ok(value=10)
        >>> ps.Ok(-5).flat_map(positive).map(lambda x: x * 2)
        Err(error='must be positive')

        ```
        """
        if self.is_ok():
            return f(self.value, *args, **kwargs)
        return cast(Result[U, E], self)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Calls **f** with the `Err` value and returns its result, otherwise returns the `Ok` unchanged."""
        if self.is_err():
            return f(self.error)
        return cast(Result[T, F], self)

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case dispatch, exactly one of the handlers runs.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Ok(3).match(ok=str, err=lambda e: f"error: {e}")
        '3'
        >>> ps.Err("x").match(ok=str, err=lambda e: f"error: {e}")
        'error: x'

        ```
        """
        match self:
            case Ok(value):
                return ok(value)
            case Err(error):
                return err(error)
            case _:
                raise RuntimeError("unreachable")

    def ok(self) -> Option[T]:
        """Converts the result into an `Option`, discarding the error.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Ok(2).ok()
        Some(value=2)
        >>> ps.Err("x").ok()
        NONE

        ```
        """
        if self.is_ok():
            return Some(self.value)
        return NONE

    def err(self) -> Option[E]:
        """Converts the result into an `Option` of its error, discarding the success value."""
        if self.is_err():
            return Some(self.error)
        return NONE

    def to_try(self) -> Try[T]:
        """Converts the result into a `Try`.

        A non-exception error is wrapped in an `OpaqueFailure`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Ok(1).to_try()
        Success(value=1)
        >>> ps.Err("bad").to_try()
        Failure(error=OpaqueFailure('bad'))

        ```
        """
        from ._try import Failure, Success

        if self.is_ok():
            return Success(self.value)
        return Failure(self.error)  # pyright: ignore[reportArgumentType]

    def to_either(self) -> Either[E, T]:
        """Converts the result into an `Either`, `Err` going to the `Left` side."""
        from ._either import Left, Right

        if self.is_ok():
            return Right(self.value)
        return Left(self.error)


@dataclass(slots=True, frozen=True)
class Ok[T, E](Result[T, E]):
    """Result variant representing a successful value."""

    tag: ClassVar[str] = "Ok"
    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise WrongSideAccess(f"called `unwrap_err` on Ok: {self.value!r}", self.value)


@dataclass(slots=True, frozen=True)
class Err[T, E](Result[T, E]):
    """Result variant representing an error value."""

    tag: ClassVar[str] = "Err"
    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        if isinstance(self.error, BaseException):
            raise self.error
        raise WrongSideAccess(f"called `unwrap` on Err: {self.error!r}", self.error)

    def unwrap_err(self) -> E:
        return self.error


def ok[T](value: T) -> Result[T, Any]:
    """Build an `Ok` holding **value**."""
    return Ok(value)


def err[E](error: E) -> Result[Any, E]:
    """Build an `Err` holding **error**."""
    return Err(error)
