from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Concatenate, Never, TypeIs, cast

from .._core import Container
from .._errors import WrongSideAccess


class Either[L, R](Container):
    """Symmetric two-case container holding a `Left` or a `Right` value.

    Neither side carries a success or failure meaning. `map` acts on the `Right` side by convention only, `map_left` is its mirror.

    Example:
    ```python
    >>> import pyosafe as ps
    >>> def classify(n: int) -> ps.Either[str, int]:
    ...     return ps.Right(n) if n % 2 == 0 else ps.Left(f"odd:{n}")
    >>> classify(4).map(lambda x: x // 2)
    Right(value=2)
    >>> classify(3).map(lambda x: x // 2)
    Left(value='odd:3')
    >>> classify(3).map_left(str.upper)
    Left(value='ODD:3')

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_left(self) -> TypeIs[Left[L, R]]:  # type: ignore[misc]
        ...

    @abstractmethod
    def is_right(self) -> TypeIs[Right[L, R]]:  # type: ignore[misc]
        ...

    @abstractmethod
    def unwrap(self) -> R:
        """Returns the `Right` value.

        Raises:
            WrongSideAccess: If the either is `Left`.
        """
        ...

    @abstractmethod
    def unwrap_left(self) -> L:
        """Returns the `Left` value.

        Raises:
            WrongSideAccess: If the either is `Right`.
        """
        ...

    def map[**P, T](
        self, f: Callable[Concatenate[R, P], T], *args: P.args, **kwargs: P.kwargs
    ) -> Either[L, T]:
        """Applies **f** to a `Right` value, a `Left` passes through."""
        if self.is_right():
            return Right(f(self.value, *args, **kwargs))
        return cast(Either[L, T], self)

    def map_left[**P, T](
        self, f: Callable[Concatenate[L, P], T], *args: P.args, **kwargs: P.kwargs
    ) -> Either[T, R]:
        """Applies **f** to a `Left` value, a `Right` passes through."""
        if self.is_left():
            return Left(f(self.value, *args, **kwargs))
        return cast(Either[T, R], self)

    def match[U](self, *, left: Callable[[L], U], right: Callable[[R], U]) -> U:
        """Exhaustive case dispatch, exactly one of the handlers runs.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Left(2).match(left=lambda x: -x, right=lambda x: x)
        -2

        ```
        """
        match self:
            case Left(value):
                return left(value)
            case Right(value):
                return right(value)
            case _:
                raise RuntimeError("unreachable")

    def fold[U](self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        """Positional form of `match`."""
        return self.match(left=left_fn, right=right_fn)

    def swap(self) -> Either[R, L]:
        """Exchanges the sides.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Left("a").swap()
        Right(value='a')

        ```
        """
        if self.is_left():
            return Right(self.value)
        return Left(cast(Right[L, R], self).value)


@dataclass(slots=True, frozen=True)
class Left[L, R](Either[L, R]):
    tag: ClassVar[str] = "Left"
    value: L

    def is_left(self) -> TypeIs[Left[L, R]]:  # type: ignore[misc]
        return True

    def is_right(self) -> TypeIs[Right[L, R]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> Never:
        raise WrongSideAccess(f"called `unwrap` on Left: {self.value!r}", self.value)

    def unwrap_left(self) -> L:
        return self.value


@dataclass(slots=True, frozen=True)
class Right[L, R](Either[L, R]):
    tag: ClassVar[str] = "Right"
    value: R

    def is_left(self) -> TypeIs[Left[L, R]]:  # type: ignore[misc]
        return False

    def is_right(self) -> TypeIs[Right[L, R]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> R:
        return self.value

    def unwrap_left(self) -> Never:
        raise WrongSideAccess(
            f"called `unwrap_left` on Right: {self.value!r}", self.value
        )


def left[L](value: L) -> Either[L, Any]:
    """Build a `Left` holding **value**."""
    return Left(value)


def right[R](value: R) -> Either[Any, R]:
    """Build a `Right` holding **value**."""
    return Right(value)
