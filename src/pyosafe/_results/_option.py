from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Concatenate, Never, TypeIs

from .._core import Container
from .._errors import EmptyValueAccess

if TYPE_CHECKING:
    from ._either import Either
    from ._result import Result
    from ._try import Try


class Option[T](Container):
    """Represents the presence (`Some`) or absence (`NONE`) of a value.

    `Option` is a closed union: its only variants are `Some` and `NoneOption`, whose single instance is `NONE`.

    Example:
    ```python
    >>> import pyosafe as ps
    >>> def first_even(values: list[int]) -> ps.Option[int]:
    ...     return ps.Option.from_(next((v for v in values if v % 2 == 0), None))
    >>> first_even([1, 4, 5]).map(lambda x: x * 10)
    Some(value=40)
    >>> first_even([1, 3]).map(lambda x: x * 10)
    NONE

    ```
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """Wrap a value that may be `None` into an `Option`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `NONE` if **value** is `None`, `Some(value)` otherwise.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Option.from_(0)
        Some(value=0)
        >>> ps.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some(2).is_some()
        True
        >>> ps.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is the `NONE` value.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some(2).is_none()
        False
        >>> ps.NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            EmptyValueAccess: If the option is `NONE`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some("car").unwrap()
        'car'
        >>> ps.NONE.unwrap()
        Traceback (most recent call last):
            ...
        pyosafe._errors.EmptyValueAccess: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with a provided message if the value is `NONE`.

        Args:
            msg (str): The message to include in the exception.

        Returns:
            T: The contained value.

        Raises:
            EmptyValueAccess: If the option is `NONE`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some("value").expect("fruits are healthy")
        'value'
        >>> ps.NONE.expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        pyosafe._errors.EmptyValueAccess: fruits are healthy (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.value
        msg = f"{msg} (called `expect` on a `None`)"
        raise EmptyValueAccess(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some("car").unwrap_or("bike")
        'car'
        >>> ps.NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.value if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from **f**.

        **f** is only called on the `NONE` path.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> k = 10
        >>> ps.Some(4).unwrap_or_else(lambda: 2 * k)
        4
        >>> ps.NONE.unwrap_or_else(lambda: 2 * k)
        20

        ```
        """
        return self.value if self.is_some() else f()

    def map[**P, U](
        self, f: Callable[Concatenate[T, P], U], *args: P.args, **kwargs: P.kwargs
    ) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **f** to a contained `Some` value.

        `NONE` is returned untouched, and **f** is not called.

        Args:
            f (Callable[Concatenate[T, P], U]): The function to apply to the `Some` value.
            *args (P.args): Additional positional arguments to pass to **f**.
            **kwargs (P.kwargs): Additional keyword arguments to pass to **f**.

        Returns:
            Option[U]: `Some` of the mapped value, or `NONE`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some("Hello, World!").map(len)
        Some(value=13)
        >>> ps.Some(5).map(pow, 2)
        Some(value=25)
        >>> ps.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.value, *args, **kwargs))
        return NONE

    def flat_map[**P, U](
        self,
        f: Callable[Concatenate[T, P], Option[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[U]:
        """Calls **f** with the `Some` value and returns its result, otherwise returns `NONE`.

        Allows **f** to short-circuit the chain by returning `NONE`.

        Args:
            f (Callable[Concatenate[T, P], Option[U]]): The function to call with the `Some` value.
            *args (P.args): Additional positional arguments to pass to **f**.
            **kwargs (P.kwargs): Additional keyword arguments to pass to **f**.

        Returns:
            Option[U]: The result of **f**, or `NONE`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> def sq(x: int) -> ps.Option[int]:
        ...     return ps.Some(x * x)
        >>> def nope(x: int) -> ps.Option[int]:
        ...     return ps.NONE
        >>> ps.Some(2).flat_map(sq).flat_map(sq)
        Some(value=16)
        >>> ps.Some(2).flat_map(nope).flat_map(sq)
        NONE

        ```
        """
        if self.is_some():
            return f(self.value, *args, **kwargs)
        return NONE

    def filter[**P](
        self,
        predicate: Callable[Concatenate[T, P], bool],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[T]:
        """Keeps a `Some` value only if it satisfies **predicate**.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some(4).filter(lambda x: x % 2 == 0)
        Some(value=4)
        >>> ps.Some(3).filter(lambda x: x % 2 == 0)
        NONE
        >>> ps.NONE.filter(lambda x: x % 2 == 0)
        NONE

        ```
        """
        if self.is_some() and predicate(self.value, *args, **kwargs):
            return self
        return NONE

    def or_(self, alternative: Option[T]) -> Option[T]:
        """Returns the option if it is `Some`, otherwise **alternative**.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some(1).or_(ps.Some(2))
        Some(value=1)
        >>> ps.NONE.or_(ps.Some(2))
        Some(value=2)

        ```
        """
        return self if self.is_some() else alternative

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it is `Some`, otherwise calls **f** and returns its result.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some("barbarians").or_else(lambda: ps.Some("vikings"))
        Some(value='barbarians')
        >>> ps.NONE.or_else(lambda: ps.Some("vikings"))
        Some(value='vikings')

        ```
        """
        return self if self.is_some() else f()

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Exhaustive case dispatch, exactly one of the handlers runs.

        Args:
            some (Callable[[T], U]): Called with the value if the option is `Some`.
            none (Callable[[], U]): Called without arguments if the option is `NONE`.

        Returns:
            U: The result of the handler that ran.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some(3).match(some=lambda x: x + 1, none=lambda: 0)
        4
        >>> ps.NONE.match(some=lambda x: x + 1, none=lambda: 0)
        0

        ```
        """
        match self:
            case Some(value):
                return some(value)
            case _:
                return none()

    def to_result[E](self, error_if_none: E) -> Result[T, E]:
        """Converts the option into a `Result`, using **error_if_none** only when the option is `NONE`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some(1).to_result("missing")
        Ok(value=1)
        >>> ps.NONE.to_result("missing")
        Err(error='missing')

        ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.value)
        return Err(error_if_none)

    def to_try(self, error_if_none: object) -> Try[T]:
        """Converts the option into a `Try`, using **error_if_none** only when the option is `NONE`.

        A non-exception **error_if_none** is wrapped in an `OpaqueFailure`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some(1).to_try(KeyError("id"))
        Success(value=1)
        >>> ps.NONE.to_try(KeyError("id"))
        Failure(error=KeyError('id'))

        ```
        """
        from ._try import Failure, Success

        if self.is_some():
            return Success(self.value)
        return Failure(error_if_none)  # pyright: ignore[reportArgumentType]

    def to_either[L](self, left_if_none: L) -> Either[L, T]:
        """Converts the option into an `Either`, `Some` going to the `Right` side.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some(1).to_either("empty")
        Right(value=1)
        >>> ps.NONE.to_either("empty")
        Left(value='empty')

        ```
        """
        from ._either import Left, Right

        if self.is_some():
            return Right(self.value)
        return Left(left_if_none)


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    tag: ClassVar[str] = "Some"
    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Use the `NONE` singleton rather than instantiating this class.
    """

    tag: ClassVar[str] = "None"

    def __repr__(self) -> str:
        return "NONE"

    def __reduce__(self) -> str:
        # copy, deepcopy and pickle resolve back to the module-level singleton
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise EmptyValueAccess("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""


def some[T](value: T) -> Option[T]:
    """Build a `Some` holding **value**."""
    return Some(value)


def none() -> Option[Any]:
    """Return the shared `NONE` instance."""
    return NONE
