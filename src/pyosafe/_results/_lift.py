"""Lift operations over collections of containers.

`sequence` turns an iterable of containers into a container of a `list`, `traverse` maps a function returning a container over an iterable and sequences the outcome in the same pass.

Both walk their input front-to-back and stop at the first absence or failure, which is returned as-is: items after it are never pulled from the iterable, and the mapping function of `traverse` is never called on them.

`Either` has no lifter, since neither of its sides means failure.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Concatenate, Final, cast

from .._core import get_config
from ._option import NONE, Option, Some
from ._result import Ok, Result
from ._try import Success, Try, _captured


class Sequencer:
    """Combine an iterable of containers into one container of the ordered values."""

    __slots__ = ()

    @staticmethod
    def option[T](items: Iterable[Option[T]]) -> Option[list[T]]:
        """Returns `Some` of every value in order, or `NONE` as soon as one item is `NONE`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.sequence.option([ps.Some(1), ps.Some(2)])
        Some(value=[1, 2])
        >>> ps.sequence.option([ps.Some(1), ps.NONE, ps.Some(3)])
        NONE
        >>> ps.sequence.option([])
        Some(value=[])

        ```
        """
        collected: list[T] = []
        for item in items:
            if item.is_none():
                return NONE
            collected.append(item.unwrap())
        return Some(collected)

    @staticmethod
    def result[T, E](items: Iterable[Result[T, E]]) -> Result[list[T], E]:
        """Returns `Ok` of every value in order, or the first `Err` encountered.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.sequence.result([ps.Ok(1), ps.Ok(2), ps.Ok(3)])
        Ok(value=[1, 2, 3])
        >>> ps.sequence.result([ps.Ok(1), ps.Err("first"), ps.Err("second")])
        Err(error='first')

        ```
        """
        collected: list[T] = []
        for item in items:
            if item.is_err():
                return cast(Result[list[T], E], item)
            collected.append(item.unwrap())
        return Ok(collected)

    @staticmethod
    def try_[T](items: Iterable[Try[T]]) -> Try[list[T]]:
        """Returns `Success` of every value in order, or the first `Failure` encountered.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.sequence.try_([ps.Success("a"), ps.Success("b")])
        Success(value=['a', 'b'])
        >>> ps.sequence.try_([ps.Success("a"), ps.Failure(KeyError("b"))])
        Failure(error=KeyError('b'))

        ```
        """
        collected: list[T] = []
        for item in items:
            if item.is_failure():
                return cast(Try[list[T]], item)
            collected.append(item.unwrap())
        return Success(collected)


class Traverser:
    """Map a function returning a container over an iterable, then sequence the results.

    The extra `*args` and `**kwargs` are passed to the function after each item.
    """

    __slots__ = ()

    @staticmethod
    def option[T, **P, U](
        items: Iterable[T],
        f: Callable[Concatenate[T, P], Option[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Option[list[U]]:
        """Returns `Some` of every mapped value, or `NONE` as soon as **f** returns `NONE`.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> def half(x: int) -> ps.Option[int]:
        ...     return ps.Some(x // 2) if x % 2 == 0 else ps.NONE
        >>> ps.traverse.option([2, 4, 6], half)
        Some(value=[1, 2, 3])
        >>> ps.traverse.option([2, 3, 6], half)
        NONE

        ```
        """
        return sequence.option(f(item, *args, **kwargs) for item in items)

    @staticmethod
    def result[T, E, **P, U](
        items: Iterable[T],
        f: Callable[Concatenate[T, P], Result[U, E]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Result[list[U], E]:
        """Returns `Ok` of every mapped value, or the first `Err` returned by **f**.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> def parse(s: str) -> ps.Result[int, str]:
        ...     return ps.Ok(int(s)) if s.isdigit() else ps.Err(f"invalid: {s}")
        >>> ps.traverse.result(["1", "2", "3"], parse)
        Ok(value=[1, 2, 3])
        >>> ps.traverse.result(["1", "bad", "3"], parse)
        Err(error='invalid: bad')

        ```
        """
        return sequence.result(f(item, *args, **kwargs) for item in items)

    @staticmethod
    def try_[T, **P, U](
        items: Iterable[T],
        f: Callable[Concatenate[T, P], Try[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Try[list[U]]:
        """Like the other lifters, but an exception raised by **f** is captured into a `Failure` and stops the traversal.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> def explode(s: str) -> ps.Try[int]:
        ...     raise LookupError(s)
        >>> ps.traverse.try_(["a", "b"], explode)
        Failure(error=LookupError('a'))
        >>> ps.traverse.try_(["1", "2"], lambda s: ps.Success(int(s)))
        Success(value=[1, 2])

        ```
        """

        def _apply(item: T) -> Try[U]:
            try:
                return f(item, *args, **kwargs)
            except get_config().capture as exc:
                return _captured(exc, f)

        return sequence.try_(_apply(item) for item in items)


sequence: Final = Sequencer()
"""Namespace of the `sequence` lifters: `sequence.option`, `sequence.result` and `sequence.try_`."""
traverse: Final = Traverser()
"""Namespace of the `traverse` lifters: `traverse.option`, `traverse.result` and `traverse.try_`."""
