from __future__ import annotations

from abc import ABC
from collections.abc import Mapping
from dataclasses import fields
from functools import partial
from typing import Any, ClassVar

import cytoolz as cz

from ._config import get_config
from ._main import Pipeable


class Container(ABC, Pipeable):
    """Base class of every container variant.

    Variants are frozen dataclasses holding at most one payload field, and declare a `tag`, the discriminator used by the debug representations.
    """

    __slots__ = ()
    tag: ClassVar[str]

    def _payload(self) -> tuple[object, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))  # pyright: ignore[reportArgumentType]

    def debug(self) -> dict[str, Any]:
        """Render the container as a tagged structural form, suitable for logging or snapshot tests.

        Containers nested in the payload (directly, or inside lists, tuples and mappings) are rendered recursively. Namedtuples keep their type, and a payload that contains itself is cut with `...` where the cycle closes.

        This is an informational representation, not a persistence format.

        Returns:
            dict[str, Any]: The variant discriminator under `"tag"`, and the payload under `"value"` if the variant holds one.

        Example:
        ```python
        >>> import pyosafe as ps
        >>> ps.Some(1).debug()
        {'tag': 'Some', 'value': 1}
        >>> ps.NONE.debug()
        {'tag': 'None'}
        >>> ps.Ok([ps.Left("a"), ps.Right(2)]).debug()
        {'tag': 'Ok', 'value': [{'tag': 'Left', 'value': 'a'}, {'tag': 'Right', 'value': 2}]}

        ```
        """
        return _tagged(self, frozenset({id(self)}))

    def __str__(self) -> str:
        match self._payload():
            case (value,):
                return f"{self.tag}({get_config().payload_repr(value)})"
            case _:
                return repr(self)


def _tagged(container: Container, active: frozenset[int]) -> dict[str, Any]:
    match container._payload():  # noqa: SLF001
        case (value,):
            return {"tag": container.tag, "value": debug_form(value, active)}
        case _:
            return {"tag": container.tag}


def debug_form(value: object, active: frozenset[int] = frozenset()) -> object:
    """Structural form of **value**, with **active** holding the ids of the enclosing objects."""
    if id(value) in active:
        return ...
    inner = active | {id(value)}
    match value:
        case Container():
            return _tagged(value, inner)
        case list():
            return [debug_form(v, inner) for v in value]  # pyright: ignore[reportUnknownVariableType]
        case tuple() if hasattr(value, "_fields"):
            return type(value)._make(debug_form(v, inner) for v in value)  # pyright: ignore[reportUnknownMemberType, reportAttributeAccessIssue]
        case tuple():
            return tuple(debug_form(v, inner) for v in value)  # pyright: ignore[reportUnknownVariableType]
        case Mapping():
            return cz.dicttoolz.valmap(partial(debug_form, active=inner), value)  # pyright: ignore[reportUnknownArgumentType]
        case _:
            return value
