from collections.abc import Mapping
from typing import Any

import cytoolz as cz

_BRACKETS: dict[type[Any], tuple[str, str]] = {
    list: ("[", "]"),
    tuple: ("(", ")"),
    set: ("{", "}"),
    frozenset: ("frozenset({", "})"),
}


def _items_repr(parts: list[str], opening: str, closing: str, *, more: bool) -> str:
    if more:
        parts.append("...")
    return f"{opening}{', '.join(parts)}{closing}"


def payload_repr(value: object, max_items: int, max_width: int) -> str:
    match value:
        case list() | tuple() | set() | frozenset() if value and type(value) in _BRACKETS:
            opening, closing = _BRACKETS[type(value)]
            parts = [repr(v) for v in cz.itertoolz.take(max_items, value)]
            if isinstance(value, tuple) and len(value) == 1 and parts:
                parts[0] += ","
            text = _items_repr(parts, opening, closing, more=len(value) > max_items)
        case Mapping():
            parts = [
                f"{k!r}: {v!r}"
                for k, v in cz.itertoolz.take(max_items, value.items())  # pyright: ignore[reportUnknownMemberType]
            ]
            text = _items_repr(parts, "{", "}", more=len(value) > max_items)
        case _:
            text = repr(value)
    if len(text) <= max_width:
        return text
    return text[: max_width - 3] + "..."
