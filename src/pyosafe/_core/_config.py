from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

from ._format import payload_repr


class Config(BaseModel):
    """Runtime configuration shared by every container.

    Values are validated strictly on construction, and instances are immutable: use `set_config` or `config_context` to change the active one.

    Args:
        capture: Exception classes captured by `Try` combinators and boundaries. A single class is accepted.
        repr_max_items: Items of a sized payload shown by `str()`.
        repr_max_width: Characters of a payload shown by `str()` before truncation.
        log_captured: Whether captured exceptions are logged at `DEBUG` level.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    capture: tuple[type[Exception], ...] = (Exception,)
    repr_max_items: NonNegativeInt = 20
    repr_max_width: Annotated[int, Field(ge=4)] = 80
    log_captured: bool = True

    @field_validator("capture", mode="before")
    @classmethod
    def _single_class(cls, value: object) -> object:
        if isinstance(value, type):
            return (value,)
        return value

    def updated(self, **changes: Any) -> Config:  # noqa: ANN401
        """Return a validated copy with **changes** applied."""
        return Config.model_validate({**dict(self), **changes})

    def payload_repr(self, value: object) -> str:
        return payload_repr(value, self.repr_max_items, self.repr_max_width)


_config: ContextVar[Config] = ContextVar("pyosafe_config", default=Config())


def get_config() -> Config:
    """Return the configuration active in the current context."""
    return _config.get()


def set_config(**changes: Any) -> Config:  # noqa: ANN401
    """Replace the configuration of the current context with a copy updated with **changes**.

    Asyncio tasks created afterwards inherit it. Unknown keys and invalid values raise `pydantic.ValidationError`.

    Example:
    ```python
    >>> import pyosafe as ps
    >>> previous = ps.get_config()
    >>> ps.set_config(repr_max_items=2).repr_max_items
    2
    >>> str(ps.Some([1, 2, 3]))
    'Some([1, 2, ...])'
    >>> ps.set_config(repr_max_items=previous.repr_max_items).repr_max_items
    20

    ```
    """
    config = get_config().updated(**changes)
    _config.set(config)
    return config


@contextmanager
def config_context(**changes: Any) -> Iterator[Config]:  # noqa: ANN401
    """Apply **changes** to the configuration for the duration of a `with` block.

    Only the current context sees the changes, so concurrent asyncio tasks keep their own configuration.

    Example:
    ```python
    >>> import pyosafe as ps
    >>> with ps.config_context(capture=ValueError):
    ...     ps.sync_try(int, "x").is_failure()
    True
    >>> ps.get_config().capture
    (<class 'Exception'>,)

    ```
    """
    token = _config.set(get_config().updated(**changes))
    try:
        yield _config.get()
    finally:
        _config.reset(token)
