from __future__ import annotations


class UnwrapError(RuntimeError):
    """Base class for errors raised when a container is unwrapped on the wrong variant."""


class EmptyValueAccess(UnwrapError):
    """Raised when the value of an empty `Option` is requested."""


class WrongSideAccess(UnwrapError):
    """Raised when a two-sided container is unwrapped on the side it does not hold.

    Args:
        msg: The error message.
        value: The payload the container actually holds.
    """

    value: object

    def __init__(self, msg: str, value: object = None) -> None:
        super().__init__(msg)
        self.value = value


class OpaqueFailure(Exception):  # noqa: N818
    """Exception standing in for a non-exception value stored as a `Try` failure.

    Example:
    ```python
    >>> import pyosafe as ps
    >>> ps.failure("disk full").error
    OpaqueFailure('disk full')
    >>> ps.failure("disk full").error.value
    'disk full'

    ```
    """

    value: object

    def __init__(self, value: object) -> None:
        super().__init__(str(value))
        self.value = value


def as_exception(value: object) -> Exception:
    if isinstance(value, Exception):
        return value
    return OpaqueFailure(value)
