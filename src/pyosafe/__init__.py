"""Composable containers for absent, failed and raising computations."""

import logging
from logging import NullHandler

from ._core import Config, Pipeable, config_context, get_config, set_config
from ._errors import EmptyValueAccess, OpaqueFailure, UnwrapError, WrongSideAccess
from ._results import (
    NONE,
    Either,
    Err,
    Failure,
    Left,
    NoneOption,
    Ok,
    Option,
    Result,
    Right,
    Some,
    Success,
    Try,
    async_try,
    err,
    failure,
    left,
    none,
    ok,
    right,
    sequence,
    some,
    success,
    sync_try,
    traverse,
)

__version__ = "0.1.0"

__all__ = [
    "NONE",
    "Config",
    "Either",
    "EmptyValueAccess",
    "Err",
    "Failure",
    "Left",
    "NoneOption",
    "Ok",
    "OpaqueFailure",
    "Option",
    "Pipeable",
    "Result",
    "Right",
    "Some",
    "Success",
    "Try",
    "UnwrapError",
    "WrongSideAccess",
    "add_stderr_logger",
    "async_try",
    "config_context",
    "err",
    "failure",
    "get_config",
    "left",
    "none",
    "ok",
    "right",
    "sequence",
    "set_config",
    "some",
    "success",
    "sync_try",
    "traverse",
]

logging.getLogger(__name__).addHandler(NullHandler())


def add_stderr_logger(level: int = logging.DEBUG) -> logging.StreamHandler:  # type: ignore[type-arg]
    """Helper for quickly adding a StreamHandler to the package logger, useful to see the exceptions captured by `Try`.

    Returns the handler after adding it.
    """
    logger = logging.getLogger(__name__)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.debug("Added a stderr logging handler to logger: %s", __name__)
    return handler


del NullHandler
