from ._either import Either, Left, Right, left, right
from ._lift import Sequencer, Traverser, sequence, traverse
from ._option import NONE, NoneOption, Option, Some, none, some
from ._result import Err, Ok, Result, err, ok
from ._try import Failure, Success, Try, async_try, failure, success, sync_try

__all__ = [
    "NONE",
    "Either",
    "Err",
    "Failure",
    "Left",
    "NoneOption",
    "Ok",
    "Option",
    "Result",
    "Right",
    "Sequencer",
    "Some",
    "Success",
    "Traverser",
    "Try",
    "async_try",
    "err",
    "failure",
    "left",
    "none",
    "ok",
    "right",
    "sequence",
    "some",
    "success",
    "sync_try",
    "traverse",
]
