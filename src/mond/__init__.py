from __future__ import annotations

from .errors import UnwrapError
from .option import Nothing, Option, Some, none, some
from .result import Err, Ok, Result, err, ok

__version__ = "0.1.0"

__all__ = [
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
    "err",
    "none",
    "ok",
    "some",
]
