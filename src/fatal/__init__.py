"""fatal: end a command-line program with an error message and exit status 1."""

from .models import Config, Err, Ok, Result
from .terminate import Terminator, error, fatal, warn
from .unwrap import attempt, expect, guard, unwrap, unwrap_format, unwrap_message

__version__ = "0.1.0"
__all__ = [
    "Config",
    "Err",
    "Ok",
    "Result",
    "Terminator",
    "attempt",
    "error",
    "expect",
    "fatal",
    "guard",
    "unwrap",
    "unwrap_format",
    "unwrap_message",
    "warn",
]
