"""Core data models for fatal."""

import os
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, TextIO, TypeVar

if TYPE_CHECKING:
    from .terminate import Terminator

T = TypeVar("T")
E = TypeVar("E")

# Values of FATAL_COLOR that turn the colored prefix on
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """How a terminator writes and exits.

    ``color`` is fixed for the lifetime of the terminator built from it.
    ``file`` of ``None`` means whatever stderr is when the write happens.
    """

    color: bool = False
    file: TextIO | None = None
    exit: Callable[[int], NoReturn] = field(default=sys.exit, repr=False)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Config":
        """Build a config with ``color`` taken from ``FATAL_COLOR``."""
        env = os.environ if environ is None else environ
        return cls(color=env.get("FATAL_COLOR", "").strip().lower() in _TRUTHY)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result carrying its payload."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self, *, terminator: "Terminator | None" = None) -> T:
        from .unwrap import unwrap
        return unwrap(self, terminator=terminator)

    def expect(self, message: str, *, terminator: "Terminator | None" = None) -> T:
        from .unwrap import expect
        return expect(self, message, terminator=terminator)

    def unwrap_format(
        self,
        template: str,
        *args: Any,
        terminator: "Terminator | None" = None,
        **params: Any,
    ) -> T:
        from .unwrap import unwrap_format
        return unwrap_format(self, template, *args, terminator=terminator, **params)

    def unwrap_message(
        self,
        template: str,
        *args: Any,
        terminator: "Terminator | None" = None,
        **params: Any,
    ) -> T:
        from .unwrap import unwrap_message
        return unwrap_message(self, template, *args, terminator=terminator, **params)


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result. ``str(error)`` is what ends up on stderr."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self, *, terminator: "Terminator | None" = None) -> NoReturn:
        from .unwrap import unwrap
        return unwrap(self, terminator=terminator)

    def expect(self, message: str, *, terminator: "Terminator | None" = None) -> NoReturn:
        from .unwrap import expect
        return expect(self, message, terminator=terminator)

    def unwrap_format(
        self,
        template: str,
        *args: Any,
        terminator: "Terminator | None" = None,
        **params: Any,
    ) -> NoReturn:
        from .unwrap import unwrap_format
        return unwrap_format(self, template, *args, terminator=terminator, **params)

    def unwrap_message(
        self,
        template: str,
        *args: Any,
        terminator: "Terminator | None" = None,
        **params: Any,
    ) -> NoReturn:
        from .unwrap import unwrap_message
        return unwrap_message(self, template, *args, terminator=terminator, **params)


Result = Ok[T] | Err[E]
