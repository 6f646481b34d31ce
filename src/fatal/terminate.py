"""Write a message to stderr and end the process with exit status 1.

Everything else in the package reduces to :meth:`Terminator.fatal`. The
module-level :func:`fatal`, :func:`error` and :func:`warn` use a default
terminator whose color setting is read from ``FATAL_COLOR`` once, at import.
"""

from typing import Any, NoReturn

import click

from .models import Config

EXIT_CODE = 1
ERROR_PREFIX = "Error: "
WARNING_PREFIX = "Warning: "

_RED = click.style("", fg="red", reset=False)
_YELLOW = click.style("", fg="yellow", reset=False)
_RESET = click.style("", reset=True)


def _join(parts: tuple[Any, ...], sep: str) -> str:
    return sep.join(str(p) for p in parts)


class Terminator:
    """Fatal-exit helpers bound to one :class:`~fatal.models.Config`."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()

    def __repr__(self) -> str:
        return f"Terminator({self.config!r})"

    # -----------------------------------------------------------------------
    # Stream writes
    # -----------------------------------------------------------------------

    def _write(self, text: str, nl: bool = False) -> bool:
        """Best-effort write to the error stream. Returns ``False`` on failure."""
        try:
            click.echo(text, file=self.config.file, nl=nl, err=True, color=True)
        except (OSError, ValueError):
            return False
        return True

    def _write_styled_prefix(self, prefix: str, escape: str) -> None:
        if not self.config.color:
            self._write(prefix)
            return
        if not self._write(escape):
            self._write(prefix)
            return
        self._write(prefix)
        self._write(_RESET)

    def write_prefix(self) -> None:
        """Write ``Error: `` (red when color is enabled) with no newline."""
        self._write_styled_prefix(ERROR_PREFIX, _RED)

    # -----------------------------------------------------------------------
    # Terminators
    # -----------------------------------------------------------------------

    def fatal(self, *parts: Any, sep: str = " ") -> NoReturn:
        """Print ``parts`` as one line on stderr, if any, and exit with status 1.

        Parameters
        ----------
        parts:
            Pieces of the message, converted with ``str`` and joined by
            ``sep``. With no parts nothing is written.
        sep:
            Separator placed between parts.
        """
        if parts:
            self._write(_join(parts, sep), nl=True)
        self.config.exit(EXIT_CODE)
        # Never resume the caller, even if an injected exit returns.
        raise SystemExit(EXIT_CODE)

    def error(self, *parts: Any, sep: str = " ") -> NoReturn:
        """Like :meth:`fatal`, with ``Error: `` written before the message.

        With no parts this is exactly ``fatal()``: no bare prefix is printed.
        """
        if not parts:
            self.fatal()
        # Render every part before the prefix goes out.
        line = _join(parts, sep)
        self.write_prefix()
        self.fatal(line)

    def warn(self, *parts: Any, sep: str = " ") -> None:
        """Emit a ``Warning:`` line to stderr and carry on. No parts, no output."""
        if not parts:
            return
        line = _join(parts, sep)
        self._write_styled_prefix(WARNING_PREFIX, _YELLOW)
        self._write(line, nl=True)


DEFAULT = Terminator(Config.from_env())


def fatal(*parts: Any, sep: str = " ") -> NoReturn:
    """Print ``parts`` to stderr and exit with status 1."""
    DEFAULT.fatal(*parts, sep=sep)


def error(*parts: Any, sep: str = " ") -> NoReturn:
    """Print ``Error: `` and ``parts`` to stderr and exit with status 1."""
    DEFAULT.error(*parts, sep=sep)


def warn(*parts: Any, sep: str = " ") -> None:
    """Print ``Warning: `` and ``parts`` to stderr."""
    DEFAULT.warn(*parts, sep=sep)
