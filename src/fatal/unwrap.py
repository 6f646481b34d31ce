"""Take the payload out of a result, or end the process with its error.

The success path of every helper here does no formatting work at all; the
message is only built once we know we are exiting.
"""

from contextlib import contextmanager
from typing import Any, Callable, Iterator, NoReturn, TypeVar

from . import terminate
from .models import Err, Ok, Result
from .terminate import Terminator

T = TypeVar("T")


def _resolve(terminator: Terminator | None) -> Terminator:
    return terminator if terminator is not None else terminate.DEFAULT


def _fail(result: Any, terminator: Terminator | None, build: Callable[[Any], str]) -> NoReturn:
    if not isinstance(result, Err):
        raise TypeError(f"expected Ok or Err, got {type(result).__name__}")
    _resolve(terminator).error(build(result.error))


def unwrap(result: Result[T, Any], *, terminator: Terminator | None = None) -> T:
    """Return the payload of ``result``, or exit printing ``Error: <error>``."""
    if isinstance(result, Ok):
        return result.value
    _fail(result, terminator, str)


def expect(result: Result[T, Any], message: str, *, terminator: Terminator | None = None) -> T:
    """Return the payload of ``result``, or exit printing ``Error: <message> (<error>)``."""
    if isinstance(result, Ok):
        return result.value
    _fail(result, terminator, lambda err: f"{message} ({err!s})")


def unwrap_format(
    result: Result[T, Any],
    template: str,
    *args: Any,
    terminator: Terminator | None = None,
    **params: Any,
) -> T:
    """Return the payload of ``result``, or exit with a custom message.

    On failure ``template`` is formatted with ``str.format`` using ``args``,
    ``params`` and ``str(error)`` bound to ``error``. The template is expected
    to mention ``{error}`` somewhere; this is not checked.

    Parameters
    ----------
    result:
        An :class:`~fatal.models.Ok` or :class:`~fatal.models.Err`.
    template:
        ``str.format`` template, e.g. ``"could not read {path}: {error}"``.
    terminator:
        Terminator to exit through. Defaults to the module default.

    Raises
    ------
    TypeError
        If ``error`` is passed in ``params``; that name is reserved.
    """
    if "error" in params:
        raise TypeError("'error' is reserved for the failure value")
    if isinstance(result, Ok):
        return result.value
    _fail(result, terminator, lambda err: template.format(*args, **params, error=str(err)))


def unwrap_message(
    result: Result[T, Any],
    template: str,
    *args: Any,
    terminator: Terminator | None = None,
    **params: Any,
) -> T:
    """Like :func:`unwrap_format`, with `` ({error})`` appended to ``template``."""
    return unwrap_format(result, template + " ({error})", *args, terminator=terminator, **params)


# ---------------------------------------------------------------------------
# Exception adapters
# ---------------------------------------------------------------------------

def attempt(
    func: Callable[..., T],
    *args: Any,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: Any,
) -> Result[T, BaseException]:
    """Call ``func`` and wrap the outcome.

    Returns ``Ok(return value)``, or ``Err(exc)`` if it raised something
    matching ``catch``. Anything else propagates.
    """
    try:
        return Ok(func(*args, **kwargs))
    except catch as exc:
        return Err(exc)


@contextmanager
def guard(
    message: str | None = None,
    *,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    terminator: Terminator | None = None,
) -> Iterator[None]:
    """Exit through the prefixed terminator if the block raises ``catch``.

    Without ``message`` this prints like :func:`unwrap`, with it like
    :func:`expect`::

        with guard("could not read config"):
            config = load(path)
    """
    try:
        yield
    except catch as exc:
        if message is None:
            unwrap(Err(exc), terminator=terminator)
        else:
            expect(Err(exc), message, terminator=terminator)
