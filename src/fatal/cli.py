"""Command-line interface for fatal.

Lets shell scripts end the same way Python callers do::

    cp "$src" "$dst" || fatal "could not copy $src"
"""

import click

from . import terminate
from .models import Config
from .terminate import Terminator


@click.command(context_settings={
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
})
@click.argument("message", metavar="[MESSAGE ...]", nargs=-1)
@click.option(
    "--color/--no-color", default=None,
    help="Color the Error: prefix red. Defaults to the FATAL_COLOR environment variable.",
)
@click.option(
    "--plain", is_flag=True, default=False,
    help="Print MESSAGE without the Error: prefix.",
)
@click.version_option(package_name="fatal")
def main(message: tuple[str, ...], color: bool | None, plain: bool) -> None:
    """Print MESSAGE to stderr and exit with status 1.

    MESSAGE words are joined with single spaces. Options must come first;
    everything from the first MESSAGE word on is message text. With no
    MESSAGE nothing is printed, and the exit status is still 1.
    """
    use_color = terminate.DEFAULT.config.color if color is None else color
    terminator = Terminator(Config(color=use_color))
    if plain:
        terminator.fatal(*message)
    terminator.error(*message)


if __name__ == "__main__":
    main()
