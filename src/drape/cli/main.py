import logging

import typer

from drape.common import bus
from drape.needle import L, needle
from .rendering import CliRenderer

from .commands.title import title_command

app = typer.Typer(
    name="drape",
    help=needle.get(L.cli.app.description),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=needle.get(L.cli.option.verbose.help)
    ),
):
    # The CLI is the composition root. It decides *which* renderer to use.
    bus.set_renderer(CliRenderer(verbose=verbose))
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


app.command(name="title", help=needle.get(L.cli.command.title.help))(title_command)


if __name__ == "__main__":
    app()
