from typing import Dict, Iterator, Optional, Tuple

import typer

from drape.app.services import HtmlSerializer
from drape.common.messaging import protocols
from drape.spec import DecorationPassState

_LEVEL_COLORS: Dict[str, Optional[str]] = {
    "debug": typer.colors.BRIGHT_BLACK,
    "info": None,
    "success": typer.colors.GREEN,
    "warning": typer.colors.YELLOW,
    "error": typer.colors.RED,
}

# Diagnostics go to stderr so stdout carries nothing but the rendered title.
_STDERR_LEVELS = frozenset({"warning", "error"})


class CliRenderer(protocols.Renderer):
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return
        typer.secho(
            message, fg=_LEVEL_COLORS.get(level), err=level in _STDERR_LEVELS
        )


def state_lines(
    state: DecorationPassState, serializer: Optional[HtmlSerializer] = None
) -> Iterator[Tuple[str, str]]:
    """Yields ``(key, markup)`` for each title recorded during a pass."""
    serializer = serializer or HtmlSerializer()
    for key, value in state.values.items():
        yield key, serializer.serialize(value) if value is not None else "None"
