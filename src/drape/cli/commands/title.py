from pathlib import Path
from typing import Dict, List, Optional

import typer

from drape.app import MappingContext, TitleDecorationPass
from drape.app.services import HtmlSerializer
from drape.common import bus
from drape.config import DrapeConfig, load_config_from_path
from drape.needle import L
from drape.spec import DrapeError, Element, Text
from ..rendering import state_lines


def _title_element(
    config: DrapeConfig,
    text: Optional[str],
    expression: Optional[str],
    pattern: Optional[str],
) -> Optional[Element]:
    if text is None and expression is None and pattern is None:
        return None
    return Element.create(
        "title",
        {
            config.title_pattern_attribute: pattern,
            config.text_attribute: expression,
        },
        [Text(text)] if text is not None else [],
    )


def _parse_vars(values: List[str]) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for value in values:
        name, sep, raw = value.partition("=")
        if not sep or not name.strip():
            bus.error(L.cli.title.invalid_var, value=value)
            raise typer.Exit(code=1)
        parsed[name.strip()] = raw
    return parsed


def title_command(
    layout_title: Optional[str] = typer.Option(
        None, "--layout-title", help="Inline text of the layout page's <title>."
    ),
    layout_expr: Optional[str] = typer.Option(
        None, "--layout-expr", help="Text expression of the layout page's <title>."
    ),
    layout_pattern: Optional[str] = typer.Option(
        None, "--layout-pattern", help="Title pattern declared on the layout page."
    ),
    content_title: Optional[str] = typer.Option(
        None, "--content-title", help="Inline text of the content page's <title>."
    ),
    content_expr: Optional[str] = typer.Option(
        None, "--content-expr", help="Text expression of the content page's <title>."
    ),
    pattern: Optional[str] = typer.Option(
        None, "--pattern", help="Title pattern declared on the content page."
    ),
    variables: List[str] = typer.Option(
        [], "--var", help="Context variable as NAME=VALUE. Repeatable."
    ),
    escape: Optional[bool] = typer.Option(
        None, "--escape/--no-escape", help="Escape evaluated titles as HTML."
    ),
):
    config = load_config_from_path(Path.cwd())
    if escape is not None:
        config.escape_titles = escape

    context = MappingContext(_parse_vars(variables))
    layout = _title_element(config, layout_title, layout_expr, layout_pattern)
    content = _title_element(config, content_title, content_expr, pattern)

    try:
        result, state = TitleDecorationPass(config).run(layout, content, context)
    except DrapeError as e:
        bus.error(L.cli.error, message=str(e))
        raise typer.Exit(code=1)

    serializer = HtmlSerializer()
    typer.echo(serializer.serialize(result) if result is not None else "")

    for key, markup in state_lines(state, serializer):
        bus.debug(L.cli.title.state, key=key, value=markup)
