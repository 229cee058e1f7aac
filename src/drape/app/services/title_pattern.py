import html
import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from drape.needle import L
from drape.spec import (
    ContextProtocol,
    ExpressionEvaluatorProtocol,
    Fragment,
    Node,
    Text,
    TitleSource,
)
from drape.app.diagnostics import Diagnostics, diagnostics as default_diagnostics

log = logging.getLogger(__name__)

TOKEN_LAYOUT_TITLE = "$LAYOUT_TITLE"
TOKEN_CONTENT_TITLE = "$CONTENT_TITLE"
# Deprecated alias of $LAYOUT_TITLE.
TOKEN_DECORATOR_TITLE = "$DECORATOR_TITLE"

TOKEN_PATTERN = re.compile(r"\$(?:LAYOUT|DECORATOR|CONTENT)_TITLE")


def escape_html5_xml(value: str) -> str:
    """
    Escapes ``& < > " '`` using the forms markup authors write by hand, so
    a title escaped here reads the same as one typed into a template.
    """
    return html.escape(value, quote=True).replace("&#x27;", "&#39;")


@dataclass(frozen=True)
class PatternSegment:
    text: str
    is_token: bool = False


def tokenize(pattern: str) -> List[PatternSegment]:
    """
    Splits a title pattern into literal and token segments in a single
    left-to-right pass. Joining the segments' text gives back the pattern.
    Anything that is not exactly one of the known tokens stays literal.
    """
    segments: List[PatternSegment] = []
    position = 0
    for match in TOKEN_PATTERN.finditer(pattern):
        if match.start() > position:
            segments.append(PatternSegment(pattern[position : match.start()]))
        segments.append(PatternSegment(match.group(0), is_token=True))
        position = match.end()
    if position < len(pattern):
        segments.append(PatternSegment(pattern[position:]))
    return segments


def _spread(node: Node) -> Iterable[Node]:
    # A fragment contributes its children, never itself.
    if isinstance(node, Fragment):
        return node.children
    return (node,)


class PatternTitleBuilder:
    """
    Builds the composite title from a title pattern and the content and
    layout titles.
    """

    def __init__(self, diagnostics: Optional[Diagnostics] = None):
        self._diagnostics = diagnostics or default_diagnostics

    def build(
        self,
        pattern: Optional[str],
        content_title: Optional[Node],
        layout_title: Optional[Node],
    ) -> Node:
        """
        Strategy:
        - Both titles present and a pattern given: interleave the pattern's
          literal text with the referenced titles, in pattern order.
        - Otherwise the content title, then the layout title, is returned
          untouched and the pattern is ignored.
        - No titles at all: an empty fragment.
        """
        if pattern and TOKEN_DECORATOR_TITLE in pattern:
            self._diagnostics.deprecation(L.title.pattern.deprecated_token)

        if content_title is not None and layout_title is not None and pattern is not None:
            parts: List[Node] = []
            for segment in tokenize(pattern):
                if not segment.is_token:
                    parts.append(Text(segment.text))
                elif segment.text == TOKEN_CONTENT_TITLE:
                    parts.extend(_spread(content_title))
                else:
                    parts.extend(_spread(layout_title))
            return Fragment.of(parts)

        if content_title is not None:
            return content_title
        if layout_title is not None:
            return layout_title
        return Fragment()


class TitleSourceResolver:
    def __init__(self, evaluator: ExpressionEvaluatorProtocol):
        self._evaluator = evaluator

    def resolve(
        self, source: Optional[TitleSource], context: ContextProtocol
    ) -> Optional[Node]:
        """
        Turns a registered title into a node. An expression is evaluated,
        unescaped, and escaped again as HTML when the source asks for it.
        A source with neither expression nor model resolves to None, which
        is distinct from an empty title.
        """
        if source is None:
            return None

        if source.title_text is not None:
            # Evaluation errors propagate: there is no sensible partial title.
            value = html.unescape(self._evaluator.evaluate(source.title_text, context))
            if source.escape:
                value = escape_html5_xml(value)
            return Text(value)

        if source.title_model is not None:
            return source.title_model

        log.debug("Title source carries neither text nor model: %r", source)
        return None
