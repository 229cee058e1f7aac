import logging
from typing import Optional

from drape.config import DrapeConfig
from drape.spec import (
    ContextProtocol,
    DecorationPassState,
    Element,
    Fragment,
    WrongHostElementError,
)
from drape.app.context import CONTENT_TITLE_KEY, LAYOUT_TITLE_KEY
from drape.app.services.title_decorator import (
    CONTENT_TITLE_ATTRIBUTE,
    LAYOUT_TITLE_ATTRIBUTE,
)
from drape.app.services.title_pattern import PatternTitleBuilder, TitleSourceResolver

log = logging.getLogger(__name__)


class TitlePatternProcessor:
    """
    Processes the title pattern attribute on a ``<title>`` element, replacing
    the title's body with the titles of the content and layout pages arranged
    by the pattern.
    """

    def __init__(
        self,
        resolver: TitleSourceResolver,
        builder: Optional[PatternTitleBuilder] = None,
        config: Optional[DrapeConfig] = None,
    ):
        self._resolver = resolver
        self._builder = builder or PatternTitleBuilder()
        self._config = config or DrapeConfig()

    def process(
        self,
        element: Element,
        context: ContextProtocol,
        state: DecorationPassState,
    ) -> Element:
        attribute = self._config.title_pattern_attribute
        if element.tag.lower() != "title":
            raise WrongHostElementError(element.tag, attribute)

        pattern = element.get_attribute(attribute)
        content_title = self._resolver.resolve(
            context.get_title_source(CONTENT_TITLE_KEY), context
        )
        layout_title = self._resolver.resolve(
            context.get_title_source(LAYOUT_TITLE_KEY), context
        )

        result = self._builder.build(pattern, content_title, layout_title)
        log.debug("Title pattern %r produced %r", pattern, result)

        state.update(
            {
                DecorationPassState.CONTENT_TITLE: content_title,
                DecorationPassState.LAYOUT_TITLE: layout_title,
                DecorationPassState.RESULTING_TITLE: result,
            }
        )

        body = result.children if isinstance(result, Fragment) else (result,)
        title = (
            element.without_attribute(attribute)
            .without_attribute(CONTENT_TITLE_ATTRIBUTE)
            .without_attribute(LAYOUT_TITLE_ATTRIBUTE)
        )
        return title.with_children(body)
