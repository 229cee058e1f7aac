import logging
from typing import Optional

from drape.config import DrapeConfig
from drape.spec import Element, StructuralMergerProtocol, Text
from .element_merger import ElementMerger

log = logging.getLogger(__name__)

CONTENT_TITLE_ATTRIBUTE = "data-layout-content-title"
LAYOUT_TITLE_ATTRIBUTE = "data-layout-decorator-title"


class TitleMergeStrategy:
    """
    Decorator for the ``<title>`` part of a page. When either title carries a
    title pattern, the merge is deferred: a placeholder ``<title>`` is emitted
    that records the pattern and both title values for the title pattern
    processor. Otherwise the titles are merged like any other element.
    """

    def __init__(
        self,
        config: Optional[DrapeConfig] = None,
        merger: Optional[StructuralMergerProtocol] = None,
    ):
        self._config = config or DrapeConfig()
        self._merger = merger or ElementMerger()

    def _pattern_attribute(self, title: Optional[Element]) -> Optional[str]:
        name = self._config.title_pattern_attribute
        if title is not None and title.has_attribute(name):
            return name
        return None

    def _title_value(self, title: Optional[Element]) -> Optional[str]:
        """
        The expression that produces a title's text: its text attribute if it
        has one, else its inline text as a quoted literal, else nothing.
        """
        if title is None:
            return None

        explicit = title.get_attribute(self._config.text_attribute)
        if explicit:
            return explicit

        # Only inline text directly inside the title counts. A bare
        # `<title></title>` or a title wrapping other elements has no value.
        # The text is already markup, so only the quote needs encoding; the
        # resolver unescapes the evaluated literal exactly once.
        if title.children and isinstance(title.children[0], Text):
            text = title.children[0].content.replace("'", "&#39;")
            return f"'{text}'"
        return None

    def decorate(
        self, target_title: Optional[Element], source_title: Optional[Element]
    ) -> Optional[Element]:
        # Content (source) wins over layout (target).
        pattern_source = source_title if self._pattern_attribute(source_title) else None
        if pattern_source is None and self._pattern_attribute(target_title):
            pattern_source = target_title

        if pattern_source is None:
            log.debug("No title pattern found, merging titles structurally")
            return self._merger.merge(target_title, source_title)

        attribute = self._config.title_pattern_attribute
        pattern = pattern_source.get_attribute(attribute)
        log.debug("Deferring title merge to pattern %r", pattern)

        return Element.create(
            "title",
            {
                attribute: pattern,
                CONTENT_TITLE_ATTRIBUTE: self._title_value(source_title),
                LAYOUT_TITLE_ATTRIBUTE: self._title_value(target_title),
            },
        )
