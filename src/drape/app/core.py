import logging
from typing import Dict, Optional, Tuple

from drape.config import DrapeConfig
from drape.spec import (
    ContextProtocol,
    DecorationPassState,
    Element,
    ExpressionEvaluatorProtocol,
    StructuralMergerProtocol,
    TitleSource,
)
from .context import CONTENT_TITLE_KEY, LAYOUT_TITLE_KEY, MappingContext
from .diagnostics import Diagnostics
from .evaluation import SimpleExpressionEvaluator
from .processors.title_pattern import TitlePatternProcessor
from .services.title_decorator import (
    CONTENT_TITLE_ATTRIBUTE,
    LAYOUT_TITLE_ATTRIBUTE,
    TitleMergeStrategy,
)
from .services.title_pattern import PatternTitleBuilder, TitleSourceResolver

log = logging.getLogger(__name__)


class TitleDecorationPass:
    """
    Runs the title part of one decoration pass: merge the layout and content
    titles, then, if a title pattern deferred the merge, resolve the pattern.
    """

    def __init__(
        self,
        config: Optional[DrapeConfig] = None,
        evaluator: Optional[ExpressionEvaluatorProtocol] = None,
        merger: Optional[StructuralMergerProtocol] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.config = config or DrapeConfig()
        self.strategy = TitleMergeStrategy(self.config, merger)
        self.processor = TitlePatternProcessor(
            TitleSourceResolver(evaluator or SimpleExpressionEvaluator()),
            PatternTitleBuilder(diagnostics),
            self.config,
        )

    def _deferred_sources(self, placeholder: Element) -> Dict[str, TitleSource]:
        sources: Dict[str, TitleSource] = {}
        for attribute, key in (
            (CONTENT_TITLE_ATTRIBUTE, CONTENT_TITLE_KEY),
            (LAYOUT_TITLE_ATTRIBUTE, LAYOUT_TITLE_KEY),
        ):
            expression = placeholder.get_attribute(attribute)
            if expression is not None:
                sources[key] = TitleSource(
                    title_text=expression, escape=self.config.escape_titles
                )
        return sources

    def run(
        self,
        layout_title: Optional[Element],
        content_title: Optional[Element],
        context: Optional[ContextProtocol] = None,
    ) -> Tuple[Optional[Element], DecorationPassState]:
        # A fresh state per pass; concurrent passes never share one.
        state = DecorationPassState()
        decorated = self.strategy.decorate(layout_title, content_title)

        if decorated is None or not decorated.has_attribute(
            self.config.title_pattern_attribute
        ):
            return decorated, state

        pass_context = MappingContext(
            self._deferred_sources(decorated), parent=context or MappingContext()
        )
        log.debug("Resolving deferred title pattern")
        return self.processor.process(decorated, pass_context, state), state
