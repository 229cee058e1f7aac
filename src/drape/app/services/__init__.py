from .element_merger import ElementMerger
from .serializer import HtmlSerializer
from .title_decorator import (
    CONTENT_TITLE_ATTRIBUTE,
    LAYOUT_TITLE_ATTRIBUTE,
    TitleMergeStrategy,
)
from .title_pattern import (
    PatternSegment,
    PatternTitleBuilder,
    TitleSourceResolver,
    tokenize,
)

__all__ = [
    "ElementMerger",
    "HtmlSerializer",
    "CONTENT_TITLE_ATTRIBUTE",
    "LAYOUT_TITLE_ATTRIBUTE",
    "TitleMergeStrategy",
    "PatternSegment",
    "PatternTitleBuilder",
    "TitleSourceResolver",
    "tokenize",
]
