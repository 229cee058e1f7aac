from .core import TitleDecorationPass
from .context import CONTENT_TITLE_KEY, LAYOUT_TITLE_KEY, MappingContext
from .diagnostics import Diagnostics, diagnostics
from .evaluation import SimpleExpressionEvaluator

__all__ = [
    "TitleDecorationPass",
    "CONTENT_TITLE_KEY",
    "LAYOUT_TITLE_KEY",
    "MappingContext",
    "Diagnostics",
    "diagnostics",
    "SimpleExpressionEvaluator",
]
