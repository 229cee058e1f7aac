from .title_pattern import TitlePatternProcessor

__all__ = ["TitlePatternProcessor"]
