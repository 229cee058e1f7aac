import logging
from typing import Any, Optional, Union

from drape.needle import Needle, SemanticPointer
from .protocols import Renderer

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LoggingRenderer:
    """Default renderer: hands messages to the standard logging tree."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("drape")

    def render(self, message: str, level: str) -> None:
        self.logger.log(_LEVELS.get(level, logging.INFO), message)


class MessageBus:
    def __init__(self, needle: Needle, renderer: Optional[Renderer] = None):
        self._needle = needle
        self._renderer: Optional[Renderer] = renderer

    def set_renderer(self, renderer: Renderer) -> None:
        self._renderer = renderer

    def _render(self, level: str, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        if not self._renderer:
            return

        template = self._needle.get(msg_id)
        try:
            message = template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            message = f"<formatting_error for '{msg_id}'>"

        self._renderer.render(message, level)

    def debug(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("debug", msg_id, **kwargs)

    def info(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("info", msg_id, **kwargs)

    def success(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("success", msg_id, **kwargs)

    def warning(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("warning", msg_id, **kwargs)

    def error(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> None:
        self._render("error", msg_id, **kwargs)
