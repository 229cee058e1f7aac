from .bus import LoggingRenderer, MessageBus
from .protocols import Renderer

__all__ = ["LoggingRenderer", "MessageBus", "Renderer"]
