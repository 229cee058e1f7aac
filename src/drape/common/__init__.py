from drape.needle import needle
from .messaging.bus import LoggingRenderer, MessageBus

# --- Composition Root for drape's shared services ---

# Library users get warnings through `logging` until a front end (the CLI)
# installs its own renderer.
bus = MessageBus(needle, renderer=LoggingRenderer())

__all__ = ["bus", "MessageBus", "LoggingRenderer"]
