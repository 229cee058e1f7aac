from .bus import SpyBus
from .nodes import title

__all__ = ["SpyBus", "title"]
