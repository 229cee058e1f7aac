from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Union

# Import the actual singleton to patch it in-place
import drape.common
from drape.needle import SemanticPointer


class SpyRenderer:
    def __init__(self):
        self.messages: List[Dict[str, Any]] = []

    def render(self, message: str, level: str) -> None:
        pass

    def record(self, level: str, msg_id: Union[str, SemanticPointer], params: Dict[str, Any]):
        self.messages.append({"level": level, "id": str(msg_id), "params": params})


class SpyBus:
    """
    Spies on the global drape.common.bus singleton.

    Modules hold on to the bus instance they imported, so the instance is
    patched in place rather than replaced.
    """

    def __init__(self):
        self._spy_renderer = SpyRenderer()

    @contextmanager
    def patch(self, monkeypatch: Any):
        real_bus = drape.common.bus

        def intercept_render(
            level: str, msg_id: Union[str, SemanticPointer], **kwargs: Any
        ) -> None:
            # Capture the intent only; nothing reaches a real renderer.
            self._spy_renderer.record(level, msg_id, kwargs)

        monkeypatch.setattr(real_bus, "_render", intercept_render)
        monkeypatch.setattr(real_bus, "_renderer", self._spy_renderer)

        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._spy_renderer.messages

    def count(self, msg_id: SemanticPointer, level: Optional[str] = None) -> int:
        key = str(msg_id)
        return sum(
            1
            for msg in self.get_messages()
            if msg["id"] == key and (level is None or msg["level"] == level)
        )

    def assert_id_called(self, msg_id: SemanticPointer, level: Optional[str] = None):
        if not self.count(msg_id, level):
            ids_seen = [m["id"] for m in self.get_messages()]
            raise AssertionError(
                f"Message with ID '{msg_id}' was not sent.\nCaptured IDs: {ids_seen}"
            )
