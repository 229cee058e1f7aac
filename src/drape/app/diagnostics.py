import threading
from typing import Any, Optional, Set, Union

from drape.common import bus as default_bus
from drape.common.messaging import MessageBus
from drape.needle import SemanticPointer


class Diagnostics:
    """
    Process-lifetime latches for warnings that must only be shown once, no
    matter how many documents are decorated or on how many threads.

    Tests create their own instance; library code never resets one.
    """

    def __init__(self, bus: Optional[MessageBus] = None):
        self._bus = bus
        self._lock = threading.Lock()
        self._warned: Set[str] = set()

    @property
    def bus(self) -> MessageBus:
        return self._bus or default_bus

    def warn_once(self, key: str) -> bool:
        """Returns True for exactly one caller per key (compare-and-set)."""
        with self._lock:
            if key in self._warned:
                return False
            self._warned.add(key)
            return True

    def has_warned(self, key: str) -> bool:
        with self._lock:
            return key in self._warned

    def deprecation(self, msg_id: Union[str, SemanticPointer], **kwargs: Any) -> bool:
        if not self.warn_once(str(msg_id)):
            return False
        self.bus.warning(msg_id, **kwargs)
        return True


diagnostics = Diagnostics()
