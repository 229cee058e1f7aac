from typing import Any, Mapping, Optional

from drape.spec import ContextProtocol, TitleSource

# Context keys under which the title processors of the content and layout
# pages register their titles.
CONTENT_TITLE_KEY = "drape::ContentTitle"
LAYOUT_TITLE_KEY = "drape::LayoutTitle"


class MappingContext:
    """
    Dict-backed context. Lookups that miss fall through to ``parent``, and a
    key that is missing everywhere reads as None.
    """

    def __init__(
        self,
        values: Optional[Mapping[str, Any]] = None,
        parent: Optional[ContextProtocol] = None,
    ):
        self._values = dict(values or {})
        self._parent = parent

    def get_title_source(self, key: str) -> Optional[TitleSource]:
        value = self._values.get(key)
        if isinstance(value, TitleSource):
            return value
        if key not in self._values and self._parent is not None:
            return self._parent.get_title_source(key)
        return None

    def get_string(self, key: str) -> Optional[str]:
        if key in self._values:
            value = self._values[key]
            if value is None or isinstance(value, TitleSource):
                return None
            return str(value)
        if self._parent is not None:
            return self._parent.get_string(key)
        return None

    def derive(self, values: Mapping[str, Any]) -> "MappingContext":
        return MappingContext(values, parent=self)
