from typing import Optional

from drape.spec import Element, Text


def title(
    text: Optional[str] = None, tag: str = "title", **attributes: str
) -> Element:
    """
    Shorthand for title elements in tests. Keyword names use ``__`` for ``:``
    and ``_`` for ``-``, so ``layout__title_pattern`` is
    ``layout:title-pattern``.
    """
    attrs = {
        name.replace("__", ":").replace("_", "-"): value
        for name, value in attributes.items()
    }
    return Element.create(tag, attrs, [Text(text)] if text is not None else [])
