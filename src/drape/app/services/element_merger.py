from typing import Optional

from drape.spec import Element


class ElementMerger:
    """
    Default structural merge of a layout element with its content
    counterpart.
    """

    def merge(
        self, target: Optional[Element], source: Optional[Element]
    ) -> Optional[Element]:
        """
        Merges ``source`` (content page) into ``target`` (layout page).

        Strategy:
        - A missing side yields the other side.
        - Attributes: the target's, overwritten and extended by the source's.
        - Tag and body come from the source, unless the source is empty, in
          which case the target's body is kept.

        Returns:
            A new Element; neither argument is modified.
        """
        if target is None:
            return source
        if source is None:
            return target

        merged = Element(tag=source.tag, attributes=target.attributes)
        merged = merged.with_attribute_map(source.attrs)
        children = source.children if source.children else target.children
        return merged.with_children(children)
