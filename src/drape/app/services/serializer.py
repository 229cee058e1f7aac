import html
from typing import List

from drape.spec import Element, Fragment, Node, Text


class HtmlSerializer:
    """
    Writes nodes back out as markup. Text content is already in markup form
    and is emitted as-is; attribute values are escaped.
    """

    def serialize(self, node: Node) -> str:
        out: List[str] = []
        self._write(node, out)
        return "".join(out)

    def _write(self, node: Node, out: List[str]) -> None:
        if isinstance(node, Text):
            out.append(node.content)
        elif isinstance(node, Fragment):
            for child in node.children:
                self._write(child, out)
        elif isinstance(node, Element):
            out.append(f"<{node.tag}")
            for name, value in node.attributes:
                out.append(f' {name}="{html.escape(value, quote=True)}"')
            out.append(">")
            for child in node.children:
                self._write(child, out)
            out.append(f"</{node.tag}>")
        else:
            raise TypeError(f"Cannot serialize {type(node).__name__}")
