"""
Text node implementation for the DOM.
"""

from typing import Optional

from .escape import html_special_chars
from .node import Node, NodeType


class Text(Node):
    """Text content of an element. Always rendered escaped."""

    def __init__(self, data: str = "", owner_document: Optional['Document'] = None):
        super().__init__(NodeType.TEXT_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#text"
        self.data = str(data)

    @property
    def length(self) -> int:
        return len(self.data)

    def render(self) -> str:
        return html_special_chars(self.data)
