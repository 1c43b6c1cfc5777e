"""
Comment node implementation for the DOM.
"""

from typing import Optional

from .escape import html_special_chars
from .node import Node, NodeType


class Comment(Node):
    """
    Comment node.

    The comment text is escaped and the comment is followed by a newline.
    """

    def __init__(self, data: str = "", owner_document: Optional['Document'] = None):
        """
        Initialize a comment node.

        Args:
            data: The comment text
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.COMMENT_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#comment"
        self.data = str(data)

    def render(self) -> str:
        return f"<!--{html_special_chars(self.data)}-->\n"
