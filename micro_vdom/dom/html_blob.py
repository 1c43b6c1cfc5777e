"""
Raw markup node.
"""

from typing import Optional

from .node import Node, NodeType


class HtmlBlob(Node):
    """
    Pre-formed markup emitted verbatim.

    Nothing is escaped and no newline is added, so the caller is responsible
    for the markup being well formed.
    """

    def __init__(self, data: str = "", owner_document: Optional['Document'] = None):
        super().__init__(NodeType.HTML_BLOB_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#html-blob"
        self.data = str(data)

    def render(self) -> str:
        return self.data
