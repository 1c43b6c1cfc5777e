"""
DocumentType node implementation for the DOM.
"""

from typing import Optional

from .node import Node, NodeType


class DocumentType(Node):
    """The doctype declaration at the top of a document."""

    def __init__(self, doc_type: str = "html", owner_document: Optional['Document'] = None):
        super().__init__(NodeType.DOCUMENT_TYPE_NODE, owner_document)
        self.node_name = doc_type
        self.doc_type = doc_type

    def render(self) -> str:
        # Doctype keywords come from the caller and are not escaped
        return f"<!DOCTYPE {self.doc_type.upper()}>\n"
