"""
DOM implementation for the tree builder.
This package provides the node types, the document factory and the HTML
serializer.
"""

from .node import Node, NodeType, ParentNode
from .escape import html_special_chars
from .attr import Attr
from .text import Text
from .comment import Comment
from .document_type import DocumentType
from .html_blob import HtmlBlob
from .element import Element, SELF_CLOSING_TAGS
from .document import Document

__all__ = [
    'Node', 'NodeType', 'ParentNode', 'html_special_chars', 'Attr', 'Text',
    'Comment', 'DocumentType', 'HtmlBlob', 'Element', 'SELF_CLOSING_TAGS',
    'Document'
]
