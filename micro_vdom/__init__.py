"""
micro_vdom - build an HTML document as a DOM-like tree and render it to a string.
"""

import logging

from micro_vdom.dom import (
    Attr,
    Comment,
    Document,
    DocumentType,
    Element,
    HtmlBlob,
    Node,
    NodeType,
    ParentNode,
    SELF_CLOSING_TAGS,
    Text,
    html_special_chars,
)
from micro_vdom.exceptions import (
    HierarchyRequestError,
    InvalidAttributeError,
    InvalidNodeError,
    MicroVDomError,
    NotFoundError,
)
from micro_vdom.utils import Config, setup_logging

# Applications opt in to log output with setup_logging()
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package information
__version__ = "1.0.0"
__description__ = "A minimal DOM-like HTML tree builder and serializer"

__all__ = [
    'Attr', 'Comment', 'Document', 'DocumentType', 'Element', 'HtmlBlob',
    'Node', 'NodeType', 'ParentNode', 'SELF_CLOSING_TAGS', 'Text',
    'html_special_chars', 'HierarchyRequestError', 'InvalidAttributeError',
    'InvalidNodeError', 'MicroVDomError', 'NotFoundError', 'Config',
    'setup_logging',
]
