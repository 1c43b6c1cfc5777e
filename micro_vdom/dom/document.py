"""
Document implementation for the DOM.
This module implements the document root and the factory for every other
node kind.
"""

import logging
from typing import Optional

from ..utils.config import Config, default_config
from ..utils.logging import PerformanceLogger
from .attr import Attr
from .comment import Comment
from .document_type import DocumentType
from .element import AttributeSource, Element
from .html_blob import HtmlBlob
from .node import NodeType, ParentNode
from .text import Text

logger = logging.getLogger(__name__)


class Document(ParentNode):
    """
    Document node implementation.

    A new document already holds a doctype and an ``html`` element with
    empty ``head`` and ``body`` children. Nodes made by the ``create_*``
    factories are not attached anywhere until the caller appends them.
    """

    def __init__(self, doc_type: Optional[str] = None, config: Optional[Config] = None):
        """
        Initialize a new Document.

        Args:
            doc_type: Doctype keyword, defaults to ``document.doc_type`` from
                the config ("html")
            config: Configuration for this document and the nodes it creates
        """
        self._config = config or default_config
        super().__init__(NodeType.DOCUMENT_NODE)

        self.node_name = "#document"
        self.character_set: str = self._config.get("document.character_set", "UTF-8")
        if doc_type is None:
            doc_type = self._config.get("document.doc_type", "html")

        self.doc_type = DocumentType(doc_type, self)
        self.document_element = self.create_element("html")
        self.head = self.create_element("head")
        self.body = self.create_element("body")
        self.document_element.append_child([self.head, self.body])
        self.append_child([self.doc_type, self.document_element])

        self._perf = PerformanceLogger(logger, "Document")

        # JavaScript-style aliases
        self.createElement = self.create_element
        self.createTextNode = self.create_text_node
        self.createComment = self.create_comment
        self.createAttribute = self.create_attribute
        self.createHtmlBlob = self.create_html_blob

        logger.debug(f"Document initialized (doctype: {doc_type})")

    @property
    def config(self) -> Config:
        return self._config

    @property
    def characterSet(self) -> str:
        return self.character_set

    @property
    def documentElement(self) -> Element:
        return self.document_element

    @property
    def docType(self) -> DocumentType:
        return self.doc_type

    def create_element(self, tag_name: str, attributes: Optional[AttributeSource] = None) -> Element:
        """
        Create an element owned by this document.

        Args:
            tag_name: Tag name of the element
            attributes: Initial attributes, a mapping or (name, value) pairs

        Returns:
            Element: The new, unattached element
        """
        return Element(tag_name, attributes, self)

    def create_text_node(self, data: str = "") -> Text:
        return Text(data, self)

    def create_comment(self, data: str = "") -> Comment:
        return Comment(data, self)

    def create_attribute(self, name: str, value: str = "") -> Attr:
        return Attr(name, value, self)

    def create_html_blob(self, data: str) -> HtmlBlob:
        """
        Create a node whose markup is emitted verbatim.

        Args:
            data: Pre-formed HTML

        Returns:
            HtmlBlob: The new, unattached node
        """
        return HtmlBlob(data, self)

    def render(self) -> str:
        """
        Serialize the whole document.

        Returns:
            str: The doctype followed by the rendered ``html`` element
        """
        self._perf.start("render")
        html = self.render_children()
        self._perf.end("render")
        return html
