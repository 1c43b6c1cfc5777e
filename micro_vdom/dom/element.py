"""
Element implementation for the DOM.
This module implements HTML elements: tag name, attributes, children and
their serialization.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from ..exceptions import InvalidAttributeError
from .attr import Attr
from .node import NodeType, ParentNode

logger = logging.getLogger(__name__)

# In HTML these elements have no closing tag and no rendered content
SELF_CLOSING_TAGS = frozenset({
    'area', 'base', 'br', 'col', 'command', 'embed', 'hr', 'img', 'input',
    'keygen', 'link', 'meta', 'param', 'source', 'track', 'wbr'
})

AttributeSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Element(ParentNode):
    """
    Element node implementation.

    Self-closing status is decided once from the tag name. Children can still
    be appended to a self-closing element but they are never rendered.
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[AttributeSource] = None,
                 owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Initial attributes, either a mapping of name to value
                or an iterable of (name, value) pairs
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        self.tag_name = tag_name
        self.node_name = tag_name
        self.attributes: Dict[str, Attr] = {}
        self.self_closing = tag_name in SELF_CLOSING_TAGS

        # JavaScript-style aliases
        self.setAttribute = self.set_attribute
        self.getAttribute = self.get_attribute
        self.hasAttribute = self.has_attribute
        self.removeAttribute = self.remove_attribute

        if attributes:
            self._set_initial_attributes(attributes)

    def _set_initial_attributes(self, attributes: AttributeSource) -> None:
        if isinstance(attributes, Mapping):
            for name, value in attributes.items():
                self.set_attribute(name, value)
            return

        # A bare string is iterable but is never a list of pairs
        if isinstance(attributes, str) or not isinstance(attributes, Iterable):
            self._reject_attribute(attributes, "not a mapping or iterable of (name, value) pairs")
            return

        for item in attributes:
            if isinstance(item, str) or not isinstance(item, (list, tuple)) or len(item) != 2:
                self._reject_attribute(item, "not a (name, value) pair")
                continue
            self.set_attribute(item[0], item[1])

    def _reject_attribute(self, attribute: Any, reason: str) -> None:
        message = f"Cannot set attribute from {type(attribute).__name__} on <{self.tag_name}>: {reason}"
        if self.config.get("dom.strict", False):
            raise InvalidAttributeError(message)
        logger.warning(f"{message}, ignoring it")

    def set_attribute(self, attribute: Union[str, Attr], value: str = "") -> Optional[Attr]:
        """
        Set an attribute, replacing any attribute with the same name.

        Args:
            attribute: An Attr, or the name of the attribute to create
            value: Value for a new attribute (ignored when an Attr is given)

        Returns:
            The stored Attr, or None if the input was dropped
        """
        if isinstance(attribute, Attr):
            attr = attribute
        elif isinstance(attribute, str):
            attr = Attr(attribute, value, self.owner_document)
        else:
            self._reject_attribute(attribute, "not a string or Attr")
            return None

        self.attributes[attr.name] = attr
        return attr

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: Attribute name

        Returns:
            The attribute value, or None if it is not set
        """
        attr = self.attributes.get(name)
        return attr.value if attr is not None else None

    def get_attribute_node(self, name: str) -> Optional[Attr]:
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def remove_attribute(self, name: str) -> None:
        """Remove an attribute. Removing a missing attribute does nothing."""
        self.attributes.pop(name, None)

    def has_attributes(self) -> bool:
        return bool(self.attributes)

    @property
    def inner_html(self) -> str:
        """The rendered children, empty for self-closing elements."""
        if self.self_closing:
            return ""
        return self.render_children()

    @property
    def outer_html(self) -> str:
        return self.render()

    def render(self) -> str:
        """
        Serialize this element and its children.

        Attributes are written in insertion order. The opening tag and the
        closing tag are each followed by a newline.

        Returns:
            str: The HTML for this element
        """
        config = self.config
        attrs = "".join(attr.render(config) for attr in self.attributes.values())
        open_tag = f"<{self.tag_name}{attrs}>\n"

        if self.self_closing:
            if self.children:
                logger.debug(f"Skipping {len(self.children)} children of self-closing <{self.tag_name}>")
            return open_tag

        return f"{open_tag}{self.render_children()}</{self.tag_name}>\n"

    def __repr__(self) -> str:
        return f"<Element {self.tag_name}>"
