"""
Attr implementation for the DOM.
This module implements an element attribute and its serialization.
"""

from typing import Optional

from ..utils.config import Config, default_config
from .escape import html_special_chars


class Attr:
    """
    Attribute of an Element node.

    Attributes are not nodes: they are never attached to a container and
    only render as part of their element's opening tag.
    """

    def __init__(self, name: str, value: str = "", owner_document: Optional['Document'] = None):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name
            value: The attribute value
            owner_document: The document that created this attribute
        """
        self.name = name
        self.value = value
        self.owner_document = owner_document

    @property
    def config(self) -> Config:
        if self.owner_document is not None:
            return self.owner_document.config
        return default_config

    def render(self, config: Optional[Config] = None) -> str:
        """
        Serialize the attribute as ` name="value"`.

        The value is written as-is unless ``render.escape_attribute_values``
        is enabled.

        Args:
            config: Config of the element being rendered, if different from
                this attribute's own

        Returns:
            str: The attribute fragment, with its leading space
        """
        config = config or self.config
        value = str(self.value)
        if config.get("render.escape_attribute_values", False):
            value = html_special_chars(value)
        return f' {self.name}="{value}"'

    def clone(self) -> 'Attr':
        """Return a new Attr with the same name and value."""
        return Attr(self.name, self.value, self.owner_document)

    def __repr__(self) -> str:
        return f"<Attr {self.name}={self.value!r}>"
