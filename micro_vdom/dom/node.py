"""
Node implementation for the DOM.
This module implements the base Node type and the ParentNode container shared
by elements and documents.
"""

import logging
from enum import IntEnum
from typing import List, Optional, Sequence, Union

from ..exceptions import HierarchyRequestError, InvalidNodeError, NotFoundError
from ..utils.config import Config, default_config

logger = logging.getLogger(__name__)


class NodeType(IntEnum):
    """Node types that can appear in a tree."""
    # Not a DOM node type: pre-formed markup emitted verbatim
    HTML_BLOB_NODE = 0
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10


class Node:
    """
    Base Node implementation.

    Every node knows its type, the document that created it (if any) and the
    container it is currently attached to. Subclasses implement ``render``.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document
        self.parent_node: Optional['ParentNode'] = None
        self.node_name: str = "#node"

    @property
    def config(self) -> Config:
        """The configuration in effect for this node."""
        if self.owner_document is not None:
            return self.owner_document.config
        return default_config

    def render(self) -> str:
        """
        Serialize this node and its descendants to HTML.

        Returns:
            str: The HTML fragment for this node
        """
        raise NotImplementedError(f"{type(self).__name__} does not implement render()")

    def contains(self, other: Optional['Node']) -> bool:
        """
        Check if this node is ``other`` or one of its ancestors.

        Args:
            other: The node to check

        Returns:
            True if this node contains the other node, False otherwise
        """
        current = other
        while current is not None:
            if current is self:
                return True
            current = current.parent_node
        return False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.node_name}>"


ChildLike = Union[str, Node]


class ParentNode(Node):
    """
    A node that holds an ordered list of child nodes.

    Strings are wrapped in Text nodes when attached. A node attached here is
    first detached from any previous parent, so it is never a child of two
    containers at once.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        super().__init__(node_type, owner_document)
        self.children: List[Node] = []

        # JavaScript-style aliases
        self.appendChild = self.append_child
        self.prependChild = self.prepend_child
        self.removeChild = self.remove_child

    @property
    def child_element_count(self) -> int:
        """Number of children attached to this container."""
        return len(self.children)

    @property
    def childElementCount(self) -> int:
        return self.child_element_count

    @property
    def first_child(self) -> Optional[Node]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional[Node]:
        return self.children[-1] if self.children else None

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.children) > 0

    def append_one_child(self, node: ChildLike) -> Optional[Node]:
        """
        Attach one child after the last child.

        Args:
            node: A Node, or a string to wrap in a Text node

        Returns:
            The attached node, or None if the input was dropped
        """
        return self._insert_one(node, to_front=False)

    def prepend_one_child(self, node: ChildLike) -> Optional[Node]:
        """
        Attach one child before the first child.

        Args:
            node: A Node, or a string to wrap in a Text node

        Returns:
            The attached node, or None if the input was dropped
        """
        return self._insert_one(node, to_front=True)

    def add_children(self, nodes: Union[ChildLike, Sequence[ChildLike]],
                     to_front: bool = False) -> List[Node]:
        """
        Attach one node or a list of nodes.

        Items are inserted one at a time in the order given. When prepending,
        each item goes to index 0 on its own, so ``[a, b]`` ends up as
        ``b, a`` in front of the existing children.

        Args:
            nodes: A single child or a list/tuple of children
            to_front: Prepend instead of append

        Returns:
            The nodes that were attached, in the order they were processed
        """
        nodes_to_add = nodes if isinstance(nodes, (list, tuple)) else [nodes]
        added = []
        for node in nodes_to_add:
            child = self._insert_one(node, to_front=to_front)
            if child is not None:
                added.append(child)
        return added

    def append_child(self, nodes: Union[ChildLike, Sequence[ChildLike]]) -> List[Node]:
        """Insert a node or a list of nodes after the last child."""
        return self.add_children(nodes, to_front=False)

    def prepend_child(self, nodes: Union[ChildLike, Sequence[ChildLike]]) -> List[Node]:
        """Insert a node or a list of nodes before the first child."""
        return self.add_children(nodes, to_front=True)

    def remove_child(self, child: Node) -> Node:
        """
        Remove a child node from this node.

        Args:
            child: The node to remove

        Returns:
            The removed node

        Raises:
            NotFoundError: If the node is not a child of this node
        """
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                child.parent_node = None
                return child
        raise NotFoundError("Child not found in child nodes")

    def render_children(self) -> str:
        """Concatenate the rendered fragments of all children in order."""
        return "".join(child.render() for child in self.children)

    def _insert_one(self, node: ChildLike, to_front: bool) -> Optional[Node]:
        child = self._coerce_child(node)
        if child is None:
            return None

        if child.parent_node is not None:
            child.parent_node.remove_child(child)

        if to_front:
            self.children.insert(0, child)
        else:
            self.children.append(child)
        child.parent_node = self
        return child

    def _coerce_child(self, node: ChildLike) -> Optional[Node]:
        if isinstance(node, str):
            from .text import Text
            owner = self if self.node_type == NodeType.DOCUMENT_NODE else self.owner_document
            return Text(node, owner)

        if not isinstance(node, Node):
            message = f"Cannot attach {type(node).__name__} to <{self.node_name}>: not a string or Node"
            if self.config.get("dom.strict", False):
                raise InvalidNodeError(message)
            logger.warning(f"{message}, ignoring it")
            return None

        if node.node_type == NodeType.DOCUMENT_NODE:
            raise HierarchyRequestError("A document cannot be inserted into another node")
        if node.contains(self):
            raise HierarchyRequestError("A node cannot be inserted into itself or its own descendant")
        return node
