"""
Exceptions raised by the micro_vdom tree builder.
"""


class MicroVDomError(Exception):
    """Base class for all micro_vdom errors."""


class InvalidNodeError(MicroVDomError, TypeError):
    """A child is neither a string nor a Node."""


class InvalidAttributeError(MicroVDomError, TypeError):
    """An attribute is neither an Attr nor a string name."""


class HierarchyRequestError(MicroVDomError, ValueError):
    """A node was inserted where it would break the tree structure."""


class NotFoundError(MicroVDomError, ValueError):
    """A node is not a child of the container it was removed from."""
