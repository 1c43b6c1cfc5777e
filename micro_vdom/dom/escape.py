"""
HTML escaping for text and comment content.
"""

# Ampersand goes first so the entities inserted afterwards are not re-escaped.
_REPLACEMENTS = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def html_special_chars(string: str) -> str:
    """
    Escape the HTML special characters of a string.

    This is a one-pass transform: escaping an already escaped string
    escapes its ampersands again.

    Args:
        string: Raw text

    Returns:
        str: Text safe to place in element content
    """
    for char, entity in _REPLACEMENTS:
        string = string.replace(char, entity)
    return string
