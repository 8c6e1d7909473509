"""
Errors raised by graph construction and traversal.
"""


class InvalidArgument(ValueError):
    """Raised when a node index or graph input is out of range or malformed."""
