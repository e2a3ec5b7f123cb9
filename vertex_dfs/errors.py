"""
Exceptions raised by the traversal engines.
"""


class MissingVertexError(ValueError):
    """Raised when a traversal that requires both endpoints receives None."""

    pass


__all__ = ["MissingVertexError"]
