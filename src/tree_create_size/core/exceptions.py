class TreeCreateError(Exception):
    """Base exception for tree construction failures."""


class TreeConfigError(TreeCreateError, ValueError):
    """Raised when the tree shape or node class configuration is invalid."""
