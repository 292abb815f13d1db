"""Exceptions raised while rendering diffs."""


class DiffRenderError(Exception):
    """Raised when a diff cannot be rendered to HTML."""
    pass
