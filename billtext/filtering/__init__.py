"""Content filter that strips front matter and boilerplate from bill text."""

from .service import ContentFilter, FilterStats, filter_content

__all__ = ["ContentFilter", "FilterStats", "filter_content"]
