"""Summarization collaborator interface and validating service."""

from .base import Summarizer
from .exceptions import SummarizationError, SummarizationInputError
from .service import SummarizationService

__all__ = [
    "Summarizer",
    "SummarizationService",
    "SummarizationError",
    "SummarizationInputError",
]
