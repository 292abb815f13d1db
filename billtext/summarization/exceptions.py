"""Exceptions for bill and amendment summarization."""


class SummarizationError(Exception):
    """The summarization collaborator failed to produce a summary."""
    pass


class SummarizationInputError(SummarizationError):
    """Required document text was missing or empty."""
    pass
