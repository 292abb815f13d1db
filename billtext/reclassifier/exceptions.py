"""Exceptions raised by the line reclassifier."""


class NormalizationError(Exception):
    """Input to the reclassifier was not text.

    The passes are total over every string, so this is only raised for
    non-string input (for example raw bytes handed over by mistake).
    """

    pass
