"""Interface for external summarization collaborators."""

from abc import ABC, abstractmethod


class Summarizer(ABC):
    """Produces plain-language summaries of legislative text.

    Implementations wrap an external text-generation service. They receive
    reconstructed document text and return the summary as a string; prompt
    wording and model choice are up to the implementation.
    """

    @abstractmethod
    def summarize_bill(self, bill_text: str) -> str:
        """Summarize a bill.

        Args:
            bill_text: Reconstructed bill text

        Returns:
            Summary text
        """
        pass

    @abstractmethod
    def summarize_amendment(self, amendment_text: str, bill_text: str) -> str:
        """Summarize how an amendment changes a bill.

        Args:
            amendment_text: Reconstructed amendment text
            bill_text: Reconstructed text of the bill being amended

        Returns:
            Summary text
        """
        pass
