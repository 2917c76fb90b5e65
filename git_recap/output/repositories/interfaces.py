"""Repository interfaces for summary output."""

from abc import ABC, abstractmethod

from git_recap.summarization.domain.value_objects import SummaryResult


class SummarySink(ABC):
    """Interface for delivering a finished summary."""

    @abstractmethod
    def write(self, result: SummaryResult) -> None:
        """
        Deliver the summary.

        Args:
            result: Summary returned by the model

        Raises:
            OSError: If the summary cannot be written
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Where the summary goes, for status messages."""
        ...
