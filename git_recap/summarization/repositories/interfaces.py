"""Repository interfaces for LLM summarization operations."""

from abc import ABC, abstractmethod

from git_recap.summarization.domain.value_objects import SummaryRequest, SummaryResult


class LLMAgentRepository(ABC):
    """Interface for LLM-based commit history summarization."""

    @abstractmethod
    def request_summary(self, request: SummaryRequest) -> SummaryResult:
        """
        Send a prompt to the model and return its answer.

        Args:
            request: Prompt built from a commit batch

        Returns:
            Non-empty summary text

        Raises:
            RequestFailedError: If the model call fails
            EmptyResponseError: If the model returns no text
        """
        ...
