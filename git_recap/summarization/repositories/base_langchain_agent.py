"""Base class for LangChain-based LLM agents."""

import logging
from abc import ABC
from typing import TYPE_CHECKING, Any

from git_recap.exceptions import EmptyResponseError, RequestFailedError
from git_recap.summarization.domain.value_objects import SummaryRequest, SummaryResult
from git_recap.summarization.repositories.interfaces import LLMAgentRepository

if TYPE_CHECKING:
    from langchain_core.language_models.chat_models import BaseChatModel

logger = logging.getLogger(__name__)


class BaseLangChainAgent(LLMAgentRepository, ABC):
    """Base class for LangChain-based summarization agents."""

    def __init__(self, llm: "BaseChatModel", model_name: str = "") -> None:
        """
        Initialize the agent around a chat model.

        Args:
            llm: Configured LangChain chat model
            model_name: Name of the model, used in diagnostics
        """
        self._llm = llm
        self._model_name = model_name

    @property
    def model_name(self) -> str:
        return self._model_name

    def request_summary(self, request: SummaryRequest) -> SummaryResult:
        """
        Send the prompt as a single user message and return the model's text.

        Args:
            request: Prompt built from a commit batch

        Returns:
            Non-empty summary text

        Raises:
            RequestFailedError: If the LLM API call fails
            EmptyResponseError: If the response is missing or has no text
        """
        from langchain_core.messages import HumanMessage

        logger.debug(
            "Requesting %s summary of %d commits from %s",
            request.style.value,
            request.commit_count,
            self._model_name or "model",
        )

        try:
            response = self._llm.invoke([HumanMessage(content=request.prompt_text)])
        except Exception as e:
            raise RequestFailedError(f"Failed to get response from AI model: {e}") from e

        if response is None:
            raise EmptyResponseError("Failed to get response from AI model")

        text = self._extract_text(response.content)
        if not text.strip():
            raise EmptyResponseError("AI response is empty")

        return SummaryResult(text=text)

    @staticmethod
    def _extract_text(content: Any) -> str:
        """Extract plain text from a chat model response content."""
        if content is None:
            return ""
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            # Content blocks: plain strings or {"type": "text", "text": ...} dicts
            parts: list[str] = []
            for item in content:
                if isinstance(item, str):
                    parts.append(item)
                elif isinstance(item, dict) and item.get("type", "text") == "text":
                    parts.append(str(item.get("text", "")))
            return "".join(parts)
        return str(content)
