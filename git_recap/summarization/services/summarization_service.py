"""Summarization service for orchestrating commit history analysis."""

import logging
from pathlib import Path

from git_recap.git.domain.value_objects import CommitSelector
from git_recap.git.services.git_service import GitService
from git_recap.summarization.domain.value_objects import SummaryResult, SummaryStyle
from git_recap.summarization.repositories.interfaces import LLMAgentRepository
from git_recap.summarization.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)


class SummarizationService:
    """Service running fetch, prompt building and the model request in order."""

    def __init__(
        self,
        git_service: GitService,
        llm_agent: LLMAgentRepository,
        max_prompt_chars: int | None = None,
    ) -> None:
        """
        Initialize SummarizationService.

        Args:
            git_service: Service for fetching git commit data
            llm_agent: Repository for LLM-based summarization
            max_prompt_chars: Optional size limit for the commit list in the prompt
        """
        self._git_service = git_service
        self._llm_agent = llm_agent
        self._max_prompt_chars = max_prompt_chars

    def summarize(
        self,
        repo_path: Path,
        selector: CommitSelector,
        style: SummaryStyle,
    ) -> SummaryResult:
        """
        Summarize the commits matching a selector.

        Each step only runs once the previous one has succeeded.

        Args:
            repo_path: Path to the git repository
            selector: Last-N or time-window selection
            style: Requested output style

        Returns:
            The model's summary

        Raises:
            SourceError: If no commits are found or the log cannot be read
            PromptError: If no prompt can be built from the commits
            RequestError: If the model call fails or returns no text
        """
        batch = self._git_service.fetch_commits(repo_path, selector)
        request = build_prompt(batch, style, max_chars=self._max_prompt_chars)
        result = self._llm_agent.request_summary(request)
        logger.debug("Received a summary of %d characters", len(result.text))
        return result
