"""Git service for coordinating Git operations."""

import logging
from pathlib import Path

from git_recap.exceptions import NoCommitsFoundError
from git_recap.git.domain.entities import CommitBatch
from git_recap.git.domain.value_objects import CommitSelector
from git_recap.git.repositories.interfaces import GitRepository

logger = logging.getLogger(__name__)


class GitService:
    """Service for Git operations."""

    def __init__(self, git_repository: GitRepository) -> None:
        """
        Initialize GitService.

        Args:
            git_repository: Repository implementation for Git operations
        """
        self._git_repository = git_repository

    def fetch_commits(self, repo_path: Path, selector: CommitSelector) -> CommitBatch:
        """
        Fetch the commits matching a selector.

        Args:
            repo_path: Path to the git repository
            selector: Last-N or time-window selection

        Returns:
            Non-empty batch of commits ordered from newest to oldest

        Raises:
            NoCommitsFoundError: If the selection matches no commits
            SourceUnavailableError: If the log cannot be queried
        """
        commits = self._git_repository.list_commits(repo_path, selector)

        if not commits:
            raise NoCommitsFoundError(
                f"No commits found in {repo_path} ({selector.describe()})"
            )

        logger.debug("Fetched %d commits (%s)", len(commits), selector.describe())
        return CommitBatch(commits=commits, selector=selector)
