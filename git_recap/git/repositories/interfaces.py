"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from git_recap.git.domain.entities import Commit
from git_recap.git.domain.value_objects import CommitSelector


class GitRepository(ABC):
    """Interface for Git repository operations."""

    @abstractmethod
    def list_commits(self, repo_path: Path, selector: CommitSelector) -> tuple[Commit, ...]:
        """
        List commits matching a selector.

        Args:
            repo_path: Path to the git repository
            selector: Last-N or time-window selection

        Returns:
            Tuple of commits ordered from newest to oldest, empty if none match

        Raises:
            SourceUnavailableError: If the log cannot be queried
        """
        ...
