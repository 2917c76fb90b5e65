"""Concrete implementation of Git repository operations."""

import logging
import subprocess
from pathlib import Path

from git_recap.exceptions import SourceUnavailableError
from git_recap.git.domain.entities import Commit
from git_recap.git.domain.value_objects import CommitSelector
from git_recap.git.repositories.interfaces import GitRepository

logger = logging.getLogger(__name__)

# Fields are separated by the ASCII unit separator so that "|" or tabs in
# author names never shift the columns.
FIELD_SEPARATOR = "\x1f"
LOG_FORMAT = "%H%x1f%an%x1f%ae%x1f%ad%x1f%s"
FIELD_COUNT = 5


class GitRepositoryImpl(GitRepository):
    """Concrete implementation of Git repository operations using git commands."""

    def list_commits(self, repo_path: Path, selector: CommitSelector) -> tuple[Commit, ...]:
        """
        List commits matching a selector.

        Args:
            repo_path: Path to the git repository
            selector: Last-N or time-window selection

        Returns:
            Tuple of commits ordered from newest to oldest, empty if none match

        Raises:
            SourceUnavailableError: If git fails or cannot be run in repo_path
        """
        command = [
            "git",
            "log",
            f"--format={LOG_FORMAT}",
            "--date=iso-strict",
            *self._selector_arguments(selector),
        ]
        logger.debug("Running %s in %s", " ".join(command), repo_path)

        try:
            result = subprocess.run(
                command,
                cwd=repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else str(e)
            raise SourceUnavailableError(
                f"Failed to list commits in {repo_path}: {error_msg}"
            ) from e
        except OSError as e:
            raise SourceUnavailableError(
                f"Failed to run git in {repo_path}: {e}"
            ) from e

        commits: list[Commit] = []
        for line in result.stdout.split("\n"):
            if not line:
                continue
            parts = line.split(FIELD_SEPARATOR, FIELD_COUNT - 1)
            if len(parts) != FIELD_COUNT:
                logger.warning("Skipping unparseable log line: %r", line)
                continue
            commit_hash, author_name, author_email, date, message = parts
            commits.append(
                Commit(
                    hash=commit_hash,
                    author_name=author_name,
                    author_email=author_email,
                    date=date,
                    message=message,
                )
            )

        return tuple(commits)

    @staticmethod
    def _selector_arguments(selector: CommitSelector) -> list[str]:
        """Translate a selector into git log options."""
        if selector.max_count is not None:
            return [f"--max-count={selector.max_count}"]

        assert selector.since is not None and selector.until is not None
        return [
            f"--since={selector.since.isoformat(timespec='seconds')}",
            f"--until={selector.until.isoformat(timespec='seconds')}",
        ]
