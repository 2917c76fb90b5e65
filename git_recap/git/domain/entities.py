"""Git domain entities."""

from collections.abc import Iterator
from dataclasses import dataclass

from git_recap.git.domain.value_objects import CommitSelector


@dataclass(frozen=True)
class Commit:
    """Commit entity."""

    hash: str
    author_name: str
    author_email: str
    date: str
    message: str


@dataclass(frozen=True)
class CommitBatch:
    """Commits returned by one log query, most recent first."""

    commits: tuple[Commit, ...]
    selector: CommitSelector

    def __len__(self) -> int:
        return len(self.commits)

    def __iter__(self) -> Iterator[Commit]:
        return iter(self.commits)

    @property
    def is_empty(self) -> bool:
        """True if the batch holds no commits."""
        return not self.commits
