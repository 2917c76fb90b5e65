"""Value objects for Git domain."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class CommitSelector:
    """Which commits to read from the log.

    Exactly one of the two modes is set: ``max_count`` for the last N commits,
    or ``since``/``until`` for a time window.
    """

    max_count: int | None = None
    since: datetime | None = None
    until: datetime | None = None

    def __post_init__(self) -> None:
        """Validate the selector."""
        has_window = self.since is not None or self.until is not None

        if self.max_count is None and not has_window:
            raise ValueError("A commit selector needs either a max count or a time window")

        if self.max_count is not None and has_window:
            raise ValueError("A commit selector cannot combine a max count with a time window")

        if self.max_count is not None and self.max_count <= 0:
            raise ValueError(f"Max count must be a positive integer, got {self.max_count}")

        if has_window:
            if self.since is None or self.until is None:
                raise ValueError("A time window needs both a start and an end")
            if self.since >= self.until:
                raise ValueError(
                    f"Time window start {self.since.isoformat()} must be before "
                    f"its end {self.until.isoformat()}"
                )

    @classmethod
    def last(cls, count: int) -> "CommitSelector":
        """Select the ``count`` most recent commits."""
        return cls(max_count=count)

    @classmethod
    def between(cls, since: datetime, until: datetime) -> "CommitSelector":
        """Select commits authored between ``since`` and ``until``."""
        return cls(since=since, until=until)

    @classmethod
    def window(cls, hours: float, now: datetime | None = None) -> "CommitSelector":
        """
        Select commits from the last ``hours`` hours.

        Args:
            hours: Length of the window, must be positive
            now: End of the window. Defaults to the current UTC time

        Returns:
            Selector covering ``[now - hours, now]``
        """
        if hours <= 0:
            raise ValueError(f"Time window must be a positive number of hours, got {hours}")

        until = now or datetime.now(timezone.utc)
        return cls(since=until - timedelta(hours=hours), until=until)

    @property
    def is_window(self) -> bool:
        """True if the selector is a time window."""
        return self.max_count is None

    def describe(self) -> str:
        """Short human-readable description of the selection."""
        if self.max_count is not None:
            return f"last {self.max_count} commits"
        assert self.since is not None and self.until is not None
        return (
            f"commits from {self.since.isoformat(timespec='seconds')} "
            f"to {self.until.isoformat(timespec='seconds')}"
        )
