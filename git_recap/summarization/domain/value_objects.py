"""Value objects for Summarization domain."""

from dataclasses import dataclass
from enum import Enum

from git_recap.exceptions import ConfigurationError


class SummaryStyle(str, Enum):
    """Output style requested for the summary."""

    GENERAL = "general"
    RELEASE = "release"
    STANDUP = "standup"
    TWEET = "tweet"

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        """Names accepted on the command line, in declaration order."""
        return tuple(style.value for style in cls)

    @classmethod
    def parse(cls, value: str) -> "SummaryStyle":
        """
        Convert a user-supplied name into a style.

        Raises:
            ConfigurationError: If value is not one of the known styles
        """
        try:
            return cls(value)
        except ValueError as e:
            raise ConfigurationError(
                f'Invalid format "{value}". Valid formats are: {", ".join(cls.choices())}.'
            ) from e


@dataclass(frozen=True)
class SummaryRequest:
    """Prompt ready to be sent to the model."""

    prompt_text: str
    style: SummaryStyle
    commit_count: int


@dataclass(frozen=True)
class SummaryResult:
    """Text produced by the model."""

    text: str

    def __post_init__(self) -> None:
        """Validate the result."""
        if not self.text.strip():
            raise ValueError("Summary text cannot be empty")
