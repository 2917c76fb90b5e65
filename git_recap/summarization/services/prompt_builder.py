"""Build the instruction prompt sent to the model."""

import logging

from git_recap.exceptions import ConfigurationError, EmptyBatchError
from git_recap.git.domain.entities import Commit, CommitBatch
from git_recap.summarization.domain.value_objects import SummaryRequest, SummaryStyle

logger = logging.getLogger(__name__)

# Commit lines are the only lines of the prompt starting with "- ", keep the
# template free of dash bullets.
COMMIT_LINE_PREFIX = "- "

STYLE_INSTRUCTIONS: dict[SummaryStyle, str] = {
    SummaryStyle.GENERAL: (
        "Write a short, high-level summary of what has been done. "
        "A few sentences or a handful of grouped points is enough."
    ),
    SummaryStyle.RELEASE: (
        "Write changelog-style release notes. Organize them under the headings "
        "Features, Fixes and Improvements, and leave out empty headings."
    ),
    SummaryStyle.STANDUP: (
        "Write a daily standup update in the first person plural, "
        'e.g. "Yesterday we ... Today we will ...". Keep it brief.'
    ),
    SummaryStyle.TWEET: (
        "Write a single line suitable for posting as a short public update. "
        "Stay under 280 characters and do not use markdown."
    ),
}

PROMPT_TEMPLATE = """You are an assistant specialized in analyzing Git commit messages. \
Your job is to summarize recent project activity from a list of commits so that \
it can be used in team updates, changelogs or release notes.

Guidelines:
1. Group related commits together (e.g. authentication changes, UI tweaks).
2. Highlight key progress: new features, bug fixes and refactors.
3. Omit low-value commits such as typo fixes, README updates or documentation tweaks.
4. Do NOT restate every commit one by one; summarize intelligently.
5. Use natural, developer-friendly language.

Requested style: {style}
{style_instructions}

Produce exactly one summary in the "{style}" style and nothing else. \
Do not prompt for further questions or comments.

Recent commits, most recent first:
{commit_lines}"""


def format_commit_line(commit: Commit) -> str:
    """Render one commit as a prompt line."""
    return f"{COMMIT_LINE_PREFIX}{commit.message}"


def build_prompt(
    batch: CommitBatch,
    style: SummaryStyle,
    max_chars: int | None = None,
) -> SummaryRequest:
    """
    Build the summary prompt for a batch of commits.

    Args:
        batch: Commits to summarize, most recent first
        style: Requested output style
        max_chars: Optional limit on the size of the commit list. When it is
            exceeded the oldest commits are dropped and replaced by a single
            "(N older commits omitted)" line. At least one commit is kept

    Returns:
        SummaryRequest holding the prompt text

    Raises:
        ConfigurationError: If style is not a SummaryStyle
        EmptyBatchError: If the batch holds no commits
    """
    if not isinstance(style, SummaryStyle):
        raise ConfigurationError(
            f'Invalid format "{style}". Valid formats are: {", ".join(SummaryStyle.choices())}.'
        )

    lines = [format_commit_line(commit) for commit in batch]
    if not lines:
        raise EmptyBatchError("No commit messages to summarize")

    kept_lines = _truncate(lines, max_chars)
    omitted = len(lines) - len(kept_lines)
    commit_lines = "\n".join(kept_lines)
    if omitted:
        logger.warning(
            "Prompt limited to %d characters: omitting %d of %d commits",
            max_chars,
            omitted,
            len(lines),
        )
        commit_lines += f"\n({omitted} older commits omitted)"

    logger.debug("Commit messages to summarize:\n%s", commit_lines)

    prompt_text = PROMPT_TEMPLATE.format(
        style=style.value,
        style_instructions=STYLE_INSTRUCTIONS[style],
        commit_lines=commit_lines,
    )
    return SummaryRequest(prompt_text=prompt_text, style=style, commit_count=len(kept_lines))


def _truncate(lines: list[str], max_chars: int | None) -> list[str]:
    """Drop lines from the end until the joined text fits in max_chars."""
    if max_chars is None:
        return lines

    kept = list(lines)
    size = len("\n".join(kept))
    while len(kept) > 1 and size > max_chars:
        size -= len(kept.pop()) + 1
    return kept
