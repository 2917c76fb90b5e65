"""Configuration resolution for git-recap.

Settings come from command-line flags first, then from the process
environment (optionally populated from a ``.env`` file). They are resolved
once into a frozen :class:`RecapConfig` before any git or network activity.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from git_recap.exceptions import ConfigurationError
from git_recap.git.domain.value_objects import CommitSelector
from git_recap.output.repositories.implementations import DEFAULT_OUTPUT_FILE
from git_recap.summarization.domain.value_objects import SummaryStyle
from git_recap.summarization.repositories.factory import (
    API_KEY_ENV_VARS,
    DEFAULT_PROVIDER,
    MODEL_ENV_VARS,
    normalize_provider,
)

DEFAULT_WINDOW_HOURS = 24.0


@dataclass(frozen=True)
class RecapConfig:
    """Fully resolved settings for one run."""

    api_key: str
    provider: str
    style: SummaryStyle
    repo_path: Path
    selector: CommitSelector
    model_name: str | None = None
    output_path: Path | None = DEFAULT_OUTPUT_FILE
    max_prompt_chars: int | None = None

    @property
    def writes_to_stdout(self) -> bool:
        return self.output_path is None


def load_env_file() -> None:
    """Load environment variables from a .env file in or above the working directory."""
    load_dotenv(find_dotenv(usecwd=True))


def resolve_config(
    *,
    style: str,
    api_key: str | None = None,
    provider: str | None = None,
    model_name: str | None = None,
    repo_path: Path = Path("."),
    max_count: int | None = None,
    since_hours: float | None = None,
    output_path: Path | None = DEFAULT_OUTPUT_FILE,
    max_prompt_chars: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> RecapConfig:
    """
    Resolve flags and environment into a RecapConfig.

    The style is checked before the credential, and the credential comes from
    ``api_key`` if given, otherwise from the provider's environment variable.

    Args:
        style: Requested output style name
        api_key: Credential given on the command line
        provider: Provider name; falls back to LLM_PROVIDER, then gemini
        model_name: Model override; falls back to the provider's *_MODEL variable
        repo_path: Repository to read
        max_count: Select the last N commits
        since_hours: Select commits from the last H hours. Used when max_count
            is not given, defaulting to 24 hours
        output_path: File to write, or None to print to standard output
        max_prompt_chars: Optional size limit for the commit list in the prompt
        environ: Environment to read, defaults to os.environ

    Returns:
        Resolved configuration

    Raises:
        ConfigurationError: If any setting is missing or invalid
    """
    env = os.environ if environ is None else environ

    summary_style = SummaryStyle.parse(style)

    canonical_provider = normalize_provider(provider or env.get("LLM_PROVIDER") or DEFAULT_PROVIDER)

    key_var = API_KEY_ENV_VARS[canonical_provider]
    resolved_key = api_key or env.get(key_var)
    if not resolved_key:
        raise ConfigurationError(
            f"API key is required. Please provide it using -k or set {key_var} "
            "in the environment or a .env file."
        )

    resolved_model = model_name or env.get(MODEL_ENV_VARS[canonical_provider]) or None

    if max_count is not None and since_hours is not None:
        raise ConfigurationError("Use either a max count or a time window, not both")

    try:
        if max_count is not None:
            selector = CommitSelector.last(max_count)
        else:
            selector = CommitSelector.window(
                since_hours if since_hours is not None else DEFAULT_WINDOW_HOURS
            )
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    if max_prompt_chars is not None and max_prompt_chars <= 0:
        raise ConfigurationError(
            f"Max prompt size must be a positive integer, got {max_prompt_chars}"
        )

    return RecapConfig(
        api_key=resolved_key,
        provider=canonical_provider,
        style=summary_style,
        repo_path=repo_path,
        selector=selector,
        model_name=resolved_model,
        output_path=output_path,
        max_prompt_chars=max_prompt_chars,
    )
