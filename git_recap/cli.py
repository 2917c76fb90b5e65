"""Command-line entry point: summarize recent commits with an LLM.

Reads the recent history of a git repository, asks the model for a summary in
the requested style and writes it to ``summary.md`` (or standard output).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, TextIO

from git_recap import __version__
from git_recap.config import RecapConfig, load_env_file, resolve_config
from git_recap.exceptions import (
    ConfigurationError,
    PromptError,
    RequestError,
    SourceError,
)
from git_recap.git.repositories.implementations import GitRepositoryImpl
from git_recap.git.services.git_service import GitService
from git_recap.output.repositories.implementations import (
    DEFAULT_OUTPUT_FILE,
    FileSummarySink,
    StdoutSummarySink,
)
from git_recap.output.repositories.interfaces import SummarySink
from git_recap.output.services.output_service import OutputService
from git_recap.summarization.domain.value_objects import SummaryStyle
from git_recap.summarization.repositories.factory import create_llm_agent
from git_recap.summarization.services.summarization_service import SummarizationService


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="git-recap",
        description="Summarize recent git commits using AI-powered analysis",
    )
    parser.add_argument(
        "repo_path",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Path to the git repository directory (default: current directory)",
    )
    parser.add_argument(
        "-k",
        "--api-key",
        type=str,
        default=None,
        help="API key for the model provider (default: GEMINI_API_KEY from the environment)",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=str,
        default=SummaryStyle.GENERAL.value,
        help=f"Output format: {', '.join(SummaryStyle.choices())} (default: general)",
    )
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "-n",
        "--max-count",
        type=int,
        default=None,
        help="Summarize the last N commits",
    )
    selection.add_argument(
        "--since-hours",
        type=float,
        default=None,
        help="Summarize commits from the last H hours (default: 24)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_FILE,
        help="Output file path, overwritten on each run (default: summary.md)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the summary instead of writing the output file",
    )
    parser.add_argument(
        "--provider",
        type=str,
        default=None,
        help="LLM provider: gemini, anthropic or openai (default: LLM_PROVIDER or gemini)",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model name override (default: the provider's default model)",
    )
    parser.add_argument(
        "--max-prompt-chars",
        type=int,
        default=None,
        help="Drop the oldest commits when the commit list exceeds this many characters",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output, including the commit messages sent to the model",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_sink(config: RecapConfig) -> SummarySink:
    """Pick the single output destination for this run."""
    if config.output_path is None:
        return StdoutSummarySink()
    return FileSummarySink(config.output_path)


def _fail(message: str, hint: str | None = None) -> NoReturn:
    print(f"✗ {message}", file=sys.stderr)
    if hint:
        print(f"  Hint: {hint}", file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, validate configuration, and run the summary pipeline."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    load_env_file()

    try:
        config = resolve_config(
            style=args.format,
            api_key=args.api_key,
            provider=args.provider,
            model_name=args.model,
            repo_path=args.repo_path,
            max_count=args.max_count,
            since_hours=args.since_hours,
            output_path=None if args.stdout else args.output,
            max_prompt_chars=args.max_prompt_chars,
        )
        llm_agent = create_llm_agent(config.provider, config.api_key, config.model_name)
    except ConfigurationError as e:
        _fail(f"Configuration error: {e}")

    # Progress goes to stderr when the summary itself is printed on stdout
    status: TextIO = sys.stderr if config.writes_to_stdout else sys.stdout

    git_service = GitService(GitRepositoryImpl())
    summarization_service = SummarizationService(
        git_service, llm_agent, max_prompt_chars=config.max_prompt_chars
    )
    output_service = OutputService(create_sink(config))

    try:
        print("📝 Generating commit summary...", file=status)
        print(f"   Repository: {config.repo_path}", file=status)
        print(f"   Selection: {config.selector.describe()}", file=status)
        print(f"   Format: {config.style.value}", file=status)

        summary = summarization_service.summarize(
            repo_path=config.repo_path,
            selector=config.selector,
            style=config.style,
        )
    except SourceError as e:
        _fail(f"Failed to get commits: {e}")
    except PromptError as e:
        _fail(f"Failed to build prompt: {e}")
    except RequestError as e:
        _fail(
            f"Failed to summarize commits: {e}",
            hint=f"Check the API key and quota for provider '{config.provider}'",
        )

    try:
        output_service.deliver(summary)
    except OSError as e:
        _fail(f"Failed to write summary to {output_service.destination}: {e}")

    if not config.writes_to_stdout:
        print("✓ Summary generated successfully!", file=status)
        print(f"  Output file: {output_service.destination}", file=status)


if __name__ == "__main__":
    main()
