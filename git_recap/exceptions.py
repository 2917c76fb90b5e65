"""Errors raised by git-recap.

Every failure the pipeline can hit maps to one of the classes below. Lower
layers wrap third-party errors (``subprocess``, LangChain providers) into
these and chain the original with ``raise ... from``; only the CLI turns them
into messages and exit codes.
"""


class GitRecapError(Exception):
    """Base class for all git-recap errors."""


class ConfigurationError(GitRecapError):
    """Missing credential, or an invalid style, provider or commit selector."""


class SourceError(GitRecapError):
    """The commit history could not be read."""


class NoCommitsFoundError(SourceError):
    """The log query succeeded but matched no commits."""


class SourceUnavailableError(SourceError):
    """The log query itself failed (not a repository, git missing, ...)."""


class PromptError(GitRecapError):
    """A prompt could not be built from the commit batch."""


class EmptyBatchError(PromptError):
    """The commit batch holds no commits to summarize."""


class RequestError(GitRecapError):
    """The summary could not be obtained from the model."""


class RequestFailedError(RequestError):
    """The model call raised (network, authentication, quota, ...)."""


class EmptyResponseError(RequestError):
    """The model answered without any text."""
