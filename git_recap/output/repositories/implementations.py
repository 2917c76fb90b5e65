"""Concrete implementations of summary sinks."""

import sys
from pathlib import Path
from typing import TextIO

from git_recap.output.repositories.interfaces import SummarySink
from git_recap.summarization.domain.value_objects import SummaryResult

DEFAULT_OUTPUT_FILE = Path("summary.md")


class FileSummarySink(SummarySink):
    """Writes the summary verbatim to a file, replacing previous content."""

    def __init__(self, path: Path = DEFAULT_OUTPUT_FILE) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def write(self, result: SummaryResult) -> None:
        with self._path.open("w", encoding="utf-8") as f:
            f.write(result.text)

    def describe(self) -> str:
        return str(self._path)


class StdoutSummarySink(SummarySink):
    """Prints the summary to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, result: SummaryResult) -> None:
        stream = self._stream or sys.stdout
        stream.write(result.text)
        if not result.text.endswith("\n"):
            stream.write("\n")
        stream.flush()

    def describe(self) -> str:
        return "standard output"
