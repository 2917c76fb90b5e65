"""Service for delivering summaries."""

import logging

from git_recap.output.repositories.interfaces import SummarySink
from git_recap.summarization.domain.value_objects import SummaryResult

logger = logging.getLogger(__name__)


class OutputService:
    """Service for orchestrating summary delivery."""

    def __init__(self, sink: SummarySink) -> None:
        """Initialize the output service.

        Args:
            sink: Destination of the summary
        """
        self._sink = sink

    @property
    def destination(self) -> str:
        return self._sink.describe()

    def deliver(self, result: SummaryResult) -> None:
        """Write a summary to the configured sink.

        Args:
            result: Summary returned by the model

        Raises:
            OSError: If the sink cannot be written
        """
        logger.debug("Writing summary to %s", self._sink.describe())
        self._sink.write(result)
