"""Unit tests for domain value objects."""

from datetime import datetime, timedelta, timezone

import pytest

from git_recap.exceptions import ConfigurationError
from git_recap.git.domain.value_objects import CommitSelector
from git_recap.summarization.domain.value_objects import SummaryResult, SummaryStyle
from stubs import make_batch


class TestCommitSelector:
    """Test cases for CommitSelector."""

    def test_last_sets_max_count(self):
        """Test selecting the last N commits."""
        selector = CommitSelector.last(100)
        assert selector.max_count == 100
        assert selector.since is None
        assert not selector.is_window
        assert selector.describe() == "last 100 commits"

    def test_window_ends_at_now(self):
        """Test building a 24 hour window."""
        now = datetime(2024, 5, 2, 12, 0, tzinfo=timezone.utc)
        selector = CommitSelector.window(24, now=now)
        assert selector.is_window
        assert selector.until == now
        assert selector.since == now - timedelta(hours=24)

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_is_rejected(self, count):
        """Test that a count below one is invalid."""
        with pytest.raises(ValueError, match="positive"):
            CommitSelector.last(count)

    def test_non_positive_window_is_rejected(self):
        """Test that an empty window is invalid."""
        with pytest.raises(ValueError, match="positive"):
            CommitSelector.window(0)

    def test_count_and_window_are_exclusive(self):
        """Test that both modes cannot be combined."""
        now = datetime.now(timezone.utc)
        with pytest.raises(ValueError, match="cannot combine"):
            CommitSelector(max_count=5, since=now - timedelta(hours=1), until=now)

    def test_empty_selector_is_rejected(self):
        """Test that a selector needs one mode."""
        with pytest.raises(ValueError, match="either"):
            CommitSelector()

    def test_reversed_window_is_rejected(self):
        """Test that since must come before until."""
        now = datetime.now(timezone.utc)
        with pytest.raises(ValueError, match="before"):
            CommitSelector.between(now, now - timedelta(hours=1))


class TestCommitBatch:
    """Test cases for CommitBatch."""

    def test_len_and_iteration_keep_order(self):
        """Test that the batch behaves like its commit tuple."""
        batch = make_batch("newest", "older", "oldest")
        assert len(batch) == 3
        assert [commit.message for commit in batch] == ["newest", "older", "oldest"]
        assert not batch.is_empty

    def test_empty_batch(self):
        """Test an empty batch."""
        assert make_batch().is_empty


class TestSummaryStyle:
    """Test cases for SummaryStyle."""

    @pytest.mark.parametrize("name", ["general", "release", "standup", "tweet"])
    def test_parse_known_styles(self, name):
        """Test parsing every supported style."""
        assert SummaryStyle.parse(name).value == name

    def test_parse_unknown_style_names_valid_set(self):
        """Test that the error names the bad value and the valid ones."""
        with pytest.raises(ConfigurationError) as exc_info:
            SummaryStyle.parse("haiku")
        message = str(exc_info.value)
        assert '"haiku"' in message
        assert "general, release, standup, tweet" in message

    def test_parse_is_case_sensitive(self):
        """Test that style names must match exactly."""
        with pytest.raises(ConfigurationError):
            SummaryStyle.parse("General")


class TestSummaryResult:
    """Test cases for SummaryResult."""

    def test_text_is_kept_verbatim(self):
        """Test that text is not altered."""
        assert SummaryResult(text="  done\n").text == "  done\n"

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_empty_text_is_rejected(self, text):
        """Test that blank summaries cannot be built."""
        with pytest.raises(ValueError):
            SummaryResult(text=text)
