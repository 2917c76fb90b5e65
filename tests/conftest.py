"""Shared fixtures for the test suite."""

import pytest

from stubs import StubGitRepository, StubLLMAgent


@pytest.fixture
def stub_git_repository() -> StubGitRepository:
    return StubGitRepository(["fix login bug", "update docs", "add dark mode"])


@pytest.fixture
def stub_llm_agent() -> StubLLMAgent:
    return StubLLMAgent()
