"""Unit tests for the LLM agent factory."""

from unittest.mock import patch

import pytest

from git_recap.exceptions import ConfigurationError
from git_recap.summarization.repositories.factory import create_llm_agent, normalize_provider

FACTORY = "git_recap.summarization.repositories.factory"


class TestNormalizeProvider:
    """Test cases for normalize_provider."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("gemini", "gemini"),
            ("Google", "gemini"),
            ("claude", "anthropic"),
            ("anthropic", "anthropic"),
            (" GPT ", "openai"),
            ("openai", "openai"),
        ],
    )
    def test_aliases(self, name, expected):
        """Test provider aliases."""
        assert normalize_provider(name) == expected

    def test_unknown_provider(self):
        """Test that an unknown provider is a configuration error."""
        with pytest.raises(ConfigurationError, match="mistral"):
            normalize_provider("mistral")


class TestCreateLLMAgent:
    """Test cases for create_llm_agent."""

    @patch(f"{FACTORY}.LangChainGeminiAgent")
    def test_gemini(self, mock_agent):
        """Test creating the default Gemini agent."""
        agent = create_llm_agent("gemini", "key")

        mock_agent.assert_called_once_with(api_key="key", model_name=None)
        assert agent is mock_agent.return_value

    @patch(f"{FACTORY}.LangChainClaudeAgent")
    def test_claude(self, mock_agent):
        """Test creating a Claude agent through its alias."""
        create_llm_agent("claude", "key", "claude-3-5-haiku-latest")

        mock_agent.assert_called_once_with(api_key="key", model_name="claude-3-5-haiku-latest")

    @patch(f"{FACTORY}.LangChainOpenAIAgent")
    def test_openai(self, mock_agent):
        """Test creating an OpenAI agent."""
        create_llm_agent("gpt", "key")

        mock_agent.assert_called_once_with(api_key="key", model_name=None)

    @patch(f"{FACTORY}.LangChainGeminiAgent")
    def test_empty_key(self, mock_agent):
        """Test that an agent is never built without a key."""
        with pytest.raises(ConfigurationError, match="API key"):
            create_llm_agent("gemini", "")

        mock_agent.assert_not_called()
