"""Concrete implementations of LLM summarization using LangChain."""

from langchain_anthropic import ChatAnthropic
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI
from pydantic import SecretStr

from git_recap.summarization.repositories.base_langchain_agent import (
    BaseLangChainAgent,
)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_ANTHROPIC_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_OPENAI_MODEL = "gpt-4-turbo-preview"

# Lower temperature for more consistent summaries
TEMPERATURE = 0.3


class LangChainGeminiAgent(BaseLangChainAgent):
    """LangChain implementation using Google Gemini."""

    def __init__(self, api_key: str, model_name: str | None = None) -> None:
        """
        Initialize the Gemini agent.

        Args:
            api_key: Google Gemini API key
            model_name: Optional model name override. Defaults to gemini-2.5-flash
        """
        model = model_name or DEFAULT_GEMINI_MODEL
        llm = ChatGoogleGenerativeAI(
            model=model,
            google_api_key=SecretStr(api_key),
            temperature=TEMPERATURE,
            max_retries=0,
        )
        super().__init__(llm, model_name=model)


class LangChainClaudeAgent(BaseLangChainAgent):
    """LangChain implementation using Claude."""

    def __init__(self, api_key: str, model_name: str | None = None) -> None:
        """
        Initialize the Claude agent.

        Args:
            api_key: Anthropic API key
            model_name: Optional model name override. Defaults to claude-3-5-sonnet-20241022
        """
        model = model_name or DEFAULT_ANTHROPIC_MODEL
        llm = ChatAnthropic(  # type: ignore[call-arg]
            model_name=model,
            api_key=SecretStr(api_key),
            temperature=TEMPERATURE,
            max_retries=0,
        )
        super().__init__(llm, model_name=model)


class LangChainOpenAIAgent(BaseLangChainAgent):
    """LangChain implementation using OpenAI."""

    def __init__(self, api_key: str, model_name: str | None = None) -> None:
        """
        Initialize the OpenAI agent.

        Args:
            api_key: OpenAI API key
            model_name: Optional model name override. Defaults to gpt-4-turbo-preview
        """
        model = model_name or DEFAULT_OPENAI_MODEL
        llm = ChatOpenAI(  # type: ignore[call-arg]
            model=model,
            api_key=SecretStr(api_key),
            temperature=TEMPERATURE,
            max_retries=0,
        )
        super().__init__(llm, model_name=model)
