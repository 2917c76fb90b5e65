"""Factory for creating LLM agent instances."""

from git_recap.exceptions import ConfigurationError
from git_recap.summarization.repositories.implementations import (
    LangChainClaudeAgent,
    LangChainGeminiAgent,
    LangChainOpenAIAgent,
)
from git_recap.summarization.repositories.interfaces import LLMAgentRepository

DEFAULT_PROVIDER = "gemini"

PROVIDER_ALIASES: dict[str, str] = {
    "gemini": "gemini",
    "google": "gemini",
    "anthropic": "anthropic",
    "claude": "anthropic",
    "openai": "openai",
    "gpt": "openai",
}

# Environment variables holding the credential and the model override
API_KEY_ENV_VARS: dict[str, str] = {
    "gemini": "GEMINI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
}
MODEL_ENV_VARS: dict[str, str] = {
    "gemini": "GEMINI_MODEL",
    "anthropic": "ANTHROPIC_MODEL",
    "openai": "OPENAI_MODEL",
}


def normalize_provider(provider: str) -> str:
    """
    Map a provider name or alias to its canonical name.

    Raises:
        ConfigurationError: If the provider is unknown
    """
    canonical = PROVIDER_ALIASES.get(provider.strip().lower())
    if canonical is None:
        raise ConfigurationError(
            f"Invalid LLM provider: {provider}. "
            f"Supported values: {', '.join(repr(name) for name in PROVIDER_ALIASES)}"
        )
    return canonical


def create_llm_agent(
    provider: str,
    api_key: str,
    model_name: str | None = None,
) -> LLMAgentRepository:
    """
    Create an LLM agent instance.

    Args:
        provider: Provider name or alias (gemini, anthropic, openai, ...)
        api_key: Credential for that provider
        model_name: Optional model name override

    Returns:
        LLM agent instance (Gemini, Claude or OpenAI)

    Raises:
        ConfigurationError: If the provider is unknown or the key is empty
    """
    canonical = normalize_provider(provider)
    if not api_key:
        raise ConfigurationError(f"An API key is required for provider '{canonical}'")

    if canonical == "gemini":
        return LangChainGeminiAgent(api_key=api_key, model_name=model_name)
    elif canonical == "anthropic":
        return LangChainClaudeAgent(api_key=api_key, model_name=model_name)
    else:
        return LangChainOpenAIAgent(api_key=api_key, model_name=model_name)
