from collections.abc import Callable
from functools import lru_cache

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from mindweave.config import Settings, get_settings
from mindweave.exceptions import ServiceUnavailableError

# Presence of the model name and of each provider's credential is checked by
# the settings validator, hence the empty-string fallbacks are never used.
_MODEL_FACTORIES: dict[str, Callable[[Settings], Model]] = {
    "ollama": lambda s: OpenAIChatModel(
        s.AI_MODEL_NAME or "", provider=OllamaProvider(base_url=s.OPENAI_BASE_URL or "")
    ),
    "openai": lambda s: OpenAIChatModel(
        s.AI_MODEL_NAME or "", provider=OpenAIProvider(api_key=s.OPENAI_API_KEY or "")
    ),
    "anthropic": lambda s: AnthropicModel(
        s.AI_MODEL_NAME or "", provider=AnthropicProvider(api_key=s.ANTHROPIC_API_KEY or "")
    ),
    "google": lambda s: GoogleModel(
        s.AI_MODEL_NAME or "", provider=GoogleProvider(api_key=s.GEMINI_API_KEY or "")
    ),
}


@lru_cache
def get_ai_model() -> Model:
    """
    Model for the configured provider.

    Built on first use so the API and the worker start without an AI
    provider; only generation calls need one.
    """
    settings = get_settings()
    factory = _MODEL_FACTORIES.get(settings.AI_PROVIDER or "")
    if factory is None:
        raise ServiceUnavailableError("No AI model provider is configured.")
    return factory(settings)
