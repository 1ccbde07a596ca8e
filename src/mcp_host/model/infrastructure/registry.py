"""Model backend registry — maps the configured provider:model string to a backend."""

import litellm

from mcp_host.config.domain.settings import HostSettings
from mcp_host.model.domain.backend import ModelBackend
from mcp_host.model.domain.observer import ModelObserver
from mcp_host.model.domain.selection import ModelSelection, ProviderKind
from mcp_host.model.infrastructure.errors import (
    InvalidModelIdentifierError,
    MissingCredentialError,
    UnsupportedProviderError,
)
from mcp_host.model.infrastructure.litellm import LiteLLMBackend


def parse_model_selection(identifier: str) -> ModelSelection:
    """Parse ``provider:model`` into a ModelSelection.

    Only the first colon separates; model names may contain further colons
    (``ollama:llama3.1:8b``).

    Raises:
        InvalidModelIdentifierError: if either part is missing.
        UnsupportedProviderError: if the provider is not a known ProviderKind.
    """
    provider, sep, model = identifier.strip().partition(":")
    if not sep or not provider or not model:
        raise InvalidModelIdentifierError(identifier=identifier)

    try:
        kind = ProviderKind(provider.lower())
    except ValueError as exc:
        raise UnsupportedProviderError(
            provider=provider, supported=[k.value for k in ProviderKind]
        ) from exc

    return ModelSelection(provider=kind, model=model)


def create_model_backend(settings: HostSettings, observer: ModelObserver) -> ModelBackend:
    """Return the backend for settings.model, with its credentials wired in.

    Raises:
        InvalidModelIdentifierError: if settings.model is not provider:model.
        UnsupportedProviderError: if the provider is unknown.
        MissingCredentialError: if the provider needs an API key and none is set.
    """
    selection = parse_model_selection(settings.model)
    litellm.suppress_debug_info = True

    if selection.provider is ProviderKind.ANTHROPIC:
        if settings.anthropic_api_key is None:
            raise MissingCredentialError(provider="anthropic", env_var="ANTHROPIC_API_KEY")
        return LiteLLMBackend(
            selection=selection,
            observer=observer,
            api_key=settings.anthropic_api_key.get_secret_value(),
            api_base=settings.anthropic_base_url,
        )

    if selection.provider is ProviderKind.OPENAI:
        if settings.openai_api_key is None:
            raise MissingCredentialError(provider="OpenAI", env_var="OPENAI_API_KEY")
        return LiteLLMBackend(
            selection=selection,
            observer=observer,
            api_key=settings.openai_api_key.get_secret_value(),
            api_base=settings.openai_base_url,
        )

    return LiteLLMBackend(
        selection=selection,
        observer=observer,
        api_base=settings.ollama_base_url,
    )
