"""ModelSelection value object — which provider and model to talk to."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ProviderKind(StrEnum):
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    OLLAMA = "ollama"


class ModelSelection(BaseModel, frozen=True):
    """A validated ``provider:model`` pair."""

    provider: ProviderKind
    model: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.provider.value}:{self.model}"
