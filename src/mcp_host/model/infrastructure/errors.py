"""Error types raised by model backend infrastructure."""

from mcp_host.core.errors import McpHostError


class ModelBackendError(McpHostError):
    """Raised when the model backend cannot be reached or returns an unusable response."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to query model backend: {reason}")


class InvalidModelIdentifierError(McpHostError):
    """Raised when the configured model identifier is not of the form provider:model."""

    def __init__(self, identifier: str) -> None:
        super().__init__(
            "Failed to parse model identifier: expected provider:model,"
            f" got '{identifier}'"
        )


class UnsupportedProviderError(McpHostError):
    """Raised when the provider part of the model identifier is not a known backend."""

    def __init__(self, provider: str, supported: list[str]) -> None:
        super().__init__(
            f"Failed to create model backend: unsupported provider '{provider}'"
            f" (supported: {', '.join(supported)})"
        )


class MissingCredentialError(McpHostError):
    """Raised when a provider that needs an API key has none configured."""

    def __init__(self, provider: str, env_var: str) -> None:
        super().__init__(
            f"Failed to create model backend: {provider} API key not provided;"
            f" set {env_var}"
        )
