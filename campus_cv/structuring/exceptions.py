class StructuringError(Exception):
    """Base exception for AI structuring failures."""


class AIResponseMalformedError(StructuringError):
    """Raised when the completion contains no parseable JSON object."""


class AIServiceUnavailableError(StructuringError):
    """Raised when the completion call fails at the transport, auth or quota level."""


class AIProviderConfigError(StructuringError):
    """Raised when the configured AI provider is unknown or incompletely set up."""
