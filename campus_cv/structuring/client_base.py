from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific text completion clients."""

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
    ) -> str:
        """Return the provider's completion as plain text.

        Raises:
            AIServiceUnavailableError: on network, auth or rate-limit failures.
        """
