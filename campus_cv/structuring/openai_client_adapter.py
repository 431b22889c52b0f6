import httpx
import openai

from campus_cv.structuring.client_base import BaseCompletionClient
from campus_cv.structuring.exceptions import (
    AIResponseMalformedError,
    AIServiceUnavailableError,
)


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client for any OpenAI-compatible chat API (OpenAI, Gemini, Groq...)."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AIServiceUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIServiceUnavailableError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AIResponseMalformedError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise AIResponseMalformedError("AI returned empty response")
        return content
