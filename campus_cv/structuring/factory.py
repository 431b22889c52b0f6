from typing import ClassVar

from campus_cv.config.settings import Settings
from campus_cv.structuring.base import BaseStructurer
from campus_cv.structuring.example_client_adapter import ExampleClientAdapter
from campus_cv.structuring.exceptions import AIProviderConfigError
from campus_cv.structuring.openai_client_adapter import OpenAIClientAdapter
from campus_cv.structuring.structurer import CVStructurer


class StructurerFactory:
    """Creates the configured CV structurer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "groq": "https://api.groq.com/openai/v1",
        "openrouter": "https://openrouter.ai/api/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseStructurer:
        """Create a configured structurer from application settings."""
        provider = settings.ai_provider.lower()
        if provider == "example":
            return CVStructurer(client=ExampleClientAdapter(), model="example", max_retries=0)
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.ai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return CVStructurer(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.ai_temperature,
            max_retries=settings.ai_max_retries,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.ai_openai_compatible_base_url.strip()
            if not url:
                raise AIProviderConfigError(
                    "ai_openai_compatible_base_url is required for "
                    "ai_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise AIProviderConfigError(f"Unknown AI provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.ai_openai_api_key,
            "openai_compatible": settings.ai_openai_compatible_api_key,
            "gemini": settings.ai_gemini_api_key,
            "groq": settings.ai_groq_api_key,
            "openrouter": settings.ai_openrouter_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.ai_openai_model_name,
            "openai_compatible": settings.ai_openai_compatible_model_name,
            "gemini": settings.ai_gemini_model_name,
            "groq": settings.ai_groq_model_name,
            "openrouter": settings.ai_openrouter_model_name,
        }
        return key_map.get(provider, "") or ""
