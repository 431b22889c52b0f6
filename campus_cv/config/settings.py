from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    min_text_length: int = 50
    docx_raw_accept_length: int = 100
    max_file_size_bytes: int = 10 * 1024 * 1024

    ocr_enabled: bool = True
    ocr_language: str = "eng"
    ocr_dpi: int = 200

    ai_provider: str = "gemini"
    ai_temperature: float = 0.0
    ai_timeout_seconds: int = 60
    ai_max_retries: int = 1

    ai_openai_api_key: str = ""
    ai_openai_model_name: str = "gpt-4o-mini"

    ai_gemini_api_key: str = ""
    ai_gemini_model_name: str = "gemini-2.0-flash"

    ai_groq_api_key: str = ""
    ai_groq_model_name: str = "llama-3.3-70b-versatile"

    ai_openrouter_api_key: str = ""
    ai_openrouter_model_name: str = ""

    ai_openai_compatible_base_url: str = ""
    ai_openai_compatible_api_key: str = ""
    ai_openai_compatible_model_name: str = ""

    reveal_delay_seconds: float = 0.5
