"""Application configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from healthcare_translator.core.translation.pipeline.llm_gateway import DEFAULT_BASE_URL, DEFAULT_MODEL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Healthcare Translator"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    frontend_port: int = 5173

    # CORS - dynamically built based on frontend_port
    cors_origins: list[str] = []

    # Authentication (optional - for network-exposed deployments)
    # Set API_AUTH_TOKEN to protect cache management endpoints
    api_auth_token: Optional[str] = None

    # LLM backend (OpenAI-compatible chat completions endpoint)
    # Leaving GROQ_API_KEY unset runs the service in offline mode
    groq_api_key: Optional[str] = None
    llm_base_url: str = DEFAULT_BASE_URL
    llm_model: str = DEFAULT_MODEL
    llm_temperature: float = 0.1
    llm_max_tokens: int = 1024

    # Translation defaults
    default_context: str = "healthcare"
    history_limit: int = 10  # Entries kept per voice session

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if not self.cors_origins:
            self.cors_origins = [
                f"http://localhost:{self.frontend_port}",
                f"http://127.0.0.1:{self.frontend_port}",
            ]


settings = Settings()
