from functools import lru_cache
from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    QUOTES_API_BASE_URL, HTTP_TIMEOUT_SECONDS, FETCH_RATES_ON_STARTUP).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Calculadora de Fondo de Emergencia"
    debug: bool = True
    version: str = "0.1.0"

    # Exchange quotes; each quote lives at {base}/{slug}
    quotes_api_base_url: AnyHttpUrl = "https://dolarapi.com/v1/dolares"
    http_timeout_seconds: float = Field(5.0, gt=0)

    # Single fetch per process lifetime, started by the lifespan hook
    fetch_rates_on_startup: bool = True

    def quote_url(self, slug: str) -> str:
        return f"{str(self.quotes_api_base_url).rstrip('/')}/{slug}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
