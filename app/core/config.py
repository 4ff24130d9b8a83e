from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FUNCTION_BASE_URL = "https://us-central1-agentics-dev.cloudfunctions.net/registry-agents"


class Settings(BaseSettings):
    """
    Application configuration settings.
    """
    model_config = SettingsConfigDict(env_prefix="REGISTRY_AGENTS_", env_file=".env", extra="ignore")

    # Service Info
    service_name: str = "registry-agents"
    environment: str = "local"
    log_level: str = "INFO"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Public origin used to build bootstrap endpoint links
    function_base_url: str = Field(
        default=DEFAULT_FUNCTION_BASE_URL,
        validation_alias=AliasChoices("FUNCTION_BASE_URL", "REGISTRY_AGENTS_FUNCTION_BASE_URL"),
    )

    # Contract enforcement
    strict_validation: bool = False

    # Observability
    trace_enabled: bool = True


settings = Settings()
