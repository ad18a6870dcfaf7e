"""
Application configuration module.

Defines environment-specific settings using Pydantic BaseSettings.
Loads environment variables from a `.env` file.
"""
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings


class ConfigurationError(Exception):
    """Raised when required settings are missing or invalid."""

    pass


class Settings(BaseSettings):
    """
    Centralized application configuration using environment variables.

    Attributes:
        env (str): Current environment name (e.g., 'development', 'production').
        supabase_url (str): URL of the Supabase project. Required.
        supabase_key (str): API key used to access the Supabase project. Required.
        supabase_table (str): Table holding the registered users.
        host (str): Interface the HTTP server binds to.
        port (int): Port the HTTP server listens on.
        log_level (str): Logging level (e.g., 'DEBUG', 'INFO').
        api_language (str): Language of user-facing messages ('en' or 'fa').
    """

    env: str = "development"

    supabase_url: str = Field(min_length=1)
    supabase_key: str = Field(min_length=1)
    supabase_table: str = "users"

    host: str = "0.0.0.0"
    port: int = 8000

    log_level: str = "INFO"
    api_language: str = "en"

    class Config:
        """Loads environment variables from `.env` file using UTF-8 encoding."""

        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = "ignore"


def load_settings(**overrides) -> Settings:
    """
    Build the settings object, turning validation failures into a readable diagnostic.

    Args:
        **overrides: Values taking precedence over the environment (used by tests).

    Raises:
        ConfigurationError: If a required setting is missing or invalid. The message
            names every offending environment variable.

    Returns:
        Settings: The loaded configuration.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        names = sorted({str(err["loc"][0]).upper() for err in e.errors() if err.get("loc")})
        raise ConfigurationError(
            f"Missing or invalid settings: {', '.join(names)}. "
            f"Set them in the environment or in the .env file."
        ) from e
