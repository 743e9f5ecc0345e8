"""Configuration management for aicommit."""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from .exceptions import ConfigError, ConfigInitialized, MissingAPIKeyError

CONFIG_DIR_NAME = ".aicommit"
CONFIG_FILE_NAME = "config.json"

DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_LANG = "en"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_MAX_TOKENS = 500
DEFAULT_TEMPERATURE = 0.7

# Environment variables override values read from the config file
ENV_MAPPING = {
    "AICOMMIT_ENDPOINT": "openai_endpoint",
    "AICOMMIT_API_KEY": "api_key",
    "AICOMMIT_LANG": "default_lang",
    "AICOMMIT_PROXY_URL": "proxy_url",
    "AICOMMIT_MODEL": "model",
    "AICOMMIT_MAX_TOKENS": "max_tokens",
    "AICOMMIT_TEMPERATURE": "temperature",
    "AICOMMIT_LOG_FILE": "log_file",
}


def get_config_path() -> Path:
    """Return the location of the user's config file (~/.aicommit/config.json)."""
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class Config(BaseModel):
    """Configuration settings for aicommit.

    Values come from the JSON config file, optionally overridden by
    ``AICOMMIT_*`` environment variables and, for the language, by the
    ``--lang`` command line option.

    Empty strings and non-positive numbers fall back to the defaults, so a
    partially filled config file still yields a usable configuration.
    """

    openai_endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="OpenAI-compatible chat completions URL"
    )

    api_key: str = Field(
        default="",
        description="Bearer token sent to the endpoint"
    )

    default_lang: str = Field(
        default=DEFAULT_LANG,
        description="Language code the commit message is written in"
    )

    proxy_url: Optional[str] = Field(
        default=None,
        description="Optional HTTP(S) proxy for the completion request"
    )

    model: str = Field(
        default=DEFAULT_MODEL,
        description="Model identifier sent with the request"
    )

    max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS,
        description="Maximum number of tokens in the completion"
    )

    temperature: float = Field(
        default=DEFAULT_TEMPERATURE,
        description="Sampling temperature"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path of a file that receives a log of each run"
    )

    @field_validator("openai_endpoint", "default_lang", "model", "max_tokens", "temperature", mode="before")
    @classmethod
    def _fallback_when_missing(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("max_tokens", "temperature")
    @classmethod
    def _fallback_when_not_positive(cls, value: Any, info: ValidationInfo) -> Any:
        if value <= 0:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("api_key", mode="before")
    @classmethod
    def _normalize_api_key(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    @field_validator("proxy_url", "log_file", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @staticmethod
    def _env_overrides() -> Dict[str, str]:
        """Collect config values set through environment variables."""
        return {
            field_name: os.environ[env_var]
            for env_var, field_name in ENV_MAPPING.items()
            if env_var in os.environ
        }

    @classmethod
    def load_or_init(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load the configuration, creating a default file on first use.

        Args:
            config_path: Location of the config file, defaults to get_config_path()

        Returns:
            Config: The validated configuration

        Raises:
            ConfigInitialized: The file did not exist and a default one was written
            ConfigError: The file could not be read or is not a valid config document
            MissingAPIKeyError: No API key is configured
        """
        config_path = config_path or get_config_path()

        if not config_path.exists():
            cls().save(config_path)
            raise ConfigInitialized(config_path)

        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e
        except ValueError as e:
            raise ConfigError(f"Invalid JSON in config file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a JSON object")

        try:
            config = cls(**{**data, **cls._env_overrides()})
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e

        if not config.api_key:
            raise MissingAPIKeyError(config_path)

        return config

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Write the configuration as indented JSON, omitting unset optional fields."""
        config_path = config_path or get_config_path()

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(
                json.dumps(self.model_dump(exclude_none=True), indent=2) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"Could not write config file {config_path}: {e}") from e

        return config_path

    def with_language(self, language: str) -> 'Config':
        """Return a copy of this configuration using another commit message language."""
        return self.model_copy(update={"default_lang": language})

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file, or None when logging to a file is disabled."""
        if self.log_file:
            return Path(self.log_file).expanduser()
        return None
