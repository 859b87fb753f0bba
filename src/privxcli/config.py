"""privx-cli configuration.

Configuration priority (highest to lowest):
1. Command line flags (--url, --access, --secret)
2. Environment variables (PRIVX_API_*)
3. Config file (--config, PRIVX_API_CONFIG_FILE, or ~/.config/privx-cli/config.toml)
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Optional, Tuple, Type

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class ConfigError(ValueError):
    """Invalid or missing client configuration."""


# (table, key) in the TOML file -> settings field
_FILE_MAPPING = {
    ("api", "base_url"): "base_url",
    ("api", "api_base_certificate"): "base_certificate",
    ("auth", "api_client_id"): "access_key",
    ("auth", "api_client_secret"): "secret_key",
    ("auth", "oauth_client_id"): "client_id",
    ("auth", "oauth_client_secret"): "client_secret",
    ("auth", "bearer"): "bearer",
}


def _get_user_config_path() -> Path:
    """Get user config path."""
    config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(config_home) / "privx-cli" / "config.toml"


def _load_config_file(filepath: Optional[Path]) -> dict[str, Any]:
    """Load the TOML config file and flatten it onto settings fields.

    An explicitly given file must exist. Without one, the user config file
    is used when present.
    """
    if filepath is None:
        filepath = _get_user_config_path()
        if not filepath.exists():
            return {}
    elif not filepath.exists():
        raise ConfigError(f"config file not found: {filepath}")

    with open(filepath, "rb") as f:
        document = tomllib.load(f)

    config = {}
    for (table, key), field_name in _FILE_MAPPING.items():
        value = document.get(table, {}).get(key)
        if value not in (None, ""):
            config[field_name] = value
    return config


class ConfigFileSource(PydanticBaseSettingsSource):
    """Settings source backed by the TOML config file."""

    def __init__(self, settings_cls: Type[BaseSettings], config_file: Optional[Path]):
        super().__init__(settings_cls)
        self._values = _load_config_file(config_file)

    def get_field_value(self, field: Any, field_name: str) -> Tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._values)


class Settings(BaseSettings):
    """Connection settings for one invocation."""

    model_config = SettingsConfigDict(
        env_prefix="PRIVX_API_",
        extra="ignore",
    )

    config_file: Optional[Path] = Field(
        default=None,
        description="TOML config file (--config or PRIVX_API_CONFIG_FILE)",
    )

    base_url: Optional[str] = Field(
        default=None,
        description="PrivX absolute URL (e.g. https://your-instance.privx.io)",
    )
    base_certificate: Optional[Path] = Field(
        default=None,
        description="CA bundle used to verify the PrivX server certificate",
    )
    verify: bool = Field(
        default=True,
        description="Verify TLS certificates",
    )
    timeout: float = Field(
        default=30.0,
        description="HTTP timeout in seconds",
    )

    # API client credentials
    access_key: Optional[str] = Field(
        default=None,
        description="Access key of the API client, or username",
    )
    secret_key: Optional[str] = Field(
        default=None,
        description="Secret key of the API client, or password",
    )
    client_id: str = Field(
        default="privx-external",
        description="OAuth client ID",
    )
    client_secret: str = Field(
        default="",
        description="OAuth client secret",
    )
    bearer: Optional[str] = Field(
        default=None,
        description="Pre-issued access token; skips the OAuth exchange",
    )

    def require_base_url(self) -> str:
        """Return the base URL or fail with a configuration error."""
        if not self.base_url:
            raise ConfigError(
                "PrivX URL is not defined. Use --url, PRIVX_API_BASE_URL or the config file"
            )
        return self.base_url.rstrip("/")

    @classmethod
    def load(cls, config_file: Optional[Path] = None, **overrides: Any) -> "Settings":
        """Build settings, letting non-empty overrides win over env and file."""
        values = {key: value for key, value in overrides.items() if value}
        if config_file is not None:
            values["config_file"] = config_file
        return cls(**values)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources.

        Priority (highest to lowest):
        1. init_settings (command line flags)
        2. env_settings (PRIVX_API_* environment variables)
        3. config file (TOML)
        """
        config_file = getattr(init_settings, "init_kwargs", {}).get("config_file")
        if config_file is None:
            env_name = f"{cls.model_config['env_prefix']}CONFIG_FILE"
            config_file = Path(os.environ[env_name]) if os.environ.get(env_name) else None
        return (
            init_settings,
            env_settings,
            ConfigFileSource(settings_cls, config_file),
        )
