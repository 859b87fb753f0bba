from pathlib import Path

import pytest

from privxcli.config import ConfigError, Settings

CONFIG = """
[api]
base_url = "https://file.example.com"

[auth]
api_client_id = "file-access"
api_client_secret = "file-secret"
oauth_client_id = "file-client"
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(CONFIG, encoding="utf-8")
    return path


def test_config_file_values(config_file: Path) -> None:
    settings = Settings.load(config_file)

    assert settings.base_url == "https://file.example.com"
    assert settings.access_key == "file-access"
    assert settings.secret_key == "file-secret"
    assert settings.client_id == "file-client"
    assert settings.client_secret == ""


def test_environment_overrides_config_file(config_file: Path, monkeypatch) -> None:
    monkeypatch.setenv("PRIVX_API_ACCESS_KEY", "env-access")
    monkeypatch.setenv("PRIVX_API_BASE_URL", "https://env.example.com")

    settings = Settings.load(config_file)

    assert settings.access_key == "env-access"
    assert settings.base_url == "https://env.example.com"
    assert settings.secret_key == "file-secret"


def test_flags_override_environment(config_file: Path, monkeypatch) -> None:
    monkeypatch.setenv("PRIVX_API_ACCESS_KEY", "env-access")

    settings = Settings.load(config_file, access_key="flag-access", base_url="https://flag.example.com")

    assert settings.access_key == "flag-access"
    assert settings.base_url == "https://flag.example.com"


def test_empty_flags_do_not_override(config_file: Path) -> None:
    settings = Settings.load(config_file, access_key=None, secret_key="")

    assert settings.access_key == "file-access"
    assert settings.secret_key == "file-secret"


def test_user_config_file_is_read_when_present(tmp_path: Path) -> None:
    user_config = tmp_path / "xdg" / "privx-cli" / "config.toml"
    user_config.parent.mkdir(parents=True)
    user_config.write_text(CONFIG, encoding="utf-8")

    settings = Settings.load()

    assert settings.base_url == "https://file.example.com"


def test_explicit_missing_config_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="config file not found"):
        Settings.load(tmp_path / "nope.toml")


def test_require_base_url() -> None:
    with pytest.raises(ConfigError, match="PrivX URL is not defined"):
        Settings.load().require_base_url()

    settings = Settings.load(base_url="https://privx.example.com/")
    assert settings.require_base_url() == "https://privx.example.com"


def test_config_flag_reaches_connector(privx, config_file: Path) -> None:
    privx.on("GET", "/db-proxy/api/v1/conf", json={})

    # Access and secret come from the file, the URL from the flag
    result = privx.invoke(["--config", str(config_file), "db-proxy", "config"], credentials=False)

    assert result.exit_code == 0
    form = privx.token_requests[0].content.decode()
    assert "username=file-access" in form


def test_config_file_from_environment(config_file: Path, monkeypatch) -> None:
    monkeypatch.setenv("PRIVX_API_CONFIG_FILE", str(config_file))

    settings = Settings.load()

    assert settings.config_file == config_file
    assert settings.base_url == "https://file.example.com"
    assert settings.access_key == "file-access"


def test_config_flag_overrides_config_file_environment(config_file: Path, tmp_path: Path, monkeypatch) -> None:
    other = tmp_path / "other.toml"
    other.write_text('[api]\nbase_url = "https://other.example.com"\n', encoding="utf-8")
    monkeypatch.setenv("PRIVX_API_CONFIG_FILE", str(other))

    settings = Settings.load(config_file)

    assert settings.config_file == config_file
    assert settings.base_url == "https://file.example.com"


def test_missing_config_file_from_environment_is_an_error(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PRIVX_API_CONFIG_FILE", str(tmp_path / "nope.toml"))

    with pytest.raises(ConfigError, match="config file not found"):
        Settings.load()
