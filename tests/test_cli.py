import base64
from urllib.parse import parse_qs

import click
import typer
from typer.testing import CliRunner

from privxcli import __version__
from privxcli.cli import app
from privxcli.client import TOKEN_PATH

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_login_prints_access_token(privx) -> None:
    result = privx.invoke(["login"])

    assert result.exit_code == 0
    assert result.stdout == "test-token"

    request = privx.token_requests[0]
    assert request.method == "POST"
    assert request.url.path == TOKEN_PATH
    form = parse_qs(request.content.decode())
    assert form == {
        "grant_type": ["password"],
        "username": ["access-key"],
        "password": ["secret-key"],
    }
    expected = base64.b64encode(b"privx-external:").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"


def test_requests_carry_bearer_token(privx) -> None:
    privx.on("GET", "/role-store/api/v1/roles", json={"count": 0, "items": []})

    result = privx.invoke(["roles"])

    assert result.exit_code == 0
    assert result.stdout == "[]"
    assert len(privx.token_requests) == 1
    assert privx.calls[0].headers["Authorization"] == "Bearer test-token"


def test_token_fetched_once_per_invocation(privx) -> None:
    privx.on("GET", "/host-store/api/v1/hosts/h1", json={"id": "h1"})
    privx.on("GET", "/host-store/api/v1/hosts/h2", json={"id": "h2"})

    result = privx.invoke(["hosts", "show", "--id", "h1,h2"])

    assert result.exit_code == 0
    assert len(privx.token_requests) == 1


def test_missing_credentials_fail_before_any_request(privx) -> None:
    result = privx.invoke(["roles"], credentials=False)

    assert result.exit_code == 1
    assert "Access and secret keys are not defined" in result.stderr
    assert privx.token_requests == []
    assert privx.calls == []


def test_missing_url_is_reported() -> None:
    result = runner.invoke(app, ["-a", "access", "-s", "secret", "roles"])

    assert result.exit_code == 1
    assert "PrivX URL is not defined" in result.stderr


def test_api_error_is_capitalised_on_stderr(privx) -> None:
    privx.on("GET", "/role-store/api/v1/roles/r1", status=404, json={"error_message": "role not found"})

    result = privx.invoke(["roles", "show", "--id", "r1"])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Role not found" in result.stderr


def test_missing_required_flag_exits_1_without_requests(privx) -> None:
    result = privx.invoke(["hosts", "show"])

    assert result.exit_code == 1
    assert "--id" in result.stderr
    assert privx.calls == []
    assert privx.token_requests == []


def test_missing_json_file_is_reported(privx, tmp_path) -> None:
    result = privx.invoke(["roles", "create", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "No such file" in result.stderr
    assert privx.calls == []


def test_invalid_json_file_is_reported(privx, tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    result = privx.invoke(["roles", "create", str(path)])

    assert result.exit_code == 1
    assert privx.calls == []


def test_verbose_logs_requests_to_stderr(privx) -> None:
    privx.on("GET", "/db-proxy/api/v1/conf", json={"enabled": True})

    result = privx.invoke(["--verbose", "db-proxy", "config"])

    assert result.exit_code == 0
    assert result.stdout == '{"enabled": true}'
    assert "/db-proxy/api/v1/conf" in result.stderr


def test_typer_shares_the_click_context_and_errors() -> None:
    # connect() and PrivXGroup rely on typer running on the click package
    assert issubclass(typer.Context, click.Context)
    assert issubclass(typer.BadParameter, click.UsageError)


def test_bad_parameter_exits_1_and_connector_is_reachable(privx) -> None:
    privx.on("GET", "/host-store/api/v1/hosts", json={"items": []})

    assert privx.invoke(["hosts", "deployable", "--id", "h1"]).exit_code == 1
    result = privx.invoke(["hosts"])

    assert result.exit_code == 0
    assert result.stdout == "[]"
