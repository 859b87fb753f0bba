import json
from typing import Any, Optional

import httpx
import pytest
from typer.testing import CliRunner

from privxcli.cli import app
from privxcli.client import TOKEN_PATH, GlobalOptions

BASE_URL = "https://privx.example.com"

runner = CliRunner()


class FakePrivX:
    """In-memory PrivX backend routed by (method, path)."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.calls: list[httpx.Request] = []
        self.token_requests: list[httpx.Request] = []

    def on(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
    ) -> None:
        if content is not None:
            response = httpx.Response(status, content=content)
        else:
            response = httpx.Response(status, json=json)
        self.routes[(method, path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == TOKEN_PATH:
            self.token_requests.append(request)
            return httpx.Response(200, json={"access_token": "test-token"})

        self.calls.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"error_message": f"no route for {request.url.path}"})
        return httpx.Response(
            response.status_code,
            content=response.content,
            headers=response.headers,
        )

    @property
    def paths(self) -> list[tuple[str, str]]:
        return [(request.method, request.url.path) for request in self.calls]

    def body(self, index: int) -> Any:
        return json.loads(self.calls[index].content)

    def invoke(self, args: list[str], credentials: bool = True):
        prefix = ["--url", BASE_URL]
        if credentials:
            prefix += ["--access", "access-key", "--secret", "secret-key"]
        options = GlobalOptions(transport=httpx.MockTransport(self.handler))
        return runner.invoke(app, [*prefix, *args], obj=options)


@pytest.fixture(autouse=True)
def clean_environment(tmp_path, monkeypatch):
    """Keep the developer's environment and config file out of the tests."""
    for name in (
        "BASE_URL",
        "BASE_CERTIFICATE",
        "ACCESS_KEY",
        "SECRET_KEY",
        "CLIENT_ID",
        "CLIENT_SECRET",
        "BEARER",
        "VERIFY",
        "TIMEOUT",
        "CONFIG_FILE",
    ):
        monkeypatch.delenv(f"PRIVX_API_{name}", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    # Usage error panels wrap at the terminal width
    monkeypatch.setenv("COLUMNS", "200")


@pytest.fixture
def privx() -> FakePrivX:
    return FakePrivX()


@pytest.fixture
def json_file(tmp_path):
    """Write a JSON document to a file and return its path as a string."""

    def write(document: Any, name: str = "body.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)

    return write
