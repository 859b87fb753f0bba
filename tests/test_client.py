import httpx
import pytest

from privxcli.client import TOKEN_PATH, PrivXClient, PrivXError, _error_message
from privxcli.config import Settings

BASE_URL = "https://privx.example.com"


def make_client(handler, **settings) -> PrivXClient:
    values = {"base_url": BASE_URL, "bearer": "preset-token", **settings}
    return PrivXClient(Settings.load(**values), transport=httpx.MockTransport(handler))


def test_bearer_setting_skips_token_request() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    client = make_client(handler)

    assert client.get("/monitor-service/api/v1/instance/status") == {"ok": True}
    assert [r.url.path for r in seen] == ["/monitor-service/api/v1/instance/status"]
    assert seen[0].headers["Authorization"] == "Bearer preset-token"


def test_empty_and_none_params_are_dropped() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    make_client(handler).get("/x", params={"offset": 0, "sortkey": "", "filter": None})

    assert dict(seen[0].url.params) == {"offset": "0"}


def test_no_content_decodes_to_none() -> None:
    client = make_client(lambda request: httpx.Response(204))

    assert client.delete("/x") is None


def test_http_error_maps_to_privx_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error_code": "FORBIDDEN", "error_message": "not allowed"})

    with pytest.raises(PrivXError) as exc_info:
        make_client(handler).get("/x")

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "FORBIDDEN: not allowed"


def test_error_message_falls_back_to_status() -> None:
    response = httpx.Response(502, content=b"<html>bad gateway</html>")

    assert _error_message(response) == "HTTP 502 Bad Gateway"


def test_failed_token_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": "invalid_grant"})

    client = make_client(handler, bearer=None, access_key="a", secret_key="b")

    with pytest.raises(PrivXError, match="authentication failed: invalid_grant"):
        client.get("/x")


def test_transport_error_maps_to_privx_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(PrivXError, match="connection failed"):
        make_client(handler).get("/x")


def test_download_streams_to_file(tmp_path) -> None:
    client = make_client(lambda request: httpx.Response(200, content=b"-----BEGIN X509 CRL-----"))
    target = tmp_path / "crl.pem"

    client.download("/authorizer/api/v1/cas/ca1/crl", target)

    assert target.read_bytes() == b"-----BEGIN X509 CRL-----"


def test_download_error_leaves_no_file(tmp_path) -> None:
    client = make_client(lambda request: httpx.Response(404, json={"error_message": "missing"}))
    target = tmp_path / "crl.pem"

    with pytest.raises(PrivXError, match="missing"):
        client.download("/authorizer/api/v1/cas/ca1/crl", target)

    assert not target.exists()


def test_base_url_path_prefix_is_kept_for_token_and_requests() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        if request.url.path.endswith(TOKEN_PATH):
            return httpx.Response(200, json={"access_token": "prefixed-token"})
        return httpx.Response(200, json={})

    client = make_client(
        handler,
        base_url=f"{BASE_URL}/gateway/",
        bearer=None,
        access_key="access-key",
        secret_key="secret-key",
    )
    client.get("/db-proxy/api/v1/conf")

    assert seen == ["/gateway" + TOKEN_PATH, "/gateway/db-proxy/api/v1/conf"]
