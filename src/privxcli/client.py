"""PrivX REST API connector."""

import base64
import logging
import ssl
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generator, Optional, Union

import click
import httpx

from privxcli.config import Settings

logger = logging.getLogger("privxcli")

TOKEN_PATH = "/auth/api/v1/oauth/token"


class PrivXError(Exception):
    """PrivX API error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


def _error_message(response: httpx.Response) -> str:
    """Pick a human readable message out of an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        detail = body.get("error_message") or body.get("error_description") or body.get("error")
        code = body.get("error_code")
        if detail and code:
            return f"{code}: {detail}"
        if detail or code:
            return str(detail or code)

    return f"HTTP {response.status_code} {response.reason_phrase}".strip()


class OAuthAuthorizer(httpx.Auth):
    """Attach a PrivX OAuth bearer token to every request.

    The token is requested lazily with the resource owner password grant on
    the first call and kept for the lifetime of this object only.
    """

    requires_response_body = True

    def __init__(self, settings: Settings):
        self.settings = settings
        self._token: Optional[str] = settings.bearer

    def build_token_request(self) -> httpx.Request:
        """Token request for the configured credentials.

        The token path is appended to the base URL, keeping any path prefix.
        """
        access = self.settings.access_key
        secret = self.settings.secret_key
        if not access or not secret:
            raise PrivXError(
                "access and secret keys are not defined. "
                "Use --access/--secret, PRIVX_API_ACCESS_KEY/PRIVX_API_SECRET_KEY or the config file"
            )

        basic = f"{self.settings.client_id}:{self.settings.client_secret}".encode()
        return httpx.Request(
            "POST",
            self.settings.require_base_url() + TOKEN_PATH,
            data={
                "grant_type": "password",
                "username": access,
                "password": secret,
            },
            headers={
                "Authorization": "Basic " + base64.b64encode(basic).decode(),
                "Accept": "application/json",
            },
        )

    def accept_token_response(self, response: httpx.Response) -> str:
        """Store and return the access token of a token response."""
        if response.status_code >= 400:
            raise PrivXError(
                f"authentication failed: {_error_message(response)}",
                response.status_code,
            )

        token = response.json().get("access_token")
        if not token:
            raise PrivXError("authentication failed: no access token in response")

        self._token = token
        return token

    def access_token(self, client: httpx.Client) -> str:
        """Return the access token, requesting it if needed."""
        if self._token is None:
            try:
                response = client.send(self.build_token_request(), auth=None)
            except httpx.RequestError as e:
                raise PrivXError(f"connection failed: {e}") from e
            self.accept_token_response(response)

        token = self._token
        assert token is not None
        return token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if self._token is None:
            response = yield self.build_token_request()
            self.accept_token_response(response)

        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def _log_request(request: httpx.Request) -> None:
    logger.debug("%s %s", request.method, request.url)


def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.debug("%s %s -> %s", request.method, request.url, response.status_code)


class PrivXClient:
    """Authorized HTTP connector to one PrivX instance."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings
        self.base_url = settings.require_base_url()
        self.authorizer = OAuthAuthorizer(settings)
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """HTTP client (lazy initialization)."""
        if self._client is None:
            verify: Union[bool, ssl.SSLContext] = self.settings.verify
            if self.settings.verify and self.settings.base_certificate:
                verify = ssl.create_default_context(cafile=str(self.settings.base_certificate))

            self._client = httpx.Client(
                base_url=self.base_url,
                auth=self.authorizer,
                headers={"Accept": "application/json"},
                verify=verify,
                timeout=self.settings.timeout,
                transport=self._transport,
                event_hooks={"request": [_log_request], "response": [_log_response]},
            )

        client = self._client
        assert client is not None
        return client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def access_token(self) -> str:
        """Return an access token for the configured credentials."""
        return self.authorizer.access_token(self.client)

    # ─────────────────────────────────────────────────────────────────────────
    # Requests
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _params(params: Optional[dict]) -> Optional[dict]:
        if not params:
            return None
        return {key: value for key, value in params.items() if value is not None and value != ""}

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json: Any = None,
    ) -> Any:
        """Execute an API request and decode its JSON body."""
        try:
            response = self.client.request(
                method=method,
                url=path,
                params=self._params(params),
                json=json,
            )
        except httpx.RequestError as e:
            raise PrivXError(f"connection failed: {e}") from e

        if response.status_code >= 400:
            raise PrivXError(_error_message(response), response.status_code)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError:
            return response.text

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("POST", path, params=params, json=json)

    def put(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("PUT", path, params=params, json=json)

    def delete(self, path: str, params: Optional[dict] = None) -> Any:
        return self.request("DELETE", path, params=params)

    def fetch(self, path: str, params: Optional[dict] = None) -> bytes:
        """GET a raw (non JSON) payload."""
        try:
            response = self.client.get(path, params=self._params(params))
        except httpx.RequestError as e:
            raise PrivXError(f"connection failed: {e}") from e

        if response.status_code >= 400:
            raise PrivXError(_error_message(response), response.status_code)
        return response.content

    def download(self, path: str, filename: Union[str, Path], params: Optional[dict] = None) -> None:
        """Stream a GET response body into ``filename``."""
        try:
            with self.client.stream("GET", path, params=self._params(params)) as response:
                if response.status_code >= 400:
                    response.read()
                    raise PrivXError(_error_message(response), response.status_code)

                with open(filename, "wb") as f:
                    for chunk in response.iter_bytes():
                        f.write(chunk)
        except httpx.RequestError as e:
            raise PrivXError(f"connection failed: {e}") from e

        logger.debug("saved %s", filename)


# ─────────────────────────────────────────────────────────────────────────────
# Invocation state
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class GlobalOptions:
    """Root command flags, shared with every subcommand of one invocation."""

    config: Optional[Path] = None
    url: Optional[str] = None
    access: Optional[str] = None
    secret: Optional[str] = None
    transport: Optional[httpx.BaseTransport] = None
    client: Optional[PrivXClient] = None


def connect() -> PrivXClient:
    """Return the connector of the running invocation, building it once."""
    ctx = click.get_current_context()
    options = ctx.find_object(GlobalOptions)
    if options is None:
        options = ctx.find_root().ensure_object(GlobalOptions)

    if options.client is None:
        settings = Settings.load(
            options.config,
            base_url=options.url,
            access_key=options.access,
            secret_key=options.secret,
        )
        options.client = PrivXClient(settings, transport=options.transport)
    return options.client
