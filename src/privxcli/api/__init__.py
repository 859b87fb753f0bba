"""PrivX service APIs.

One class per PrivX microservice. Every class wraps the invocation's
:class:`~privxcli.client.PrivXClient`, exposes one method per REST
operation and returns decoded JSON.
"""

from typing import Any, Optional

from privxcli.client import PrivXClient


def items(result: Any) -> list:
    """Unwrap a ``{"count": n, "items": [...]}`` collection."""
    if isinstance(result, dict):
        return result.get("items") or []
    return result or []


def created_id(result: Any) -> Any:
    """Identifier of a newly created object."""
    if isinstance(result, dict) and "id" in result:
        return result["id"]
    return result


def session_id(result: Any) -> str:
    """Download handle returned by the ``.../sessions`` style endpoints."""
    if isinstance(result, dict):
        value = result.get("session_id") or result.get("id")
        if value:
            return value
    raise ValueError("download handle missing from response")


class Service:
    """Base class binding a service URL prefix to a connector."""

    prefix = ""

    def __init__(self, client: PrivXClient):
        self.client = client

    def _url(self, path: str) -> str:
        return f"{self.prefix}/{path}" if path else self.prefix

    def _get(self, path: str, params: Optional[dict] = None) -> Any:
        return self.client.get(self._url(path), params=params)

    def _post(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.client.post(self._url(path), json=json, params=params)

    def _put(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.client.put(self._url(path), json=json, params=params)

    def _delete(self, path: str, params: Optional[dict] = None) -> Any:
        return self.client.delete(self._url(path), params=params)

    def _download(self, path: str, filename: str, params: Optional[dict] = None) -> None:
        self.client.download(self._url(path), filename, params=params)
