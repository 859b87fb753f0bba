"""Vault API: shared secrets and per-user secrets."""

from typing import Any

from privxcli.api import Service, items


def _refs(role_ids: list[str]) -> list[dict]:
    return [{"id": role_id} for role_id in role_ids]


class Vault(Service):
    """PrivX vault (/vault)."""

    prefix = "/vault/api/v1"

    # ─────────────────────────────────────────────────────────────────────────
    # Secrets
    # ─────────────────────────────────────────────────────────────────────────

    def secrets(self, offset: int, limit: int) -> list:
        return items(self._get("secrets", params={"offset": offset, "limit": limit}))

    def secret(self, name: str) -> dict:
        return self._get(f"secrets/{name}")

    def create_secret(self, name: str, read: list[str], write: list[str], data: Any) -> Any:
        """Create a secret readable and writable by the given role IDs."""
        body = {
            "name": name,
            "data": data,
            "allow_read": _refs(read),
            "allow_write": _refs(write),
        }
        return self._post("secrets", json=body)

    def update_secret(self, name: str, read: list[str], write: list[str], data: Any) -> None:
        """Replace the data and access lists of a secret."""
        body = {"data": data, "allow_read": _refs(read), "allow_write": _refs(write)}
        self._put(f"secrets/{name}", json=body)

    def delete_secret(self, name: str) -> None:
        self._delete(f"secrets/{name}")

    def secret_metadata(self, name: str) -> dict:
        return self._get(f"metadata/secrets/{name}")

    def search_secrets(
        self, offset: int, limit: int, sortkey: str, sortdir: str, search: dict
    ) -> list:
        result = self._post(
            "search/secrets",
            json=search,
            params={"offset": offset, "limit": limit, "sortkey": sortkey, "sortdir": sortdir},
        )
        return items(result)

    def schemas(self) -> Any:
        """JSON schemas of the vault objects."""
        return self._get("schemas")

    # ─────────────────────────────────────────────────────────────────────────
    # User secrets
    # ─────────────────────────────────────────────────────────────────────────

    def user_secrets(self, owner_id: str, offset: int, limit: int) -> list:
        result = self._get(
            f"user/{owner_id}/secrets",
            params={"offset": offset, "limit": limit},
        )
        return items(result)

    def user_secret(self, owner_id: str, name: str) -> dict:
        return self._get(f"user/{owner_id}/secrets/{name}")

    def create_user_secret(
        self, owner_id: str, name: str, read: list[str], write: list[str], data: Any
    ) -> Any:
        body = {
            "name": name,
            "data": data,
            "allow_read": _refs(read),
            "allow_write": _refs(write),
        }
        return self._post(f"user/{owner_id}/secrets", json=body)

    def update_user_secret(
        self, owner_id: str, name: str, read: list[str], write: list[str], data: Any
    ) -> None:
        body = {"data": data, "allow_read": _refs(read), "allow_write": _refs(write)}
        self._put(f"user/{owner_id}/secrets/{name}", json=body)

    def user_secret_metadata(self, owner_id: str, name: str) -> dict:
        return self._get(f"user/{owner_id}/metadata/secrets/{name}")

    def delete_user_secret(self, owner_id: str, name: str) -> None:
        self._delete(f"user/{owner_id}/secrets/{name}")
