"""Local user store API: local users, trusted clients and API clients."""

from typing import Any

from privxcli.api import Service, created_id, items

# Trusted client types as reported by the local user store
EXTENDER = "EXTENDER"
WEBPROXY = "ICAP"
CARRIER = "CARRIER"
HOST_PROVISIONING = "HOST_PROVISIONING"


def host_provisioning(name: str) -> dict:
    """Trusted client definition used for host deployment."""
    return {"type": HOST_PROVISIONING, "name": name}


class UserStore(Service):
    """PrivX local user store (/local-user-store)."""

    prefix = "/local-user-store/api/v1"

    # ─────────────────────────────────────────────────────────────────────────
    # Local users
    # ─────────────────────────────────────────────────────────────────────────

    def local_users(self, offset: int, limit: int, user_id: str = "", username: str = "") -> list:
        """List local users, optionally filtered by ID or username."""
        result = self._get(
            "users",
            params={"offset": offset, "limit": limit, "id": user_id, "username": username},
        )
        return items(result)

    def local_user(self, user_id: str) -> dict:
        return self._get(f"users/{user_id}")

    def create_local_user(self, user: Any) -> str:
        return created_id(self._post("users", json=user))

    def update_local_user(self, user_id: str, user: Any) -> None:
        self._put(f"users/{user_id}", json=user)

    def delete_local_user(self, user_id: str) -> None:
        self._delete(f"users/{user_id}")

    def update_local_user_password(self, user_id: str, password: str) -> None:
        self._put(f"users/{user_id}/password", json={"password": password})

    def local_user_tags(self, offset: int, limit: int, sortdir: str = "", query: str = "") -> list:
        result = self._get(
            "users/tags",
            params={"offset": offset, "limit": limit, "sortdir": sortdir, "query": query},
        )
        return items(result)

    # ─────────────────────────────────────────────────────────────────────────
    # Trusted clients
    # ─────────────────────────────────────────────────────────────────────────

    def trusted_clients(self) -> list:
        return items(self._get("trusted-clients"))

    def trusted_client(self, client_id: str) -> dict:
        return self._get(f"trusted-clients/{client_id}")

    def create_trusted_client(self, client: Any) -> str:
        return created_id(self._post("trusted-clients", json=client))

    def update_trusted_client(self, client_id: str, client: Any) -> None:
        self._put(f"trusted-clients/{client_id}", json=client)

    def delete_trusted_client(self, client_id: str) -> None:
        self._delete(f"trusted-clients/{client_id}")

    # ─────────────────────────────────────────────────────────────────────────
    # API clients
    # ─────────────────────────────────────────────────────────────────────────

    def api_clients(self) -> list:
        return items(self._get("api-clients"))

    def api_client(self, client_id: str) -> dict:
        return self._get(f"api-clients/{client_id}")

    def create_api_client(self, name: str, roles: list[str]) -> str:
        """Create an API client holding the given role IDs."""
        body = {"name": name, "roles": [{"id": role} for role in roles]}
        return created_id(self._post("api-clients", json=body))

    def update_api_client(self, client_id: str, client: Any) -> None:
        self._put(f"api-clients/{client_id}", json=client)

    def delete_api_client(self, client_id: str) -> None:
        self._delete(f"api-clients/{client_id}")
