"""Auth service API: session storage, IdP clients and paired devices."""

from typing import Any, Optional

from privxcli.api import Service, created_id, items


class Auth(Service):
    """PrivX auth service (/auth)."""

    prefix = "/auth/api/v1"

    # ─────────────────────────────────────────────────────────────────────────
    # Sessions
    # ─────────────────────────────────────────────────────────────────────────

    def _sessions(self, path: str, offset: int, limit: int, sortkey: str, sortdir: str) -> list:
        result = self._get(
            path,
            params={"offset": offset, "limit": limit, "sortkey": sortkey, "sortdir": sortdir},
        )
        return items(result)

    def user_sessions(self, user_id: str, offset: int, limit: int, sortkey: str, sortdir: str) -> list:
        return self._sessions(f"sessionstorage/users/{user_id}/sessions", offset, limit, sortkey, sortdir)

    def source_sessions(
        self, source_id: str, offset: int, limit: int, sortkey: str, sortdir: str
    ) -> list:
        return self._sessions(
            f"sessionstorage/sources/{source_id}/sessions", offset, limit, sortkey, sortdir
        )

    def search_sessions(
        self, offset: int, limit: int, sortkey: str, sortdir: str, search: Optional[dict] = None
    ) -> list:
        result = self._post(
            "sessionstorage/sessions/search",
            json=search or {},
            params={"offset": offset, "limit": limit, "sortkey": sortkey, "sortdir": sortdir},
        )
        return items(result)

    def terminate_session(self, session_id: str) -> None:
        self._post(f"sessionstorage/sessions/{session_id}/terminate")

    def terminate_user_sessions(self, user_id: str) -> None:
        self._post(f"sessionstorage/users/{user_id}/sessions/terminate")

    # ─────────────────────────────────────────────────────────────────────────
    # IdP clients
    # ─────────────────────────────────────────────────────────────────────────

    def idp_client(self, client_id: str) -> dict:
        return self._get(f"idp/clients/{client_id}")

    def create_idp_client(self, client: Any) -> str:
        return created_id(self._post("idp/clients", json=client))

    def update_idp_client(self, client_id: str, client: Any) -> None:
        self._put(f"idp/clients/{client_id}", json=client)

    def delete_idp_client(self, client_id: str) -> None:
        self._delete(f"idp/clients/{client_id}")

    def regenerate_idp_client_config(self, client_id: str) -> dict:
        """Rotate the client credentials of an IdP client."""
        return self._post(f"idp/clients/{client_id}/regenerate")

    # ─────────────────────────────────────────────────────────────────────────
    # Paired mobile devices
    # ─────────────────────────────────────────────────────────────────────────

    def paired_devices(self, user_id: str) -> list:
        return items(self._get(f"users/{user_id}/mobilegw/devices"))

    def unpair_device(self, user_id: str, device_id: str) -> None:
        self._delete(f"users/{user_id}/mobilegw/devices/{device_id}")
