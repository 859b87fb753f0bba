"""Connection manager API: connections, trails and UEBA."""

from typing import Any, Optional

from privxcli.api import Service, created_id, items, session_id


class ConnectionManager(Service):
    """PrivX connection manager (/connection-manager)."""

    prefix = "/connection-manager/api/v1"

    # ─────────────────────────────────────────────────────────────────────────
    # Connections
    # ─────────────────────────────────────────────────────────────────────────

    def connections(
        self, offset: int, limit: int, sortkey: str = "", sortdir: str = "", fuzzy_count: bool = False
    ) -> list:
        result = self._get(
            "connections",
            params={
                "offset": offset,
                "limit": limit,
                "sortkey": sortkey,
                "sortdir": sortdir,
                "fuzzycount": "true" if fuzzy_count else None,
            },
        )
        return items(result)

    def search_connections(
        self,
        offset: int,
        limit: int,
        sortkey: str,
        sortdir: str,
        fuzzy_count: bool = False,
        search: Optional[dict] = None,
    ) -> list:
        result = self._post(
            "connections/search",
            json=search or {},
            params={
                "offset": offset,
                "limit": limit,
                "sortkey": sortkey,
                "sortdir": sortdir,
                "fuzzycount": "true" if fuzzy_count else None,
            },
        )
        return items(result)

    def connection(self, conn_id: str) -> dict:
        return self._get(f"connections/{conn_id}")

    def download_file(self, conn_id: str, channel_id: str, file_id: str, filename: str) -> None:
        """Download a file transferred during a connection."""
        path = f"connections/{conn_id}/channel/{channel_id}/file/{file_id}"
        handle = session_id(self._post(path))
        self._download(f"{path}/{handle}", filename)

    def download_trail_log(
        self, conn_id: str, channel_id: str, filename: str, format_: str = "", filter_: str = ""
    ) -> None:
        """Download the trail log of a connection channel."""
        path = f"connections/{conn_id}/channel/{channel_id}/log"
        handle = session_id(self._post(path))
        self._download(f"{path}/{handle}", filename, params={"format": format_, "filter": filter_})

    def access_roles(self, conn_id: str) -> list:
        return items(self._get(f"connections/{conn_id}/access_roles"))

    def grant_access_role(self, conn_id: str, role_id: str) -> None:
        self._post(f"connections/{conn_id}/access_roles/{role_id}")

    def revoke_access_role(self, conn_id: str, role_id: str) -> None:
        self._delete(f"connections/{conn_id}/access_roles/{role_id}")

    def revoke_access_role_from_all(self, role_id: str) -> None:
        """Remove a role from the access roles of every connection."""
        self._delete(f"access_roles/{role_id}")

    def terminate_connection(self, conn_id: str) -> None:
        self._post(f"terminate/connection/{conn_id}")

    def terminate_by_target_host(self, host_id: str) -> None:
        self._post(f"terminate/target-host/{host_id}")

    def terminate_by_user(self, user_id: str) -> None:
        self._post(f"terminate/user/{user_id}")

    # ─────────────────────────────────────────────────────────────────────────
    # UEBA
    # ─────────────────────────────────────────────────────────────────────────

    def ueba_configurations(self) -> dict:
        return self._get("ueba/configure")

    def set_ueba_configurations(self, config: Any) -> None:
        self._put("ueba/configure", json=config)

    def ueba_anomaly_settings(self) -> dict:
        return self._get("ueba/anomaly-settings")

    def create_ueba_anomaly_settings(self, settings: Any) -> None:
        self._post("ueba/anomaly-settings", json=settings)

    def start_analyzing(self, dataset_id: str) -> None:
        self._post(f"ueba/start-analyzing/{dataset_id}")

    def stop_analyzing(self) -> None:
        self._post("ueba/stop-analyzing")

    def download_ueba_script(self, filename: str) -> None:
        """Download the UEBA setup script."""
        handle = session_id(self._post("ueba/setup-script"))
        self._download(f"ueba/setup-script/{handle}", filename)

    def ueba_datasets(self, logs: bool = False, bin_count: int = 0) -> list:
        result = self._get(
            "ueba/datasets",
            params={"logs": "true" if logs else None, "bin_count": bin_count or None},
        )
        return items(result)

    def ueba_dataset(self, dataset_id: str, logs: bool = False, bin_count: int = 0) -> dict:
        return self._get(
            f"ueba/datasets/{dataset_id}",
            params={"logs": "true" if logs else None, "bin_count": bin_count or None},
        )

    def create_ueba_dataset(self, dataset: Any) -> str:
        return created_id(self._post("ueba/datasets", json=dataset))

    def update_ueba_dataset(self, dataset_id: str, dataset: Any) -> None:
        self._put(f"ueba/datasets/{dataset_id}", json=dataset)

    def delete_ueba_dataset(self, dataset_id: str) -> None:
        self._delete(f"ueba/datasets/{dataset_id}")

    def train_ueba_dataset(self, dataset_id: str, set_active: bool = False) -> Any:
        params = {"set_active_after_training": "true"} if set_active else None
        return self._post(f"ueba/train/{dataset_id}", params=params)

    def ueba_connection_counts(self, time_range: Optional[dict] = None) -> dict:
        return self._post("ueba/query-connection-count", json=time_range or {})

    def ueba_status(self) -> dict:
        return self._get("ueba/status")

    def ueba_internal_status(self) -> dict:
        return self._get("ueba/status/internal")
