"""Network access manager API."""

from typing import Any

from privxcli.api import Service, created_id, items


class NetworkAccessManager(Service):
    """PrivX network access manager (/network-access-manager)."""

    prefix = "/network-access-manager/api/v1"

    def status(self) -> dict:
        return self._get("status")

    def network_targets(
        self,
        offset: int,
        limit: int,
        sortkey: str = "",
        sortdir: str = "",
        name: str = "",
        target_id: str = "",
    ) -> list:
        result = self._get(
            "nwtargets",
            params={
                "offset": offset,
                "limit": limit,
                "sortkey": sortkey,
                "sortdir": sortdir,
                "name": name,
                "id": target_id,
            },
        )
        return items(result)

    def search_network_targets(
        self,
        offset: int,
        limit: int,
        sortkey: str,
        sortdir: str,
        filter_: str = "",
        keywords: str = "",
    ) -> list:
        result = self._post(
            "nwtargets/search",
            json={"keywords": keywords},
            params={
                "offset": offset,
                "limit": limit,
                "sortkey": sortkey,
                "sortdir": sortdir,
                "filter": filter_,
            },
        )
        return items(result)

    def network_target(self, target_id: str) -> dict:
        return self._get(f"nwtargets/{target_id}")

    def create_network_target(self, target: Any) -> str:
        return created_id(self._post("nwtargets", json=target))

    def update_network_target(self, target_id: str, target: Any) -> None:
        self._put(f"nwtargets/{target_id}", json=target)

    def delete_network_target(self, target_id: str) -> None:
        self._delete(f"nwtargets/{target_id}")

    def disable_network_target(self, target_id: str, disabled: bool) -> None:
        self._put(f"nwtargets/{target_id}/disabled", json={"disabled": disabled})
