"""Host store API."""

from typing import Any, Optional

from privxcli.api import Service, created_id, items


class HostStore(Service):
    """PrivX host store (/host-store)."""

    prefix = "/host-store/api/v1"

    def hosts(
        self,
        offset: int,
        limit: int,
        sortkey: str = "",
        sortdir: str = "",
        filter_: str = "",
    ) -> list:
        """List hosts."""
        result = self._get(
            "hosts",
            params={
                "offset": offset,
                "limit": limit,
                "sortkey": sortkey,
                "sortdir": sortdir,
                "filter": filter_,
            },
        )
        return items(result)

    def search_hosts(
        self,
        sortkey: str,
        sortdir: str,
        filter_: str,
        offset: int,
        limit: int,
        search: Optional[dict] = None,
    ) -> list:
        """Search hosts with a search object body."""
        result = self._post(
            "hosts/search",
            json=search or {},
            params={
                "offset": offset,
                "limit": limit,
                "sortkey": sortkey,
                "sortdir": sortdir,
                "filter": filter_,
            },
        )
        return items(result)

    def host(self, host_id: str) -> dict:
        return self._get(f"hosts/{host_id}")

    def create_host(self, host: Any) -> str:
        return created_id(self._post("hosts", json=host))

    def update_host(self, host_id: str, host: Any) -> None:
        self._put(f"hosts/{host_id}", json=host)

    def delete_host(self, host_id: str) -> None:
        self._delete(f"hosts/{host_id}")

    def resolve_host(self, service: Any) -> dict:
        """Resolve a service and address to a single host."""
        return self._post("hosts/resolve", json=service)

    def update_deploy_status(self, host_id: str, deployable: bool) -> None:
        self._put(f"hosts/{host_id}/deployable", json={"deployable": deployable})

    def update_disabled_status(self, host_id: str, disabled: bool) -> None:
        self._put(f"hosts/{host_id}/disabled", json={"disabled": disabled})

    def service_options(self) -> dict:
        """Default service options."""
        return self._get("settings/default_service_options")

    def host_tags(self, offset: int, limit: int, sortdir: str = "", query: str = "") -> list:
        result = self._get(
            "hosts/tags",
            params={"offset": offset, "limit": limit, "sortdir": sortdir, "query": query},
        )
        return items(result)
