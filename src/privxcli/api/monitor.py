"""Monitor service API: components, instance and audit events."""

from typing import Optional

from privxcli.api import Service, items


class Monitor(Service):
    """PrivX monitor service (/monitor-service)."""

    prefix = "/monitor-service/api/v1"

    def components(self) -> list:
        return items(self._get("components"))

    def component(self, name: str) -> dict:
        return self._get(f"components/{name}")

    def instance_status(self) -> dict:
        return self._get("instance/status")

    def terminate_instances(self) -> None:
        """Shut down every PrivX instance."""
        self._post("instance/terminate")

    def audit_events(
        self, offset: int, limit: int, sortkey: str = "", sortdir: str = "", fuzzy_count: bool = False
    ) -> list:
        result = self._get(
            "auditevents",
            params={
                "offset": offset,
                "limit": limit,
                "sortkey": sortkey,
                "sortdir": sortdir,
                "fuzzycount": "true" if fuzzy_count else None,
            },
        )
        return items(result)

    def search_audit_events(
        self,
        offset: int,
        limit: int,
        sortkey: str,
        sortdir: str,
        fuzzy_count: bool = False,
        search: Optional[dict] = None,
    ) -> list:
        result = self._post(
            "auditevents/search",
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

    def audit_event_codes(self) -> dict:
        return self._get("auditevents/codes")
