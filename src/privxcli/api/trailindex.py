"""Trail index API."""

from typing import Optional

from privxcli.api import Service, items


class TrailIndex(Service):
    """PrivX trail index (/trail-index)."""

    prefix = "/trail-index/api/v1"

    def indexing_status(self, conn_ids: list[str]) -> list:
        """Indexing status of several connections in one request."""
        return items(self._post("index/status", json=conn_ids))

    def start_indexing(self, conn_ids: list[str]) -> list:
        return items(self._post("index/start", json=conn_ids))

    def search_content(
        self, offset: int, limit: int, sortdir: str = "", search: Optional[dict] = None
    ) -> list:
        result = self._post(
            "search",
            json=search or {},
            params={"offset": offset, "limit": limit, "sortdir": sortdir},
        )
        return items(result)
