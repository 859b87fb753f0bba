"""DB proxy API."""

from privxcli.api import Service


class DBProxy(Service):
    """PrivX database proxy (/db-proxy)."""

    prefix = "/db-proxy/api/v1"

    def config(self) -> dict:
        return self._get("conf")
