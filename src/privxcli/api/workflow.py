"""Workflow engine API: workflows and access requests."""

from typing import Any, Optional

from privxcli.api import Service, created_id, items


class WorkflowEngine(Service):
    """PrivX workflow engine (/workflow-engine)."""

    prefix = "/workflow-engine/api/v1"

    def workflows(self, offset: int, limit: int) -> list:
        return items(self._get("workflows", params={"offset": offset, "limit": limit}))

    def workflow(self, workflow_id: str) -> dict:
        return self._get(f"workflows/{workflow_id}")

    def create_workflow(self, workflow: Any) -> str:
        return created_id(self._post("workflows", json=workflow))

    def update_workflow(self, workflow_id: str, workflow: Any) -> None:
        self._put(f"workflows/{workflow_id}", json=workflow)

    def delete_workflow(self, workflow_id: str) -> None:
        self._delete(f"workflows/{workflow_id}")

    def settings(self) -> dict:
        return self._get("settings")

    def update_settings(self, settings: Any) -> None:
        self._put("settings", json=settings)

    def test_email_notification(self, smtp: Any) -> Any:
        """Send a test message through the given SMTP settings."""
        return self._post("testsmtp", json=smtp)

    # ─────────────────────────────────────────────────────────────────────────
    # Requests
    # ─────────────────────────────────────────────────────────────────────────

    def requests(self, offset: int, limit: int, filter_: str = "") -> list:
        result = self._get(
            "requests",
            params={"offset": offset, "limit": limit, "filter": filter_},
        )
        return items(result)

    def request(self, request_id: str) -> dict:
        return self._get(f"requests/{request_id}")

    def create_request(self, request: Any) -> str:
        return created_id(self._post("requests", json=request))

    def delete_request(self, request_id: str) -> None:
        self._delete(f"requests/{request_id}")

    def make_decision(self, request_id: str, decision: Any) -> None:
        self._post(f"requests/{request_id}/decision", json=decision)

    def search_requests(
        self,
        offset: int,
        limit: int,
        sortkey: str,
        sortdir: str,
        filter_: str = "",
        search: Optional[dict] = None,
    ) -> list:
        result = self._post(
            "requests/search",
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
