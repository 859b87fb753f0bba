"""Settings service API."""

from typing import Any

from privxcli.api import Service


class SettingsService(Service):
    """PrivX settings (/settings).

    Settings are grouped by scope (``GLOBAL`` or a service name, upper
    case) and by section within a scope (lower case).
    """

    prefix = "/settings/api/v1"

    def scope_settings(self, scope: str, merge: str = "") -> dict:
        return self._get(f"settings/{scope}", params={"merge": merge})

    def section_settings(self, scope: str, section: str) -> dict:
        return self._get(f"settings/{scope}/{section}")

    def update_scope_settings(self, scope: str, settings: Any) -> None:
        self._put(f"settings/{scope}", json=settings)

    def update_section_settings(self, scope: str, section: str, settings: Any) -> None:
        self._put(f"settings/{scope}/{section}", json=settings)

    def scope_schema(self, scope: str) -> dict:
        return self._get(f"schema/{scope}")

    def section_schema(self, scope: str, section: str) -> dict:
        return self._get(f"schema/{scope}/{section}")
