"""License manager API: license and mobile gateway registration."""

from privxcli.api import Service


class LicenseManager(Service):
    """PrivX license manager (/license-manager)."""

    prefix = "/license-manager/api/v1"

    def license(self) -> dict:
        return self._get("license")

    def set_license(self, key: str) -> None:
        self._post("license", json=key)

    def refresh_license(self) -> None:
        self._post("license/refresh")

    def set_license_statistics(self, optin: bool) -> None:
        """Opt in or out of sending license usage statistics."""
        self._post("license/optin", json={"optin": optin})

    def deactivate_license(self) -> None:
        self._post("license/deactivate")

    def register_mobile_gateway(self) -> None:
        self._post("license/mobilegw/register")

    def unregister_mobile_gateway(self) -> None:
        self._post("license/mobilegw/unregister")

    def mobile_gateway_registration(self) -> dict:
        return self._get("license/mobilegw/status")
