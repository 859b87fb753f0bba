"""Authorizer API: certificates, trust anchors, access groups and principals."""

from typing import Any, Optional

from privxcli.api import Service, created_id, items, session_id


class Authorizer(Service):
    """PrivX authorizer (/authorizer).

    Downloads go through a two step handshake: a POST returns a
    ``session_id`` and a GET on ``<path>/<session_id>`` streams the file.
    """

    prefix = "/authorizer/api/v1"

    def _download_session(self, path: str, filename: str) -> None:
        handle = session_id(self._post(f"{path}/sessions"))
        self._download(f"{path}/{handle}", filename)

    # ─────────────────────────────────────────────────────────────────────────
    # Authorizer CAs
    # ─────────────────────────────────────────────────────────────────────────

    def ca_certificates(self, access_group_id: str = "") -> list:
        return items(self._get("cas", params={"access_group_id": access_group_id}))

    def download_ca_certificate(self, ca_id: str, filename: str) -> None:
        self._download(f"cas/{ca_id}", filename)

    def download_crl(self, ca_id: str, filename: str) -> None:
        self._download(f"cas/{ca_id}/crl", filename)

    def target_host_credentials(self, request: Any) -> dict:
        """Issue a certificate for accessing a target host."""
        return self._post("ca/authorize", json=request)

    def ssl_trust_anchor(self) -> dict:
        return self._get("ssl-trust-anchor")

    def extender_trust_anchor(self) -> dict:
        return self._get("extender-trust-anchor")

    # ─────────────────────────────────────────────────────────────────────────
    # Certificates
    # ─────────────────────────────────────────────────────────────────────────

    def search_certificates(
        self, offset: int, limit: int, sortkey: str, sortdir: str, search: Optional[dict] = None
    ) -> list:
        result = self._post(
            "cert/search",
            json=search or {},
            params={"offset": offset, "limit": limit, "sortkey": sortkey, "sortdir": sortdir},
        )
        return items(result)

    def certificates(self) -> list:
        return items(self._get("cert"))

    def certificate(self, cert_id: str) -> dict:
        return self._get(f"cert/{cert_id}")

    # ─────────────────────────────────────────────────────────────────────────
    # Trusted client CAs and configuration downloads
    # ─────────────────────────────────────────────────────────────────────────

    def extender_ca_certificates(self, access_group_id: str = "") -> list:
        return items(self._get("extender/cas", params={"access_group_id": access_group_id}))

    def extender_ca_certificate(self, ca_id: str) -> dict:
        return self._get(f"extender/cas/{ca_id}")

    def download_extender_crl(self, ca_id: str, filename: str) -> None:
        self._download(f"extender/cas/{ca_id}/crl", filename)

    def webproxy_ca_certificates(self, access_group_id: str = "") -> list:
        return items(self._get("icap/cas", params={"access_group_id": access_group_id}))

    def webproxy_ca_certificate(self, ca_id: str) -> dict:
        return self._get(f"icap/cas/{ca_id}")

    def download_webproxy_crl(self, ca_id: str, filename: str) -> None:
        self._download(f"icap/cas/{ca_id}/crl", filename)

    def download_extender_config(self, trusted_client_id: str, filename: str) -> None:
        self._download_session(f"extender/conf/{trusted_client_id}", filename)

    def download_webproxy_config(self, trusted_client_id: str, filename: str) -> None:
        self._download_session(f"icap/conf/{trusted_client_id}", filename)

    def download_carrier_config(self, trusted_client_id: str, filename: str) -> None:
        self._download_session(f"carrier/conf/{trusted_client_id}", filename)

    def download_deploy_script(self, trusted_client_id: str, filename: str) -> None:
        self._download_session(f"deploy/{trusted_client_id}", filename)

    def download_principal_command_script(self, filename: str) -> None:
        self._download("deploy/principals_command.sh", filename)

    def deploy_script(self, trusted_client_id: str) -> bytes:
        """Host deployment script of a trusted client, as raw bytes."""
        path = f"deploy/{trusted_client_id}"
        handle = session_id(self._post(f"{path}/sessions"))
        return self.client.fetch(self._url(f"{path}/{handle}"))

    # ─────────────────────────────────────────────────────────────────────────
    # Access groups
    # ─────────────────────────────────────────────────────────────────────────

    def access_groups(self, offset: int, limit: int, sortkey: str = "", sortdir: str = "") -> list:
        result = self._get(
            "accessgroups",
            params={"offset": offset, "limit": limit, "sortkey": sortkey, "sortdir": sortdir},
        )
        return items(result)

    def search_access_groups(
        self, offset: int, limit: int, sortkey: str, sortdir: str, search: Optional[dict] = None
    ) -> list:
        result = self._post(
            "accessgroups/search",
            json=search or {},
            params={"offset": offset, "limit": limit, "sortkey": sortkey, "sortdir": sortdir},
        )
        return items(result)

    def access_group(self, group_id: str) -> dict:
        return self._get(f"accessgroups/{group_id}")

    def create_access_group(self, group: Any) -> str:
        return created_id(self._post("accessgroups", json=group))

    def update_access_group(self, group_id: str, group: Any) -> None:
        self._put(f"accessgroups/{group_id}", json=group)

    def renew_access_group_ca(self, group_id: str) -> str:
        """Create a new CA key for the group and return its ID."""
        return created_id(self._post(f"accessgroups/{group_id}/cas"))

    def revoke_access_group_ca(self, group_id: str, ca_id: str) -> None:
        self._delete(f"accessgroups/{group_id}/cas/{ca_id}")

    # ─────────────────────────────────────────────────────────────────────────
    # Principals
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _principal_path(group_id: str, key_id: str = "") -> str:
        return f"principals/{group_id}/{key_id}" if key_id else f"principals/{group_id}"

    def principals(self) -> list:
        return items(self._get("principals"))

    def principal(self, group_id: str, key_id: str = "", filter_: str = "") -> Any:
        return self._get(self._principal_path(group_id, key_id), params={"filter": filter_})

    def delete_principal_key(self, group_id: str, key_id: str = "") -> None:
        self._delete(self._principal_path(group_id, key_id))

    def create_principal_key(self, group_id: str) -> dict:
        return self._post(f"principals/{group_id}/create")

    def import_principal_key(self, group_id: str, request: Any) -> dict:
        return self._post(f"principals/{group_id}/import", json=request)

    def sign_principal_key(self, group_id: str, key_id: str, credential: Any) -> dict:
        return self._post(f"{self._principal_path(group_id, key_id)}/sign", json=credential)
