"""Role store API."""

from typing import Any

from privxcli.api import Service, created_id, items


class RoleStore(Service):
    """PrivX role store (/role-store).

    Besides roles the role store owns users, identity providers, user
    sources, AWS role links, principal keys, authorized keys and log
    collector configurations.
    """

    prefix = "/role-store/api/v1"

    # ─────────────────────────────────────────────────────────────────────────
    # Roles
    # ─────────────────────────────────────────────────────────────────────────

    def roles(self) -> list:
        return items(self._get("roles"))

    def role(self, role_id: str) -> dict:
        return self._get(f"roles/{role_id}")

    def create_role(self, role: Any) -> str:
        return created_id(self._post("roles", json=role))

    def update_role(self, role_id: str, role: Any) -> None:
        self._put(f"roles/{role_id}", json=role)

    def delete_role(self, role_id: str) -> None:
        self._delete(f"roles/{role_id}")

    def role_members(self, role_id: str) -> list:
        return items(self._get(f"roles/{role_id}/members"))

    def resolve_roles(self, names: list[str]) -> list:
        """Resolve role names to role references."""
        return items(self._post("roles/resolve", json=names))

    def aws_token(self, role_id: str, token_code: str = "", ttl: int = 0) -> dict:
        """Temporary AWS credentials for an AWS-linked role.

        Args:
            role_id: Role ID
            token_code: MFA token code, when the role requires one
            ttl: Credential lifetime in minutes
        """
        return self._get(
            f"roles/{role_id}/awstoken",
            params={"tokencode": token_code, "ttl": ttl or None},
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Users
    # ─────────────────────────────────────────────────────────────────────────

    def search_users(self, keywords: str = "", source: str = "") -> list:
        body = {"keywords": keywords, "source": source}
        return items(self._post("users/search", json=body))

    def user(self, user_id: str) -> dict:
        return self._get(f"users/{user_id}")

    def user_roles(self, user_id: str) -> list:
        return items(self._get(f"users/{user_id}/roles"))

    def grant_user_role(self, user_id: str, role_id: str) -> None:
        """Add an explicit role to the user's role set."""
        roles = self.user_roles(user_id)
        if any(role.get("id") == role_id for role in roles):
            return
        roles.append({"id": role_id, "explicit": True})
        self._put(f"users/{user_id}/roles", json=roles)

    def revoke_user_role(self, user_id: str, role_id: str) -> None:
        """Remove a role from the user's role set."""
        roles = self.user_roles(user_id)
        remaining = [role for role in roles if role.get("id") != role_id]
        if len(remaining) == len(roles):
            return
        self._put(f"users/{user_id}/roles", json=remaining)

    # ─────────────────────────────────────────────────────────────────────────
    # Identity providers
    # ─────────────────────────────────────────────────────────────────────────

    def identity_providers(self, offset: int, limit: int) -> list:
        result = self._get("identity-providers", params={"offset": offset, "limit": limit})
        return items(result)

    def identity_provider(self, provider_id: str) -> dict:
        return self._get(f"identity-providers/{provider_id}")

    def create_identity_provider(self, provider: Any) -> str:
        return created_id(self._post("identity-providers", json=provider))

    def update_identity_provider(self, provider_id: str, provider: Any) -> None:
        self._put(f"identity-providers/{provider_id}", json=provider)

    def delete_identity_provider(self, provider_id: str) -> None:
        self._delete(f"identity-providers/{provider_id}")

    def search_identity_providers(
        self, offset: int, limit: int, sortkey: str, sortdir: str, keywords: str = ""
    ) -> list:
        result = self._post(
            "identity-providers/search",
            json={"keywords": keywords},
            params={"offset": offset, "limit": limit, "sortkey": sortkey, "sortdir": sortdir},
        )
        return items(result)

    # ─────────────────────────────────────────────────────────────────────────
    # Sources
    # ─────────────────────────────────────────────────────────────────────────

    def sources(self) -> list:
        return items(self._get("sources"))

    def source(self, source_id: str) -> dict:
        return self._get(f"sources/{source_id}")

    def create_source(self, source: Any) -> str:
        return created_id(self._post("sources", json=source))

    def update_source(self, source_id: str, source: Any) -> None:
        self._put(f"sources/{source_id}", json=source)

    def delete_source(self, source_id: str) -> None:
        self._delete(f"sources/{source_id}")

    def refresh_sources(self, source_ids: list[str]) -> None:
        """Refresh all the given sources with one request."""
        self._post("sources/refresh", json=source_ids)

    # ─────────────────────────────────────────────────────────────────────────
    # AWS role links
    # ─────────────────────────────────────────────────────────────────────────

    def aws_role_links(self, refresh: bool = False) -> list:
        params = {"refresh": "true"} if refresh else None
        return items(self._get("awsroles", params=params))

    def aws_role_link(self, aws_role_id: str) -> dict:
        return self._get(f"awsroles/{aws_role_id}")

    def update_aws_role_link(self, aws_role_id: str, link: Any) -> None:
        self._put(f"awsroles/{aws_role_id}", json=link)

    def delete_aws_role_link(self, aws_role_id: str) -> None:
        self._delete(f"awsroles/{aws_role_id}")

    def linked_roles(self, aws_role_id: str) -> list:
        return items(self._get(f"awsroles/{aws_role_id}/roles"))

    # ─────────────────────────────────────────────────────────────────────────
    # Principal keys
    # ─────────────────────────────────────────────────────────────────────────

    def principal_keys(self, role_id: str) -> list:
        return items(self._get(f"roles/{role_id}/principalkeys"))

    def principal_key(self, role_id: str, key_id: str) -> dict:
        return self._get(f"roles/{role_id}/principalkeys/{key_id}")

    def generate_principal_key(self, role_id: str) -> str:
        return created_id(self._post(f"roles/{role_id}/principalkeys/generate"))

    def import_principal_key(self, role_id: str, key: Any) -> str:
        return created_id(self._post(f"roles/{role_id}/principalkeys/import", json=key))

    def delete_principal_key(self, role_id: str, key_id: str) -> None:
        self._delete(f"roles/{role_id}/principalkeys/{key_id}")

    # ─────────────────────────────────────────────────────────────────────────
    # Authorized keys
    # ─────────────────────────────────────────────────────────────────────────

    def all_authorized_keys(self, offset: int, limit: int, sortkey: str = "", sortdir: str = "") -> list:
        result = self._get(
            "authorizedkeys",
            params={"offset": offset, "limit": limit, "sortkey": sortkey, "sortdir": sortdir},
        )
        return items(result)

    def authorized_keys(self, user_id: str) -> list:
        return items(self._get(f"users/{user_id}/authorizedkeys"))

    def create_authorized_key(self, user_id: str, key: Any) -> str:
        return created_id(self._post(f"users/{user_id}/authorizedkeys", json=key))

    def update_authorized_key(self, user_id: str, key_id: str, key: Any) -> None:
        self._put(f"users/{user_id}/authorizedkeys/{key_id}", json=key)

    def delete_authorized_key(self, user_id: str, key_id: str) -> None:
        self._delete(f"users/{user_id}/authorizedkeys/{key_id}")

    def resolve_authorized_key(self, request: Any) -> dict:
        return self._post("authorizedkeys/resolve", json=request)

    # ─────────────────────────────────────────────────────────────────────────
    # Log collectors
    # ─────────────────────────────────────────────────────────────────────────

    def logconf_collectors(self) -> list:
        return items(self._get("logconf/collectors"))

    def logconf_collector(self, collector_id: str) -> dict:
        return self._get(f"logconf/collectors/{collector_id}")

    def create_logconf_collector(self, collector: Any) -> str:
        return created_id(self._post("logconf/collectors", json=collector))

    def update_logconf_collector(self, collector_id: str, collector: Any) -> None:
        self._put(f"logconf/collectors/{collector_id}", json=collector)

    def delete_logconf_collector(self, collector_id: str) -> None:
        self._delete(f"logconf/collectors/{collector_id}")
