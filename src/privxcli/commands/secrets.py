"""Vault secret commands."""

import logging
from pathlib import Path
from typing import Optional

import typer

from privxcli.api.vault import Vault
from privxcli.client import PrivXError, connect
from privxcli.commands.common import file_argument, limit_option, offset_option
from privxcli.utils import apply_each, decode_json, print_json, show_each, split_ids

logger = logging.getLogger("privxcli")

app = typer.Typer(help="List and manage vault secrets")
user_secrets_app = typer.Typer(help="List and manage the personal secrets of a user")

SEARCH_FILTERS = ("personal", "shared", "readable", "writable", "")
SEARCH_SORTDIRS = ("ASC", "DESC")
SEARCH_SORTKEYS = ("name", "updated", "created", "")

# Upper bound on the names one user-secrets show call accepts
MAX_BATCH = 100


def _check_choice(field: str, value: str, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        raise typer.BadParameter(
            f"{field} field must be one of these values {list(allowed)}",
            param_hint=f"--{field}",
        )


def _role_ids(refs: Optional[list]) -> list[str]:
    return [ref["id"] for ref in refs or [] if ref.get("id")]


# ─────────────────────────────────────────────────────────────────────────────
# Secrets
# ─────────────────────────────────────────────────────────────────────────────


@app.callback(invoke_without_command=True)
def secrets_list(
    ctx: typer.Context,
    offset: int = offset_option(),
    limit: int = limit_option(),
):
    """List secrets."""
    if ctx.invoked_subcommand is None:
        print_json(Vault(connect()).secrets(offset, limit))


@app.command("show")
def secret_show(name: str = typer.Option(..., "--name", help="secret name, comma separated")):
    """Get secrets by name."""
    api = Vault(connect())
    print_json(show_each(name, api.secret))


@app.command("create")
def secret_create(
    name: str = typer.Option(..., "--name", help="secret name"),
    allow_read_to: Optional[list[str]] = typer.Option(
        None, "--allow-read-to", help="role ID allowed to read the secret, repeatable"
    ),
    allow_write_to: Optional[list[str]] = typer.Option(
        None, "--allow-write-to", help="role ID allowed to write the secret, repeatable"
    ),
    file: Path = file_argument(),
):
    """Create a secret."""
    data = decode_json(file)
    Vault(connect()).create_secret(name, allow_read_to or [], allow_write_to or [], data)
    print_json(data)


@app.command("update")
def secret_update(
    name: str = typer.Option(..., "--name", help="secret name"),
    allow_read_to: Optional[list[str]] = typer.Option(
        None, "--allow-read-to", help="role ID allowed to read the secret, repeatable"
    ),
    allow_write_to: Optional[list[str]] = typer.Option(
        None, "--allow-write-to", help="role ID allowed to write the secret, repeatable"
    ),
    file: Path = file_argument(),
):
    """Update a secret.

    Access lists that are not given keep their current roles.
    """
    data = decode_json(file)
    api = Vault(connect())
    current = api.secret(name)

    read = allow_read_to or _role_ids(current.get("allow_read"))
    write = allow_write_to or _role_ids(current.get("allow_write"))
    api.update_secret(name, read, write, data)
    print_json(data)


@app.command("delete")
def secret_delete(name: str = typer.Option(..., "--name", help="secret name, comma separated")):
    """Delete secrets."""
    api = Vault(connect())
    apply_each(name, api.delete_secret)


@app.command("metadata")
def secret_metadata(name: str = typer.Option(..., "--name", help="secret name, comma separated")):
    """Get secret metadata by name."""
    api = Vault(connect())
    print_json(show_each(name, api.secret_metadata))


@app.command("search")
def secret_search(
    offset: int = offset_option(),
    limit: int = limit_option(),
    sortkey: str = typer.Option("", "--sortkey", help="sort by name, updated or created"),
    sortdir: str = typer.Option("ASC", "--sortdir", help="sort direction, ASC or DESC"),
    keywords: str = typer.Option("", "--keywords", help="comma or space separated keywords"),
    filter_: str = typer.Option(
        "", "--filter", help="secret type: personal, shared, readable or writable"
    ),
    owner_ids: Optional[list[str]] = typer.Option(
        None, "--owner-ids", help="owner user ID, repeatable"
    ),
):
    """Search secrets."""
    filter_ = filter_.lower()
    sortdir = sortdir.upper()
    sortkey = sortkey.lower()
    _check_choice("filter", filter_, SEARCH_FILTERS)
    _check_choice("sortdir", sortdir, SEARCH_SORTDIRS)
    _check_choice("sortkey", sortkey, SEARCH_SORTKEYS)

    search: dict = {"keywords": keywords, "filter": filter_}
    if owner_ids:
        search["owner_ids"] = owner_ids

    print_json(Vault(connect()).search_secrets(offset, limit, sortkey, sortdir, search))


@app.command("schemas")
def secret_schemas():
    """Get the vault schemas."""
    print_json(Vault(connect()).schemas())


# ─────────────────────────────────────────────────────────────────────────────
# User secrets
# ─────────────────────────────────────────────────────────────────────────────


@user_secrets_app.callback(invoke_without_command=True)
def user_secrets_list(
    ctx: typer.Context,
    owner_id: str = typer.Option("", "--owner-id", help="secret owner ID"),
    offset: int = offset_option(),
    limit: int = limit_option(),
):
    """List the secrets of a user."""
    if ctx.invoked_subcommand is not None:
        return
    if not owner_id:
        raise typer.BadParameter("--owner-id is required", param_hint="--owner-id")

    print_json(Vault(connect()).user_secrets(owner_id, offset, limit))


@user_secrets_app.command("show")
def user_secret_show(
    owner_id: str = typer.Option(..., "--owner-id", help="secret owner ID"),
    name: str = typer.Option(..., "--name", help="secret name, comma separated"),
    ignore_error: bool = typer.Option(
        False, "--ignore-error", help="skip secrets that cannot be fetched"
    ),
):
    """Get user secrets by name."""
    names = split_ids(name)
    if len(names) > MAX_BATCH:
        raise typer.BadParameter(f"you exceed the limit {MAX_BATCH} of secrets", param_hint="--name")

    api = Vault(connect())
    secrets = []
    last_error: Optional[PrivXError] = None
    for item in names:
        try:
            secrets.append(api.user_secret(owner_id, item))
        except PrivXError as e:
            if not ignore_error:
                raise
            logger.debug("skipping secret %s: %s", item, e.message)
            last_error = e

    if not secrets and last_error is not None:
        raise last_error
    print_json(secrets)


@user_secrets_app.command("create")
def user_secret_create(
    owner_id: str = typer.Option(..., "--owner-id", help="secret owner ID"),
    name: str = typer.Option(..., "--name", help="secret name"),
    read_role: Optional[list[str]] = typer.Option(
        None, "--read-role", help="role ID allowed to read the secret, repeatable"
    ),
    write_role: Optional[list[str]] = typer.Option(
        None, "--write-role", help="role ID allowed to write the secret, repeatable"
    ),
    file: Path = file_argument(),
):
    """Create a user secret."""
    data = decode_json(file)
    Vault(connect()).create_user_secret(owner_id, name, read_role or [], write_role or [], data)
    print_json(data)


@user_secrets_app.command("update")
def user_secret_update(
    owner_id: str = typer.Option(..., "--owner-id", help="secret owner ID"),
    name: str = typer.Option(..., "--name", help="secret name"),
    allow_read_to: Optional[list[str]] = typer.Option(
        None, "--allow-read-to", help="role ID allowed to read the secret, repeatable"
    ),
    allow_write_to: Optional[list[str]] = typer.Option(
        None, "--allow-write-to", help="role ID allowed to write the secret, repeatable"
    ),
    file: Path = file_argument(),
):
    """Update a user secret.

    Access lists that are not given keep their current roles.
    """
    data = decode_json(file)
    api = Vault(connect())
    current = api.user_secret(owner_id, name)

    read = allow_read_to or _role_ids(current.get("allow_read"))
    write = allow_write_to or _role_ids(current.get("allow_write"))
    api.update_user_secret(owner_id, name, read, write, data)
    print_json(data)


@user_secrets_app.command("metadata")
def user_secret_metadata(
    owner_id: str = typer.Option(..., "--owner-id", help="secret owner ID"),
    name: str = typer.Option(..., "--name", help="secret name, comma separated"),
):
    """Get user secret metadata by name."""
    api = Vault(connect())
    print_json(show_each(name, lambda item: api.user_secret_metadata(owner_id, item)))


@user_secrets_app.command("delete")
def user_secret_delete(
    owner_id: str = typer.Option(..., "--owner-id", help="secret owner ID"),
    name: str = typer.Option(..., "--name", help="secret name, comma separated"),
):
    """Delete user secrets."""
    api = Vault(connect())
    apply_each(name, lambda item: api.delete_user_secret(owner_id, item))
