"""License and mobile gateway commands."""

import typer

from privxcli.api.auth import Auth
from privxcli.api.licensemanager import LicenseManager
from privxcli.client import connect
from privxcli.utils import print_json

app = typer.Typer(help="Show and manage the PrivX license")
mobilegw_app = typer.Typer(help="Mobile gateway registration and paired devices")


@app.callback(invoke_without_command=True)
def license_show(ctx: typer.Context):
    """Show the license."""
    if ctx.invoked_subcommand is None:
        print_json(LicenseManager(connect()).license())


@app.command("set")
def license_set(key: str = typer.Option(..., "--key", help="PrivX license key")):
    """Set the license key."""
    LicenseManager(connect()).set_license(key)


@app.command("refresh")
def license_refresh():
    """Refresh the license."""
    LicenseManager(connect()).refresh_license()


@app.command("stats")
def license_stats(
    optin: bool = typer.Option(True, "--optin/--no-optin", help="enable or disable license statistics"),
):
    """Opt in or out of license statistics."""
    LicenseManager(connect()).set_license_statistics(optin)


@app.command("deactivate")
def license_deactivate():
    """Deactivate the license."""
    LicenseManager(connect()).deactivate_license()


@mobilegw_app.command("register")
def mobilegw_register():
    """Register PrivX with the mobile gateway."""
    LicenseManager(connect()).register_mobile_gateway()


@mobilegw_app.command("unregister")
def mobilegw_unregister():
    """Unregister PrivX from the mobile gateway."""
    LicenseManager(connect()).unregister_mobile_gateway()


@mobilegw_app.command("regstat")
def mobilegw_registration_status():
    """Show the mobile gateway registration status."""
    print_json(LicenseManager(connect()).mobile_gateway_registration())


@mobilegw_app.command("paired-devices")
def mobilegw_paired_devices(user_id: str = typer.Option(..., "--user-id", help="user ID")):
    """List the mobile devices paired by a user."""
    print_json(Auth(connect()).paired_devices(user_id))


@mobilegw_app.command("unpair-device")
def mobilegw_unpair_device(
    user_id: str = typer.Option(..., "--user-id", help="user ID"),
    device_id: str = typer.Option(..., "--device-id", help="device ID"),
):
    """Unpair a mobile device of a user."""
    Auth(connect()).unpair_device(user_id, device_id)
