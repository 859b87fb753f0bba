"""privx-cli package entry point."""

from privxcli.cli import app

if __name__ == "__main__":
    app()
