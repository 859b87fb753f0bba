"""privx-cli command groups."""
