"""``python -m easy_cli`` runs the same entry point as the ``easy-cli`` script."""

from __future__ import annotations

from easy_cli.cli.app import cli

if __name__ == "__main__":
    cli()
