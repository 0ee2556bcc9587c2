"""Entry point for ``python -m pathtext``."""

from pathtext.cli import cli

if __name__ == "__main__":
    cli()
