"""Entry point for ``python -m tree_size``."""

from tree_size.app.cli import cli

if __name__ == "__main__":
    cli()
