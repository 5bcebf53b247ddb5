"""Main entry point for ``python -m chromapick``."""

from chromapick.cli.main import cli

if __name__ == "__main__":
    cli()
