"""Main entry point for cc-skill CLI."""
import sys

import click

from ccskill.cli.main import cli


def main() -> int:
    """Run the CLI, reporting unexpected errors on stderr."""
    try:
        cli()
        return 0
    except Exception as e:
        click.echo(click.style("Error: ", fg="red", bold=True) + str(e), err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
