"""
Main Entry Point for envpopulate

Runs the command-line interface used to inspect and check configuration
records against the current environment.

Example Usage:
    $ python -m envpopulate describe myapp.settings:Settings
    $ python -m envpopulate check myapp.settings:Settings --env-file .env
"""

import sys
from typing import Optional, Sequence

import click

from .cli.commands import cli


def main(args: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments.
            Defaults to sys.argv[1:].

    Returns:
        Exit code.
    """
    try:
        cli(args=args, standalone_mode=False)
        return 0

    except click.exceptions.Exit as e:
        return e.exit_code

    except click.ClickException as e:
        e.show()
        return e.exit_code

    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
