"""CLI error reporting helpers.

Every command failure is printed as a single ``Error: ...`` line on stderr
and ends the command with exit status 1.
"""

import click

from rentflow.domain.errors import DomainError


def exit_with_error(ctx: click.Context, message: str) -> None:
    """Print message as a CLI error and exit with failure."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError, action: str | None = None) -> None:
    """Report a domain error, prefixed with the attempted action when given."""
    exit_with_error(ctx, f"{action}: {error}" if action else str(error))
