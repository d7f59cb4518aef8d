"""Main CLI entry point."""

import logging

import click
from rentflow.database.factories import create_sqlite_database

# Import and register all commands at module level
from rentflow.cli.commands import (
    dashboard,
    tenant,
    property,
    message,
    theme,
)


def configure_logging(verbosity: int) -> None:
    """Configure root logging from the number of -v flags."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides RENTFLOW_DB_PATH environment variable)",
    envvar="RENTFLOW_DB_PATH",
)
@click.option("-v", "--verbose", count=True, help="Increase log output (-v info, -vv debug)")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: int):
    """Rentflow - Rent tracking for small landlords.

    Keep a roster of tenants, tick off monthly rent payments, and see
    collected revenue at a glance.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
dashboard.register_commands(cli)
tenant.register_commands(cli)
property.register_commands(cli)
message.register_commands(cli)
theme.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
