"""Main CLI entry point."""

import click
from roomledger.database.factories import create_sqlite_database
from roomledger.logging_config import configure_logging

# Import and register all commands at module level
from roomledger.cli.commands import (
    room,
    tenant,
    manager,
    assignment,
    payment,
    transfer,
    summary,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides ROOMLEDGER_DB_PATH environment variable)",
    envvar="ROOMLEDGER_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="ROOMLEDGER_LOG_LEVEL",
    help="Logging level for diagnostic output on stderr",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Roomledger - Rooming house management.

    Keep track of rooms, tenants and who occupies which room when, record
    rent payments and transfers between managers, and see a monthly summary.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
room.register_commands(cli)
tenant.register_commands(cli)
manager.register_commands(cli)
assignment.register_commands(cli)
payment.register_commands(cli)
transfer.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
