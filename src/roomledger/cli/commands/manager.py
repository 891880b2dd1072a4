"""Manager commands."""

import click
from roomledger.cli.error_handling import handle_domain_error
from roomledger.cli.resolution import resolve_manager_or_exit
from roomledger.domain.errors import DomainError
from roomledger.domain.manager import ManagerService


@click.group()
def manager_group():
    """Manage managers."""
    pass


@manager_group.command("register")
@click.argument("username")
@click.option(
    "--credential",
    required=True,
    help="Opaque credential to store for the manager (e.g. a password hash)",
)
@click.pass_context
def register_manager(ctx, username: str, credential: str):
    """Register a new manager."""
    service = ManagerService(ctx.obj["db"])

    try:
        manager_id = service.register_manager(username=username, credential=credential)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Registered manager '{username}' (ID: {manager_id})")


@manager_group.command("list")
@click.pass_context
def list_managers(ctx):
    """List all managers."""
    service = ManagerService(ctx.obj["db"])

    managers = service.list_managers()
    if not managers:
        click.echo("No managers found.")
        return

    click.echo("\nManagers:")
    click.echo("-" * 60)
    for manager in managers:
        click.echo(f"ID: {manager.id:3d} | {manager.username:20s} | Since: {manager.created_at:%Y-%m-%d}")


@manager_group.command("update")
@click.argument("manager", metavar="MANAGER")
@click.option("--username", help="New username")
@click.option("--credential", help="New credential")
@click.pass_context
def update_manager(ctx, manager: str, username: str | None, credential: str | None):
    """Update a manager's username or credential.

    MANAGER can be a username or ID.
    """
    service = ManagerService(ctx.obj["db"])
    manager_id = resolve_manager_or_exit(ctx, service, manager)

    try:
        updated = service.update_profile(manager_id, username=username, credential=credential)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated manager '{updated.username}' (ID: {updated.id})")


def register_commands(cli):
    """Register manager commands with main CLI."""
    cli.add_command(manager_group, name="manager")
