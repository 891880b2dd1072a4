"""Tenant management commands."""

import click
from roomledger.cli.error_handling import handle_domain_error
from roomledger.cli.resolution import resolve_tenant_or_exit
from roomledger.domain.errors import DomainError
from roomledger.domain.tenant import TenantService


@click.group()
def tenant_group():
    """Manage tenants."""
    pass


@tenant_group.command("create")
@click.argument("name", metavar="TENANT_NAME")
@click.option("--notes", help="Notes about the tenant")
@click.pass_context
def create_tenant(ctx, name: str, notes: str | None):
    """Create a new tenant.

    Examples:
        roomledger tenant create "Alice"
    """
    service = TenantService(ctx.obj["db"])

    try:
        tenant_id = service.create_tenant(name=name, notes=notes)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created tenant '{name}' (ID: {tenant_id})")


@tenant_group.command("list")
@click.pass_context
def list_tenants(ctx):
    """List all tenants."""
    service = TenantService(ctx.obj["db"])

    tenants = service.list_tenants()
    if not tenants:
        click.echo("No tenants found.")
        return

    click.echo("\nTenants:")
    click.echo("-" * 60)
    for tenant in tenants:
        click.echo(f"ID: {tenant.id:3d} | {tenant.name:20s} | {tenant.notes or ''}")


@tenant_group.command("show")
@click.argument("tenant", metavar="TENANT")
@click.pass_context
def show_tenant(ctx, tenant: str):
    """Show a tenant's occupancy history and payments.

    TENANT can be a tenant name or ID.
    """
    service = TenantService(ctx.obj["db"])
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)

    try:
        profile = service.get_profile(tenant_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Tenant: {profile.tenant.name} (ID: {profile.tenant.id})")
    if profile.tenant.notes:
        click.echo(f"Notes: {profile.tenant.notes}")

    click.echo("\nAssignments:")
    if not profile.assignments:
        click.echo("  (none)")
    for detail in profile.assignments:
        end = detail.assignment.end_date.isoformat() if detail.assignment.end_date else "present"
        click.echo(f"  {detail.room.name:15s} {detail.assignment.start_date.isoformat()} - {end}")

    click.echo("\nPayments:")
    if not profile.payments:
        click.echo("  (none)")
    for detail in profile.payments:
        txn = detail.transaction
        click.echo(
            f"  {txn.payment_date:%Y-%m-%d} | {txn.amount:>10.2f} | {detail.room.name} | "
            f"{txn.start_month.isoformat()} - {txn.end_month.isoformat()}"
        )


@tenant_group.command("update")
@click.argument("tenant", metavar="TENANT")
@click.option("--name", "new_name", help="New tenant name")
@click.option("--notes", help="New notes")
@click.option("--clear-notes", is_flag=True, help="Remove the notes")
@click.pass_context
def update_tenant(ctx, tenant: str, new_name: str | None, notes: str | None, clear_notes: bool) -> None:
    """Rename a tenant or edit their notes.

    TENANT can be a tenant name or ID.
    """
    service = TenantService(ctx.obj["db"])
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)

    if new_name is None and notes is None and not clear_notes:
        click.echo("Error: Nothing to update. Use --name, --notes or --clear-notes.", err=True)
        ctx.exit(1)

    try:
        updated = service.update_tenant(tenant_id, name=new_name, notes=notes, clear_notes=clear_notes)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated tenant '{updated.name}' (ID: {updated.id})")


@tenant_group.command("delete")
@click.argument("tenant", metavar="TENANT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_tenant(ctx, tenant: str, yes: bool) -> None:
    """Delete a tenant.

    TENANT can be a tenant name or ID.

    The tenant's assignments and payments are deleted as well.
    """
    service = TenantService(ctx.obj["db"])
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)
    tenant_obj = service.get_tenant(tenant_id)
    assignment_count, payment_count = service.dependent_counts(tenant_id)

    if not yes and not click.confirm(
        f"Delete tenant '{tenant_obj.name}' (ID: {tenant_id}) along with "
        f"{assignment_count} assignment(s) and {payment_count} payment(s)?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_tenant(tenant_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted tenant '{tenant_obj.name}'")


def register_commands(cli):
    """Register tenant commands with main CLI."""
    cli.add_command(tenant_group, name="tenant")
