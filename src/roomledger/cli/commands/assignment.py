"""Room assignment commands."""

import click
from roomledger.cli.error_handling import handle_domain_error
from roomledger.cli.resolution import resolve_room_or_exit, resolve_tenant_or_exit
from roomledger.domain.assignment import AssignmentService
from roomledger.domain.entities import AssignmentDetail
from roomledger.domain.errors import DomainError
from roomledger.domain.room import RoomService
from roomledger.domain.tenant import TenantService
from roomledger.utils.date_parser import parse_date


def _format_assignment(detail: AssignmentDetail) -> str:
    assignment = detail.assignment
    end = assignment.end_date.isoformat() if assignment.end_date else "present"
    return (
        f"ID: {assignment.id:3d} | {detail.room.name:15s} | {detail.tenant.name:20s} | "
        f"{assignment.start_date.isoformat()} - {end}"
    )


@click.group()
def assignment_group():
    """Manage which tenant occupies which room."""
    pass


@assignment_group.command("list")
@click.option("--tenant", help="Only show assignments of this tenant (name or ID)")
@click.option("--room", help="Only show assignments of this room (name or ID)")
@click.option("--active", "active_only", is_flag=True, help="Only show active assignments")
@click.pass_context
def list_assignments(ctx, tenant: str | None, room: str | None, active_only: bool):
    """List assignments, newest start date first."""
    db = ctx.obj["db"]
    service = AssignmentService(db)

    tenant_id = resolve_tenant_or_exit(ctx, TenantService(db), tenant) if tenant else None
    room_id = resolve_room_or_exit(ctx, RoomService(db), room) if room else None

    assignments = service.list_assignments(tenant_id=tenant_id, room_id=room_id, active_only=active_only)
    if not assignments:
        click.echo("No assignments found.")
        return

    click.echo("\nAssignments:")
    click.echo("-" * 80)
    for detail in assignments:
        click.echo(_format_assignment(detail))


@assignment_group.command("create")
@click.argument("tenant", metavar="TENANT")
@click.argument("room", metavar="ROOM")
@click.option("--start", "start_date", required=True, help="First day of occupancy (YYYY-MM-DD or 'today')")
@click.pass_context
def create_assignment(ctx, tenant: str, room: str, start_date: str):
    """Assign a tenant to a room.

    TENANT and ROOM can be names or IDs.

    Examples:
        roomledger assignment create "Alice" "A-101" --start 2025-05-01
    """
    db = ctx.obj["db"]
    service = AssignmentService(db)
    tenant_id = resolve_tenant_or_exit(ctx, TenantService(db), tenant)
    room_id = resolve_room_or_exit(ctx, RoomService(db), room)

    try:
        start = parse_date(start_date)
        detail = service.create_assignment(tenant_id=tenant_id, room_id=room_id, start_date=start)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Assigned '{detail.tenant.name}' to room '{detail.room.name}' from "
        f"{detail.assignment.start_date.isoformat()} (ID: {detail.assignment.id})"
    )


@assignment_group.command("close")
@click.argument("assignment_id", type=int)
@click.option("--end", "end_date", required=True, help="Last day of occupancy (YYYY-MM-DD or 'today')")
@click.pass_context
def close_assignment(ctx, assignment_id: int, end_date: str):
    """End an assignment, making the room vacant again."""
    service = AssignmentService(ctx.obj["db"])

    try:
        end = parse_date(end_date)
        assignment = service.close_assignment(assignment_id, end)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Closed assignment {assignment.id} on {assignment.end_date.isoformat()}")


@assignment_group.command("reopen")
@click.argument("assignment_id", type=int)
@click.pass_context
def reopen_assignment(ctx, assignment_id: int):
    """Clear the end date of an assignment."""
    service = AssignmentService(ctx.obj["db"])

    try:
        assignment = service.reopen_assignment(assignment_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Reopened assignment {assignment.id}")


@assignment_group.command("delete")
@click.argument("assignment_id", type=int)
@click.pass_context
def delete_assignment(ctx, assignment_id: int):
    """Delete an assignment."""
    service = AssignmentService(ctx.obj["db"])

    try:
        service.delete_assignment(assignment_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted assignment {assignment_id}")


def register_commands(cli):
    """Register assignment commands with main CLI."""
    cli.add_command(assignment_group, name="assignment")
