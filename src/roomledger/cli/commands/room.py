"""Room management commands."""

import click
from roomledger.cli.error_handling import handle_domain_error
from roomledger.cli.resolution import resolve_room_or_exit
from roomledger.domain.entities import RoomOccupancy
from roomledger.domain.errors import DomainError
from roomledger.domain.room import RoomService


def _occupancy_line(occupancy: RoomOccupancy) -> str:
    if occupancy.current is None:
        return "Vacant"
    return f"Occupied by {occupancy.occupant.name} since {occupancy.occupied_since.isoformat()}"


@click.group()
def room_group():
    """Manage rooms."""
    pass


@room_group.command("create")
@click.argument("name", metavar="ROOM_NAME")
@click.option("--notes", help="Notes about the room")
@click.pass_context
def create_room(ctx, name: str, notes: str | None):
    """Create a new room.

    Examples:
        roomledger room create "A-101"
        roomledger room create "B-201" --notes "Top floor, no balcony"
    """
    service = RoomService(ctx.obj["db"])

    try:
        room_id = service.create_room(name=name, notes=notes)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created room '{name}' (ID: {room_id})")


@room_group.command("list")
@click.pass_context
def list_rooms(ctx):
    """List all rooms with their current occupancy."""
    service = RoomService(ctx.obj["db"])

    rooms = service.list_rooms()
    if not rooms:
        click.echo("No rooms found.")
        return

    click.echo("\nRooms:")
    click.echo("-" * 60)
    for occupancy in rooms:
        click.echo(f"ID: {occupancy.room.id:3d} | {occupancy.room.name:15s} | {_occupancy_line(occupancy)}")


@room_group.command("show")
@click.argument("room", metavar="ROOM")
@click.pass_context
def show_room(ctx, room: str):
    """Show a room and who occupies it.

    ROOM can be a room name or ID.
    """
    service = RoomService(ctx.obj["db"])
    room_id = resolve_room_or_exit(ctx, service, room)

    try:
        occupancy = service.get_room_occupancy(room_id)
        assignment_count, payment_count = service.dependent_counts(room_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Room: {occupancy.room.name} (ID: {occupancy.room.id})")
    if occupancy.room.notes:
        click.echo(f"Notes: {occupancy.room.notes}")
    click.echo(f"Status: {_occupancy_line(occupancy)}")
    click.echo(f"History: {assignment_count} assignment(s), {payment_count} payment(s)")


@room_group.command("update")
@click.argument("room", metavar="ROOM")
@click.option("--name", "new_name", help="New room name")
@click.option("--notes", help="New notes")
@click.option("--clear-notes", is_flag=True, help="Remove the notes")
@click.pass_context
def update_room(ctx, room: str, new_name: str | None, notes: str | None, clear_notes: bool) -> None:
    """Rename a room or edit its notes.

    ROOM can be a room name or ID.

    Examples:
        roomledger room update "A-101" --name "A-102"
        roomledger room update 1 --notes "Window fixed"
    """
    service = RoomService(ctx.obj["db"])
    room_id = resolve_room_or_exit(ctx, service, room)

    if new_name is None and notes is None and not clear_notes:
        click.echo("Error: Nothing to update. Use --name, --notes or --clear-notes.", err=True)
        ctx.exit(1)

    try:
        updated = service.update_room(room_id, name=new_name, notes=notes, clear_notes=clear_notes)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated room '{updated.name}' (ID: {updated.id})")


@room_group.command("delete")
@click.argument("room", metavar="ROOM")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_room(ctx, room: str, yes: bool) -> None:
    """Delete a room.

    ROOM can be a room name or ID.

    The room can only be deleted if it has no assignments and no payments.
    Use 'assignment delete' and 'payment delete' to remove them first.
    """
    service = RoomService(ctx.obj["db"])
    room_id = resolve_room_or_exit(ctx, service, room)
    room_obj = service.get_room(room_id)

    if not yes and not click.confirm(f"Are you sure you want to delete room '{room_obj.name}' (ID: {room_id})?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_room(room_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted room '{room_obj.name}'")


def register_commands(cli):
    """Register room commands with main CLI."""
    cli.add_command(room_group, name="room")
