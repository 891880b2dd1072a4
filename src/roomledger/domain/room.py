"""Room domain service."""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from roomledger.domain import errors
from roomledger.domain.deletion import DeletionGuard, EntityKind
from roomledger.domain.entities import Room as RoomEntity, RoomOccupancy
from roomledger.logging_config import get_logger

if TYPE_CHECKING:
    from roomledger.database.base import Database

logger = get_logger(__name__)


def _clean_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise errors.ValidationError("Name is required")
    return name.strip()


class RoomService:
    """Service for managing rooms."""

    def __init__(self, db: Database, deletion_guard: Optional[DeletionGuard] = None):
        """Initialize room service.

        Args:
            db: Database instance
            deletion_guard: Deletion policy lookup (defaults to the standard policies)
        """
        self.db = db
        self.deletion_guard = deletion_guard or DeletionGuard()

    def create_room(self, name: str, notes: Optional[str] = None) -> int:
        """Create a room.

        Args:
            name: Unique room name
            notes: Optional notes

        Returns:
            Room ID

        Raises:
            ValidationError: If name is missing
            ConflictError: If a room with that name already exists
        """
        room_id = self.db.create_room(name=_clean_name(name), notes=notes)
        logger.info("Created room %s (%s)", room_id, name)
        return room_id

    def get_room(self, room_id: int) -> Optional[RoomEntity]:
        """Get room by ID, or None if not found."""
        return self.db.get_room(room_id)

    def get_room_by_name(self, name: str) -> Optional[RoomEntity]:
        """Get room by name, or None if not found."""
        return self.db.get_room_by_name(name)

    def require_room(self, room_id: int) -> RoomEntity:
        """Get room by ID or raise NotFoundError."""
        room = self.db.get_room(room_id)
        if room is None:
            raise errors.NotFoundError(errors.room_not_found(room_id))
        return room

    def list_rooms(self) -> list[RoomOccupancy]:
        """List all rooms, newest first, each with its live occupancy."""
        return self.db.list_room_occupancies()

    def get_room_occupancy(self, room_id: int) -> RoomOccupancy:
        """Get a room with its live occupancy.

        Raises:
            NotFoundError: If room doesn't exist
        """
        occupancy = self.db.get_room_occupancy(room_id)
        if occupancy is None:
            raise errors.NotFoundError(errors.room_not_found(room_id))
        return occupancy

    def update_room(
        self,
        room_id: int,
        name: Optional[str] = None,
        notes: Optional[str] = None,
        clear_notes: bool = False,
    ) -> RoomEntity:
        """Rename a room and/or edit its notes.

        Args:
            room_id: Room ID
            name: Optional new name
            notes: Optional new notes
            clear_notes: If True, remove the notes (notes must be None)

        Raises:
            ValidationError: If name is blank or both notes and clear_notes are given
            NotFoundError: If room doesn't exist
            ConflictError: If the new name is taken
        """
        if clear_notes and notes is not None:
            raise errors.ValidationError("Cannot set both notes and clear_notes")
        if name is not None:
            name = _clean_name(name)

        room = self.db.update_room(room_id, name=name, notes=notes, update_notes=clear_notes)
        logger.info("Updated room %s", room_id)
        return room

    def dependent_counts(self, room_id: int) -> tuple[int, int]:
        """Return how many assignments and payments reference a room."""
        return self.db.count_room_dependents(room_id)

    def delete_room(self, room_id: int) -> None:
        """Delete a room.

        Rooms are guarded: a room that still has assignments or payments
        cannot be deleted. Under an unguarded policy the storage refuses the
        same deletes, so the outcome is a DependencyError either way.

        Raises:
            NotFoundError: If room doesn't exist
            DependencyError: If the room has assignments or tenant transactions
        """
        guarded = self.deletion_guard.is_guarded(EntityKind.ROOM)
        try:
            self.db.delete_room(room_id, require_no_dependents=guarded)
        except errors.DependencyError as e:
            logger.warning("Refused to delete room %s: %s", room_id, e)
            raise
        logger.info("Deleted room %s", room_id)
