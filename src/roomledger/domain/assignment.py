"""Room assignment domain service.

An assignment is one occupancy interval of a tenant in a room. It is
active while its end date is unset. A room's occupancy is always derived
from its active assignments and never stored on the room itself.

Only an exact duplicate (room, start date) pair is rejected; overlapping
intervals with different start dates are accepted, so a room can end up
with more than one active assignment. The most recent one wins when
answering "who occupies this room".
"""

from __future__ import annotations

from datetime import date
from typing import Optional, TYPE_CHECKING

from roomledger.domain import errors
from roomledger.domain.entities import (
    AssignmentDetail,
    RoomAssignment as RoomAssignmentEntity,
    RoomOccupancy,
)
from roomledger.logging_config import get_logger

if TYPE_CHECKING:
    from roomledger.database.base import Database

logger = get_logger(__name__)


class AssignmentService:
    """Service for managing room assignments."""

    def __init__(self, db: Database):
        """Initialize assignment service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_assignments(
        self,
        tenant_id: Optional[int] = None,
        room_id: Optional[int] = None,
        active_only: bool = False,
    ) -> list[AssignmentDetail]:
        """List assignments with tenant and room, newest start date first."""
        return self.db.list_assignments(tenant_id=tenant_id, room_id=room_id, active_only=active_only)

    def get_assignment(self, assignment_id: int) -> AssignmentDetail:
        """Get an assignment by ID.

        Raises:
            NotFoundError: If assignment doesn't exist
        """
        detail = self.db.get_assignment(assignment_id)
        if detail is None:
            raise errors.NotFoundError(errors.assignment_not_found(assignment_id))
        return detail

    def create_assignment(
        self,
        tenant_id: Optional[int],
        room_id: Optional[int],
        start_date: Optional[date],
    ) -> AssignmentDetail:
        """Assign a tenant to a room from start_date onwards (open-ended).

        Args:
            tenant_id: Tenant ID
            room_id: Room ID
            start_date: First day of occupancy

        Returns:
            The new assignment with its tenant and room

        Raises:
            ValidationError: If any argument is missing
            NotFoundError: If tenant or room doesn't exist
            ConflictError: If the room already has an assignment starting on start_date
        """
        missing = [
            field
            for field, value in (("tenant_id", tenant_id), ("room_id", room_id), ("start_date", start_date))
            if value is None
        ]
        if missing:
            raise errors.ValidationError(errors.missing_fields(*missing))

        try:
            detail = self.db.create_assignment(tenant_id=tenant_id, room_id=room_id, start_date=start_date)
        except errors.ConflictError as e:
            logger.warning("Rejected assignment of tenant %s to room %s: %s", tenant_id, room_id, e)
            raise

        logger.info(
            "Assigned tenant %s to room %s from %s (assignment %s)",
            tenant_id,
            room_id,
            start_date.isoformat(),
            detail.assignment.id,
        )
        return detail

    def close_assignment(self, assignment_id: int, end_date: Optional[date]) -> RoomAssignmentEntity:
        """Set the end date of an assignment, or reopen it with None.

        Raises:
            NotFoundError: If assignment doesn't exist
            ValidationError: If end_date is before the assignment's start date
        """
        assignment = self.db.set_assignment_end_date(assignment_id, end_date)
        if end_date is None:
            logger.info("Reopened assignment %s", assignment_id)
        else:
            logger.info("Closed assignment %s on %s", assignment_id, end_date.isoformat())
        return assignment

    def reopen_assignment(self, assignment_id: int) -> RoomAssignmentEntity:
        """Make a closed assignment active again."""
        return self.close_assignment(assignment_id, None)

    def delete_assignment(self, assignment_id: int) -> None:
        """Delete an assignment. No dependency guard applies.

        Raises:
            NotFoundError: If assignment doesn't exist
        """
        self.db.delete_assignment(assignment_id)
        logger.info("Deleted assignment %s", assignment_id)

    def current_assignment_for(self, room_id: int) -> Optional[AssignmentDetail]:
        """Return the most recent active assignment for a room, if any."""
        return self.db.get_current_assignment(room_id)

    def assignments_for(self, tenant_id: int) -> list[AssignmentDetail]:
        """Return a tenant's occupancy history, newest first.

        Raises:
            NotFoundError: If tenant doesn't exist
        """
        if self.db.get_tenant(tenant_id) is None:
            raise errors.NotFoundError(errors.tenant_not_found(tenant_id))
        return self.db.list_assignments(tenant_id=tenant_id)

    def occupancy_for(self, room_id: int) -> RoomOccupancy:
        """Return whether a room is vacant or occupied, and by whom.

        Raises:
            NotFoundError: If room doesn't exist
        """
        occupancy = self.db.get_room_occupancy(room_id)
        if occupancy is None:
            raise errors.NotFoundError(errors.room_not_found(room_id))
        return occupancy
