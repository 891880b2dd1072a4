"""Manager domain service."""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from roomledger.domain import errors
from roomledger.domain.entities import Manager as ManagerEntity
from roomledger.logging_config import get_logger

if TYPE_CHECKING:
    from roomledger.database.base import Database

logger = get_logger(__name__)


class ManagerService:
    """Service for managing managers.

    Credentials are opaque strings; producing and checking them is up to
    the caller.
    """

    def __init__(self, db: Database):
        """Initialize manager service.

        Args:
            db: Database instance
        """
        self.db = db

    def register_manager(self, username: str, credential: str) -> int:
        """Register a new manager.

        Returns:
            Manager ID

        Raises:
            ValidationError: If username or credential is missing
            ConflictError: If the username is taken
        """
        missing = [
            field
            for field, value in (("username", username), ("credential", credential))
            if not value
        ]
        if missing:
            raise errors.ValidationError(errors.missing_fields(*missing))

        manager_id = self.db.create_manager(username=username, credential=credential)
        logger.info("Registered manager %s (%s)", manager_id, username)
        return manager_id

    def get_manager(self, manager_id: int) -> Optional[ManagerEntity]:
        return self.db.get_manager(manager_id)

    def get_manager_by_username(self, username: str) -> Optional[ManagerEntity]:
        return self.db.get_manager_by_username(username)

    def list_managers(self) -> list[ManagerEntity]:
        return self.db.list_managers()

    def update_profile(
        self,
        manager_id: int,
        username: Optional[str] = None,
        credential: Optional[str] = None,
    ) -> ManagerEntity:
        """Update a manager's username and/or credential.

        Raises:
            ValidationError: If neither field is given
            NotFoundError: If manager doesn't exist
            ConflictError: If the new username is taken
        """
        if not username and not credential:
            raise errors.ValidationError("Nothing to update")

        manager = self.db.update_manager(
            manager_id, username=username or None, credential=credential or None
        )
        logger.info("Updated profile of manager %s", manager_id)
        return manager
