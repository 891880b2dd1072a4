"""Abstract database interface (the ledger store)."""

from abc import ABC, abstractmethod
from typing import Optional, Any
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from roomledger.domain.entities import (
    Manager,
    Room,
    Tenant,
    RoomAssignment,
    TenantTransaction,
    AssignmentDetail,
    RoomOccupancy,
    TenantProfile,
    TenantTransactionDetail,
    ManagerTransactionDetail,
)


class Database(ABC):
    """Abstract database interface for roomledger.

    Every mutating method runs in its own storage transaction and either
    applies fully or raises a DomainError subclass with nothing written.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Manager operations
    @abstractmethod
    def create_manager(self, username: str, credential: str) -> int:
        """Create a manager. Returns manager ID."""
        pass

    @abstractmethod
    def get_manager(self, manager_id: int) -> Optional[Manager]:
        """Get manager by ID."""
        pass

    @abstractmethod
    def get_manager_by_username(self, username: str) -> Optional[Manager]:
        """Get manager by unique username."""
        pass

    @abstractmethod
    def list_managers(self) -> list[Manager]:
        """List all managers."""
        pass

    @abstractmethod
    def update_manager(
        self, manager_id: int, username: Optional[str] = None, credential: Optional[str] = None
    ) -> Manager:
        """Update manager username and/or credential."""
        pass

    # Room operations
    @abstractmethod
    def create_room(self, name: str, notes: Optional[str] = None) -> int:
        """Create a room. Returns room ID."""
        pass

    @abstractmethod
    def get_room(self, room_id: int) -> Optional[Room]:
        """Get room by ID."""
        pass

    @abstractmethod
    def get_room_by_name(self, name: str) -> Optional[Room]:
        """Get room by unique name."""
        pass

    @abstractmethod
    def list_room_occupancies(self) -> list[RoomOccupancy]:
        """List all rooms, newest first, each with its current assignment."""
        pass

    @abstractmethod
    def get_room_occupancy(self, room_id: int) -> Optional[RoomOccupancy]:
        """Get a room with its current assignment."""
        pass

    @abstractmethod
    def update_room(
        self,
        room_id: int,
        name: Optional[str] = None,
        notes: Optional[str] = None,
        update_notes: bool = False,
    ) -> Room:
        """Update room fields.

        Args:
            update_notes: If True, update notes even if it's None (to clear it)
        """
        pass

    @abstractmethod
    def count_room_dependents(self, room_id: int) -> tuple[int, int]:
        """Return (assignment count, tenant transaction count) for a room."""
        pass

    @abstractmethod
    def delete_room(self, room_id: int, require_no_dependents: bool = True) -> None:
        """Delete a room, refusing when it has dependents if required.

        A refusal, whether from the check or the storage, is a DependencyError.
        """
        pass

    # Tenant operations
    @abstractmethod
    def create_tenant(self, name: str, notes: Optional[str] = None) -> int:
        """Create a tenant. Returns tenant ID."""
        pass

    @abstractmethod
    def get_tenant(self, tenant_id: int) -> Optional[Tenant]:
        """Get tenant by ID."""
        pass

    @abstractmethod
    def get_tenant_by_name(self, name: str) -> Optional[Tenant]:
        """Get tenant by unique name."""
        pass

    @abstractmethod
    def list_tenants(self) -> list[Tenant]:
        """List all tenants."""
        pass

    @abstractmethod
    def get_tenant_profile(self, tenant_id: int) -> Optional[TenantProfile]:
        """Get tenant with assignment history and payments."""
        pass

    @abstractmethod
    def update_tenant(
        self,
        tenant_id: int,
        name: Optional[str] = None,
        notes: Optional[str] = None,
        update_notes: bool = False,
    ) -> Tenant:
        """Update tenant fields."""
        pass

    @abstractmethod
    def count_tenant_dependents(self, tenant_id: int) -> tuple[int, int]:
        """Return (assignment count, tenant transaction count) for a tenant."""
        pass

    @abstractmethod
    def delete_tenant(self, tenant_id: int, require_no_dependents: bool = False) -> None:
        """Delete a tenant. Dependents are removed with it unless refused."""
        pass

    # Room assignment operations
    @abstractmethod
    def create_assignment(self, tenant_id: int, room_id: int, start_date: date) -> AssignmentDetail:
        """Create an open-ended assignment.

        Raises:
            NotFoundError: If the tenant or room does not exist
            ConflictError: If the room already has an assignment on start_date
        """
        pass

    @abstractmethod
    def get_assignment(self, assignment_id: int) -> Optional[AssignmentDetail]:
        """Get assignment by ID with tenant and room."""
        pass

    @abstractmethod
    def list_assignments(
        self,
        tenant_id: Optional[int] = None,
        room_id: Optional[int] = None,
        active_only: bool = False,
    ) -> list[AssignmentDetail]:
        """List assignments, newest start date first, with optional filters."""
        pass

    @abstractmethod
    def get_current_assignment(self, room_id: int) -> Optional[AssignmentDetail]:
        """Get the active assignment with the latest start date for a room."""
        pass

    @abstractmethod
    def set_assignment_end_date(self, assignment_id: int, end_date: Optional[date]) -> RoomAssignment:
        """Set or clear the end date of an assignment.

        The end date is checked against the start date in the same
        transaction as the write; an earlier end date raises ValidationError.
        """
        pass

    @abstractmethod
    def delete_assignment(self, assignment_id: int) -> None:
        """Delete an assignment."""
        pass

    # Tenant transaction operations
    @abstractmethod
    def create_tenant_transaction(
        self,
        tenant_id: int,
        room_id: int,
        manager_id: int,
        amount: Decimal,
        start_month: date,
        end_month: date,
        payment_date: datetime,
        notes: Optional[str] = None,
    ) -> int:
        """Record a tenant payment. Returns transaction ID."""
        pass

    @abstractmethod
    def get_tenant_transaction(self, transaction_id: int) -> Optional[TenantTransactionDetail]:
        """Get tenant transaction by ID with tenant, room and manager."""
        pass

    @abstractmethod
    def list_tenant_transactions(
        self,
        tenant_id: Optional[int] = None,
        room_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[TenantTransactionDetail]:
        """List tenant transactions, newest payment first.

        Args:
            tenant_id: Optional tenant filter
            room_id: Optional room filter
            start: Optional inclusive lower bound on payment date
            end: Optional exclusive upper bound on payment date
        """
        pass

    @abstractmethod
    def update_tenant_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        start_month: Optional[date] = None,
        end_month: Optional[date] = None,
        notes: Optional[str] = None,
        update_notes: bool = False,
    ) -> TenantTransaction:
        """Update only the supplied fields of a tenant transaction."""
        pass

    @abstractmethod
    def delete_tenant_transaction(self, transaction_id: int) -> None:
        """Delete a tenant transaction."""
        pass

    # Manager transaction operations
    @abstractmethod
    def create_manager_transaction(
        self,
        sender_id: int,
        receiver_id: int,
        amount: Decimal,
        currency: str,
        payment_date: datetime,
        notes: Optional[str] = None,
    ) -> int:
        """Record a manager-to-manager transfer. Returns transaction ID."""
        pass

    @abstractmethod
    def get_manager_transaction(self, transaction_id: int) -> Optional[ManagerTransactionDetail]:
        """Get manager transaction by ID with sender and receiver."""
        pass

    @abstractmethod
    def list_manager_transactions(self, manager_id: Optional[int] = None) -> list[ManagerTransactionDetail]:
        """List transfers, newest first, optionally those involving a manager."""
        pass

    # Summary
    @abstractmethod
    def get_house_figures(self, period_start: datetime, period_end: datetime) -> dict[str, Any]:
        """Read the raw figures behind the summary in one consistent snapshot.

        Returns a dictionary with room_count, active_assignment_count,
        tenant_count and payment_amounts (amounts of tenant transactions paid
        in [period_start, period_end)).
        """
        pass
