"""Domain model entities for roomledger.

These are pure data classes representing business concepts, independent of
database schema. Occupancy is never stored on a room; it is derived from
the active assignment and exposed through RoomOccupancy.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class OccupancyStatus(str, Enum):
    """Live occupancy state of a room."""

    VACANT = "vacant"
    OCCUPIED = "occupied"


@dataclass(frozen=True)
class Manager:
    """Manager domain entity.

    The credential is opaque to this package; it is stored and returned as
    given by the caller.
    """

    id: int
    username: str
    credential: str
    created_at: datetime


@dataclass(frozen=True)
class Room:
    """Room domain entity."""

    id: int
    name: str
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Tenant:
    """Tenant domain entity."""

    id: int
    name: str
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class RoomAssignment:
    """One contiguous occupancy interval of a tenant in a room."""

    id: int
    tenant_id: int
    room_id: int
    start_date: date
    end_date: Optional[date]
    created_at: datetime

    @property
    def is_active(self) -> bool:
        """True while the interval is open-ended."""
        return self.end_date is None


@dataclass(frozen=True)
class TenantTransaction:
    """Rent payment made by a tenant for a room over a month range."""

    id: int
    tenant_id: int
    room_id: int
    manager_id: int
    amount: Decimal
    start_month: date
    end_month: date
    payment_date: datetime
    notes: Optional[str]


@dataclass(frozen=True)
class ManagerTransaction:
    """Transfer of funds between two managers (possibly the same one)."""

    id: int
    sender_id: int
    receiver_id: int
    amount: Decimal
    currency: str
    payment_date: datetime
    notes: Optional[str]

    @property
    def is_internal(self) -> bool:
        return self.sender_id == self.receiver_id


@dataclass(frozen=True)
class AssignmentDetail:
    """Assignment joined with its tenant and room."""

    assignment: RoomAssignment
    tenant: Tenant
    room: Room


@dataclass(frozen=True)
class RoomOccupancy:
    """Room together with its current (most recent active) assignment."""

    room: Room
    current: Optional[AssignmentDetail] = None

    @property
    def status(self) -> OccupancyStatus:
        if self.current is None:
            return OccupancyStatus.VACANT
        return OccupancyStatus.OCCUPIED

    @property
    def occupant(self) -> Optional[Tenant]:
        return self.current.tenant if self.current is not None else None

    @property
    def occupied_since(self) -> Optional[date]:
        return self.current.assignment.start_date if self.current is not None else None


@dataclass(frozen=True)
class TenantTransactionDetail:
    """Tenant transaction joined with tenant, room and recording manager."""

    transaction: TenantTransaction
    tenant: Tenant
    room: Room
    manager: Manager


@dataclass(frozen=True)
class ManagerTransactionDetail:
    """Manager transaction joined with sender and receiver."""

    transaction: ManagerTransaction
    sender: Manager
    receiver: Manager


@dataclass(frozen=True)
class TenantProfile:
    """Tenant with occupancy history and payments, newest first."""

    tenant: Tenant
    assignments: tuple[AssignmentDetail, ...] = ()
    payments: tuple[TenantTransactionDetail, ...] = ()


@dataclass(frozen=True)
class Summary:
    """Point-in-time statistics for the whole house."""

    total_rooms: int
    occupied_rooms: int
    total_tenants: int
    total_income_this_month: Decimal

    def as_dict(self) -> dict[str, int | str]:
        """Return the summary with the income rendered to two decimals."""
        return {
            "total_rooms": self.total_rooms,
            "occupied_rooms": self.occupied_rooms,
            "total_tenants": self.total_tenants,
            "total_income_this_month": f"{self.total_income_this_month:.2f}",
        }
