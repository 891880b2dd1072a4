"""Domain layer for roomledger application."""

from roomledger.domain.room import RoomService
from roomledger.domain.tenant import TenantService
from roomledger.domain.manager import ManagerService
from roomledger.domain.assignment import AssignmentService
from roomledger.domain.ledger import LedgerService
from roomledger.domain.summary import SummaryService
from roomledger.domain.deletion import DeletionGuard

__all__ = [
    "RoomService",
    "TenantService",
    "ManagerService",
    "AssignmentService",
    "LedgerService",
    "SummaryService",
    "DeletionGuard",
]
