"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay
stable when the database schema changes.
"""

from roomledger.domain import entities as domain
from roomledger.database.models import (
    Manager as ORMManager,
    Room as ORMRoom,
    Tenant as ORMTenant,
    RoomAssignment as ORMRoomAssignment,
    TenantTransaction as ORMTenantTransaction,
    ManagerTransaction as ORMManagerTransaction,
)
from roomledger.utils.amount_parser import quantize_amount


def manager_to_domain(orm_manager: ORMManager) -> domain.Manager:
    """Convert SQLAlchemy Manager model to domain Manager entity."""
    return domain.Manager(
        id=orm_manager.id,
        username=orm_manager.username,
        credential=orm_manager.credential,
        created_at=orm_manager.created_at,
    )


def room_to_domain(orm_room: ORMRoom) -> domain.Room:
    """Convert SQLAlchemy Room model to domain Room entity."""
    return domain.Room(
        id=orm_room.id,
        name=orm_room.name,
        notes=orm_room.notes,
        created_at=orm_room.created_at,
    )


def tenant_to_domain(orm_tenant: ORMTenant) -> domain.Tenant:
    """Convert SQLAlchemy Tenant model to domain Tenant entity."""
    return domain.Tenant(
        id=orm_tenant.id,
        name=orm_tenant.name,
        notes=orm_tenant.notes,
        created_at=orm_tenant.created_at,
    )


def assignment_to_domain(orm_assignment: ORMRoomAssignment) -> domain.RoomAssignment:
    """Convert SQLAlchemy RoomAssignment model to domain RoomAssignment entity."""
    return domain.RoomAssignment(
        id=orm_assignment.id,
        tenant_id=orm_assignment.tenant_id,
        room_id=orm_assignment.room_id,
        start_date=orm_assignment.start_date,
        end_date=orm_assignment.end_date,
        created_at=orm_assignment.created_at,
    )


def assignment_detail_to_domain(orm_assignment: ORMRoomAssignment) -> domain.AssignmentDetail:
    """Convert an assignment row and its tenant/room to an AssignmentDetail."""
    return domain.AssignmentDetail(
        assignment=assignment_to_domain(orm_assignment),
        tenant=tenant_to_domain(orm_assignment.tenant),
        room=room_to_domain(orm_assignment.room),
    )


def tenant_transaction_to_domain(orm_txn: ORMTenantTransaction) -> domain.TenantTransaction:
    """Convert SQLAlchemy TenantTransaction model to domain entity."""
    return domain.TenantTransaction(
        id=orm_txn.id,
        tenant_id=orm_txn.tenant_id,
        room_id=orm_txn.room_id,
        manager_id=orm_txn.manager_id,
        amount=quantize_amount(orm_txn.amount),
        start_month=orm_txn.start_month,
        end_month=orm_txn.end_month,
        payment_date=orm_txn.payment_date,
        notes=orm_txn.notes,
    )


def tenant_transaction_detail_to_domain(
    orm_txn: ORMTenantTransaction,
) -> domain.TenantTransactionDetail:
    """Convert a payment row and its tenant/room/manager to a detail view."""
    return domain.TenantTransactionDetail(
        transaction=tenant_transaction_to_domain(orm_txn),
        tenant=tenant_to_domain(orm_txn.tenant),
        room=room_to_domain(orm_txn.room),
        manager=manager_to_domain(orm_txn.manager),
    )


def manager_transaction_to_domain(orm_txn: ORMManagerTransaction) -> domain.ManagerTransaction:
    """Convert SQLAlchemy ManagerTransaction model to domain entity."""
    return domain.ManagerTransaction(
        id=orm_txn.id,
        sender_id=orm_txn.sender_id,
        receiver_id=orm_txn.receiver_id,
        amount=quantize_amount(orm_txn.amount),
        currency=orm_txn.currency,
        payment_date=orm_txn.payment_date,
        notes=orm_txn.notes,
    )


def manager_transaction_detail_to_domain(
    orm_txn: ORMManagerTransaction,
) -> domain.ManagerTransactionDetail:
    """Convert a transfer row and its sender/receiver to a detail view."""
    return domain.ManagerTransactionDetail(
        transaction=manager_transaction_to_domain(orm_txn),
        sender=manager_to_domain(orm_txn.sender),
        receiver=manager_to_domain(orm_txn.receiver),
    )
