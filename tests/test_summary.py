"""Tests for SummaryService."""

from datetime import date, datetime, timedelta, timezone, UTC
from decimal import Decimal

import pytest

from roomledger.domain.entities import Summary
from roomledger.domain.summary import SummaryService


def _pay(ledger_service, tenant, room, manager, amount, paid):
    return ledger_service.record_tenant_transaction(
        tenant_id=tenant.id,
        room_id=room.id,
        manager_id=manager.id,
        amount=Decimal(amount),
        start_month=date(2025, 5, 1),
        end_month=date(2025, 5, 31),
        payment_date=paid,
    )


def test_empty_store(summary_service):
    summary = summary_service.compute_summary()

    assert summary == Summary(
        total_rooms=0, occupied_rooms=0, total_tenants=0, total_income_this_month=Decimal("0.00")
    )
    assert summary.as_dict() == {
        "total_rooms": 0,
        "occupied_rooms": 0,
        "total_tenants": 0,
        "total_income_this_month": "0.00",
    }


def test_house_with_one_occupied_room(
    summary_service, ledger_service, room_service, sample_assignment, sample_tenant, sample_room, sample_manager
):
    room_service.create_room(name="B-201")
    _pay(ledger_service, sample_tenant, sample_room, sample_manager, "300", datetime(2025, 5, 3, 9, 0))
    _pay(ledger_service, sample_tenant, sample_room, sample_manager, "250", datetime(2025, 5, 20, 18, 30))

    summary = summary_service.compute_summary()

    assert summary.as_dict() == {
        "total_rooms": 2,
        "occupied_rooms": 1,
        "total_tenants": 1,
        "total_income_this_month": "550.00",
    }


def test_income_counts_only_the_reference_month(
    summary_service, ledger_service, sample_tenant, sample_room, sample_manager
):
    _pay(ledger_service, sample_tenant, sample_room, sample_manager, "100", datetime(2025, 4, 30, 23, 59, 59))
    _pay(ledger_service, sample_tenant, sample_room, sample_manager, "200", datetime(2025, 5, 1, 0, 0))
    _pay(ledger_service, sample_tenant, sample_room, sample_manager, "300", datetime(2025, 5, 31, 23, 59, 59))
    _pay(ledger_service, sample_tenant, sample_room, sample_manager, "400", datetime(2025, 6, 1, 0, 0))

    assert summary_service.compute_summary().total_income_this_month == Decimal("500.00")
    assert summary_service.compute_summary(datetime(2025, 4, 10, tzinfo=UTC)).total_income_this_month == Decimal(
        "100.00"
    )
    assert summary_service.compute_summary(datetime(2025, 6, 10, tzinfo=UTC)).total_income_this_month == Decimal(
        "400.00"
    )


def test_reference_instant_is_interpreted_in_utc(
    summary_service, ledger_service, sample_tenant, sample_room, sample_manager
):
    _pay(ledger_service, sample_tenant, sample_room, sample_manager, "75", datetime(2025, 5, 31, 12, 0))

    # 2025-06-01 01:00 at UTC+2 is still May 31st in UTC
    reference = datetime(2025, 6, 1, 1, 0, tzinfo=timezone(timedelta(hours=2)))
    assert summary_service.compute_summary(reference).total_income_this_month == Decimal("75.00")


def test_income_sums_without_float_drift(summary_service, ledger_service, sample_tenant, sample_room, sample_manager):
    for _ in range(3):
        _pay(ledger_service, sample_tenant, sample_room, sample_manager, "0.10", datetime(2025, 5, 5))

    assert summary_service.compute_summary().as_dict()["total_income_this_month"] == "0.30"


def test_occupied_rooms_counts_active_assignments(
    summary_service, assignment_service, tenant_service, sample_assignment, sample_room
):
    carol = tenant_service.create_tenant(name="Carol")
    assignment_service.create_assignment(tenant_id=carol, room_id=sample_room.id, start_date=date(2025, 6, 1))

    summary = summary_service.compute_summary()

    assert summary.total_rooms == 1
    assert summary.occupied_rooms == 2


def test_closed_assignments_are_not_occupied(summary_service, assignment_service, sample_assignment):
    assignment_service.close_assignment(sample_assignment.assignment.id, date(2025, 5, 10))

    assert summary_service.compute_summary().occupied_rooms == 0


def test_default_clock_is_used_without_reference(temp_db):
    service = SummaryService(temp_db, clock=lambda: datetime(2030, 1, 1, tzinfo=UTC))

    assert service.compute_summary().total_income_this_month == Decimal("0.00")
