"""Tests for LedgerService."""

from datetime import date, datetime, timedelta, timezone, UTC
from decimal import Decimal

import pytest

from roomledger.domain.errors import NotFoundError, ValidationError
from roomledger.domain.ledger import DEFAULT_CURRENCY, normalize_amount, normalize_currency


@pytest.fixture
def payment_args(sample_tenant, sample_room, sample_manager):
    return dict(
        tenant_id=sample_tenant.id,
        room_id=sample_room.id,
        manager_id=sample_manager.id,
        amount=Decimal("300"),
        start_month=date(2025, 5, 1),
        end_month=date(2025, 5, 31),
    )


class TestTenantTransactions:
    """Tests for rent payments."""

    def test_record_and_fetch_round_trip(self, ledger_service, payment_args):
        transaction_id = ledger_service.record_tenant_transaction(**payment_args, notes="May rent")

        detail = ledger_service.get_tenant_transaction(transaction_id)
        txn = detail.transaction
        assert txn.amount == Decimal("300.00")
        assert txn.start_month == date(2025, 5, 1)
        assert txn.end_month == date(2025, 5, 31)
        assert txn.notes == "May rent"
        assert detail.tenant.name == "Alice"
        assert detail.room.name == "A-101"
        assert detail.manager.username == "bob"

    def test_payment_date_defaults_to_clock(self, ledger_service, payment_args):
        transaction_id = ledger_service.record_tenant_transaction(**payment_args)

        txn = ledger_service.get_tenant_transaction(transaction_id).transaction
        assert txn.payment_date == datetime(2025, 5, 15, 12, 0)

    def test_aware_payment_date_is_stored_as_utc(self, ledger_service, payment_args):
        paid = datetime(2025, 5, 3, 10, 0, tzinfo=timezone(timedelta(hours=2)))
        transaction_id = ledger_service.record_tenant_transaction(**payment_args, payment_date=paid)

        txn = ledger_service.get_tenant_transaction(transaction_id).transaction
        assert txn.payment_date == datetime(2025, 5, 3, 8, 0)

    def test_amount_is_rounded_to_cents(self, ledger_service, payment_args):
        payment_args["amount"] = Decimal("99.995")
        transaction_id = ledger_service.record_tenant_transaction(**payment_args)

        assert ledger_service.get_tenant_transaction(transaction_id).transaction.amount == Decimal("100.00")

    def test_partial_payments_for_same_period_are_allowed(self, ledger_service, payment_args):
        first = ledger_service.record_tenant_transaction(**payment_args)
        second = ledger_service.record_tenant_transaction(**payment_args)

        assert first != second
        assert len(ledger_service.list_tenant_transactions()) == 2

    def test_missing_fields_are_rejected(self, ledger_service, payment_args):
        payment_args["amount"] = None
        payment_args["end_month"] = None

        with pytest.raises(ValidationError, match="Missing required fields: amount, end_month"):
            ledger_service.record_tenant_transaction(**payment_args)

    def test_negative_amount_is_rejected(self, ledger_service, payment_args):
        payment_args["amount"] = Decimal("-1")

        with pytest.raises(ValidationError, match="must not be negative"):
            ledger_service.record_tenant_transaction(**payment_args)

    def test_zero_amount_is_accepted(self, ledger_service, payment_args):
        payment_args["amount"] = 0
        transaction_id = ledger_service.record_tenant_transaction(**payment_args)

        assert ledger_service.get_tenant_transaction(transaction_id).transaction.amount == Decimal("0.00")

    @pytest.mark.parametrize("amount", [Decimal("1e30"), "99999999999999999999999999999", Decimal("100000000")])
    def test_amount_beyond_column_range_is_rejected(self, ledger_service, payment_args, amount):
        payment_args["amount"] = amount

        with pytest.raises(ValidationError):
            ledger_service.record_tenant_transaction(**payment_args)

        assert ledger_service.list_tenant_transactions() == []

    def test_largest_amount_is_accepted(self, ledger_service, payment_args):
        payment_args["amount"] = Decimal("99999999.99")
        transaction_id = ledger_service.record_tenant_transaction(**payment_args)

        assert ledger_service.get_tenant_transaction(transaction_id).transaction.amount == Decimal("99999999.99")

    def test_inverted_period_is_rejected(self, ledger_service, payment_args):
        payment_args["start_month"] = date(2025, 6, 1)

        with pytest.raises(ValidationError, match="is after end"):
            ledger_service.record_tenant_transaction(**payment_args)

    @pytest.mark.parametrize("field", ["tenant_id", "room_id", "manager_id"])
    def test_missing_reference_is_not_found(self, ledger_service, payment_args, field):
        payment_args[field] = 999

        with pytest.raises(NotFoundError, match="999 not found"):
            ledger_service.record_tenant_transaction(**payment_args)

        assert ledger_service.list_tenant_transactions() == []

    def test_get_missing_transaction(self, ledger_service):
        with pytest.raises(NotFoundError, match="Transaction 42 not found"):
            ledger_service.get_tenant_transaction(42)

    def test_list_newest_first_with_filters(self, ledger_service, payment_args, tenant_service, room_service):
        other_tenant = tenant_service.create_tenant(name="Carol")
        other_room = room_service.create_room(name="B-201")

        older = ledger_service.record_tenant_transaction(
            **payment_args, payment_date=datetime(2025, 4, 30, 23, 0)
        )
        newer = ledger_service.record_tenant_transaction(
            **{**payment_args, "tenant_id": other_tenant, "room_id": other_room},
            payment_date=datetime(2025, 5, 2),
        )

        assert [d.transaction.id for d in ledger_service.list_tenant_transactions()] == [newer, older]
        assert [d.transaction.id for d in ledger_service.list_tenant_transactions(tenant_id=other_tenant)] == [newer]
        assert [
            d.transaction.id for d in ledger_service.list_tenant_transactions(room_id=payment_args["room_id"])
        ] == [older]

        may = ledger_service.list_tenant_transactions(start=datetime(2025, 5, 1), end=datetime(2025, 6, 1))
        assert [d.transaction.id for d in may] == [newer]

    def test_update_changes_only_supplied_fields(self, ledger_service, payment_args):
        transaction_id = ledger_service.record_tenant_transaction(**payment_args, notes="May rent")

        updated = ledger_service.update_tenant_transaction(transaction_id, amount=Decimal("320.5"))

        assert updated.amount == Decimal("320.50")
        assert updated.start_month == date(2025, 5, 1)
        assert updated.end_month == date(2025, 5, 31)
        assert updated.notes == "May rent"

    def test_update_clears_notes(self, ledger_service, payment_args):
        transaction_id = ledger_service.record_tenant_transaction(**payment_args, notes="May rent")

        updated = ledger_service.update_tenant_transaction(transaction_id, clear_notes=True)

        assert updated.notes is None

    def test_update_rejects_period_inverted_by_merge(self, ledger_service, payment_args):
        transaction_id = ledger_service.record_tenant_transaction(**payment_args)

        with pytest.raises(ValidationError, match="is after end"):
            ledger_service.update_tenant_transaction(transaction_id, start_month=date(2025, 7, 1))

        # Rolled back
        txn = ledger_service.get_tenant_transaction(transaction_id).transaction
        assert txn.start_month == date(2025, 5, 1)

    def test_update_rejects_oversized_amount(self, ledger_service, payment_args):
        transaction_id = ledger_service.record_tenant_transaction(**payment_args)

        with pytest.raises(ValidationError, match="too large"):
            ledger_service.update_tenant_transaction(transaction_id, amount=Decimal("1e30"))

        assert ledger_service.get_tenant_transaction(transaction_id).transaction.amount == Decimal("300.00")

    def test_update_missing_transaction(self, ledger_service):
        with pytest.raises(NotFoundError):
            ledger_service.update_tenant_transaction(42, notes="x")

    def test_delete_transaction(self, ledger_service, payment_args):
        transaction_id = ledger_service.record_tenant_transaction(**payment_args)

        ledger_service.delete_tenant_transaction(transaction_id)

        with pytest.raises(NotFoundError):
            ledger_service.get_tenant_transaction(transaction_id)
        with pytest.raises(NotFoundError):
            ledger_service.delete_tenant_transaction(transaction_id)


class TestManagerTransfers:
    """Tests for transfers between managers."""

    def test_record_transfer_defaults(self, ledger_service, manager_service, sample_manager):
        carol = manager_service.register_manager(username="carol", credential="hash-carol")

        transaction_id = ledger_service.record_manager_transfer(
            sender_id=sample_manager.id, receiver_id=carol, amount=Decimal("500")
        )

        detail = ledger_service.get_manager_transaction(transaction_id)
        assert detail.transaction.amount == Decimal("500.00")
        assert detail.transaction.currency == DEFAULT_CURRENCY
        assert detail.transaction.payment_date == datetime(2025, 5, 15, 12, 0)
        assert detail.sender.username == "bob"
        assert detail.receiver.username == "carol"
        assert not detail.transaction.is_internal

    def test_transfer_to_self_is_internal_adjustment(self, ledger_service, sample_manager):
        transaction_id = ledger_service.record_manager_transfer(
            sender_id=sample_manager.id, receiver_id=sample_manager.id, amount=Decimal("10"), currency="usd"
        )

        txn = ledger_service.get_manager_transaction(transaction_id).transaction
        assert txn.is_internal
        assert txn.currency == "USD"

    def test_transfer_to_missing_manager(self, ledger_service, sample_manager):
        with pytest.raises(NotFoundError, match="Manager 999 not found"):
            ledger_service.record_manager_transfer(
                sender_id=sample_manager.id, receiver_id=999, amount=Decimal("10")
            )

    def test_transfer_with_invalid_currency(self, ledger_service, sample_manager):
        with pytest.raises(ValidationError, match="Invalid currency code"):
            ledger_service.record_manager_transfer(
                sender_id=sample_manager.id, receiver_id=sample_manager.id, amount=Decimal("10"), currency="EURO"
            )

    def test_list_transfers_filtered_by_manager(self, ledger_service, manager_service, sample_manager):
        carol = manager_service.register_manager(username="carol", credential="c")
        dave = manager_service.register_manager(username="dave", credential="d")

        first = ledger_service.record_manager_transfer(
            sender_id=sample_manager.id, receiver_id=carol, amount=1, payment_date=datetime(2025, 5, 1, tzinfo=UTC)
        )
        second = ledger_service.record_manager_transfer(
            sender_id=carol, receiver_id=dave, amount=2, payment_date=datetime(2025, 5, 2, tzinfo=UTC)
        )
        ledger_service.record_manager_transfer(
            sender_id=dave, receiver_id=dave, amount=3, payment_date=datetime(2025, 5, 3, tzinfo=UTC)
        )

        assert len(ledger_service.list_manager_transactions()) == 3
        assert [d.transaction.id for d in ledger_service.list_manager_transactions(manager_id=carol)] == [
            second,
            first,
        ]

    def test_transfer_with_oversized_amount(self, ledger_service, sample_manager):
        with pytest.raises(ValidationError):
            ledger_service.record_manager_transfer(
                sender_id=sample_manager.id,
                receiver_id=sample_manager.id,
                amount="99999999999999999999999999999",
            )

        assert ledger_service.list_manager_transactions() == []

    def test_get_missing_transfer(self, ledger_service):
        with pytest.raises(NotFoundError, match="Transfer 7 not found"):
            ledger_service.get_manager_transaction(7)


def test_normalize_amount():
    assert normalize_amount("12.345") == Decimal("12.35")
    assert normalize_amount(7) == Decimal("7.00")
    with pytest.raises(ValidationError):
        normalize_amount("abc")
    with pytest.raises(ValidationError):
        normalize_amount("NaN")
    with pytest.raises(ValidationError, match="must not exceed"):
        normalize_amount("99999999.995")


def test_normalize_currency():
    assert normalize_currency(None) == "EUR"
    assert normalize_currency(" gbp ") == "GBP"
    with pytest.raises(ValidationError):
        normalize_currency("E1R")
