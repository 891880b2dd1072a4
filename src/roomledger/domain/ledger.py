"""Ledger domain service: tenant rent payments and manager transfers.

The ledger is bookkeeping only. There are no balances and no overdraft
checks; a transfer from a manager to themselves is a valid internal
adjustment.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, TYPE_CHECKING

from roomledger.domain import errors
from roomledger.domain.entities import (
    ManagerTransactionDetail,
    TenantTransaction as TenantTransactionEntity,
    TenantTransactionDetail,
)
from roomledger.logging_config import get_logger
from roomledger.utils.amount_parser import quantize_amount
from roomledger.utils.clock import Clock, to_naive_utc, utc_now

if TYPE_CHECKING:
    from roomledger.database.base import Database

logger = get_logger(__name__)

DEFAULT_CURRENCY = "EUR"
# Largest value the amount columns can hold
MAX_AMOUNT = Decimal("99999999.99")

_CURRENCY_RE = re.compile(r"^[A-Za-z]{3}$")


def normalize_amount(amount: Decimal | int | str) -> Decimal:
    """Validate an amount and round it to currency precision.

    Raises:
        ValidationError: If the amount is not a number, is negative or exceeds MAX_AMOUNT
    """
    try:
        value = quantize_amount(amount)
    except ValueError as e:
        raise errors.ValidationError(str(e)) from e
    if value < 0:
        raise errors.ValidationError(f"Amount must not be negative, got {value}")
    if value > MAX_AMOUNT:
        raise errors.ValidationError(f"Amount must not exceed {MAX_AMOUNT}, got {value}")
    return value


def normalize_currency(currency: Optional[str]) -> str:
    """Return an upper-cased three letter currency code, defaulting to EUR.

    Raises:
        ValidationError: If the code is not three letters
    """
    if currency is None:
        return DEFAULT_CURRENCY
    currency = currency.strip()
    if not _CURRENCY_RE.match(currency):
        raise errors.ValidationError(f"Invalid currency code '{currency}'")
    return currency.upper()


def _check_period(start_month: date, end_month: date) -> None:
    if start_month > end_month:
        raise errors.ValidationError(
            f"Billing period start {start_month.isoformat()} is after end {end_month.isoformat()}"
        )


class LedgerService:
    """Service for recording and querying ledger transactions."""

    def __init__(self, db: Database, clock: Clock = utc_now):
        """Initialize ledger service.

        Args:
            db: Database instance
            clock: Current-time provider used to default payment dates
        """
        self.db = db
        self.clock = clock

    # Tenant transactions
    def list_tenant_transactions(
        self,
        tenant_id: Optional[int] = None,
        room_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[TenantTransactionDetail]:
        """List tenant payments, newest first.

        Args:
            tenant_id: Optional tenant filter
            room_id: Optional room filter
            start: Optional inclusive lower bound on payment date
            end: Optional exclusive upper bound on payment date
        """
        return self.db.list_tenant_transactions(
            tenant_id=tenant_id,
            room_id=room_id,
            start=to_naive_utc(start) if start is not None else None,
            end=to_naive_utc(end) if end is not None else None,
        )

    def get_tenant_transaction(self, transaction_id: int) -> TenantTransactionDetail:
        """Get a tenant payment by ID.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        detail = self.db.get_tenant_transaction(transaction_id)
        if detail is None:
            raise errors.NotFoundError(errors.tenant_transaction_not_found(transaction_id))
        return detail

    def record_tenant_transaction(
        self,
        tenant_id: Optional[int],
        room_id: Optional[int],
        manager_id: Optional[int],
        amount: Optional[Decimal],
        start_month: Optional[date],
        end_month: Optional[date],
        payment_date: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Record a rent payment.

        Several payments for the same tenant and period are allowed
        (e.g. partial payments).

        Args:
            tenant_id: Paying tenant
            room_id: Room the payment is for
            manager_id: Manager recording the payment
            amount: Non-negative amount
            start_month: First day of the billing period
            end_month: Last day of the billing period
            payment_date: When it was paid (defaults to now)
            notes: Optional notes

        Returns:
            Transaction ID

        Raises:
            ValidationError: If a required field is missing or invalid
            NotFoundError: If tenant, room or manager doesn't exist
        """
        missing = [
            field
            for field, value in (
                ("tenant_id", tenant_id),
                ("room_id", room_id),
                ("manager_id", manager_id),
                ("amount", amount),
                ("start_month", start_month),
                ("end_month", end_month),
            )
            if value is None
        ]
        if missing:
            raise errors.ValidationError(errors.missing_fields(*missing))

        value = normalize_amount(amount)
        _check_period(start_month, end_month)
        if payment_date is None:
            payment_date = self.clock()

        transaction_id = self.db.create_tenant_transaction(
            tenant_id=tenant_id,
            room_id=room_id,
            manager_id=manager_id,
            amount=value,
            start_month=start_month,
            end_month=end_month,
            payment_date=to_naive_utc(payment_date),
            notes=notes,
        )
        logger.info(
            "Recorded payment %s of %s from tenant %s for room %s",
            transaction_id,
            value,
            tenant_id,
            room_id,
        )
        return transaction_id

    def update_tenant_transaction(
        self,
        transaction_id: int,
        notes: Optional[str] = None,
        amount: Optional[Decimal] = None,
        start_month: Optional[date] = None,
        end_month: Optional[date] = None,
        clear_notes: bool = False,
    ) -> TenantTransactionEntity:
        """Update only the supplied fields of a payment.

        Args:
            transaction_id: Transaction ID
            notes: Optional new notes
            amount: Optional new amount
            start_month: Optional new period start
            end_month: Optional new period end
            clear_notes: If True, remove the notes (notes must be None)

        Raises:
            NotFoundError: If transaction doesn't exist
            ValidationError: If the amount or resulting period is invalid
        """
        if clear_notes and notes is not None:
            raise errors.ValidationError("Cannot set both notes and clear_notes")
        if start_month is not None and end_month is not None:
            _check_period(start_month, end_month)

        transaction = self.db.update_tenant_transaction(
            transaction_id,
            amount=normalize_amount(amount) if amount is not None else None,
            start_month=start_month,
            end_month=end_month,
            notes=notes,
            update_notes=clear_notes,
        )
        logger.info("Updated payment %s", transaction_id)
        return transaction

    def delete_tenant_transaction(self, transaction_id: int) -> None:
        """Delete a payment.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        self.db.delete_tenant_transaction(transaction_id)
        logger.info("Deleted payment %s", transaction_id)

    # Manager transactions
    def list_manager_transactions(self, manager_id: Optional[int] = None) -> list[ManagerTransactionDetail]:
        """List transfers, newest first, optionally only those involving a manager."""
        return self.db.list_manager_transactions(manager_id=manager_id)

    def get_manager_transaction(self, transaction_id: int) -> ManagerTransactionDetail:
        """Get a transfer by ID.

        Raises:
            NotFoundError: If transfer doesn't exist
        """
        detail = self.db.get_manager_transaction(transaction_id)
        if detail is None:
            raise errors.NotFoundError(errors.manager_transaction_not_found(transaction_id))
        return detail

    def record_manager_transfer(
        self,
        sender_id: Optional[int],
        receiver_id: Optional[int],
        amount: Optional[Decimal],
        currency: Optional[str] = None,
        payment_date: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Record a transfer of funds between managers.

        Returns:
            Transaction ID

        Raises:
            ValidationError: If a required field is missing or invalid
            NotFoundError: If sender or receiver doesn't exist
        """
        missing = [
            field
            for field, value in (("sender_id", sender_id), ("receiver_id", receiver_id), ("amount", amount))
            if value is None
        ]
        if missing:
            raise errors.ValidationError(errors.missing_fields(*missing))

        value = normalize_amount(amount)
        code = normalize_currency(currency)
        if payment_date is None:
            payment_date = self.clock()

        transaction_id = self.db.create_manager_transaction(
            sender_id=sender_id,
            receiver_id=receiver_id,
            amount=value,
            currency=code,
            payment_date=to_naive_utc(payment_date),
            notes=notes,
        )
        logger.info(
            "Recorded transfer %s of %s %s from manager %s to manager %s",
            transaction_id,
            value,
            code,
            sender_id,
            receiver_id,
        )
        return transaction_id
