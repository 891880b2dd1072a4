"""Summary domain service."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, TYPE_CHECKING

from roomledger.domain.entities import Summary
from roomledger.logging_config import get_logger
from roomledger.utils.clock import Clock, to_naive_utc, utc_now
from roomledger.utils.date_parser import month_bounds

if TYPE_CHECKING:
    from roomledger.database.base import Database

logger = get_logger(__name__)


class SummaryService:
    """Service for computing point-in-time house statistics."""

    def __init__(self, db: Database, clock: Clock = utc_now):
        """Initialize summary service.

        Args:
            db: Database instance
            clock: Current-time provider used when no reference instant is given
        """
        self.db = db
        self.clock = clock

    def compute_summary(self, reference_instant: Optional[datetime] = None) -> Summary:
        """Compute the house summary for the calendar month of reference_instant.

        occupied_rooms counts active assignments rather than distinct rooms,
        so a room with two active assignments is counted twice.

        Args:
            reference_instant: Instant whose calendar month defines "this month"
                (defaults to now)

        Returns:
            Summary with room, occupancy and tenant counts and this month's income
        """
        if reference_instant is None:
            reference_instant = self.clock()
        period_start, period_end = month_bounds(to_naive_utc(reference_instant))

        figures = self.db.get_house_figures(period_start, period_end)
        income = sum(figures["payment_amounts"], Decimal("0.00"))

        logger.debug(
            "Summary for %s: %s payments in period", period_start.strftime("%Y-%m"), len(figures["payment_amounts"])
        )
        return Summary(
            total_rooms=figures["room_count"],
            occupied_rooms=figures["active_assignment_count"],
            total_tenants=figures["tenant_count"],
            total_income_this_month=income,
        )
