"""Utility functions for roomledger."""

from roomledger.utils.date_parser import parse_date, parse_month, month_bounds
from roomledger.utils.amount_parser import parse_amount, quantize_amount
from roomledger.utils.clock import utc_now

__all__ = [
    "parse_date",
    "parse_month",
    "month_bounds",
    "parse_amount",
    "quantize_amount",
    "utc_now",
]
