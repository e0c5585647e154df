"""
Utility functions for the earnings package.

Formatting helpers for amounts, day counts and reports.
"""

from earnings.utils.formatters import (
    format_currency,
    format_days,
    format_earnings_report,
)

__all__ = [
    "format_currency",
    "format_days",
    "format_earnings_report",
]
