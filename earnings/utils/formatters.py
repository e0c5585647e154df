"""
Formatting utilities for amounts and day counts.

Functions for turning derived earnings into readable text
for the dashboard and the command line.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Union

from earnings.constants import PLAN_TERM_DAYS


if TYPE_CHECKING:
    from earnings.core.models import DerivedEarnings


CURRENCY_SYMBOLS = ("₹", "$", "€")


def format_currency(
    amount: Union[float, Decimal],
    currency: str = "₹",
    decimals: int = 2,
) -> str:
    """
    Format an amount with a currency symbol or code.

    Args:
        amount: Amount to format
        currency: Symbol (prefixed) or code (suffixed), "₹" by default
        decimals: Digits after the decimal point

    Returns:
        Formatted string

    Example:
        >>> format_currency(Decimal("20000"))
        '₹20,000.00'
        >>> format_currency(1234.5, currency="INR")
        '1,234.50 INR'
    """
    formatted = f"{Decimal(str(amount)):,.{decimals}f}"
    if currency.startswith(CURRENCY_SYMBOLS):
        return f"{currency}{formatted}"
    return f"{formatted} {currency}"


def format_days(days: int) -> str:
    """
    Format days to human-readable string.

    Example:
        >>> format_days(365)
        '365 days (~12.2 months)'
    """
    if days <= 0:
        return "0 days"

    months = round(days / 30, 1)
    day_str = "1 day" if days == 1 else f"{days} days"

    if months >= 1:
        month_str = f"~{int(months)} months" if months == int(months) else f"~{months} months"
        return f"{day_str} ({month_str})"

    return day_str


def format_earnings_report(
    result: "DerivedEarnings",
    plan_amount: Decimal | None = None,
    currency: str = "₹",
) -> str:
    """
    Format derived earnings to a text report.

    Args:
        result: DerivedEarnings object
        plan_amount: Plan amount to show on the first line, if known
        currency: Currency symbol

    Returns:
        Multi-line formatted report
    """
    lines = []
    if plan_amount is not None:
        lines.append(f"Plan amount:       {format_currency(plan_amount, currency)}")
    lines.extend([
        f"Total earnings:    {format_currency(result.total_earnings, currency)}"
        f" ({result.elapsed_days} days elapsed)",
        f"Available balance: {format_currency(result.available_balance, currency)}",
        f"Remaining days:    {result.remaining_days} of {PLAN_TERM_DAYS}",
        f"Remaining amount:  {format_currency(result.remaining_amount, currency)}",
        f"Total team:        {result.total_team_size} ({result.rank.value})",
    ])
    return "\n".join(lines)
