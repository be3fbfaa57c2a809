"""
Display helpers for impact figures.

Currency is rendered in whole US dollars and percentages with at most one
decimal place. Both round half away from zero, matching what dashboards built
on top of the engine display.
"""

from decimal import ROUND_HALF_UP, Decimal


def format_currency(amount: float) -> str:
    """
    Format an amount as whole US dollars.

    Example:
        >>> format_currency(71943.75)
        '$71,944'
    """
    whole = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if whole < 0 else ""
    return f"{sign}${abs(whole):,}"


def format_percentage(value: float) -> str:
    """
    Format a fraction as a percentage with at most one decimal place.

    Example:
        >>> format_percentage(0.2)
        '20%'
        >>> format_percentage(0.00135)
        '0.1%'
    """
    pct = (Decimal(str(value)) * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    text = f"{pct:,}"
    if text.endswith(".0"):
        text = text[:-2]
    if text in ("-0", "-0.0"):
        text = "0"
    return f"{text}%"
