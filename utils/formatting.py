"""Indian-style (lakh/crore) number and currency formatting."""

import math


def group_indian(integer_digits):
    """'12345678' -> '1,23,45,678' (last three digits, then pairs)."""
    if len(integer_digits) <= 3:
        return integer_digits
    head, tail = integer_digits[:-3], integer_digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_number(value, decimals=1):
    """Group with Indian separators, trimming trailing zeros up to `decimals` places."""
    if value is None or not math.isfinite(value):
        return "0"
    text = f"{abs(value):.{decimals}f}"
    if decimals > 0:
        text = text.rstrip("0").rstrip(".")
    int_part, _, frac = text.partition(".")
    grouped = group_indian(int_part)
    if frac:
        grouped = f"{grouped}.{frac}"
    if value < 0 and grouped.strip("0.,"):
        grouped = "-" + grouped
    return grouped


def format_currency(value, symbol="₹"):
    """Whole-unit currency, e.g. 684000 -> '₹6,84,000'."""
    if value is None or not math.isfinite(value):
        value = 0
    rounded = int(math.floor(abs(value) + 0.5))
    sign = "-" if value < 0 and rounded else ""
    return f"{sign}{symbol}{group_indian(str(rounded))}"


def format_payback(years, cap=50):
    """Payback years for display; 0 means not applicable, beyond `cap` is shown as '>cap'."""
    if years <= 0:
        return "N/A"
    if years > cap:
        return f">{cap} Yrs"
    return f"{format_number(years, 1)} Yrs"
