"""Standard (dashboard) deduction model: flat OTA, maintenance, extra costs"""
from typing import Iterable, Optional
import math

from .constants import OTA_COMMISSION_RATE, DAYS_IN_MONTH, DAYS_IN_YEAR, MONTHS_IN_YEAR


def monthly_extra_total(amounts: Iterable[Optional[float]]) -> float:
    """Sum of monthly extra deductions; blank, negative or non-finite amounts count as 0"""
    total = 0.0
    for amount in amounts:
        if amount is None:
            continue
        try:
            value = float(amount)
        except (TypeError, ValueError):
            continue
        if math.isfinite(value) and value > 0:
            total += value
    return total


def standard_deductions(revenue: dict, srn: float, maintenance_cost_per_room: float,
                        monthly_extra: float) -> dict:
    """
    Apply the flat OTA rate to gross revenue and subtract maintenance and extras.

    Maintenance is a per-day factor (sold rooms x cost) scaled by 30/365;
    extras are monthly amounts, x12 for the year and /30 for the day.
    Returns nested dicts keyed by cadence plus the NOI under "net".
    """
    ota = {k: revenue[k] * OTA_COMMISSION_RATE for k in ("daily", "monthly", "yearly")}

    maintenance_factor = srn * maintenance_cost_per_room
    maintenance = {
        "daily": maintenance_factor,
        "monthly": maintenance_factor * DAYS_IN_MONTH,
        "yearly": maintenance_factor * DAYS_IN_YEAR,
    }

    extra = {
        "daily": monthly_extra / DAYS_IN_MONTH,
        "monthly": monthly_extra,
        "yearly": monthly_extra * MONTHS_IN_YEAR,
    }

    net = {
        k: revenue[k] - (ota[k] + maintenance[k] + extra[k])
        for k in ("daily", "monthly", "yearly")
    }

    return {"ota": ota, "maintenance": maintenance, "extra": extra, "net": net}


def net_margin_percent(monthly_net: float, monthly_revenue: float) -> float:
    return (monthly_net / monthly_revenue) * 100 if monthly_revenue > 0 else 0.0
