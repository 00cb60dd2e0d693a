"""Occupancy resolution and gross revenue projection"""
import math

from .constants import DAYS_IN_MONTH, DAYS_IN_YEAR


def sold_rooms(total_rooms: float, occupancy_percent: float, round_srn: bool) -> float:
    """Sold rooms per night; rounded half-up to whole rooms when round_srn is set"""
    srn = total_rooms * (occupancy_percent / 100.0)
    if round_srn:
        # half-up, not round()'s half-to-even: 12.5 rooms -> 13
        srn = float(math.floor(srn + 0.5))
    return srn


def gross_revenue(srn: float, room_price: float) -> dict:
    """Daily/monthly/yearly gross revenue on the fixed 30/365-day convention"""
    daily = srn * room_price
    return {
        "daily": daily,
        "monthly": daily * DAYS_IN_MONTH,
        "yearly": daily * DAYS_IN_YEAR,
    }
