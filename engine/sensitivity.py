"""Occupancy and room-rate sweeps built from repeated engine calls"""
from dataclasses import replace
from typing import Iterable

import numpy as np
import pandas as pd

from .models import InputState
from .compute import compute


def occupancy_sweep(inputs: InputState, step: int = 10) -> pd.DataFrame:
    """One engine run per occupancy point from 0% to 100% inclusive"""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    points = np.append(np.arange(0, 100, step), 100)
    rows = []
    for occ in points:
        m = compute(replace(inputs, occupancy_percent=float(occ)))
        rows.append({
            "occupancy": float(occ),
            "gross_revenue": m.monthly_revenue,
            "net_income": m.monthly_net,
            "deal_absolute_cm": m.deal_absolute_cm,
        })
    return pd.DataFrame(rows)


def rate_sweep(inputs: InputState, deltas: Iterable[float] = (-300, -200, -100, 0, 100, 200, 300)) -> pd.DataFrame:
    """Engine runs at room price +/- each delta (prices below 0 are skipped)"""
    rows = []
    for delta in deltas:
        price = inputs.room_price + delta
        if price < 0:
            continue
        m = compute(replace(inputs, room_price=price))
        rows.append({
            "room_price": price,
            "delta": delta,
            "monthly_revenue": m.monthly_revenue,
            "monthly_net": m.monthly_net,
            "deal_absolute_cm": m.deal_absolute_cm,
            "deal_cm_percent": m.deal_cm_percent,
        })
    return pd.DataFrame(rows)
