"""
Deal-sheet decomposition and deal structuring.

Monthly gross revenue is treated as GST-inclusive. The deal OTA rate applies to
the net-of-GST base, opex is charged on sold room-nights, and the monthly
minimum guarantee (MG) is a fixed obligation on top.
"""
from .constants import (
    GST_RATE, DAYS_IN_MONTH, MONTHS_IN_YEAR, ARR_STEP, BREAK_EVEN_UNREACHABLE,
    MG_SAFETY_BUFFER, TARGET_ANNUAL_RETURN, HYBRID_FIXED_SHARE, HYBRID_REV_SHARE_PERCENT,
    MG_IMPACT_SHARE, MG_IMPACT_MONTHS,
    SCORE_OCCUPANCY_WEIGHT, SCORE_MARGIN_WEIGHT, LESSEE_SCORE_THRESHOLD,
    OWNER_SCORE_THRESHOLD, OWNER_OCCUPANCY_THRESHOLD, STABLE_MIN_OCCUPANCY, STABLE_MIN_ROOMS,
)
from .models import InputState


def net_of_gst(gross: float) -> float:
    return gross / (1 + GST_RATE)


def deal_waterfall(monthly_revenue: float, srn: float, ota_percent: float,
                   maintenance_cost_per_room: float, monthly_mg: float,
                   security_deposit: float, business_advance: float) -> dict:
    """GST -> OTA -> opex -> MG waterfall for one month of operation"""
    revenue_net_gst = net_of_gst(monthly_revenue)
    monthly_gst = monthly_revenue - revenue_net_gst
    ota_abs = revenue_net_gst * (ota_percent / 100)
    opex_abs = srn * DAYS_IN_MONTH * maintenance_cost_per_room

    noi_before_mg = revenue_net_gst - ota_abs - opex_abs
    absolute_cm = noi_before_mg - monthly_mg

    cm_percent = (absolute_cm / revenue_net_gst) * 100 if revenue_net_gst > 0 else 0.0

    # PBP only has meaning while the deal earns a positive margin
    total_investment = security_deposit + business_advance
    pbp_percent = (total_investment / absolute_cm) * 100 if absolute_cm > 0 else 0.0

    if absolute_cm > 0:
        mg_consumption = monthly_mg / (monthly_mg + absolute_cm) * 100
    else:
        mg_consumption = None

    return {
        "revenue_net_gst": revenue_net_gst,
        "monthly_gst": monthly_gst,
        "ota_abs": ota_abs,
        "opex_abs": opex_abs,
        "noi_before_mg": noi_before_mg,
        "absolute_cm": absolute_cm,
        "cm_percent": cm_percent,
        "pbp_percent": pbp_percent,
        "mg_consumption_percent": mg_consumption,
        "mg_impact_six_months": revenue_net_gst * MG_IMPACT_SHARE * MG_IMPACT_MONTHS,
    }


def cm_per_occupancy_point(total_rooms: float, room_price: float, ota_percent: float,
                           maintenance_cost_per_room: float) -> float:
    """Monthly contribution (before MG) added by one percentage point of occupancy"""
    per_room_night = net_of_gst(room_price) * (1 - ota_percent / 100) - maintenance_cost_per_room
    return total_rooms / 100 * DAYS_IN_MONTH * per_room_night


def break_even_occupancy(total_rooms: float, room_price: float, ota_percent: float,
                         maintenance_cost_per_room: float, monthly_mg: float) -> float:
    """
    Occupancy % at which the deal contribution margin reaches zero.

    Revenue, OTA and opex are all linear in occupancy, so CM(occ) is a line
    with intercept -MG; solve it directly (continuous sold rooms).
    """
    slope = cm_per_occupancy_point(total_rooms, room_price, ota_percent, maintenance_cost_per_room)
    if slope <= 0:
        return BREAK_EVEN_UNREACHABLE
    return monthly_mg / slope


def arr_sensitivity(srn: float, ota_percent: float, step: float = ARR_STEP) -> float:
    """Monthly net-of-GST, net-of-OTA gain from raising the room rate by `step`"""
    delta_gross = step * srn * DAYS_IN_MONTH
    delta_net_gst = net_of_gst(delta_gross)
    return delta_net_gst - delta_net_gst * (ota_percent / 100)


def is_stable(occupancy_percent: float, total_rooms: float) -> bool:
    return occupancy_percent >= STABLE_MIN_OCCUPANCY and total_rooms >= STABLE_MIN_ROOMS


def deal_structuring(inputs: InputState, noi_before_mg: float, revenue_net_gst: float) -> dict:
    """MG limits, hybrid structure and lessee/owner/hybrid recommendation"""
    max_safe_mg = max(0.0, noi_before_mg * (1 - MG_SAFETY_BUFFER))

    if inputs.include_financials:
        equity = max(inputs.property_value - inputs.loan_amount, 0.0)
    else:
        equity = inputs.security_deposit + inputs.business_advance
    target_annual = equity * TARGET_ANNUAL_RETURN
    target_mg = max(0.0, (noi_before_mg * MONTHS_IN_YEAR - target_annual) / MONTHS_IN_YEAR)

    hybrid_fixed = max(0.0, noi_before_mg * HYBRID_FIXED_SHARE)
    hybrid_payout = hybrid_fixed + revenue_net_gst * (HYBRID_REV_SHARE_PERCENT / 100)

    margin = (noi_before_mg / revenue_net_gst) * 100 if revenue_net_gst > 0 else 0.0
    score = inputs.occupancy_percent * SCORE_OCCUPANCY_WEIGHT + margin * SCORE_MARGIN_WEIGHT

    if score > LESSEE_SCORE_THRESHOLD and is_stable(inputs.occupancy_percent, inputs.total_rooms):
        recommended = "lessee"
    elif score < OWNER_SCORE_THRESHOLD or inputs.occupancy_percent < OWNER_OCCUPANCY_THRESHOLD:
        recommended = "owner"
    else:
        recommended = "hybrid"

    return {
        "max_safe_mg": max_safe_mg,
        "target_mg_for_target_return": target_mg,
        "hybrid_fixed_mg": hybrid_fixed,
        "hybrid_rev_share_percent": HYBRID_REV_SHARE_PERCENT,
        "hybrid_projected_payout": hybrid_payout,
        "deal_strength_score": score,
        "recommended_deal_type": recommended,
    }
