from dataclasses import replace
import math

from .models import InputState, CalculationMetrics
from .revenue import sold_rooms, gross_revenue
from .deal import deal_waterfall, break_even_occupancy, arr_sensitivity, deal_structuring
from .deductions import monthly_extra_total, standard_deductions, net_margin_percent
from .finance import financing_overlay, valuation

_NUMERIC_FIELDS = (
    "total_rooms", "occupancy_percent", "room_price", "maintenance_cost_per_room",
    "property_value", "loan_amount", "interest_rate", "loan_term_years",
    "ota_percent", "monthly_mg", "security_deposit", "business_advance",
)


def _non_negative(value) -> float:
    """Blank, non-numeric, non-finite or negative values count as 0"""
    if value is None:
        return 0.0
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def sanitize(inputs: InputState) -> InputState:
    """Copy of inputs with every numeric field made finite and non-negative"""
    return replace(inputs, **{name: _non_negative(getattr(inputs, name)) for name in _NUMERIC_FIELDS})


def compute(inputs: InputState) -> CalculationMetrics:
    """
    Compute every revenue, deal-sheet and financing metric for one input snapshot.

    Pure and total: the same inputs always give the same metrics, and
    degenerate arithmetic resolves to 0 (or the 999 payback sentinel)
    instead of raising.

    Args:
        inputs: Form snapshot; it is not modified
    """
    i = sanitize(inputs)

    # 1. Sold rooms per night
    srn = sold_rooms(i.total_rooms, i.occupancy_percent, i.round_srn)

    # 2. Gross revenue
    rev = gross_revenue(srn, i.room_price)

    # 3. Deal sheet
    deal = deal_waterfall(
        rev["monthly"], srn, i.ota_percent, i.maintenance_cost_per_room,
        i.monthly_mg, i.security_deposit, i.business_advance,
    )
    structuring = deal_structuring(i, deal["noi_before_mg"], deal["revenue_net_gst"])

    # 4. Standard deductions / NOI
    monthly_extra = monthly_extra_total(d.amount for d in i.extra_deductions)
    std = standard_deductions(rev, srn, i.maintenance_cost_per_room, monthly_extra)
    net = std["net"]

    # 5. Financing
    fin = financing_overlay(
        i.include_financials, i.property_value, i.loan_amount,
        i.interest_rate, i.loan_term_years, net["monthly"], net["yearly"],
    )

    return CalculationMetrics(
        srn=srn,
        daily_revenue=rev["daily"],
        monthly_revenue=rev["monthly"],
        yearly_revenue=rev["yearly"],
        daily_ota=std["ota"]["daily"],
        monthly_ota=std["ota"]["monthly"],
        yearly_ota=std["ota"]["yearly"],
        daily_maintenance=std["maintenance"]["daily"],
        monthly_maintenance=std["maintenance"]["monthly"],
        yearly_maintenance=std["maintenance"]["yearly"],
        daily_extra=std["extra"]["daily"],
        monthly_extra=std["extra"]["monthly"],
        yearly_extra=std["extra"]["yearly"],
        daily_net=net["daily"],
        monthly_net=net["monthly"],
        yearly_net=net["yearly"],
        net_margin_percent=net_margin_percent(net["monthly"], rev["monthly"]),
        monthly_emi=fin["monthly_emi"],
        yearly_emi=fin["yearly_emi"],
        monthly_cash_flow=fin["monthly_cash_flow"],
        yearly_cash_flow=fin["yearly_cash_flow"],
        dscr=fin["dscr"],
        roi=fin["roi"],
        valuation=valuation(net["yearly"]),
        payback_period=fin["payback_period"],
        deal_monthly_gst=deal["monthly_gst"],
        deal_revenue_net_gst=deal["revenue_net_gst"],
        deal_ota_abs=deal["ota_abs"],
        deal_opex_abs=deal["opex_abs"],
        noi_before_mg=deal["noi_before_mg"],
        deal_absolute_cm=deal["absolute_cm"],
        deal_cm_percent=deal["cm_percent"],
        deal_pbp_percent=deal["pbp_percent"],
        deal_mg_impact_six_months=deal["mg_impact_six_months"],
        mg_consumption_percent=deal["mg_consumption_percent"],
        break_even_occupancy_deal=break_even_occupancy(
            i.total_rooms, i.room_price, i.ota_percent, i.maintenance_cost_per_room, i.monthly_mg
        ),
        arr_sensitivity=arr_sensitivity(srn, i.ota_percent),
        monthly_mg=i.monthly_mg,
        operator_profit=deal["absolute_cm"],
        **structuring,
    )
