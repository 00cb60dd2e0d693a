"""Deal sheet waterfall, break-even and structuring"""
import math
import pytest
from dataclasses import replace
from engine.compute import compute
from engine.constants import GST_RATE, BREAK_EVEN_UNREACHABLE
from engine.deal import break_even_occupancy, cm_per_occupancy_point, arr_sensitivity
from test_engine_basics import base_inputs

def test_gst_split():
    """684,000 gross is treated as GST-inclusive"""
    m = compute(base_inputs())
    assert abs(m.deal_revenue_net_gst - 610_714.2857) < 0.01
    assert abs(m.deal_monthly_gst - 73_285.7143) < 0.01

def test_gst_round_trip():
    for occ in (10, 37, 60, 95):
        m = compute(base_inputs(occupancy_percent=occ))
        assert math.isclose(m.deal_revenue_net_gst * (1 + GST_RATE), m.monthly_revenue, rel_tol=1e-6)

def test_waterfall_components():
    """OTA on the net-of-GST base, opex on sold room-nights, then MG"""
    m = compute(base_inputs(monthly_mg=100_000))
    assert abs(m.deal_ota_abs - 610_714.2857 * 0.18) < 0.01
    assert abs(m.deal_opex_abs - 19 * 30 * 380) < 1e-6
    assert abs(m.noi_before_mg - 284_185.7143) < 0.01
    assert abs(m.deal_absolute_cm - 184_185.7143) < 0.01
    assert m.operator_profit == m.deal_absolute_cm
    assert abs(m.deal_cm_percent - 184_185.7143 / 610_714.2857 * 100) < 1e-6

def test_cm_percent_without_mg():
    """With no MG, CM% = 82% - opex share (380 * 1.12 / 1200)"""
    m = compute(base_inputs())
    assert abs(m.deal_cm_percent - (82 - 35.466667)) < 1e-4

def test_cm_percent_zero_revenue():
    m = compute(base_inputs(total_rooms=0, monthly_mg=50_000))
    assert m.deal_revenue_net_gst == 0
    assert m.deal_cm_percent == 0

def test_pbp_percent():
    m = compute(base_inputs(monthly_mg=100_000, security_deposit=1_000_000, business_advance=200_000))
    assert abs(m.deal_pbp_percent - 1_200_000 / 184_185.7143 * 100) < 1e-3

def test_pbp_never_negative():
    """A loss-making deal reports 0, not a negative payback"""
    m = compute(base_inputs(monthly_mg=500_000, security_deposit=1_000_000))
    assert m.deal_absolute_cm < 0
    assert m.deal_pbp_percent == 0

def test_mg_consumption():
    m = compute(base_inputs(monthly_mg=100_000))
    assert abs(m.mg_consumption_percent - 100_000 / 284_185.7143 * 100) < 1e-6
    m = compute(base_inputs(monthly_mg=500_000))
    assert m.mg_consumption_percent is None

def test_mg_impact_six_months():
    m = compute(base_inputs())
    assert abs(m.deal_mg_impact_six_months - 610_714.2857 * 0.10 * 6) < 0.01

def test_break_even_exact_solve():
    """CM is zero at the solved occupancy (continuous sold rooms)"""
    inputs = base_inputs(monthly_mg=200_000, round_srn=False)
    m = compute(inputs)
    # 32 rooms * 30 nights / 100 * (1200/1.12 * 0.82 - 380) per occupancy point
    slope = 9.6 * (1200 / 1.12 * 0.82 - 380)
    assert abs(m.break_even_occupancy_deal - 200_000 / slope) < 1e-9
    at_break_even = compute(replace(inputs, occupancy_percent=m.break_even_occupancy_deal))
    assert abs(at_break_even.deal_absolute_cm) < 1e-6

def test_break_even_independent_of_current_occupancy():
    a = compute(base_inputs(monthly_mg=200_000, occupancy_percent=30))
    b = compute(base_inputs(monthly_mg=200_000, occupancy_percent=90))
    assert a.break_even_occupancy_deal == b.break_even_occupancy_deal

def test_break_even_without_mg_is_zero():
    assert compute(base_inputs()).break_even_occupancy_deal == 0

def test_break_even_unreachable():
    """Each sold room loses money once OTA and opex exceed net rate"""
    m = compute(base_inputs(room_price=300, monthly_mg=10_000))
    assert m.break_even_occupancy_deal == BREAK_EVEN_UNREACHABLE
    assert break_even_occupancy(0, 1200, 18, 380, 10_000) == BREAK_EVEN_UNREACHABLE

def test_cm_per_occupancy_point():
    assert abs(cm_per_occupancy_point(32, 1200, 18, 380) - 9.6 * (1200 / 1.12 * 0.82 - 380)) < 1e-9

def test_arr_sensitivity():
    """+100 on 19 rooms for 30 nights, net of GST and 18% OTA"""
    m = compute(base_inputs())
    expected = 100 * 19 * 30 / 1.12 * 0.82
    assert abs(m.arr_sensitivity - expected) < 1e-6
    assert abs(arr_sensitivity(19, 18) - expected) < 1e-6

def test_arr_sensitivity_matches_rate_change():
    """Raising the rate by 100 lifts CM by exactly the sensitivity"""
    base = compute(base_inputs(monthly_mg=80_000))
    bumped = compute(base_inputs(monthly_mg=80_000, room_price=1300))
    assert abs((bumped.deal_absolute_cm - base.deal_absolute_cm) - base.arr_sensitivity) < 1e-6

def test_max_safe_mg_and_hybrid():
    m = compute(base_inputs())
    assert abs(m.max_safe_mg - 284_185.7143 * 0.75) < 0.01
    assert abs(m.hybrid_fixed_mg - 284_185.7143 * 0.5) < 0.01
    assert m.hybrid_rev_share_percent == 15
    assert abs(m.hybrid_projected_payout - (284_185.7143 * 0.5 + 610_714.2857 * 0.15)) < 0.01

def test_structuring_floors_at_zero():
    m = compute(base_inputs(room_price=300))
    assert m.noi_before_mg < 0
    assert m.max_safe_mg == 0
    assert m.hybrid_fixed_mg == 0
    assert m.target_mg_for_target_return == 0

def test_target_mg_uses_deal_investment():
    """Without financing, equity is deposit + advance"""
    m = compute(base_inputs(security_deposit=1_000_000, business_advance=200_000))
    assert abs(m.target_mg_for_target_return - (284_185.7143 - 24_000)) < 0.01

def test_target_mg_uses_property_equity():
    m = compute(base_inputs(security_deposit=1_000_000, include_financials=True,
                            property_value=5_000_000, loan_amount=4_000_000,
                            interest_rate=10, loan_term_years=10))
    # equity 1,000,000 * 24% / 12 = 20,000 per month
    assert abs(m.target_mg_for_target_return - (284_185.7143 - 20_000)) < 0.01

@pytest.mark.parametrize("occupancy,rooms,expected", [
    (80, 32, "lessee"),   # score 66.6, stable
    (80, 10, "hybrid"),   # strong score, too small to be stable
    (60, 32, "hybrid"),   # score 54.6
    (40, 32, "owner"),    # below 50% occupancy
])
def test_recommended_deal_type(occupancy, rooms, expected):
    m = compute(base_inputs(occupancy_percent=occupancy, total_rooms=rooms))
    assert m.recommended_deal_type == expected

def test_deal_strength_score():
    m = compute(base_inputs())
    assert abs(m.deal_strength_score - (60 * 0.6 + 46.533333 * 0.4)) < 1e-4
