"""Loan amortization, DSCR, ROI, payback and valuation"""
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from .constants import DEFAULT_CAP_RATE, MONTHS_IN_YEAR, PAYBACK_NEVER


def monthly_payment(principal: float, annual_rate_pct: float, term_years: float) -> float:
    """EMI for an amortizing loan; annual_rate_pct is a percentage (10.5 = 10.5%)"""
    r = annual_rate_pct / 12.0 / 100.0
    n = int(round(term_years * 12))
    if principal <= 0 or n <= 0:
        return 0.0
    if r == 0:
        return principal / n
    growth = (1 + r) ** n
    return principal * r * growth / (growth - 1)


def amortization_schedule(principal: float, annual_rate_pct: float, term_years: float,
                          months: Optional[int] = None, start: Optional[date] = None):
    """Month-by-month split of each EMI into interest and principal"""
    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    total = int(round(term_years * 12))
    months = total if months is None else min(months, total)
    start = start or date.today().replace(day=1)
    r = annual_rate_pct / 12.0 / 100.0

    schedule = []
    bal = principal
    for m in range(months):
        interest = bal * r
        principal_pay = max(0.0, min(pmt - interest, bal))
        bal = max(0.0, bal - principal_pay)
        schedule.append({
            "month": m + 1,
            "label": (start + relativedelta(months=m)).strftime("%b %Y"),
            "payment": pmt,
            "interest": interest,
            "principal": principal_pay,
            "balance": bal,
        })

    return schedule


def dscr(noi: float, debt_service: float) -> float:
    """Debt Service Coverage Ratio; 0 when there is no debt service"""
    return (noi / debt_service) if debt_service > 0 else 0.0


def valuation(yearly_noi: float, cap_rate: float = DEFAULT_CAP_RATE) -> float:
    """Direct capitalization of yearly NOI"""
    return yearly_noi / cap_rate if yearly_noi > 0 else 0.0


def payback_years(investment: float, yearly_return: float) -> float:
    return investment / yearly_return if yearly_return > 0 else PAYBACK_NEVER


def financing_overlay(include_financials: bool, property_value: float, loan_amount: float,
                      interest_rate: float, loan_term_years: float,
                      monthly_net: float, yearly_net: float) -> dict:
    """
    Layer debt service over NOI.

    With a loan (amount and rate both positive) returns are measured on equity
    after EMI; without one, on the full property value. Inactive financing
    leaves cash flow equal to NOI and every ratio at 0.
    """
    out = {
        "monthly_emi": 0.0,
        "yearly_emi": 0.0,
        "monthly_cash_flow": monthly_net,
        "yearly_cash_flow": yearly_net,
        "dscr": 0.0,
        "roi": 0.0,
        "payback_period": 0.0,
    }
    if not include_financials:
        return out

    if loan_amount > 0 and interest_rate > 0:
        emi = monthly_payment(loan_amount, interest_rate, loan_term_years)
        yearly_emi = emi * MONTHS_IN_YEAR
        yearly_cash_flow = yearly_net - yearly_emi
        equity = max(property_value - loan_amount, 0.0)
        out.update(
            monthly_emi=emi,
            yearly_emi=yearly_emi,
            monthly_cash_flow=monthly_net - emi,
            yearly_cash_flow=yearly_cash_flow,
            dscr=dscr(yearly_net, yearly_emi),
            roi=(yearly_cash_flow / equity) * 100 if equity > 0 else 0.0,
            payback_period=payback_years(equity, yearly_cash_flow),
        )
    elif property_value > 0:
        out.update(
            roi=(yearly_net / property_value) * 100,
            payback_period=payback_years(property_value, yearly_net),
        )

    return out
