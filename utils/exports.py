"""CSV and Excel report builders (PDF rendering lives outside this app)."""

import re
from io import BytesIO

import pandas as pd
from loguru import logger

from engine.constants import GST_RATE, OTA_COMMISSION_RATE, DEFAULT_CAP_RATE
from engine.finance import amortization_schedule

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def report_filename(hotel_name, ext):
    """'Sea View Inn' -> 'Sea_View_Inn_Financial_Report.csv'."""
    name = re.sub(r"\s+", "_", (hotel_name or "").strip())
    name = re.sub(r"[^\w\-]", "", name)
    if not name:
        return f"Hotel_Revenue_Report.{ext}"
    return f"{name}_Financial_Report.{ext}"


def metrics_frame(inputs, metrics):
    """Standard-model table: one row per line item at daily/monthly/yearly cadence."""
    m = metrics
    rows = [
        ("Revenue", "Gross Revenue", m.daily_revenue, m.monthly_revenue, m.yearly_revenue),
        ("Deductions", f"OTA Commission ({OTA_COMMISSION_RATE:.0%})", m.daily_ota, m.monthly_ota, m.yearly_ota),
        ("Deductions", "Maintenance", m.daily_maintenance, m.monthly_maintenance, m.yearly_maintenance),
    ]
    for d in inputs.extra_deductions:
        amount = max(d.amount or 0, 0)
        rows.append(("Deductions", d.name or "Extra", amount / 30, amount, amount * 12))
    rows.append(("Deductions", "Total Extra Deductions", m.daily_extra, m.monthly_extra, m.yearly_extra))
    rows.append(("Net", "Net Operating Income", m.daily_net, m.monthly_net, m.yearly_net))

    if inputs.include_financials:
        rows += [
            ("Financing", "Loan EMI", None, m.monthly_emi, m.yearly_emi),
            ("Financing", "Cash Flow", None, m.monthly_cash_flow, m.yearly_cash_flow),
        ]

    return pd.DataFrame(rows, columns=["Section", "Metric", "Daily", "Monthly", "Yearly"])


def ratios_frame(inputs, metrics):
    m = metrics
    rows = [
        ("Sold Rooms / Night", m.srn),
        ("Net Margin %", m.net_margin_percent),
        (f"Valuation (@{DEFAULT_CAP_RATE:.0%} cap)", m.valuation),
    ]
    if inputs.include_financials:
        rows += [
            ("DSCR", m.dscr),
            ("ROI %", m.roi),
            ("Payback (years)", m.payback_period),
        ]
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def deal_sheet_frame(inputs, metrics):
    m = metrics
    rows = [
        ("Business Advance", inputs.business_advance),
        ("Security Deposit", inputs.security_deposit),
        ("Gross Revenue (monthly)", m.monthly_revenue),
        (f"GST ({GST_RATE:.0%})", m.deal_monthly_gst),
        ("Rev minus GST", m.deal_revenue_net_gst),
        (f"OTA ({inputs.ota_percent:g}%)", m.deal_ota_abs),
        ("Opex", m.deal_opex_abs),
        ("NOI before MG", m.noi_before_mg),
        ("MG", m.monthly_mg),
        ("Absolute CM", m.deal_absolute_cm),
        ("CM %", m.deal_cm_percent),
        ("PBP %", m.deal_pbp_percent),
        ("Break-even Occupancy %", m.break_even_occupancy_deal),
        ("ARR +100 Sensitivity", m.arr_sensitivity),
        ("Max Safe MG", m.max_safe_mg),
        ("Target MG (24% return)", m.target_mg_for_target_return),
        ("Deal Strength Score", m.deal_strength_score),
        ("Recommended Structure", m.recommended_deal_type),
    ]
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def inputs_frame(inputs):
    data = inputs.to_dict()
    data.pop("extra_deductions", None)
    return pd.DataFrame(list(data.items()), columns=["Input", "Value"])


def to_csv_bytes(inputs, metrics):
    """Standard table followed by the ratio block, UTF-8 encoded."""
    body = metrics_frame(inputs, metrics).to_csv(index=False)
    body += "\n" + ratios_frame(inputs, metrics).to_csv(index=False)
    logger.info(f"Exported CSV report for {inputs.hotel_name or 'untitled'}")
    return body.encode("utf-8")


def to_excel_bytes(inputs, metrics):
    """Workbook with Summary, Deal Sheet, Inputs and (with a loan) Amortization sheets."""
    bio = BytesIO()
    summary = metrics_frame(inputs, metrics)
    ratios = ratios_frame(inputs, metrics)
    deal = deal_sheet_frame(inputs, metrics)

    with pd.ExcelWriter(bio, engine="xlsxwriter") as xw:
        summary.to_excel(xw, index=False, sheet_name="Summary")
        ratios.to_excel(xw, index=False, sheet_name="Summary", startrow=len(summary) + 2)
        deal.to_excel(xw, index=False, sheet_name="Deal Sheet")
        inputs_frame(inputs).to_excel(xw, index=False, sheet_name="Inputs")

        if inputs.include_financials and metrics.monthly_emi > 0:
            am = pd.DataFrame(amortization_schedule(
                inputs.loan_amount, inputs.interest_rate, inputs.loan_term_years
            ))
            am.to_excel(xw, index=False, sheet_name="Amortization")
            xw.sheets["Amortization"].set_column("A:B", 10)
            xw.sheets["Amortization"].set_column("C:F", 14, xw.book.add_format({"num_format": "#,##0.00"}))

        money = xw.book.add_format({"num_format": "#,##0"})
        ws = xw.sheets["Summary"]
        ws.set_column("A:A", 14)
        ws.set_column("B:B", 30)
        ws.set_column("C:E", 16, money)
        ws.freeze_panes(1, 2)
        xw.sheets["Deal Sheet"].set_column("A:A", 28)
        xw.sheets["Deal Sheet"].set_column("B:B", 16, money)
        xw.sheets["Inputs"].set_column("A:B", 26)

    bio.seek(0)
    logger.info(f"Exported Excel report for {inputs.hotel_name or 'untitled'}")
    return bio.read()
