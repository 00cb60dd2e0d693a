"""Input-boundary checks run before the engine sees form values."""

import math

from engine.models import InputState, ExtraDeduction

NUMERIC_FIELDS = {
    'total_rooms': 'Total rooms',
    'occupancy_percent': 'Occupancy',
    'room_price': 'Room price',
    'maintenance_cost_per_room': 'Opex per room',
    'property_value': 'Property value',
    'loan_amount': 'Loan amount',
    'interest_rate': 'Interest rate',
    'loan_term_years': 'Loan term',
    'ota_percent': 'OTA %',
    'monthly_mg': 'Monthly MG',
    'security_deposit': 'Security deposit',
    'business_advance': 'Business advance',
}

BOOL_FIELDS = ('round_srn', 'include_financials', 'has_kitchen', 'has_restaurant', 'has_gym')


def to_number(raw, default=0.0):
    """Coerce a raw form value ('1,200', '', None, 12) to a finite float."""
    if raw is None:
        return default
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        return float(raw) if math.isfinite(raw) else default
    text = str(raw).replace(',', '').strip()
    if not text:
        return default
    try:
        value = float(text)
    except ValueError:
        return default
    return value if math.isfinite(value) else default


def inputs_from_form(form):
    """Build an InputState from a loose dict of widget values."""
    data = {}
    for name in NUMERIC_FIELDS:
        if name in form:
            data[name] = to_number(form[name])
    for name in ('total_rooms', 'loan_term_years'):
        if name in data:
            data[name] = int(data[name])
    for name in BOOL_FIELDS:
        if name in form:
            data[name] = bool(form[name])
    data['hotel_name'] = str(form.get('hotel_name') or '').strip()
    if form.get('deal_type') in ('owner', 'lessee'):
        data['deal_type'] = form['deal_type']
    data['extra_deductions'] = [
        ExtraDeduction(
            name=str(d.get('name') or ''),
            amount=to_number(d.get('amount')),
            **({'id': d['id']} if d.get('id') else {}),
        )
        for d in form.get('extra_deductions', [])
    ]
    return InputState(**data)


def validate_inputs(inputs: InputState):
    """Return human-readable issues; an empty list means the inputs are clean."""
    issues = []

    for name, label in NUMERIC_FIELDS.items():
        value = getattr(inputs, name)
        if value is None:
            continue
        if value < 0:
            issues.append(f"{label} cannot be negative")

    if inputs.occupancy_percent is not None and inputs.occupancy_percent > 100:
        issues.append("Occupancy cannot exceed 100%")
    if inputs.ota_percent is not None and inputs.ota_percent > 100:
        issues.append("OTA % cannot exceed 100%")

    for d in inputs.extra_deductions:
        if d.amount is not None and d.amount < 0:
            issues.append(f"Deduction '{d.name or 'Unnamed'}' cannot be negative")

    if inputs.include_financials:
        if inputs.loan_amount > 0 and inputs.loan_amount > inputs.property_value:
            issues.append("Loan amount exceeds property value")
        if inputs.loan_amount > 0 and inputs.interest_rate > 0 and inputs.loan_term_years <= 0:
            issues.append("Loan term must be at least 1 year when a loan is included")

    return issues
