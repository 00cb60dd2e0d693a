from utils.formatting import format_currency, format_number, format_payback, group_indian

def test_indian_grouping():
    assert group_indian("999") == "999"
    assert group_indian("1000") == "1,000"
    assert group_indian("684000") == "6,84,000"
    assert group_indian("12345678") == "1,23,45,678"

def test_format_currency():
    assert format_currency(684_000) == "₹6,84,000"
    assert format_currency(41_887_400) == "₹4,18,87,400"
    assert format_currency(-1_234_567.6) == "-₹12,34,568"
    assert format_currency(0) == "₹0"
    assert format_currency(1_500, symbol="$") == "$1,500"

def test_format_currency_non_finite():
    assert format_currency(float("nan")) == "₹0"
    assert format_currency(None) == "₹0"

def test_format_number():
    assert format_number(1_234_567.891, 1) == "12,34,567.9"
    assert format_number(60.0) == "60"
    assert format_number(1.25, 2) == "1.25"
    assert format_number(-0.04) == "0"
    assert format_number(-2.5) == "-2.5"

def test_format_payback():
    assert format_payback(60) == ">50 Yrs"
    assert format_payback(9.549) == "9.5 Yrs"

def test_format_payback_not_applicable():
    """Financing on without a property value leaves payback at 0"""
    assert format_payback(0) == "N/A"
