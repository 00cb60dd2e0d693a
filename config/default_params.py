"""Default parameters for the hotel revenue forecaster."""
import os

# Form defaults for a new project
DEFAULT_INPUTS = {
    'hotel_name': '',
    'total_rooms': 32,
    'occupancy_percent': 60,
    'room_price': 1200,
    'round_srn': True,
    'extra_deductions': [],
    'maintenance_cost_per_room': 380,
    # Amenities (drive the brand category)
    'has_kitchen': False,
    'has_restaurant': False,
    'has_gym': False,
    # Financing (off until the user opts in)
    'include_financials': False,
    'property_value': 0,
    'loan_amount': 0,
    'interest_rate': 0.0,
    'loan_term_years': 0,
    # Deal sheet
    'ota_percent': 18.0,
    'monthly_mg': 0,
    'security_deposit': 0,
    'business_advance': 0,
    'deal_type': 'owner',
}

# Pre-filled when financing is switched on
FINANCING_DEFAULTS = {
    'property_value': 50_000_000,
    'loan_term_years': 10,
}

DEFAULT_SETTINGS = {
    'user_name': '',
    'currency_symbol': '₹',
    'default_interest_rate': 10.5,
}

OCCUPANCY_PRESETS = [40, 50, 60, 70, 80]
ROOM_PRESETS = [10, 20, 32, 50, 100]
PRICE_PRESETS = [800, 1200, 1800, 2500]

DATA_DIR = os.getenv('HOTEL_REVPRO_DATA_DIR', './data')
LOG_LEVEL = os.getenv('HOTEL_REVPRO_LOG_LEVEL', 'INFO')
