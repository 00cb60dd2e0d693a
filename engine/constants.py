"""Rates and calendar conventions shared by every engine stage"""

GST_RATE = 0.12
OTA_COMMISSION_RATE = 0.18   # flat rate used by the standard (dashboard) model
DEFAULT_CAP_RATE = 0.10      # valuation = yearly NOI / cap rate

DAYS_IN_MONTH = 30
DAYS_IN_YEAR = 365
MONTHS_IN_YEAR = 12

# Payback that never happens (non-positive cash flow)
PAYBACK_NEVER = 999.0

# Break-even occupancy when each sold point of occupancy loses money
BREAK_EVEN_UNREACHABLE = 999.0

# ARR sensitivity step (currency units of room rate)
ARR_STEP = 100.0

# Deal structuring
MG_SAFETY_BUFFER = 0.25          # max safe MG keeps 25% of NOI before MG
TARGET_ANNUAL_RETURN = 0.24
HYBRID_FIXED_SHARE = 0.50        # of NOI before MG
HYBRID_REV_SHARE_PERCENT = 15.0  # of net-of-GST revenue
MG_IMPACT_SHARE = 0.10
MG_IMPACT_MONTHS = 6

# Deal strength score
SCORE_OCCUPANCY_WEIGHT = 0.6
SCORE_MARGIN_WEIGHT = 0.4
LESSEE_SCORE_THRESHOLD = 65.0
OWNER_SCORE_THRESHOLD = 45.0
OWNER_OCCUPANCY_THRESHOLD = 50.0
STABLE_MIN_OCCUPANCY = 60.0
STABLE_MIN_ROOMS = 20
