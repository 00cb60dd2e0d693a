from dataclasses import dataclass, field, asdict, fields
from typing import List, Optional
import uuid

from .constants import PAYBACK_NEVER


@dataclass
class ExtraDeduction:
    """Named ad-hoc monthly deduction (amount may be blank mid-edit)"""
    name: str = ""
    amount: Optional[float] = 0.0
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])


@dataclass
class InputState:
    hotel_name: str = ""
    total_rooms: int = 32
    occupancy_percent: float = 60.0
    room_price: float = 1200.0
    round_srn: bool = True               # round sold rooms to whole rooms
    extra_deductions: List[ExtraDeduction] = field(default_factory=list)
    maintenance_cost_per_room: float = 380.0  # opex per sold room-night
    # Financing
    include_financials: bool = False
    property_value: float = 0.0
    loan_amount: float = 0.0
    interest_rate: float = 0.0           # annual %
    loan_term_years: int = 0
    # Amenities / classification
    has_kitchen: bool = False
    has_restaurant: bool = False
    has_gym: bool = False
    # Deal sheet
    ota_percent: float = 18.0
    monthly_mg: float = 0.0              # minimum guarantee / lease
    security_deposit: float = 0.0
    business_advance: float = 0.0
    deal_type: str = "owner"             # 'owner' | 'lessee'

    @property
    def category(self) -> str:
        """Brand category implied by the amenity flags"""
        if self.has_gym and self.has_restaurant and self.has_kitchen:
            return "Palette"
        if self.has_restaurant and self.has_kitchen:
            return "Townhouse"
        if self.has_kitchen:
            return "Collection O"
        return "Flagship"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "InputState":
        """Build from a stored dict, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        kwargs["extra_deductions"] = [
            d if isinstance(d, ExtraDeduction) else ExtraDeduction(**d)
            for d in data.get("extra_deductions", [])
        ]
        return cls(**kwargs)


@dataclass(frozen=True)
class CalculationMetrics:
    # Occupancy / gross revenue
    srn: float
    daily_revenue: float
    monthly_revenue: float
    yearly_revenue: float
    # Standard deductions and NOI
    daily_ota: float
    monthly_ota: float
    yearly_ota: float
    daily_maintenance: float
    monthly_maintenance: float
    yearly_maintenance: float
    daily_extra: float
    monthly_extra: float
    yearly_extra: float
    daily_net: float
    monthly_net: float
    yearly_net: float
    net_margin_percent: float
    # Financing
    monthly_emi: float
    yearly_emi: float
    monthly_cash_flow: float
    yearly_cash_flow: float
    dscr: float
    roi: float
    valuation: float
    payback_period: float
    # Deal sheet
    deal_monthly_gst: float
    deal_revenue_net_gst: float
    deal_ota_abs: float
    deal_opex_abs: float
    noi_before_mg: float
    deal_absolute_cm: float
    deal_cm_percent: float
    deal_pbp_percent: float
    deal_mg_impact_six_months: float
    mg_consumption_percent: Optional[float]
    break_even_occupancy_deal: float
    arr_sensitivity: float
    monthly_mg: float
    operator_profit: float
    # Deal structuring
    max_safe_mg: float
    target_mg_for_target_return: float
    hybrid_fixed_mg: float
    hybrid_rev_share_percent: float
    hybrid_projected_payout: float
    deal_strength_score: float
    recommended_deal_type: str

    @property
    def pays_back(self) -> bool:
        return self.payback_period != PAYBACK_NEVER

    @property
    def cash_flow_negative(self) -> bool:
        return self.monthly_cash_flow < 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class MetricSummary:
    """Narrow snapshot of metrics kept alongside a saved project"""
    monthly_revenue: float = 0.0
    monthly_net: float = 0.0
    roi: float = 0.0
    valuation: float = 0.0

    @classmethod
    def from_metrics(cls, metrics: CalculationMetrics) -> "MetricSummary":
        return cls(
            monthly_revenue=metrics.monthly_revenue,
            monthly_net=metrics.monthly_net,
            roi=metrics.roi,
            valuation=metrics.valuation,
        )


@dataclass
class SavedProject:
    id: str
    last_modified: int                   # epoch milliseconds
    inputs: InputState
    summary: MetricSummary
    user_id: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SavedProject":
        return cls(
            id=data["id"],
            last_modified=int(data.get("last_modified", 0)),
            inputs=InputState.from_dict(data.get("inputs", {})),
            summary=MetricSummary(**data.get("summary", {})),
            user_id=data.get("user_id"),
        )


@dataclass
class AppSettings:
    user_name: str = ""
    currency_symbol: str = "₹"
    default_interest_rate: float = 10.5
