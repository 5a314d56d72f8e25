"""On-road price breakup with pluggable fee policies"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from gadizone_pricing.config import settings
from gadizone_pricing.domain.exceptions import UnknownFeePolicyError
from gadizone_pricing.domain.geo import nearest_cities
from gadizone_pricing.domain.models import CityPrice, GeoPoint, PriceBreakup, Variant
from gadizone_pricing.utils.rounding import round_half_up

CHARGE_FIELDS = (
    "rto_charges",
    "road_safety_tax",
    "insurance",
    "tcs",
    "other_charges",
    "hypothecation",
    "fastag",
)


class FeePolicy(ABC):
    """Computes itemized on-road charges for an ex-showroom price"""

    @abstractmethod
    def charges(self, ex_showroom_price: int, state: str, fuel_type: str) -> Dict[str, int]:
        """Return a mapping of CHARGE_FIELDS to whole-rupee amounts"""


class ExShowroomOnlyPolicy(FeePolicy):
    """No itemized charges: on-road price equals ex-showroom price.

    This is what the live price pages show today; keep it the default until
    a rate table is signed off.
    """

    def charges(self, ex_showroom_price: int, state: str, fuel_type: str) -> Dict[str, int]:
        return {name: 0 for name in CHARGE_FIELDS}


@dataclass
class FeeSchedule:
    """Rates for RateTablePolicy. Percentages are of the ex-showroom price."""

    rto_percent_by_state: Dict[str, float] = field(
        default_factory=lambda: {
            "Maharashtra": 11.0,
            "Delhi": 10.0,
            "Karnataka": 13.0,
            "Tamil Nadu": 10.0,
            "Telangana": 12.0,
            "Gujarat": 6.0,
            "West Bengal": 10.0,
        }
    )
    default_rto_percent: float = 10.0
    diesel_rto_surcharge_points: float = 1.0
    rto_exempt_fuels: tuple = ("Electric",)
    road_safety_tax_percent: float = 0.5
    insurance_percent: float = 3.5
    tcs_percent: float = 1.0
    tcs_threshold: int = 1_000_000  # 10 lakh
    hypothecation: int = 1_500
    fastag: int = 500
    other_charges: int = 0


class RateTablePolicy(FeePolicy):
    """Charges keyed by state and fuel type from a FeeSchedule"""

    def __init__(self, schedule: FeeSchedule | None = None):
        self.schedule = schedule or FeeSchedule()

    def rto_percent(self, state: str, fuel_type: str) -> float:
        s = self.schedule
        if fuel_type in s.rto_exempt_fuels:
            return 0.0
        percent = s.rto_percent_by_state.get(state, s.default_rto_percent)
        if fuel_type == "Diesel":
            percent += s.diesel_rto_surcharge_points
        return percent

    def charges(self, ex_showroom_price: int, state: str, fuel_type: str) -> Dict[str, int]:
        s = self.schedule
        price = ex_showroom_price
        tcs = round_half_up(price * s.tcs_percent / 100) if price > s.tcs_threshold else 0

        return {
            "rto_charges": round_half_up(price * self.rto_percent(state, fuel_type) / 100),
            "road_safety_tax": round_half_up(price * s.road_safety_tax_percent / 100),
            "insurance": round_half_up(price * s.insurance_percent / 100),
            "tcs": tcs,
            "other_charges": s.other_charges,
            "hypothecation": s.hypothecation,
            "fastag": s.fastag,
        }


FEE_POLICIES = {
    "ex_showroom": ExShowroomOnlyPolicy,
    "rate_table": RateTablePolicy,
}


def get_fee_policy(name: str | None = None) -> FeePolicy:
    """Instantiate a registered policy; defaults to settings.fee_policy"""
    name = name or settings.fee_policy
    try:
        return FEE_POLICIES[name]()
    except KeyError:
        raise UnknownFeePolicyError(
            f"Unknown fee policy '{name}', expected one of {sorted(FEE_POLICIES)}"
        ) from None


def primary_fuel_type(fuel_type: str) -> str:
    """'Petrol, CNG' -> 'Petrol'; blank -> configured default"""
    first = fuel_type.split(",")[0].strip()
    return first or settings.default_fuel_type


def compute_price_breakup(variant: Variant, state: str, policy: FeePolicy) -> PriceBreakup:
    fuel = primary_fuel_type(variant.fuel_type)
    charges = policy.charges(variant.price, state, fuel)
    return PriceBreakup(ex_showroom_price=variant.price, state=state, fuel_type=fuel, **charges)


def nearby_city_prices(
    points: Sequence[GeoPoint],
    city_slug: str,
    ex_showroom_price: int,
    fuel_type: str,
    policy: FeePolicy,
    radius_km: float = 250.0,
    max_results: int = 8,
) -> List[CityPrice]:
    """On-road price of the same variant in each nearby city, priced per city's state"""
    fuel = primary_fuel_type(fuel_type)
    result = []
    for city in nearest_cities(points, city_slug, radius_km, max_results):
        charges = policy.charges(ex_showroom_price, city.region, fuel)
        breakup = PriceBreakup(ex_showroom_price=ex_showroom_price, state=city.region, fuel_type=fuel, **charges)
        result.append(CityPrice(city=city, on_road_price=breakup.total_on_road_price))
    return result
