"""Domain models - pure Python dataclasses representing pricing entities"""

from dataclasses import dataclass, field
from typing import List

from gadizone_pricing.domain.exceptions import InvalidLoanTermsError


@dataclass
class LoanTerms:
    """Car loan inputs. All amounts in whole rupees."""

    principal: int
    annual_rate_percent: float
    tenure_months: int

    def validate(self) -> None:
        if self.principal < 0:
            raise InvalidLoanTermsError(f"principal must be >= 0, got {self.principal}")
        if self.annual_rate_percent < 0:
            raise InvalidLoanTermsError(
                f"annual_rate_percent must be >= 0, got {self.annual_rate_percent}"
            )
        if self.tenure_months < 1:
            raise InvalidLoanTermsError(f"tenure_months must be >= 1, got {self.tenure_months}")


@dataclass
class AmortizationRow:
    """Cumulative repayment position after a number of months"""

    months_elapsed: int
    cumulative_principal_paid: int
    cumulative_interest_paid: int
    remaining_balance: int


@dataclass
class EmiSummary:
    """Monthly installment with loan totals"""

    emi: int
    principal: int
    total_amount: int
    total_interest: int


@dataclass(frozen=True)
class GeoPoint:
    """City reference point"""

    name: str
    slug: str
    latitude_deg: float
    longitude_deg: float
    region: str  # state / union territory


@dataclass
class Variant:
    """Catalog variant as supplied by the content API"""

    name: str
    price: int  # ex-showroom
    fuel_type: str = ""
    transmission_type: str = ""


@dataclass
class VariantMatch:
    """Resolved variant and the matcher tier that produced it"""

    variant: Variant
    tier: str  # "exact" | "partial" | "lowest_price"


@dataclass
class PriceBreakup:
    """On-road price split into itemized charges"""

    ex_showroom_price: int
    state: str
    fuel_type: str
    rto_charges: int = 0
    road_safety_tax: int = 0
    insurance: int = 0
    tcs: int = 0
    other_charges: int = 0
    hypothecation: int = 0
    fastag: int = 0

    @property
    def total_on_road_price(self) -> int:
        return (
            self.ex_showroom_price
            + self.rto_charges
            + self.road_safety_tax
            + self.insurance
            + self.tcs
            + self.other_charges
            + self.hypothecation
            + self.fastag
        )


@dataclass
class CityPrice:
    """On-road price of a variant in one city"""

    city: GeoPoint
    on_road_price: int


@dataclass
class PriceQuote:
    """Everything a price-in-city page needs for one variant"""

    variant: Variant
    match_tier: str
    city_slug: str
    city_label: str
    breakup: PriceBreakup
    loan: LoanTerms
    emi: EmiSummary
    schedule: List[AmortizationRow] = field(default_factory=list)
    nearby_city_prices: List[CityPrice] = field(default_factory=list)
