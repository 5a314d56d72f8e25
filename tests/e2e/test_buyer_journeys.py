"""
E2E tests for buyer journeys landing on a price-in-city page.

Each journey starts from what the page receives: the model's variant list
from the catalog API plus the variant and city segments of the URL.

Buyer journeys:
- first_time_buyer: budget hatchback, trim name with "(O)" in the URL
- ev_buyer: electric SUV in Bangalore, RTO-exempt under the rate table
- diesel_suv_buyer: premium diesel in Delhi, TCS applies above 10 lakh
- stale_link: shared link for a trim the catalog no longer lists
- small_town_buyer: city not in the reference table
"""

import pytest
from gadizone_pricing.domain.models import Variant
from gadizone_pricing.domain.pricing import RateTablePolicy
from gadizone_pricing.domain.variants import available_filters, filter_variants
from gadizone_pricing.quote import build_price_quote


@pytest.fixture
def suv_variants():
    return [
        Variant(name="E 1.5 Petrol MT", price=1_099_000, fuel_type="Petrol", transmission_type="Manual"),
        Variant(name="S (O) 1.5 Diesel MT", price=1_450_000, fuel_type="Diesel", transmission_type="Manual"),
        Variant(name="SX (O) 1.5 Diesel AT", price=1_899_000, fuel_type="Diesel", transmission_type="Automatic"),
        Variant(name="EV Long Range", price=2_199_000, fuel_type="Electric", transmission_type="Automatic"),
    ]


@pytest.mark.integration
def test_first_time_buyer(hatchback_variants):
    """
    first_time_buyer: URL slug built from 'ZXi Plus (O) AMT'
    Expected: exact match, EMI around 11.2k, schedule closes at 7 years
    """
    quote = build_price_quote(hatchback_variants, "zxi-plus-o-amt", "mumbai")

    assert quote.match_tier == "exact"
    assert quote.variant.price == 899000
    assert 11_000 <= quote.emi.emi <= 11_500, "719k over 7 years at 8% is ~1.56k per lakh"
    assert quote.schedule[-1].months_elapsed == 84
    assert quote.schedule[-1].remaining_balance == 0


@pytest.mark.integration
def test_ev_buyer(suv_variants):
    """
    ev_buyer: electric variant in Bangalore with itemized charges
    Expected: no RTO, insurance and road safety tax still charged
    """
    quote = build_price_quote(suv_variants, "ev-long-range", "bangalore", policy=RateTablePolicy())

    assert quote.variant.fuel_type == "Electric"
    assert quote.breakup.state == "Karnataka"
    assert quote.breakup.rto_charges == 0
    assert quote.breakup.insurance > 0
    assert quote.breakup.tcs > 0
    assert all(p.city.slug != "bangalore" for p in quote.nearby_city_prices)


@pytest.mark.integration
def test_diesel_suv_buyer(suv_variants):
    """
    diesel_suv_buyer: 'SX (O) 1.5 Diesel AT' in Delhi
    Expected: diesel RTO surcharge and TCS on the breakup
    """
    quote = build_price_quote(suv_variants, "sx-o-15-diesel-at", "delhi", policy=RateTablePolicy())

    assert quote.variant.name == "SX (O) 1.5 Diesel AT"
    assert quote.breakup.rto_charges == 208_890  # 10% + 1 point diesel
    assert quote.breakup.tcs == 18_990
    assert quote.breakup.total_on_road_price > quote.variant.price


@pytest.mark.integration
def test_stale_link(suv_variants):
    """
    stale_link: trim renamed since the link was shared
    Expected: page still renders with the cheapest variant
    """
    quote = build_price_quote(suv_variants, "s-plus-turbo-dct", "pune")

    assert quote.match_tier == "lowest_price"
    assert quote.variant.name == "E 1.5 Petrol MT"


@pytest.mark.integration
def test_small_town_buyer(suv_variants):
    """
    small_town_buyer: city slug missing from the table
    Expected: default state pricing, metro cities offered instead of nearby ones
    """
    quote = build_price_quote(suv_variants, "s-o-15-diesel-mt", "chikhaldara")

    assert quote.variant.name == "S (O) 1.5 Diesel MT"
    assert quote.city_label == "Chikhaldara, India"
    assert [p.city.slug for p in quote.nearby_city_prices] == [
        "mumbai",
        "pune",
        "delhi",
        "bangalore",
        "chennai",
        "hyderabad",
        "ahmedabad",
        "kolkata",
    ]


@pytest.mark.integration
def test_variant_filters_on_price_page(suv_variants):
    """Filter chips and automatic-only list for the variants table"""
    assert available_filters(suv_variants) == ["All", "Petrol", "Diesel", "Electric", "Manual", "Automatic"]
    automatic = filter_variants(suv_variants, ["Automatic"])
    assert [v.name for v in automatic] == ["SX (O) 1.5 Diesel AT", "EV Long Range"]
