"""Price-in-city quote: the composition a price breakup page renders"""

import logging
import time
from typing import Sequence

from gadizone_pricing.config import settings
from gadizone_pricing.data.cities import load_city_table
from gadizone_pricing.domain.amortization import (
    build_amortization_schedule,
    default_checkpoints,
    loan_terms_for_price,
    summarize_emi,
)
from gadizone_pricing.domain.exceptions import InvalidLoanTermsError, VariantNotFoundError
from gadizone_pricing.domain.geo import city_label, find_city
from gadizone_pricing.domain.models import GeoPoint, PriceQuote, Variant
from gadizone_pricing.domain.pricing import FeePolicy, compute_price_breakup, get_fee_policy, nearby_city_prices
from gadizone_pricing.domain.variants import match_variant
from gadizone_pricing.infrastructure.observability.logging import log_price_quote
from gadizone_pricing.infrastructure.observability.metrics import (
    record_nearby_lookup,
    record_quote,
    record_variant_resolution,
)


def build_price_quote(
    variants: Sequence[Variant],
    variant_slug: str,
    city_slug: str,
    cities: Sequence[GeoPoint] | None = None,
    policy: FeePolicy | None = None,
    down_payment: int | None = None,
    annual_rate_percent: float | None = None,
    tenure_months: int | None = None,
) -> PriceQuote:
    """
    Build the full quote for one model's variants in one city.

    Flow:
    1. Resolve the URL variant slug (exact -> partial -> lowest price)
    2. Price it on-road for the city's state
    3. EMI and repayment schedule on the on-road price
    4. Same variant priced in nearby cities

    Raises:
        VariantNotFoundError: the catalog returned no variants
        InvalidLoanTermsError: caller-supplied loan inputs are out of bounds
    """
    start_time = time.time()
    cities = load_city_table() if cities is None else cities
    policy = policy or get_fee_policy()

    match = match_variant(variants, variant_slug)
    if match is None:
        logging.warning("No variants to resolve", extra={"variant_slug": variant_slug, "city_slug": city_slug})
        raise VariantNotFoundError(f"No variants available for slug '{variant_slug}'")
    record_variant_resolution(match.tier)

    city = find_city(cities, city_slug)
    record_nearby_lookup(fallback=city is None)
    state = city.region if city else settings.default_state

    breakup = compute_price_breakup(match.variant, state, policy)

    loan = loan_terms_for_price(
        breakup.total_on_road_price,
        down_payment=down_payment,
        annual_rate_percent=annual_rate_percent,
        tenure_months=tenure_months,
    )
    try:
        loan.validate()
    except InvalidLoanTermsError as e:
        logging.warning(f"Invalid loan terms: {e}", extra={"city_slug": city_slug})
        raise

    emi = summarize_emi(loan)
    schedule = build_amortization_schedule(loan, emi.emi, default_checkpoints(loan.tenure_months))

    nearby = nearby_city_prices(
        cities,
        city_slug,
        match.variant.price,
        match.variant.fuel_type,
        policy,
        radius_km=settings.nearby_radius_km,
        max_results=settings.nearby_max_results,
    )

    duration_ms = (time.time() - start_time) * 1000
    record_quote(emi.emi)
    log_price_quote(
        match.variant.name,
        match.tier,
        city_slug,
        breakup.total_on_road_price,
        emi.emi,
        len(nearby),
        duration_ms,
    )

    return PriceQuote(
        variant=match.variant,
        match_tier=match.tier,
        city_slug=city_slug,
        city_label=city_label(cities, city_slug),
        breakup=breakup,
        loan=loan,
        emi=emi,
        schedule=schedule,
        nearby_city_prices=nearby,
    )
