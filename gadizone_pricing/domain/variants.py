"""Variant slug resolution and catalog filters for model/variant pages"""

import re
from typing import Callable, List, Sequence, Tuple

from gadizone_pricing.domain.models import Variant, VariantMatch

AUTOMATIC_TRANSMISSIONS = ("automatic", "cvt", "amt", "dct", "torque converter", "dual clutch")
FUEL_FILTERS = ("Petrol", "Diesel", "CNG", "Electric")
ALL_FILTER = "All"


def canonicalize(raw: str) -> str:
    """
    Normalize a variant name or URL segment for comparison.

    Steps run in order; later ones rely on earlier normalization:
        "VXi (O) AMT" -> "vxi-o-amt"
        "S (O)"       -> "s-o"
    """
    slug = raw.lower()
    slug = re.sub(r"\s*\(([^)]*)\)", r"-\1-", slug)  # "s (o)" -> "s-o-"
    slug = re.sub(r"[()]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    return re.sub(r"^-|-$", "", slug)


def _exact(candidate: str, query: str) -> bool:
    return bool(candidate) and candidate == query


def _partial(candidate: str, query: str) -> bool:
    # "" is a substring of everything
    if not candidate or not query:
        return False
    return candidate in query or query in candidate


MATCH_TIERS: Tuple[Tuple[str, Callable[[str, str], bool]], ...] = (
    ("exact", _exact),
    ("partial", _partial),
)


def match_variant(variants: Sequence[Variant], url_slug_fragment: str) -> VariantMatch | None:
    """
    Resolve a URL fragment to a variant, reporting which tier matched.

    Tiers, first success wins:
    1. exact: canonical forms are equal
    2. partial: one canonical form contains the other
    3. lowest_price: cheapest variant, first one on ties

    Returns None only when variants is empty.
    """
    if not variants:
        return None

    query = canonicalize(url_slug_fragment)
    canonical_names = [canonicalize(v.name) for v in variants]

    for tier, matches in MATCH_TIERS:
        for variant, name in zip(variants, canonical_names):
            if matches(name, query):
                return VariantMatch(variant=variant, tier=tier)

    return VariantMatch(variant=min(variants, key=lambda v: v.price), tier="lowest_price")


def resolve_variant(variants: Sequence[Variant], url_slug_fragment: str) -> Variant | None:
    match = match_variant(variants, url_slug_fragment)
    return match.variant if match else None


def is_automatic_transmission(transmission: str) -> bool:
    value = transmission.lower()
    return any(kind in value for kind in AUTOMATIC_TRANSMISSIONS)


def is_manual_transmission(transmission: str) -> bool:
    """Anything labelled manual/MT, or any non-empty label that is not automatic"""
    value = transmission.lower()
    return "manual" in value or value == "mt" or (value != "" and not is_automatic_transmission(value))


def available_filters(variants: Sequence[Variant]) -> List[str]:
    """
    Filter chips for a variant list: All, fuel types in first-seen order,
    then Manual before Automatic when present.
    """
    filters = [ALL_FILTER]
    has_manual = False
    has_automatic = False

    for variant in variants:
        if variant.fuel_type and variant.fuel_type not in filters:
            filters.append(variant.fuel_type)
        if variant.transmission_type:
            has_automatic = has_automatic or is_automatic_transmission(variant.transmission_type)
            has_manual = has_manual or is_manual_transmission(variant.transmission_type)

    if has_manual:
        filters.append("Manual")
    if has_automatic:
        filters.append("Automatic")
    return filters


def filter_variants(variants: Sequence[Variant], selected: Sequence[str]) -> List[Variant]:
    """Multi-select filter; a variant is kept if it satisfies any selected chip"""
    if not selected or ALL_FILTER in selected:
        return list(variants)

    def keep(variant: Variant) -> bool:
        fuel = any(f in FUEL_FILTERS and variant.fuel_type == f for f in selected)
        transmission = variant.transmission_type
        automatic = "Automatic" in selected and bool(transmission) and is_automatic_transmission(transmission)
        manual = "Manual" in selected and bool(transmission) and is_manual_transmission(transmission)
        return fuel or automatic or manual

    return [v for v in variants if keep(v)]


def starting_price(variants: Sequence[Variant]) -> int:
    """Lowest positive variant price, 0 when no variant is priced"""
    prices = [v.price for v in variants if v.price > 0]
    return min(prices) if prices else 0
