"""Prometheus metrics for variant resolution quality and quote volume"""

from prometheus_client import Counter, Histogram

# Variant resolution
variant_resolution_counter = Counter(
    "gadizone_variant_resolution_total",
    "Variant slug resolutions by matcher tier",
    ["tier"],  # exact | partial | lowest_price
)

# Nearby cities
nearby_lookup_counter = Counter(
    "gadizone_nearby_lookup_total",
    "Nearby-city lookups",
    ["outcome"],  # matched | fallback
)

# Quotes
quote_counter = Counter(
    "gadizone_price_quote_total",
    "Price quotes built",
)

quote_emi_histogram = Histogram(
    "gadizone_quote_emi_rupees",
    "Display EMI of built quotes",
    buckets=[5_000, 10_000, 15_000, 20_000, 30_000, 50_000, 100_000],
)


def record_variant_resolution(tier: str) -> None:
    variant_resolution_counter.labels(tier=tier).inc()


def record_nearby_lookup(fallback: bool) -> None:
    """Count lookups that had to fall back to the metro list"""
    nearby_lookup_counter.labels(outcome="fallback" if fallback else "matched").inc()


def record_quote(emi: int) -> None:
    quote_counter.inc()
    quote_emi_histogram.observe(emi)
