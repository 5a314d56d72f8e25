"""Unit tests for JSON logging and Prometheus metrics"""

import json
import logging
from prometheus_client import REGISTRY
from gadizone_pricing.infrastructure.observability.logging import CustomJsonFormatter, log_price_quote
from gadizone_pricing.infrastructure.observability.metrics import (
    record_nearby_lookup,
    record_quote,
    record_variant_resolution,
)


def _sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_json_formatter_adds_service_fields():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord("gadizone", logging.INFO, __file__, 1, "Price quote built", None, None)
    record.match_tier = "exact"

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Price quote built"
    assert payload["level"] == "INFO"
    assert payload["service"] == "gadizone-pricing"
    assert payload["match_tier"] == "exact"
    assert "timestamp" in payload


def test_log_price_quote_extra_fields(caplog):
    with caplog.at_level(logging.INFO):
        log_price_quote("VXi AMT", "exact", "pune", 715000, 9981, 8, 1.5)

    record = caplog.records[-1]
    assert record.getMessage() == "Price quote built"
    assert record.variant == "VXi AMT"
    assert record.city_slug == "pune"
    assert record.nearby_count == 8


def test_record_variant_resolution_counts_by_tier():
    before = _sample("gadizone_variant_resolution_total", {"tier": "partial"})
    record_variant_resolution("partial")
    assert _sample("gadizone_variant_resolution_total", {"tier": "partial"}) == before + 1


def test_record_nearby_lookup_outcomes():
    before_fallback = _sample("gadizone_nearby_lookup_total", {"outcome": "fallback"})
    before_matched = _sample("gadizone_nearby_lookup_total", {"outcome": "matched"})

    record_nearby_lookup(fallback=True)
    record_nearby_lookup(fallback=False)

    assert _sample("gadizone_nearby_lookup_total", {"outcome": "fallback"}) == before_fallback + 1
    assert _sample("gadizone_nearby_lookup_total", {"outcome": "matched"}) == before_matched + 1


def test_record_quote():
    before = _sample("gadizone_price_quote_total")
    record_quote(12469)
    assert _sample("gadizone_price_quote_total") == before + 1
