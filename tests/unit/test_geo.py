"""Unit tests for Haversine distance and nearby-city lookup"""

import pytest
from gadizone_pricing.config import settings
from gadizone_pricing.domain.geo import (
    city_label,
    city_label_to_slug,
    distance_km,
    find_city,
    nearest_cities,
)
from gadizone_pricing.domain.models import GeoPoint


def test_distance_to_self_is_zero(small_city_table):
    for city in small_city_table:
        assert distance_km(city, city) == 0


def test_distance_is_symmetric(small_city_table):
    for a in small_city_table:
        for b in small_city_table:
            assert distance_km(a, b) == distance_km(b, a)


def test_distance_known_pairs(small_city_table):
    mumbai, pune = small_city_table[0], small_city_table[1]
    delhi = small_city_table[4]

    assert distance_km(mumbai, pune) == pytest.approx(120, abs=5)
    assert distance_km(mumbai, delhi) == pytest.approx(1150, abs=20)


def test_nearest_cities_mumbai_full_table(city_table):
    """Pune is nearby, Delhi is not; closest first, capped at 8"""
    result = nearest_cities(city_table, "mumbai", 250, 8)
    slugs = [c.slug for c in result]

    assert slugs == ["navi-mumbai", "thane", "pune", "nashik", "vapi", "satara", "ahmednagar", "surat"]
    assert "delhi" not in slugs
    assert "mumbai" not in slugs


def test_nearest_cities_sorted_and_bounded(city_table):
    for slug in ["delhi", "bangalore", "kochi", "guwahati"]:
        origin = find_city(city_table, slug)
        result = nearest_cities(city_table, slug, 300, 5)
        distances = [distance_km(origin, c) for c in result]

        assert len(result) <= 5
        assert origin not in result
        assert distances == sorted(distances)
        assert all(d <= 300 for d in distances)


def test_nearest_cities_radius_filter(small_city_table):
    result = nearest_cities(small_city_table, "mumbai", 250, 8)
    assert [c.slug for c in result] == ["thane", "pune", "nashik"]


def test_nearest_cities_ties_keep_table_order():
    points = [
        GeoPoint("Origin", "origin", 20.0, 75.0, "X"),
        GeoPoint("East A", "east-a", 20.0, 75.5, "X"),
        GeoPoint("East B", "east-b", 20.0, 75.5, "X"),
        GeoPoint("Near", "near", 20.0, 75.1, "X"),
    ]
    result = nearest_cities(points, "origin", 250, 8)
    assert [c.slug for c in result] == ["near", "east-a", "east-b"]


def test_nearest_cities_unknown_slug_falls_back_to_metros(city_table):
    """Unknown city degrades to the metro list in table order"""
    result = nearest_cities(city_table, "atlantis", 250, 8)
    assert [c.slug for c in result] == [
        "mumbai",
        "pune",
        "delhi",
        "bangalore",
        "chennai",
        "hyderabad",
        "ahmedabad",
        "kolkata",
    ]


def test_nearest_cities_fallback_truncated(city_table):
    result = nearest_cities(city_table, "atlantis", 250, 3)
    assert [c.slug for c in result] == ["mumbai", "pune", "delhi"]


def test_nearest_cities_empty_inputs(small_city_table):
    assert nearest_cities([], "mumbai", 250, 8) == []
    assert nearest_cities(small_city_table, "mumbai", 250, 0) == []
    assert nearest_cities(small_city_table, "mumbai", 250, -1) == []
    assert nearest_cities(small_city_table, "atlantis", 250, 0) == []


def test_nearest_cities_is_reproducible(city_table):
    assert nearest_cities(city_table, "pune", 250, 8) == nearest_cities(city_table, "pune", 250, 8)


def test_city_label_to_slug():
    assert city_label_to_slug("Mumbai, Maharashtra") == "mumbai"
    assert city_label_to_slug("Navi Mumbai, Maharashtra") == "navi-mumbai"
    assert city_label_to_slug("  Delhi ") == "delhi"


def test_city_label(small_city_table):
    assert city_label(small_city_table, "pune") == "Pune, Maharashtra"
    assert city_label(small_city_table, "port-blair") == "Port Blair, India"


def test_city_table_slugs_are_unique(city_table):
    slugs = [c.slug for c in city_table]
    assert len(slugs) == len(set(slugs))


def test_nearest_cities_fallback_follows_settings(city_table, monkeypatch):
    monkeypatch.setattr(settings, "fallback_metro_slugs", ["kochi", "delhi"])

    result = nearest_cities(city_table, "atlantis", 250, 8)

    assert {c.slug for c in result} == {"kochi", "delhi"}


def test_nearest_cities_explicit_fallback_slugs(city_table):
    result = nearest_cities(city_table, "atlantis", 250, 8, fallback_slugs=["pune"])
    assert [c.slug for c in result] == ["pune"]
