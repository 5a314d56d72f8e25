"""Pytest fixtures for testing"""

import pytest
from typing import List
from gadizone_pricing.data.cities import load_city_table
from gadizone_pricing.domain.models import GeoPoint, LoanTerms, Variant


@pytest.fixture
def city_table() -> List[GeoPoint]:
    """Full static city table"""
    return list(load_city_table())


@pytest.fixture
def small_city_table() -> List[GeoPoint]:
    """A handful of cities with known geography"""
    return [
        GeoPoint("Mumbai", "mumbai", 19.076, 72.8777, "Maharashtra"),
        GeoPoint("Pune", "pune", 18.5204, 73.8567, "Maharashtra"),
        GeoPoint("Thane", "thane", 19.2183, 72.9781, "Maharashtra"),
        GeoPoint("Nashik", "nashik", 19.9975, 73.7898, "Maharashtra"),
        GeoPoint("Delhi", "delhi", 28.7041, 77.1025, "Delhi"),
        GeoPoint("Bangalore", "bangalore", 12.9716, 77.5946, "Karnataka"),
    ]


@pytest.fixture
def hatchback_variants() -> List[Variant]:
    """Variant list as returned by the catalog API for a typical hatchback"""
    return [
        Variant(name="LXi", price=599000, fuel_type="Petrol", transmission_type="Manual"),
        Variant(name="VXi", price=665000, fuel_type="Petrol", transmission_type="Manual"),
        Variant(name="VXi AMT", price=715000, fuel_type="Petrol", transmission_type="AMT"),
        Variant(name="VXi CNG", price=760000, fuel_type="CNG", transmission_type="Manual"),
        Variant(name="ZXi Plus (O) AMT", price=899000, fuel_type="Petrol", transmission_type="AMT"),
    ]


@pytest.fixture
def standard_loan() -> LoanTerms:
    """8 lakh over 7 years at 8% (calculator defaults)"""
    return LoanTerms(principal=800000, annual_rate_percent=8.0, tenure_months=84)
