"""Nearby-city lookup over the static city table (Haversine distance)"""

import math
import re
from typing import List, Sequence

from gadizone_pricing.config import settings
from gadizone_pricing.domain.models import GeoPoint

EARTH_RADIUS_KM = 6371.0


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance on a spherical earth. Good for ranking, not surveying."""
    d_lat = math.radians(b.latitude_deg - a.latitude_deg)
    d_lng = math.radians(b.longitude_deg - a.longitude_deg)
    lat1 = math.radians(a.latitude_deg)
    lat2 = math.radians(b.latitude_deg)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def find_city(points: Sequence[GeoPoint], slug: str) -> GeoPoint | None:
    return next((p for p in points if p.slug == slug), None)


def nearest_cities(
    all_points: Sequence[GeoPoint],
    query_slug: str,
    radius_km: float = 250.0,
    max_results: int = 8,
    fallback_slugs: Sequence[str] | None = None,
) -> List[GeoPoint]:
    """
    Cities within radius_km of the query city, closest first.

    Requirements:
    - The query city itself is never returned
    - Ties keep table order (stable sort)
    - Unknown slug degrades to the major metros in table order
      (settings.fallback_metro_slugs unless fallback_slugs is given)
    - Never raises; empty table or max_results <= 0 gives []
    """
    if max_results <= 0 or not all_points:
        return []

    origin = find_city(all_points, query_slug)
    if origin is None:
        if fallback_slugs is None:
            fallback_slugs = settings.fallback_metro_slugs
        fallback = set(fallback_slugs)
        return [p for p in all_points if p.slug in fallback][:max_results]

    ranked = []
    for point in all_points:
        if point.slug == origin.slug:
            continue
        distance = distance_km(origin, point)
        if distance <= radius_km:
            ranked.append((distance, point))

    ranked.sort(key=lambda pair: pair[0])
    return [point for _, point in ranked[:max_results]]


def city_label_to_slug(label: str) -> str:
    """'Navi Mumbai, Maharashtra' -> 'navi-mumbai'"""
    slug = re.sub(r"\s+", "-", label.strip().lower())
    return re.sub(r",.*$", "", slug)


def city_label(points: Sequence[GeoPoint], slug: str) -> str:
    """Display label for a city slug: 'Mumbai, Maharashtra' or 'Ooty, India'"""
    city = find_city(points, slug)
    if city is not None:
        return f"{city.name}, {city.region}"
    words = [w for w in slug.split("-") if w]
    return f"{' '.join(w.capitalize() for w in words)}, India"
