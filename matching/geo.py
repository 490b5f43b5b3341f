# matching/geo.py
from __future__ import annotations

from typing import Tuple
import numpy as np

from domain.vehicle import Coordinate
from domain.user_profile import RecommendationInput

EARTH_RADIUS_KM = 6371.0


def distance_km(p1: Coordinate, p2: Coordinate) -> float:
    """Great-circle (haversine) distance in km. Not road distance."""
    lat1, lng1, lat2, lng2 = np.radians([p1.lat, p1.lng, p2.lat, p2.lng])
    d_lat = lat2 - lat1
    d_lng = lng2 - lng1
    a = np.sin(d_lat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(d_lng / 2) ** 2
    a = np.clip(a, 0.0, 1.0)  # rounding can push a past 1 near antipodes
    return float(2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))


def trip_distances(inp: RecommendationInput) -> Tuple[float, float, float]:
    """(commute, holiday, total) km. Both legs start at the house."""
    commute = distance_km(inp.house, inp.workplace)
    holiday = distance_km(inp.house, inp.holiday)
    return commute, holiday, commute + holiday
