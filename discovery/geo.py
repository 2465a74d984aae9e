"""
Great-circle distance between marketplace coordinates.
"""

import math
from typing import Optional

from .schemas import Coordinate, ProviderRecord

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    Haversine distance in kilometers between two coordinates.

    Symmetric, zero for identical points and finite for antipodal ones.
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlng = math.radians(b.lng - a.lng)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    # rounding can push h a hair outside [0, 1] near antipodes
    h = min(1.0, max(0.0, h))

    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))


def with_distance(record: ProviderRecord, viewer: Optional[Coordinate]) -> ProviderRecord:
    """Copy of ``record`` carrying its distance from ``viewer`` when both ends are known."""
    if viewer is None or record.coordinate is None:
        return record.model_copy(update={"distance_km": None})
    return record.model_copy(update={"distance_km": distance_km(viewer, record.coordinate)})
