# path: bus-tracker-api/bus_tracker/utils/geo.py

from __future__ import annotations

from typing import Dict, Sequence, Tuple
import math

from bus_tracker.models.fleet_models import GeoPoint


EARTH_RADIUS_M = 6371000.0


def haversine_m(a: GeoPoint, b: GeoPoint) -> float:
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlmb = math.radians(b.lon - a.lon)

    s = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    # Float error can push s a hair above 1 for antipodal points.
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(min(1.0, s)))


def bbox_wgs84(points: Sequence[GeoPoint]) -> Dict[str, float]:
    lats = [p.lat for p in points]
    lons = [p.lon for p in points]
    return {
        "min_lat": min(lats),
        "min_lon": min(lons),
        "max_lat": max(lats),
        "max_lon": max(lons),
    }


def bbox_center(bbox: Dict[str, float]) -> Tuple[float, float]:
    """(lat, lon) midpoint of a bbox. Planar; fine at city scale."""
    return (
        (bbox["min_lat"] + bbox["max_lat"]) / 2.0,
        (bbox["min_lon"] + bbox["max_lon"]) / 2.0,
    )


def polyline_length_m(points: Sequence[GeoPoint]) -> float:
    total = 0.0
    for i in range(1, len(points)):
        total += haversine_m(points[i - 1], points[i])
    return total


def clamp_point(lat: float, lon: float) -> GeoPoint:
    # Jitter near the poles or the antimeridian must not produce an invalid point.
    lat = max(-90.0, min(90.0, lat))
    lon = max(-180.0, min(180.0, lon))
    return GeoPoint(lat=lat, lon=lon)
