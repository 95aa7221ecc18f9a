# accessnav/navigation/utils/coordinates.py
"""
Great-circle geodesy on a spherical earth, in nautical miles and degrees.
Logging is omitted here as these are high-frequency, low-level functions
called on every position sample.
"""
import math

import numpy as np

from ..constants import NavConstants

R_NM = NavConstants.EARTH_RADIUS_NM


def normalize_heading(deg: float) -> float:
    """Wraps any angle into [0, 360)."""
    result = deg % 360.0
    # A tiny negative input rounds up to exactly 360.0
    return 0.0 if result >= 360.0 else result


def signed_angle(deg: float) -> float:
    """Wraps any angle into [-180, 180)."""
    return ((deg + 180.0) % 360.0) - 180.0


def heading_difference(heading1: float, heading2: float) -> float:
    """Absolute difference between two headings, corrected across 360/0."""
    diff = abs(heading1 - heading2) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def distance_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points in nautical miles."""
    lat1_rad, lat2_rad = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = math.sin(dlat / 2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return R_NM * c


def true_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculates the initial bearing from point 1 to point 2.

    Args:
        lat1, lon1: Latitude and longitude of point 1 (in degrees).
        lat2, lon2: Latitude and longitude of point 2 (in degrees).

    Returns:
        float: The true bearing in degrees, in [0, 360).
    """
    lat1_rad, lat2_rad = math.radians(lat1), math.radians(lat2)
    dlon = math.radians(lon2 - lon1)
    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)
    return normalize_heading(math.degrees(math.atan2(y, x)))


def magnetic_bearing(lat1: float, lon1: float, lat2: float, lon2: float, variation: float) -> float:
    """True bearing converted to magnetic. Variation is east positive."""
    return normalize_heading(true_bearing(lat1, lon1, lat2, lon2) - variation)


def destination_point(lat: float, lon: float, bearing_deg: float, distance: float) -> tuple[float, float]:
    """
    Calculates the destination point given a starting point, bearing, and distance.

    Args:
        lat, lon: Starting latitude and longitude (in degrees).
        bearing_deg: True bearing (in degrees).
        distance: Distance to travel (in nautical miles).

    Returns:
        A tuple containing (destination_latitude, destination_longitude).
    """
    lat_rad = math.radians(lat); lon_rad = math.radians(lon); bearing_rad = math.radians(bearing_deg)
    angular_distance = distance / R_NM
    dest_lat_rad = math.asin(math.sin(lat_rad) * math.cos(angular_distance) +
                             math.cos(lat_rad) * math.sin(angular_distance) * math.cos(bearing_rad))
    dest_lon_rad = lon_rad + math.atan2(math.sin(bearing_rad) * math.sin(angular_distance) * math.cos(lat_rad),
                                        math.cos(angular_distance) - math.sin(lat_rad) * math.sin(dest_lat_rad))
    return math.degrees(dest_lat_rad), math.degrees(dest_lon_rad)


# --- Vectorized forms for whole flight plan refreshes ---

def distances_nm(lat: float, lon: float, lats, lons) -> np.ndarray:
    """Haversine distance from one point to each point of two coordinate arrays."""
    lats = np.radians(np.asarray(lats, dtype=float))
    lons = np.radians(np.asarray(lons, dtype=float))
    lat_rad, lon_rad = np.radians(lat), np.radians(lon)
    a = np.sin((lats - lat_rad) / 2)**2 + np.cos(lat_rad) * np.cos(lats) * np.sin((lons - lon_rad) / 2)**2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return R_NM * c


def magnetic_bearings(lat: float, lon: float, lats, lons, variation: float) -> np.ndarray:
    """Magnetic bearing from one point to each point of two coordinate arrays."""
    lats = np.radians(np.asarray(lats, dtype=float))
    lons = np.radians(np.asarray(lons, dtype=float))
    lat_rad, lon_rad = np.radians(lat), np.radians(lon)
    dlon = lons - lon_rad
    y = np.sin(dlon) * np.cos(lats)
    x = np.cos(lat_rad) * np.sin(lats) - np.sin(lat_rad) * np.cos(lats) * np.cos(dlon)
    bearings = np.mod(np.degrees(np.arctan2(y, x)) - variation, 360.0)
    return np.where(bearings >= 360.0, 0.0, bearings)
