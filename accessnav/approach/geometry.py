# accessnav/approach/geometry.py
"""
Runway-relative derived points and distances used by the approach guidance.

Runway geometry is built on the runway's true heading, since every bearing
returned by the great-circle helpers is true. Localizer alignment is the one
comparison done in magnetic terms, against the aircraft's magnetic heading.
"""
import math

from ..navigation.constants import NavConstants
from ..navigation.data_models import AircraftPosition, Runway
from ..navigation.utils.coordinates import (
    destination_point, distance_nm, heading_difference, normalize_heading, true_bearing
)
from .constants import ApproachConstants


def reciprocal_point(runway: Runway, distance: float) -> tuple[float, float]:
    """Point on the extended centerline, `distance` NM before the threshold."""
    reciprocal_heading = normalize_heading(runway.heading_true + 180.0)
    return destination_point(runway.start_lat, runway.start_lon, reciprocal_heading, distance)


def final_approach_fix(runway: Runway, distance: float = 14.0) -> tuple[float, float]:
    return reciprocal_point(runway, distance)


def centerline_reference_point(runway: Runway, distance: float = 12.0) -> tuple[float, float]:
    return reciprocal_point(runway, distance)


def runway_endpoint(runway: Runway) -> tuple[float, float]:
    """Far end of the runway. Uses the stored end when the database supplied one."""
    if runway.end_lat is not None and runway.end_lon is not None:
        return runway.end_lat, runway.end_lon
    length_nm = runway.length_ft / NavConstants.FEET_PER_NAUTICAL_MILE
    return destination_point(runway.start_lat, runway.start_lon, runway.heading_true, length_nm)


def intercept_setup_point(runway: Runway, side: int, lateral_offset_nm: float = 8.0,
                          distance_from_threshold_nm: float = 17.0) -> tuple[float, float]:
    """
    Calculates the intercept setup point, offset to one side of the extended centerline.

    Args:
        runway: The destination runway.
        side: -1 for the left side, +1 for the right side.
        lateral_offset_nm: Perpendicular offset from the centerline.
        distance_from_threshold_nm: Distance back along the centerline before offsetting.

    Returns:
        A tuple containing (latitude, longitude) of the setup point.
    """
    on_centerline = reciprocal_point(runway, distance_from_threshold_nm)
    perpendicular_heading = normalize_heading(runway.heading_true + side * 90.0)
    return destination_point(on_centerline[0], on_centerline[1], perpendicular_heading, lateral_offset_nm)


def determine_best_intercept_side(aircraft: AircraftPosition, runway: Runway) -> int:
    """Returns +1 (right) when the aircraft lies right of the runway heading, else -1 (left)."""
    bearing_to_aircraft = true_bearing(runway.start_lat, runway.start_lon, aircraft.lat, aircraft.lon)
    # Rounded so a position on the runway axis lands exactly on 0 or 180
    relative_bearing = normalize_heading(round(normalize_heading(bearing_to_aircraft - runway.heading_true), 9))
    if 0.0 < relative_bearing <= 180.0:
        return ApproachConstants.SIDE_RIGHT
    return ApproachConstants.SIDE_LEFT


def thirty_degree_intercept_heading(runway: Runway, side: int) -> float:
    """Magnetic heading for a standard 30 degree intercept from the given side."""
    # Right side turns left onto the course, left side turns right
    return normalize_heading(runway.heading_mag - side * ApproachConstants.STANDARD_INTERCEPT_ANGLE_DEG)


def glideslope_altitude(distance: float, airport_altitude_ft: float) -> float:
    """Altitude on a 3 degree glideslope at `distance` NM from the threshold."""
    return distance * NavConstants.GLIDESLOPE_FEET_PER_NM + airport_altitude_ft


def is_on_localizer(aircraft_heading_mag: float, runway_heading_mag: float) -> bool:
    return heading_difference(aircraft_heading_mag, runway_heading_mag) <= ApproachConstants.LOCALIZER_TOLERANCE_DEG


def signed_crosstrack_nm(aircraft: AircraftPosition, runway: Runway) -> float:
    """Spherical cross-track distance from the runway course through the threshold.

    Positive when the aircraft is right of the course line as seen looking
    along the runway heading.
    """
    d = distance_nm(runway.start_lat, runway.start_lon, aircraft.lat, aircraft.lon)
    bearing = true_bearing(runway.start_lat, runway.start_lon, aircraft.lat, aircraft.lon)
    r = NavConstants.EARTH_RADIUS_NM
    return math.asin(math.sin(d / r) * math.sin(math.radians(bearing - runway.heading_true))) * r


def perpendicular_distance_to_centerline(aircraft: AircraftPosition, runway: Runway) -> float:
    return abs(signed_crosstrack_nm(aircraft, runway))
