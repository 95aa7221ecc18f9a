# accessnav/approach/visual.py
"""
Visual approach monitoring: lateral and vertical deviation from the runway's
extended centerline and 3 degree glideslope, plus the policy deciding whether
monitoring continues and how often the host should poll.
"""
from ..navigation.data_models import AircraftPosition, Airport, Runway
from ..navigation.utils.coordinates import (
    distance_nm, heading_difference, magnetic_bearing, signed_angle, true_bearing
)
from .constants import VisualApproachConstants as VAC
from .data_models import ApproachPhase, LateralState, VerticalState, VisualApproachGuidance
from .geometry import centerline_reference_point, glideslope_altitude
from .ils import turn_direction

DIRECT_TO_PHASES = (ApproachPhase.INITIAL_APPROACH, ApproachPhase.INTERCEPT_TURN)


def lateral_deviation(aircraft: AircraftPosition, runway: Runway) -> float:
    """Angle between the bearing to the threshold and the runway heading, in [-180, 180)."""
    bearing_to_threshold = true_bearing(aircraft.lat, aircraft.lon, runway.start_lat, runway.start_lon)
    return signed_angle(bearing_to_threshold - runway.heading_true)


def vertical_deviation(altitude_ft: float, distance_to_threshold: float, airport_altitude_ft: float) -> float:
    """Feet above (positive) or below (negative) the glideslope."""
    return altitude_ft - glideslope_altitude(distance_to_threshold, airport_altitude_ft)


def get_lateral_state(deviation_deg: float) -> LateralState:
    if abs(deviation_deg) <= VAC.LATERAL_TOLERANCE_DEG:
        return LateralState.ALIGNED
    return LateralState.RIGHT if deviation_deg > 0 else LateralState.LEFT


def get_vertical_state(deviation_ft: float) -> VerticalState:
    if abs(deviation_ft) <= VAC.VERTICAL_TOLERANCE_FT:
        return VerticalState.ON_SLOPE
    return VerticalState.UP if deviation_ft > 0 else VerticalState.DOWN


def should_continue(agl: float, lateral_deviation_deg: float, distance: float) -> bool:
    """Monitoring stops near the ground or when grossly off course.

    `distance` is accepted for the caller's convenience; no distance limit
    applies to visual monitoring.
    """
    return stop_reason(agl, lateral_deviation_deg, distance) == ""


def stop_reason(agl: float, lateral_deviation_deg: float, distance: float) -> str:
    if agl < VAC.SAFETY_ALTITUDE_AGL:
        return "Below minimum altitude - landing or landed"
    if abs(lateral_deviation_deg) > VAC.MAX_DEVIATION_DEG:
        return f"Too far off course - {abs(lateral_deviation_deg):.1f} degrees"
    return ""


def get_update_interval(agl: float) -> int:
    """Recommended polling interval in milliseconds; the caller owns the timer."""
    if agl <= VAC.CRITICAL_ALTITUDE_AGL:
        return VAC.FAST_UPDATE_INTERVAL_MS
    return VAC.SLOW_UPDATE_INTERVAL_MS


def determine_approach_phase(distance_to_threshold: float, agl: float,
                             is_aligned: bool, is_behind_runway: bool) -> ApproachPhase:
    # Past the threshold there is nothing left to set up, only basic guidance
    if not is_behind_runway:
        return ApproachPhase.FINAL_APPROACH

    if distance_to_threshold < VAC.SHORT_FINAL_DISTANCE_NM and agl < VAC.SHORT_FINAL_ALTITUDE_AGL:
        return ApproachPhase.SHORT_FINAL

    if is_aligned and distance_to_threshold < VAC.INITIAL_APPROACH_DISTANCE_NM:
        return ApproachPhase.FINAL_APPROACH

    if VAC.INTERCEPT_DISTANCE_NM <= distance_to_threshold < VAC.INITIAL_APPROACH_DISTANCE_NM:
        return ApproachPhase.INTERCEPT_TURN

    if distance_to_threshold >= VAC.INITIAL_APPROACH_DISTANCE_NM:
        return ApproachPhase.INITIAL_APPROACH

    return ApproachPhase.FINAL_APPROACH


def calculate_guidance(aircraft: AircraftPosition, runway: Runway, airport: Airport) -> VisualApproachGuidance:
    """Calculates visual approach guidance for one position sample."""
    distance_to_threshold = distance_nm(aircraft.lat, aircraft.lon, runway.start_lat, runway.start_lon)
    lateral = lateral_deviation(aircraft, runway)
    vertical = vertical_deviation(aircraft.alt_ft, distance_to_threshold, airport.alt_ft)
    agl = aircraft.alt_ft - airport.alt_ft

    bearing_from_threshold = true_bearing(runway.start_lat, runway.start_lon, aircraft.lat, aircraft.lon)
    is_behind_runway = heading_difference(bearing_from_threshold, runway.heading_true) > 90.0
    heading_delta = heading_difference(aircraft.heading_mag_deg, runway.heading_mag)
    is_aligned = heading_delta <= VAC.ALIGNMENT_TOLERANCE_DEG

    reason = stop_reason(agl, lateral, distance_to_threshold)
    phase = determine_approach_phase(distance_to_threshold, agl, is_aligned, is_behind_runway)

    # Direct-to the centerline point while still setting up the approach
    intercept_heading = distance_to_intercept = None
    direction = ""
    if phase in DIRECT_TO_PHASES:
        ref_lat, ref_lon = centerline_reference_point(runway, VAC.CENTERLINE_POINT_DISTANCE_NM)
        intercept_heading = magnetic_bearing(aircraft.lat, aircraft.lon, ref_lat, ref_lon, airport.mag_var)
        distance_to_intercept = distance_nm(aircraft.lat, aircraft.lon, ref_lat, ref_lon)
        direction = turn_direction(intercept_heading, aircraft.heading_mag_deg)

    return VisualApproachGuidance(
        lateral_state=get_lateral_state(lateral),
        vertical_state=get_vertical_state(vertical),
        lateral_deviation=lateral,
        vertical_deviation=vertical,
        distance_to_threshold=distance_to_threshold,
        agl=agl,
        should_continue=reason == "",
        stop_reason=reason,
        update_interval_ms=get_update_interval(agl),
        phase=phase,
        is_aligned=is_aligned,
        is_behind_runway=is_behind_runway,
        heading_difference=heading_delta,
        intercept_heading=intercept_heading,
        distance_to_intercept=distance_to_intercept,
        turn_direction=direction
    )
