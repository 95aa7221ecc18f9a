# accessnav/approach/ils.py
"""
ILS intercept guidance. The stage is re-derived from the current position
sample on every call, so the engine can be polled at any rate and in any
order without drifting.
"""
from typing import Optional

from ..navigation.data_models import AircraftPosition, Airport, Runway
from ..navigation.utils.coordinates import distance_nm, magnetic_bearing, signed_angle
from .config import ILSConfig
from .data_models import ILSGuidance, ILSGuidanceState
from .geometry import (
    centerline_reference_point, determine_best_intercept_side, final_approach_fix,
    glideslope_altitude, intercept_setup_point, is_on_localizer,
    perpendicular_distance_to_centerline, thirty_degree_intercept_heading
)


def determine_guidance_stage(on_localizer: bool, distance_to_setup_point: float,
                             distance_to_centerline: float, distance_to_threshold: float,
                             config: Optional[ILSConfig] = None) -> ILSGuidanceState:
    """Classifies the intercept stage. Rules are checked in priority order; the first match wins."""
    config = config or ILSConfig()

    if distance_to_threshold > config.max_guidance_distance_nm:
        return ILSGuidanceState.TOO_FAR

    if on_localizer and distance_to_centerline < config.established_crosstrack_nm:
        return ILSGuidanceState.ESTABLISHED

    if distance_to_setup_point > config.setup_capture_radius_nm:
        return ILSGuidanceState.VECTORING_TO_SETUP

    if distance_to_centerline > config.intercept_crosstrack_nm:
        return ILSGuidanceState.TURNING_TO_INTERCEPT

    return ILSGuidanceState.INTERCEPTING


def turn_direction(target_heading: float, current_heading: float) -> str:
    return "right" if signed_angle(target_heading - current_heading) > 0 else "left"


def calculate_ils_guidance(aircraft: AircraftPosition, runway: Runway, airport: Airport,
                           config: Optional[ILSConfig] = None) -> ILSGuidance:
    """Calculates the full ILS guidance record for one position sample."""
    config = config or ILSConfig()
    mag_var = airport.mag_var

    # --- 1. Distances and vertical profile ---
    distance_to_threshold = distance_nm(aircraft.lat, aircraft.lon, runway.start_lat, runway.start_lon)
    crosstrack = perpendicular_distance_to_centerline(aircraft, runway)
    required_altitude = glideslope_altitude(distance_to_threshold, airport.alt_ft)
    on_localizer = is_on_localizer(aircraft.heading_mag_deg, runway.heading_mag)

    # --- 2. Intercept geometry ---
    side = determine_best_intercept_side(aircraft, runway)
    setup_lat, setup_lon = intercept_setup_point(
        runway, side, config.setup_lateral_offset_nm, config.setup_distance_nm
    )
    distance_to_setup = distance_nm(aircraft.lat, aircraft.lon, setup_lat, setup_lon)

    ref_lat, ref_lon = centerline_reference_point(runway, config.centerline_reference_nm)
    recommended_heading = magnetic_bearing(aircraft.lat, aircraft.lon, ref_lat, ref_lon, mag_var)
    distance_to_ref = distance_nm(aircraft.lat, aircraft.lon, ref_lat, ref_lon)

    faf_lat, faf_lon = final_approach_fix(runway, config.faf_distance_nm)

    state = determine_guidance_stage(on_localizer, distance_to_setup, crosstrack, distance_to_threshold, config)

    return ILSGuidance(
        state=state,
        recommended_heading=recommended_heading,
        crosstrack_nm=crosstrack,
        distance_to_threshold=distance_to_threshold,
        glideslope_deviation=aircraft.alt_ft - required_altitude,
        required_altitude=required_altitude,
        turn_direction=turn_direction(recommended_heading, aircraft.heading_mag_deg),
        is_on_localizer=on_localizer,
        intercept_side=side,
        intercept_heading=thirty_degree_intercept_heading(runway, side),
        setup_point_lat=setup_lat,
        setup_point_lon=setup_lon,
        distance_to_setup_point=distance_to_setup,
        centerline_point_lat=ref_lat,
        centerline_point_lon=ref_lon,
        distance_to_centerline_point=distance_to_ref,
        faf_lat=faf_lat,
        faf_lon=faf_lon,
        distance_to_faf=distance_nm(aircraft.lat, aircraft.lon, faf_lat, faf_lon)
    )
