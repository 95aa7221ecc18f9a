# accessnav/approach/announcements.py
"""
Text rendering of guidance results for the speech layer.
"""
from .data_models import (
    ApproachPhase, ILSGuidance, ILSGuidanceState, LateralState, VerticalState, VisualApproachGuidance
)

LATERAL_TEXT = {
    LateralState.LEFT: "Left",
    LateralState.RIGHT: "Right",
    LateralState.ALIGNED: "Aligned",
}

VERTICAL_TEXT = {
    VerticalState.UP: "Up",
    VerticalState.DOWN: "Down",
    VerticalState.ON_SLOPE: "On slope",
}


def format_visual_announcement(guidance: VisualApproachGuidance) -> str:
    """Only the axes needing a correction are spoken."""
    lateral_ok = guidance.lateral_state == LateralState.ALIGNED
    vertical_ok = guidance.vertical_state == VerticalState.ON_SLOPE

    if lateral_ok and vertical_ok:
        return "Aligned, on slope"
    if lateral_ok:
        return VERTICAL_TEXT[guidance.vertical_state]
    if vertical_ok:
        return LATERAL_TEXT[guidance.lateral_state]
    return f"{LATERAL_TEXT[guidance.lateral_state]}, {VERTICAL_TEXT[guidance.vertical_state]}"


GLIDESLOPE_TEXT = {
    VerticalState.UP: "Above glideslope",
    VerticalState.DOWN: "Below glideslope",
    VerticalState.ON_SLOPE: "On glideslope",
}


def format_visual_phase_announcement(guidance: VisualApproachGuidance) -> str:
    """Phase-appropriate visual approach callout.

    Initial approach and intercept turn give the direct-to heading for the
    centerline point; final and short final prefix the distance to the
    deviation callout of `format_visual_announcement`.
    """
    distance = guidance.distance_to_threshold

    if guidance.phase == ApproachPhase.INITIAL_APPROACH:
        return (f"Initial approach. Turn {guidance.turn_direction} to heading {guidance.intercept_heading:03.0f}, "
                f"{guidance.distance_to_intercept:.1f} miles to centerline point, "
                f"{distance:.1f} miles to threshold. {GLIDESLOPE_TEXT[guidance.vertical_state]}")

    if guidance.phase == ApproachPhase.INTERCEPT_TURN:
        return (f"{distance:.1f} miles from threshold. "
                f"Turn {guidance.turn_direction} to heading {guidance.intercept_heading:03.0f}. "
                f"{GLIDESLOPE_TEXT[guidance.vertical_state]}")

    if guidance.phase == ApproachPhase.SHORT_FINAL:
        return f"Short final. {distance:.1f} miles. {format_visual_announcement(guidance)}"

    return f"{distance:.1f} miles. {format_visual_announcement(guidance)}"


def _glideslope_text(deviation_ft: float) -> str:
    side = "above" if deviation_ft > 0 else "below"
    return f"{abs(deviation_ft):.0f} feet {side} glideslope"


def format_ils_announcement(guidance: ILSGuidance) -> str:
    gs_text = _glideslope_text(guidance.glideslope_deviation)

    if guidance.state == ILSGuidanceState.ESTABLISHED:
        return (f"Established on localizer, {guidance.distance_to_threshold:.1f} miles to threshold, "
                f"{gs_text}")

    if guidance.state == ILSGuidanceState.TOO_FAR:
        return (f"Caution: {guidance.distance_to_threshold:.1f} miles from runway. "
                f"Guidance available within 100 miles. "
                f"Turn {guidance.turn_direction} to heading {guidance.recommended_heading:03.0f} toward destination.")

    if guidance.state == ILSGuidanceState.TURNING_TO_INTERCEPT:
        return (f"Turn to intercept heading {guidance.intercept_heading:03.0f}, "
                f"{guidance.crosstrack_nm:.1f} miles from centerline, "
                f"{guidance.distance_to_threshold:.1f} miles to threshold, {gs_text}")

    if guidance.state == ILSGuidanceState.INTERCEPTING:
        return (f"Intercepting localizer, {guidance.crosstrack_nm:.1f} miles from centerline, "
                f"{guidance.distance_to_threshold:.1f} miles to threshold, {gs_text}")

    return (f"Turn {guidance.turn_direction} to heading {guidance.recommended_heading:03.0f}, "
            f"{guidance.distance_to_centerline_point:.1f} miles to centerline point, "
            f"{guidance.distance_to_threshold:.1f} miles to threshold, {gs_text}")
