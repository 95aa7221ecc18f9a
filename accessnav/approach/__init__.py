"""
accessnav.approach - ILS intercept guidance and visual approach monitoring.

Everything here is a pure function of one aircraft position sample plus static
runway and airport data, so it is safe to call from any polling loop.
"""
# Guidance engines
from .ils import calculate_ils_guidance, determine_guidance_stage
from .visual import calculate_guidance as calculate_visual_guidance
from .announcements import format_ils_announcement, format_visual_announcement, format_visual_phase_announcement

# Public data models and configuration
from .data_models import (
    ILSGuidance, ILSGuidanceState, VisualApproachGuidance,
    LateralState, VerticalState, ApproachPhase
)
from .config import ILSConfig

__all__ = [
    "calculate_ils_guidance",
    "determine_guidance_stage",
    "calculate_visual_guidance",
    "format_ils_announcement",
    "format_visual_announcement",
    "format_visual_phase_announcement",
    "ILSGuidance",
    "ILSGuidanceState",
    "VisualApproachGuidance",
    "LateralState",
    "VerticalState",
    "ApproachPhase",
    "ILSConfig"
]
