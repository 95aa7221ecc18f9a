# accessnav/approach/config.py
from dataclasses import dataclass


@dataclass
class ILSConfig:
    """Geometry and stage thresholds for ILS intercept guidance."""
    setup_lateral_offset_nm: float = 8.0
    setup_distance_nm: float = 17.0
    centerline_reference_nm: float = 12.0
    faf_distance_nm: float = 14.0

    max_guidance_distance_nm: float = 100.0
    established_crosstrack_nm: float = 0.5
    setup_capture_radius_nm: float = 3.0
    intercept_crosstrack_nm: float = 1.0
