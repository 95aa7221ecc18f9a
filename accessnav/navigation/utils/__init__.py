# accessnav/navigation/utils/__init__.py
"""
Great-circle helpers promoted to the package level, so clients can write
`from accessnav.navigation.utils import distance_nm`.
"""
from .coordinates import (
    normalize_heading,
    signed_angle,
    heading_difference,
    distance_nm,
    true_bearing,
    magnetic_bearing,
    destination_point,
    distances_nm,
    magnetic_bearings,
)

__all__ = [
    "normalize_heading",
    "signed_angle",
    "heading_difference",
    "distance_nm",
    "true_bearing",
    "magnetic_bearing",
    "destination_point",
    "distances_nm",
    "magnetic_bearings",
]
