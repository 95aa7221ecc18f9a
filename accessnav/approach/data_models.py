# accessnav/approach/data_models.py
"""
Result records produced by the ILS guidance engine and the visual approach
monitor. Both are rebuilt from scratch on every call; nothing here carries
history between position samples.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class ILSGuidanceState(Enum):
    VECTORING_TO_SETUP = auto()    # Flying to the intercept setup point
    TURNING_TO_INTERCEPT = auto()  # Near the setup point, turn to the intercept heading
    INTERCEPTING = auto()          # On the intercept heading, closing the centerline
    ESTABLISHED = auto()           # On the localizer course
    TOO_FAR = auto()               # Beyond guidance range, warning only


@dataclass(frozen=True)
class ILSGuidance:
    state: ILSGuidanceState
    recommended_heading: float     # Magnetic heading to the centerline reference point
    crosstrack_nm: float           # Distance off the extended centerline
    distance_to_threshold: float
    glideslope_deviation: float    # Feet, positive = above the glideslope
    required_altitude: float
    turn_direction: str            # "left" or "right"
    is_on_localizer: bool
    intercept_side: int            # -1 left, +1 right
    intercept_heading: float       # 30 degree intercept heading (magnetic)
    setup_point_lat: float
    setup_point_lon: float
    distance_to_setup_point: float
    centerline_point_lat: float
    centerline_point_lon: float
    distance_to_centerline_point: float
    faf_lat: float
    faf_lon: float
    distance_to_faf: float


class LateralState(Enum):
    LEFT = auto()     # Right of centerline, turn left to correct
    RIGHT = auto()    # Left of centerline, turn right to correct
    ALIGNED = auto()


class VerticalState(Enum):
    UP = auto()       # Descend to correct
    DOWN = auto()     # Climb to correct
    ON_SLOPE = auto()


class ApproachPhase(Enum):
    INITIAL_APPROACH = auto()  # >10nm, vectoring to intercept
    INTERCEPT_TURN = auto()    # 3-10nm, not aligned
    FINAL_APPROACH = auto()    # <10nm, aligned
    SHORT_FINAL = auto()       # <1nm and <500ft AGL


@dataclass(frozen=True)
class VisualApproachGuidance:
    lateral_state: LateralState
    vertical_state: VerticalState
    lateral_deviation: float    # Degrees off centerline
    vertical_deviation: float   # Feet above/below glideslope
    distance_to_threshold: float
    agl: float
    should_continue: bool
    stop_reason: str
    update_interval_ms: int
    phase: ApproachPhase
    is_aligned: bool
    is_behind_runway: bool
    heading_difference: float   # Aircraft heading vs runway heading, degrees

    # Direct-to guidance, set during INITIAL_APPROACH and INTERCEPT_TURN only
    intercept_heading: Optional[float] = None      # Magnetic heading to the centerline point
    distance_to_intercept: Optional[float] = None  # Miles to the centerline point
    turn_direction: str = ""                       # "left" or "right"
