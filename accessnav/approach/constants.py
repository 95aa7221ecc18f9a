# accessnav/approach/constants.py

class ApproachConstants:
    # --- LOCALIZER ---
    LOCALIZER_TOLERANCE_DEG = 5.0  # Heading within this of the runway = on the localizer
    STANDARD_INTERCEPT_ANGLE_DEG = 30.0

    # --- INTERCEPT SIDES ---
    SIDE_LEFT = -1
    SIDE_RIGHT = 1


class VisualApproachConstants:
    LATERAL_TOLERANCE_DEG = 0.5     # ±0.5° for "Aligned"
    VERTICAL_TOLERANCE_FT = 50.0    # ±50 feet for "On slope"
    CRITICAL_ALTITUDE_AGL = 1000.0  # Switch to 1-second updates
    SAFETY_ALTITUDE_AGL = 50.0      # Stop monitoring below this
    MAX_DEVIATION_DEG = 5.0         # Stop if too far off course

    FAST_UPDATE_INTERVAL_MS = 1000
    SLOW_UPDATE_INTERVAL_MS = 3000

    # Approach phases
    SHORT_FINAL_ALTITUDE_AGL = 500.0
    SHORT_FINAL_DISTANCE_NM = 1.0
    INTERCEPT_DISTANCE_NM = 3.0
    INITIAL_APPROACH_DISTANCE_NM = 10.0
    ALIGNMENT_TOLERANCE_DEG = 3.0
    CENTERLINE_POINT_DISTANCE_NM = 12.0  # Direct-to target during initial approach and intercept turn
