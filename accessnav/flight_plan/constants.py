# accessnav/flight_plan/constants.py

class FlightPlanConstants:
    # Inbound markers stamped on loaded waypoints that arrive without one
    ORIGIN_MARKER = "ORIGIN"
    DEPART_MARKER = "DEPART"
    ARRIVAL_MARKER = "ARRIVAL"
    DESTINATION_MARKER = "DESTINATION"
    SID_MARKER = "SID"
    STAR_MARKER = "STAR"
    APPROACH_MARKER = "APPROACH"
    CONTINUATION_MARKER = "PROC"


class TrackerConstants:
    MAX_SLOTS = 5
    COORDINATE_TOLERANCE_DEG = 0.01  # ~1 km
