# accessnav/flight_plan/tracker.py
"""
Five waypoint tracking slots for quick hotkey readback.

A slot stores an identity snapshot of the waypoint, never the object itself:
sections are replaced wholesale on every load, so the tracked fix is looked
up again in the current plan each time it is read.
"""
from dataclasses import dataclass
from typing import List, Optional

from ..navigation.data_models import FlightPlanSection, WaypointFix
from ..navigation.utils.coordinates import distance_nm, magnetic_bearing
from .constants import TrackerConstants
from .core import FlightPlan
from .exceptions import InvalidSlotError, InvalidWaypointError


@dataclass(frozen=True)
class TrackedWaypoint:
    ident: str
    section: FlightPlanSection
    lat: float
    lon: float


class WaypointTracker:
    """Manages waypoint tracking slots 1-5"""

    def __init__(self):
        self._slots: List[Optional[TrackedWaypoint]] = [None] * TrackerConstants.MAX_SLOTS

    def track_waypoint(self, slot_number: int, waypoint: WaypointFix) -> None:
        index = self._index(slot_number)
        if waypoint is None:
            raise InvalidWaypointError("A waypoint is required to track a slot")

        self._slots[index] = TrackedWaypoint(
            ident=waypoint.ident,
            section=waypoint.section,
            lat=waypoint.lat,
            lon=waypoint.lon
        )

    def get_tracked(self, slot_number: int) -> Optional[TrackedWaypoint]:
        return self._slots[self._index(slot_number)]

    def resolve(self, slot_number: int, flight_plan: Optional[FlightPlan]) -> Optional[WaypointFix]:
        """Finds the tracked waypoint in the current flight plan, or None."""
        tracked = self._slots[self._index(slot_number)]
        if tracked is None or flight_plan is None:
            return None

        candidates = [wp for wp in flight_plan.get_all_waypoints()
                      if wp.ident == tracked.ident and wp.section == tracked.section]

        tolerance = TrackerConstants.COORDINATE_TOLERANCE_DEG
        for waypoint in candidates:
            if abs(waypoint.lat - tracked.lat) < tolerance and abs(waypoint.lon - tracked.lon) < tolerance:
                return waypoint

        # Same fix in the same section, even if its coordinates moved
        return candidates[0] if candidates else None

    def get_tracked_waypoint_info(self, slot_number: int, flight_plan: Optional[FlightPlan],
                                  aircraft_lat: float, aircraft_lon: float, mag_var: float) -> Optional[str]:
        """
        Announcement text for a tracked slot with current distance and bearing.

        Returns:
            "IDENT, D nautical miles, B degrees", a not-in-plan notice when the
            fix has left the plan, or None if the slot is empty.
        """
        tracked = self._slots[self._index(slot_number)]
        if tracked is None:
            return None

        waypoint = self.resolve(slot_number, flight_plan)
        if waypoint is None:
            return f"Track slot {slot_number}, {tracked.ident}, waypoint not in current flight plan"

        distance = distance_nm(aircraft_lat, aircraft_lon, waypoint.lat, waypoint.lon)
        bearing = magnetic_bearing(aircraft_lat, aircraft_lon, waypoint.lat, waypoint.lon, mag_var)
        return f"{waypoint.ident}, {distance:.0f} nautical miles, {bearing:.0f} degrees"

    def is_slot_empty(self, slot_number: int) -> bool:
        return self._slots[self._index(slot_number)] is None

    def clear_slot(self, slot_number: int) -> None:
        self._slots[self._index(slot_number)] = None

    def clear_all_slots(self) -> None:
        self._slots = [None] * TrackerConstants.MAX_SLOTS

    def get_slot_ident(self, slot_number: int) -> Optional[str]:
        tracked = self._slots[self._index(slot_number)]
        return tracked.ident if tracked else None

    @staticmethod
    def _index(slot_number: int) -> int:
        if (not isinstance(slot_number, int) or isinstance(slot_number, bool)
                or not 1 <= slot_number <= TrackerConstants.MAX_SLOTS):
            raise InvalidSlotError(slot_number, TrackerConstants.MAX_SLOTS)
        return slot_number - 1
