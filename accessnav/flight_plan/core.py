# accessnav/flight_plan/core.py
"""
The flight plan: six ordered waypoint sections, flown A through F.

Sections are published by reference swap. Every mutation builds a complete
new section mapping and assigns it in one statement, so a reader that takes
`self._sections` once before iterating never observes a half-applied update.
Writers are serialized by a lock; readers never take it.
"""
import threading
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from ..navigation.data_models import FlightPlanSection, WaypointFix
from ..navigation.utils.coordinates import distance_nm, distances_nm, magnetic_bearings

Sections = Dict[FlightPlanSection, Tuple[WaypointFix, ...]]


class FlightPlan:
    """A complete flight plan with all waypoints organized by section."""

    def __init__(self):
        self.departure_icao = ""
        self.departure_runway = ""
        self.arrival_icao = ""
        self.arrival_runway = ""
        self.sid_name = ""
        self.star_name = ""
        self.approach_name = ""

        self._sections: Sections = {section: () for section in FlightPlanSection}
        self._write_lock = threading.Lock()

    def get_all_waypoints(self) -> List[WaypointFix]:
        """All waypoints in flown order (DepartureAirport through ArrivalAirport)."""
        return self._flatten(self._sections)

    def get_section_waypoints(self, section: FlightPlanSection) -> List[WaypointFix]:
        return list(self._sections[section])

    def update_section(self, section: FlightPlanSection, waypoints: List[WaypointFix]) -> None:
        """Replaces one section wholesale.

        The plan stores copies stamped with `section`; the incoming objects,
        which may still sit in another section or a reader's snapshot, are
        left as they are.
        """
        stamped = tuple(replace(waypoint, section=section) for waypoint in waypoints)

        with self._write_lock:
            sections = dict(self._sections)
            sections[section] = stamped
            self._sections = self._with_leg_distances(sections)

    def clear_section(self, section: FlightPlanSection) -> None:
        self.update_section(section, [])

    def update_aircraft_position(self, lat: float, lon: float, mag_var: float) -> None:
        """Recomputes distance and magnetic bearing from the aircraft for every waypoint."""
        with self._write_lock:
            sections = self._sections
            waypoints = self._flatten(sections)
            if not waypoints:
                return

            lats = [wp.lat for wp in waypoints]
            lons = [wp.lon for wp in waypoints]
            distances = distances_nm(lat, lon, lats, lons)
            bearings = magnetic_bearings(lat, lon, lats, lons, mag_var)

            refreshed: Sections = {}
            index = 0
            for section in FlightPlanSection:
                updated = []
                for waypoint in sections[section]:
                    updated.append(replace(
                        waypoint,
                        distance_from_aircraft=float(distances[index]),
                        bearing_from_aircraft=float(bearings[index])
                    ))
                    index += 1
                refreshed[section] = tuple(updated)
            self._sections = refreshed

    def total_waypoint_count(self) -> int:
        sections = self._sections
        return sum(len(sections[section]) for section in FlightPlanSection)

    def is_empty(self) -> bool:
        return self.total_waypoint_count() == 0

    def summary(self) -> str:
        if self.is_empty():
            return "No flight plan loaded"

        text = f"{self.departure_icao or '???'} to {self.arrival_icao or '???'}"
        if self.departure_runway:
            text += f" (Runway {self.departure_runway})"
        if self.sid_name:
            text += f" via {self.sid_name}"
        if self.star_name:
            text += f", {self.star_name}"
        if self.approach_name:
            text += f", {self.approach_name}"
        if self.arrival_runway:
            text += f" to Runway {self.arrival_runway}"
        text += f" ({self.total_waypoint_count()} waypoints)"
        return text

    @staticmethod
    def _flatten(sections: Sections) -> List[WaypointFix]:
        return [waypoint for section in FlightPlanSection for waypoint in sections[section]]

    @staticmethod
    def _with_leg_distances(sections: Sections) -> Sections:
        """Copies of the sections with each leg distance measured from the previous waypoint."""
        result: Sections = {}
        previous: Optional[WaypointFix] = None
        for section in FlightPlanSection:
            updated = []
            for waypoint in sections[section]:
                leg = None
                if previous is not None:
                    leg = distance_nm(previous.lat, previous.lon, waypoint.lat, waypoint.lon)
                updated.append(replace(waypoint, distance=leg))
                previous = waypoint
            result[section] = tuple(updated)
        return result
