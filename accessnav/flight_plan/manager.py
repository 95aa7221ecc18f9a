# accessnav/flight_plan/manager.py
"""
Builds and maintains the current flight plan from the airport and navigation
databases.

Every load replaces exactly one section and is all-or-nothing: all lookups
complete before the section is swapped in, so a missing airport or procedure
leaves the plan as it was. Changes are not broadcast; the caller hands the
plan to its consumers through `publish` after each mutating call.
"""
import logging
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from ..navigation.data_models import Airport, FlightPlanSection, ProcedureSummary, Runway, WaypointFix
from .constants import FlightPlanConstants as FPC
from .core import FlightPlan
from .exceptions import AirportNotFoundError, ProcedureNotFoundError
from .providers import AirportDataProvider, NavigationDataProvider


class FlightPlanManager:
    """Manages flight plan loading, updating, and position calculations"""

    def __init__(self, airport_provider: AirportDataProvider, navigation_provider: NavigationDataProvider):
        self.airport_db = airport_provider
        self.nav_db = navigation_provider
        self.current_flight_plan = FlightPlan()

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logging.info("FlightPlanManager initialized with an empty flight plan.")

    # --- Section loads ---

    def load_departure(self, icao: str, runway_id: str = "") -> str:
        """Loads the departure airport and runway (Section A)."""
        try:
            airport = self._require_airport(icao)
            waypoints = [self._airport_waypoint(airport, FPC.ORIGIN_MARKER)]
            if runway_id:
                waypoints.append(self._runway_waypoint(airport, runway_id, FPC.DEPART_MARKER))
        except Exception as e:
            logging.error(f"Error loading departure: {e}")
            raise

        plan = self.current_flight_plan
        plan.update_section(FlightPlanSection.DEPARTURE_AIRPORT, waypoints)
        plan.departure_icao = icao
        plan.departure_runway = runway_id
        return self._status(f"Loaded departure: {icao} Runway {runway_id}")

    def load_arrival(self, icao: str, runway_id: str = "") -> str:
        """Loads the arrival runway and airport (Section F)."""
        try:
            airport = self._require_airport(icao)
            waypoints = []
            if runway_id:
                waypoints.append(self._runway_waypoint(airport, runway_id, FPC.ARRIVAL_MARKER))
            waypoints.append(self._airport_waypoint(airport, FPC.DESTINATION_MARKER))
        except Exception as e:
            logging.error(f"Error loading arrival: {e}")
            raise

        plan = self.current_flight_plan
        plan.update_section(FlightPlanSection.ARRIVAL_AIRPORT, waypoints)
        plan.arrival_icao = icao
        plan.arrival_runway = runway_id
        return self._status(f"Loaded arrival: {icao} Runway {runway_id}")

    def load_sid(self, sid_id: int, transition_id: Optional[int], sid_name: str) -> str:
        """Loads a SID (Section B). Transition legs follow the SID legs."""
        try:
            waypoints = self._fetch_legs("SID", self.nav_db.get_sid_waypoints, sid_id)
            if transition_id is not None:
                waypoints += self._fetch_legs("transition", self.nav_db.get_transition_waypoints, transition_id)
            self._mark_inbound(waypoints, FPC.SID_MARKER)
        except Exception as e:
            logging.error(f"Error loading SID: {e}")
            raise

        self.current_flight_plan.update_section(FlightPlanSection.SID, waypoints)
        self.current_flight_plan.sid_name = sid_name
        return self._status(f"Loaded SID: {sid_name} ({len(waypoints)} waypoints)")

    def load_star(self, star_id: int, transition_id: Optional[int], star_name: str) -> str:
        """Loads a STAR (Section D). Transition legs come first for STARs."""
        try:
            waypoints = []
            if transition_id is not None:
                waypoints += self._fetch_legs("transition", self.nav_db.get_transition_waypoints, transition_id)
            waypoints += self._fetch_legs("STAR", self.nav_db.get_star_waypoints, star_id)
            self._mark_inbound(waypoints, FPC.STAR_MARKER)
        except Exception as e:
            logging.error(f"Error loading STAR: {e}")
            raise

        self.current_flight_plan.update_section(FlightPlanSection.STAR, waypoints)
        self.current_flight_plan.star_name = star_name
        return self._status(f"Loaded STAR: {star_name} ({len(waypoints)} waypoints)")

    def load_approach(self, approach_id: int, transition_id: Optional[int], approach_name: str) -> str:
        """Loads an approach (Section E). Transition legs come first."""
        try:
            waypoints = []
            if transition_id is not None:
                waypoints += self._fetch_legs("transition", self.nav_db.get_transition_waypoints, transition_id)
            waypoints += self._fetch_legs("approach", self.nav_db.get_approach_waypoints, approach_id)
            self._mark_inbound(waypoints, FPC.APPROACH_MARKER)
        except Exception as e:
            logging.error(f"Error loading approach: {e}")
            raise

        self.current_flight_plan.update_section(FlightPlanSection.APPROACH, waypoints)
        self.current_flight_plan.approach_name = approach_name
        return self._status(f"Loaded approach: {approach_name} ({len(waypoints)} waypoints)")

    # --- Whole plan operations ---

    def update_aircraft_position(self, lat: float, lon: float, mag_var: float) -> None:
        """Refreshes distance and bearing of every waypoint. Does nothing on an empty plan."""
        if self.current_flight_plan.is_empty():
            return
        self.current_flight_plan.update_aircraft_position(lat, lon, mag_var)

    def clear_flight_plan(self) -> str:
        self.current_flight_plan = FlightPlan()
        return self._status("Flight plan cleared")

    def publish(self, sink: Callable[[FlightPlan], None]) -> FlightPlan:
        """Hands the current flight plan to a consumer (UI list, readback hotkeys)."""
        plan = self.current_flight_plan
        sink(plan)
        return plan

    def get_airport(self, icao: str) -> Optional[Airport]:
        return self.airport_db.get_airport(icao)

    def get_runways(self, icao: str) -> List[Runway]:
        return self.airport_db.get_runways(icao)

    # --- Procedure discovery (ids feed the load_* calls) ---

    def get_sids(self, icao: str) -> List[ProcedureSummary]:
        return self.nav_db.get_sids(icao)

    def get_stars(self, icao: str) -> List[ProcedureSummary]:
        return self.nav_db.get_stars(icao)

    def get_sids_for_runway(self, icao: str, runway_id: str) -> List[ProcedureSummary]:
        return self.nav_db.get_sids_for_runway(icao, runway_id)

    def get_stars_for_runway(self, icao: str, runway_id: str) -> List[ProcedureSummary]:
        return self.nav_db.get_stars_for_runway(icao, runway_id)

    def get_approaches(self, icao: str) -> List[ProcedureSummary]:
        return self.nav_db.get_approaches(icao)

    def get_transitions(self, procedure_id: int) -> List[ProcedureSummary]:
        return self.nav_db.get_transitions(procedure_id)

    # --- Helpers ---

    def _status(self, message: str) -> str:
        logging.info(message)
        return message

    def _require_airport(self, icao: str) -> Airport:
        airport = self.airport_db.get_airport(icao)
        if airport is None:
            raise AirportNotFoundError(icao)
        return airport

    def _runway_position(self, airport: Airport, runway_id: str) -> Tuple[float, float]:
        for runway in self.airport_db.get_runways(airport.icao) or []:
            if runway.runway_id == runway_id:
                return runway.start_lat, runway.start_lon
        logging.warning(f"Runway {runway_id} not found at {airport.icao}, using the airport reference point.")
        return airport.lat, airport.lon

    def _airport_waypoint(self, airport: Airport, marker: str) -> WaypointFix:
        return WaypointFix(
            ident=airport.icao,
            name=airport.name,
            fix_type="Airport",
            lat=airport.lat,
            lon=airport.lon,
            altitude_ft=int(airport.alt_ft),
            inbound_airway=marker
        )

    def _runway_waypoint(self, airport: Airport, runway_id: str, marker: str) -> WaypointFix:
        lat, lon = self._runway_position(airport, runway_id)
        return WaypointFix(
            ident=f"RW{runway_id}",
            name=f"{airport.icao} Runway {runway_id}",
            fix_type="Runway",
            lat=lat,
            lon=lon,
            altitude_ft=int(airport.alt_ft),
            inbound_airway=marker
        )

    @staticmethod
    def _fetch_legs(kind: str, fetch: Callable[[int], List[WaypointFix]], procedure_id: int) -> List[WaypointFix]:
        legs = fetch(procedure_id)
        if not legs:
            raise ProcedureNotFoundError(kind, procedure_id)
        # Database records are read-only; the plan owns copies
        return [replace(leg) for leg in legs]

    @staticmethod
    def _mark_inbound(waypoints: List[WaypointFix], marker: str) -> None:
        for i, waypoint in enumerate(waypoints):
            if not waypoint.inbound_airway:
                waypoint.inbound_airway = marker if i == 0 else FPC.CONTINUATION_MARKER
