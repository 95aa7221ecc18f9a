# accessnav/flight_plan/providers.py
"""
Interfaces of the airport and navigation databases the flight plan manager
reads from. Concrete implementations (SQLite, LittleNavMap, ...) live outside
this package; records they return are treated as read-only.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..navigation.data_models import Airport, ProcedureSummary, Runway, WaypointFix


class AirportDataProvider(ABC):
    """Airport and runway lookups keyed by ICAO code."""

    @abstractmethod
    def get_airport(self, icao: str) -> Optional[Airport]:
        """Returns the airport, or None when the ICAO code is unknown."""
        pass

    @abstractmethod
    def get_runways(self, icao: str) -> List[Runway]:
        pass


class NavigationDataProvider(ABC):
    """Procedure listings per airport and ordered procedure legs keyed by
    numeric procedure id.

    An unknown airport or id is reported as an empty list.
    """

    # --- Procedure discovery ---

    @abstractmethod
    def get_sids(self, icao: str) -> List[ProcedureSummary]:
        pass

    @abstractmethod
    def get_stars(self, icao: str) -> List[ProcedureSummary]:
        pass

    @abstractmethod
    def get_sids_for_runway(self, icao: str, runway_id: str) -> List[ProcedureSummary]:
        pass

    @abstractmethod
    def get_stars_for_runway(self, icao: str, runway_id: str) -> List[ProcedureSummary]:
        pass

    @abstractmethod
    def get_approaches(self, icao: str) -> List[ProcedureSummary]:
        pass

    @abstractmethod
    def get_transitions(self, procedure_id: int) -> List[ProcedureSummary]:
        pass

    # --- Procedure legs ---

    @abstractmethod
    def get_sid_waypoints(self, sid_id: int) -> List[WaypointFix]:
        pass

    @abstractmethod
    def get_star_waypoints(self, star_id: int) -> List[WaypointFix]:
        pass

    @abstractmethod
    def get_approach_waypoints(self, approach_id: int) -> List[WaypointFix]:
        pass

    @abstractmethod
    def get_transition_waypoints(self, transition_id: int) -> List[WaypointFix]:
        pass
