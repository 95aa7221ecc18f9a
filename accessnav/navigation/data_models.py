# accessnav/navigation/data_models.py
"""
Defines the core data structures shared by the approach guidance and
flight plan packages. Runway, Airport and WaypointFix records come from
external airport/navigation databases and are treated as read-only here;
AircraftPosition is an ephemeral sample supplied on every call.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


@dataclass(frozen=True)
class AircraftPosition:
    """A single aircraft position sample polled from the simulator."""
    lat: float
    lon: float
    alt_ft: float
    heading_mag_deg: float


@dataclass(frozen=True)
class Runway:
    """One landing direction of a runway, with the threshold as its start."""
    runway_id: str
    start_lat: float
    start_lon: float
    heading_true: float
    heading_mag: float
    length_ft: float = 0.0
    width_ft: float = 0.0
    end_lat: Optional[float] = None
    end_lon: Optional[float] = None
    airport_icao: str = ""
    ils_freq: Optional[float] = None

    def __str__(self) -> str:
        text = f"Runway {self.runway_id} - {self.length_ft:.0f}ft"
        if self.ils_freq:
            text += f" - ILS {self.ils_freq:.2f} ({self.heading_mag:03.0f}°)"
        return text


@dataclass(frozen=True)
class Airport:
    """Airport reference point, field elevation and magnetic variation."""
    icao: str
    lat: float
    lon: float
    alt_ft: float
    mag_var: float = 0.0  # degrees, east positive
    name: str = ""

    def __str__(self) -> str:
        return f"{self.icao} - {self.name}" if self.name else self.icao


@dataclass(frozen=True)
class ProcedureSummary:
    """A SID, STAR, approach or transition as listed by the navigation database."""
    name: str
    procedure_id: Optional[int] = None  # id accepted by the waypoint lookups
    fix_ident: str = ""                 # entry or exit fix
    suffix: str = ""                    # approach suffix


class FlightPlanSection(IntEnum):
    """Flight plan sections, in flown order (A through F)."""
    DEPARTURE_AIRPORT = 0
    SID = 1
    ENROUTE = 2
    STAR = 3
    APPROACH = 4
    ARRIVAL_AIRPORT = 5


@dataclass
class WaypointFix:
    """A navigation fix as it appears in a flight plan."""
    ident: str
    lat: float
    lon: float
    altitude_ft: int = 0
    section: FlightPlanSection = FlightPlanSection.ENROUTE
    name: str = ""
    region: str = ""
    fix_type: str = ""
    inbound_airway: str = ""  # airway name, "DCT" or a procedure marker
    altitude_restriction: str = ""
    min_altitude_ft: Optional[int] = None
    max_altitude_ft: Optional[int] = None
    speed_limit_kts: Optional[int] = None
    course_deg: Optional[float] = None
    notes: str = ""

    # Leg distance from the previous waypoint of the flight plan
    distance: Optional[float] = None

    # Refreshed from the aircraft position
    distance_from_aircraft: Optional[float] = None
    bearing_from_aircraft: Optional[float] = None

    def __str__(self) -> str:
        if self.distance_from_aircraft is not None and self.bearing_from_aircraft is not None:
            return f"{self.ident} - {self.distance_from_aircraft:.1f} NM, {self.bearing_from_aircraft:.0f}°"
        return self.ident or "Unknown"

    def detailed_description(self) -> str:
        """Full description of the fix for screen reader readback."""
        details = self.ident or "Unknown"

        if self.distance_from_aircraft is not None:
            details += f", Distance {self.distance_from_aircraft:.1f} nautical miles"
        if self.bearing_from_aircraft is not None:
            details += f", Bearing {self.bearing_from_aircraft:.0f} degrees"
        if self.inbound_airway:
            details += f", via {self.inbound_airway}"
        if self.fix_type:
            details += f", Type {self.fix_type}"

        if self.altitude_restriction:
            details += f", {self.altitude_restriction}"
        elif self.min_altitude_ft is not None and self.max_altitude_ft is not None:
            details += f", Altitude between {self.min_altitude_ft} and {self.max_altitude_ft} feet"
        elif self.min_altitude_ft is not None:
            details += f", Minimum altitude {self.min_altitude_ft} feet"
        elif self.max_altitude_ft is not None:
            details += f", Maximum altitude {self.max_altitude_ft} feet"

        if self.speed_limit_kts is not None:
            details += f", Speed limit {self.speed_limit_kts} knots"
        if self.notes:
            details += f", Notes: {self.notes}"

        return details
