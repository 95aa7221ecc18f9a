# accessnav/flight_plan/exceptions.py
"""
Flight plan and waypoint tracking errors
"""
from ..navigation.exceptions import NavigationError


class FlightPlanError(NavigationError):
    """Base class for all flight plan errors"""
    pass


class AirportNotFoundError(FlightPlanError):
    """Airport lookup failed during a section load"""
    def __init__(self, icao, message="Airport not found"):
        self.icao = icao
        super().__init__(f"{message}: {icao}")


class ProcedureNotFoundError(FlightPlanError):
    """Procedure or transition lookup returned no legs"""
    def __init__(self, procedure_type, procedure_id, message="Procedure not found"):
        self.procedure_type = procedure_type
        self.procedure_id = procedure_id
        super().__init__(f"{message}: {procedure_type} {procedure_id}")


class InvalidSlotError(FlightPlanError, ValueError):
    """Tracking slot number outside the supported range"""
    def __init__(self, slot_number, max_slots):
        self.slot_number = slot_number
        super().__init__(f"Slot number must be between 1 and {max_slots}, got {slot_number}")


class InvalidWaypointError(FlightPlanError, TypeError):
    """Missing waypoint passed to the tracker"""
    pass
