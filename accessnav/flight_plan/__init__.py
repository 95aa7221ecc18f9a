"""
accessnav.flight_plan - Sectioned flight plan, database-driven section loads
and hotkey waypoint tracking slots.
"""

from .core import FlightPlan
from .manager import FlightPlanManager
from .tracker import WaypointTracker, TrackedWaypoint
from .providers import AirportDataProvider, NavigationDataProvider
from .exceptions import (
    FlightPlanError,
    AirportNotFoundError,
    ProcedureNotFoundError,
    InvalidSlotError,
    InvalidWaypointError
)

__all__ = [
    'FlightPlan',
    'FlightPlanManager',
    'WaypointTracker',
    'TrackedWaypoint',
    'AirportDataProvider',
    'NavigationDataProvider',
    'FlightPlanError',
    'AirportNotFoundError',
    'ProcedureNotFoundError',
    'InvalidSlotError',
    'InvalidWaypointError'
]
