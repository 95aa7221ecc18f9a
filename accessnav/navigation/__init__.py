"""
accessnav.navigation - Shared data models and great-circle geodesy
for the approach guidance and flight plan packages.
"""

from .data_models import AircraftPosition, Runway, Airport, WaypointFix, FlightPlanSection, ProcedureSummary
from .constants import NavConstants
from .exceptions import NavigationError

__all__ = [
    'AircraftPosition',
    'Runway',
    'Airport',
    'WaypointFix',
    'FlightPlanSection',
    'ProcedureSummary',
    'NavConstants',
    'NavigationError'
]
