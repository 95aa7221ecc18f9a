#!/usr/bin/env python3
# examples/E010_approach_guidance.py
"""
[APPROACH GUIDANCE WALKTHROUGH]

Objective: Fly a scripted sequence of position samples into KSEA runway 34R and
print what the screen reader would announce at each one, for both ILS intercept
guidance and the visual approach monitor. A small in-memory flight plan is
loaded alongside to exercise the tracking slots.
"""
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from accessnav.navigation.data_models import AircraftPosition, Airport, ProcedureSummary, Runway, WaypointFix
from accessnav.approach import (
    calculate_ils_guidance, calculate_visual_guidance, format_ils_announcement, format_visual_phase_announcement
)
from accessnav.approach.geometry import reciprocal_point
from accessnav.flight_plan import (
    AirportDataProvider, FlightPlanManager, NavigationDataProvider, WaypointTracker
)

# --- [1. SCENARIO] ---
AIRPORT = Airport(icao="KSEA", lat=47.4490, lon=-122.3093, alt_ft=433, mag_var=15.5, name="Seattle-Tacoma Intl")
RUNWAY = Runway(
    runway_id="34R", start_lat=47.4502, start_lon=-122.3088,
    heading_true=340.0, heading_mag=324.5, length_ft=11900, airport_icao="KSEA", ils_freq=110.3
)

# (label, lat, lon, altitude ft, magnetic heading)
POSITION_SAMPLES = [
    ("Far south", 45.80, -122.60, 9000, 350.0),
    ("Southwest, heading away", 47.30, -122.50, 3000, 160.0),
    ("Near setup point", *reciprocal_point(RUNWAY, 17.0), 5800, 60.0),
    ("On final, 8 miles", *reciprocal_point(RUNWAY, 8.0), 2993, 326.0),
    ("On final, 2 miles, low", *reciprocal_point(RUNWAY, 2.0), 900, 324.0),
]


# --- [2. IN-MEMORY DATABASES] ---
class DemoAirports(AirportDataProvider):
    def get_airport(self, icao):
        return AIRPORT if icao == "KSEA" else None

    def get_runways(self, icao):
        return [RUNWAY] if icao == "KSEA" else []


class DemoNavigation(NavigationDataProvider):
    STAR = [WaypointFix(ident="OLM", lat=46.97, lon=-122.90), WaypointFix(ident="CHINS", lat=47.10, lon=-122.60)]
    APPROACH = [WaypointFix(ident="SAFFO", lat=47.24, lon=-122.20), WaypointFix(ident="RW34R", lat=47.4502, lon=-122.3088)]

    def get_sids(self, icao):
        return []

    def get_stars(self, icao):
        return [ProcedureSummary("OLM6", 1, fix_ident="OLM")] if icao == "KSEA" else []

    def get_sids_for_runway(self, icao, runway_id):
        return []

    def get_stars_for_runway(self, icao, runway_id):
        return self.get_stars(icao) if runway_id == "34R" else []

    def get_approaches(self, icao):
        return [ProcedureSummary("ILS 34R", 1, fix_ident="SAFFO")] if icao == "KSEA" else []

    def get_transitions(self, procedure_id):
        return []

    def get_sid_waypoints(self, sid_id):
        return []

    def get_star_waypoints(self, star_id):
        return self.STAR if star_id == 1 else []

    def get_approach_waypoints(self, approach_id):
        return self.APPROACH if approach_id == 1 else []

    def get_transition_waypoints(self, transition_id):
        return []


def run_guidance_walkthrough():
    print("=" * 70)
    print(f"ILS AND VISUAL GUIDANCE - {AIRPORT} {RUNWAY}")
    print("=" * 70)
    for label, lat, lon, alt, heading in POSITION_SAMPLES:
        aircraft = AircraftPosition(lat=lat, lon=lon, alt_ft=alt, heading_mag_deg=heading)
        ils = calculate_ils_guidance(aircraft, RUNWAY, AIRPORT)
        visual = calculate_visual_guidance(aircraft, RUNWAY, AIRPORT)

        print(f"\n--- {label} ({ils.distance_to_threshold:.1f} NM, {ils.state.name}) ---")
        print(f"  ILS:    {format_ils_announcement(ils)}")
        if visual.should_continue:
            print(f"  Visual: {format_visual_phase_announcement(visual)} "
                  f"[{visual.phase.name}, next update in {visual.update_interval_ms} ms]")
        else:
            print(f"  Visual: monitoring stopped ({visual.stop_reason})")


def run_flight_plan_walkthrough():
    manager = FlightPlanManager(DemoAirports(), DemoNavigation())
    star = manager.get_stars_for_runway("KSEA", "34R")[0]
    approach = manager.get_approaches("KSEA")[0]
    manager.load_star(star.procedure_id, None, star.name)
    manager.load_approach(approach.procedure_id, None, approach.name)
    manager.load_arrival("KSEA", "34R")
    manager.update_aircraft_position(46.90, -122.95, AIRPORT.mag_var)

    plan = manager.publish(lambda p: print(f"\nFlight plan: {p.summary()}"))
    for waypoint in plan.get_all_waypoints():
        print(f"  [{waypoint.section.name:<15}] {waypoint}")

    tracker = WaypointTracker()
    tracker.track_waypoint(1, plan.get_all_waypoints()[2])
    print(f"\nSlot 1: {tracker.get_tracked_waypoint_info(1, plan, 46.90, -122.95, AIRPORT.mag_var)}")


if __name__ == "__main__":
    run_guidance_walkthrough()
    run_flight_plan_walkthrough()
