#!/usr/bin/env python3
# accessnav/approach/tests/test_visual.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from dataclasses import replace
from accessnav.navigation.data_models import AircraftPosition, Airport, Runway
from accessnav.navigation.utils.coordinates import destination_point
from accessnav.approach import (
    ApproachPhase, LateralState, VerticalState, calculate_visual_guidance, format_visual_announcement,
    format_visual_phase_announcement
)
from accessnav.approach.geometry import reciprocal_point
from accessnav.approach.visual import (
    determine_approach_phase, get_lateral_state, get_update_interval, get_vertical_state,
    should_continue, stop_reason, vertical_deviation
)

RUNWAY = Runway("34R", 47.4502, -122.3088, heading_true=340.0, heading_mag=324.5, length_ft=11900)
AIRPORT = Airport(icao="KSEA", lat=47.4490, lon=-122.3093, alt_ft=433, mag_var=15.5)


class TestMonitoringPolicy(unittest.TestCase):
    def test_stops_below_safety_altitude(self):
        self.assertFalse(should_continue(40, 0.0, 5.0))
        self.assertEqual(stop_reason(40, 0.0, 5.0), "Below minimum altitude - landing or landed")

    def test_stops_when_far_off_course(self):
        self.assertFalse(should_continue(200, 6.0, 5.0))
        self.assertFalse(should_continue(200, -6.0, 5.0))
        self.assertEqual(stop_reason(200, -6.0, 5.0), "Too far off course - 6.0 degrees")

    def test_continues_inside_limits(self):
        self.assertTrue(should_continue(200, 2.0, 5.0))
        self.assertTrue(should_continue(50, 5.0, 5.0))
        self.assertEqual(stop_reason(200, 2.0, 5.0), "")

    def test_no_distance_limit(self):
        self.assertTrue(should_continue(5000, 0.0, 250.0))

    def test_update_interval(self):
        self.assertEqual(get_update_interval(1000), 1000)
        self.assertEqual(get_update_interval(300), 1000)
        self.assertEqual(get_update_interval(1001), 3000)


class TestDeviationStates(unittest.TestCase):
    def test_lateral_state(self):
        self.assertEqual(get_lateral_state(0.5), LateralState.ALIGNED)
        self.assertEqual(get_lateral_state(-0.5), LateralState.ALIGNED)
        self.assertEqual(get_lateral_state(0.6), LateralState.RIGHT)
        self.assertEqual(get_lateral_state(-0.6), LateralState.LEFT)

    def test_vertical_state(self):
        self.assertEqual(get_vertical_state(50.0), VerticalState.ON_SLOPE)
        self.assertEqual(get_vertical_state(-50.0), VerticalState.ON_SLOPE)
        self.assertEqual(get_vertical_state(51.0), VerticalState.UP)
        self.assertEqual(get_vertical_state(-51.0), VerticalState.DOWN)

    def test_vertical_deviation(self):
        self.assertEqual(vertical_deviation(2033.0, 5.0, 433.0), 0.0)
        self.assertEqual(vertical_deviation(2133.0, 5.0, 433.0), 100.0)


class TestApproachPhase(unittest.TestCase):
    def test_short_final(self):
        self.assertEqual(determine_approach_phase(0.5, 400, False, True), ApproachPhase.SHORT_FINAL)

    def test_final_when_aligned_inside_ten_miles(self):
        self.assertEqual(determine_approach_phase(5.0, 1500, True, True), ApproachPhase.FINAL_APPROACH)

    def test_intercept_turn_when_not_aligned(self):
        self.assertEqual(determine_approach_phase(5.0, 1500, False, True), ApproachPhase.INTERCEPT_TURN)

    def test_initial_approach_beyond_ten_miles(self):
        self.assertEqual(determine_approach_phase(12.0, 3000, True, True), ApproachPhase.INITIAL_APPROACH)

    def test_past_threshold_is_final(self):
        self.assertEqual(determine_approach_phase(12.0, 3000, False, False), ApproachPhase.FINAL_APPROACH)


class TestVisualGuidance(unittest.TestCase):
    def test_on_centerline_and_slope(self):
        lat, lon = reciprocal_point(RUNWAY, 5.0)
        aircraft = AircraftPosition(lat=lat, lon=lon, alt_ft=5.0 * 320.0 + 433, heading_mag_deg=324.5)
        g = calculate_visual_guidance(aircraft, RUNWAY, AIRPORT)

        self.assertEqual(g.lateral_state, LateralState.ALIGNED)
        self.assertEqual(g.vertical_state, VerticalState.ON_SLOPE)
        self.assertTrue(g.should_continue)
        self.assertEqual(g.stop_reason, "")
        self.assertEqual(g.agl, 1600.0)
        self.assertEqual(g.update_interval_ms, 3000)
        self.assertTrue(g.is_behind_runway)
        self.assertTrue(g.is_aligned)
        self.assertEqual(g.phase, ApproachPhase.FINAL_APPROACH)
        self.assertEqual(format_visual_announcement(g), "Aligned, on slope")

    def test_right_of_course_steers_left(self):
        lat, lon = reciprocal_point(RUNWAY, 5.0)
        lat, lon = destination_point(lat, lon, RUNWAY.heading_true + 90.0, 0.2)
        aircraft = AircraftPosition(lat=lat, lon=lon, alt_ft=1000.0, heading_mag_deg=324.5)
        g = calculate_visual_guidance(aircraft, RUNWAY, AIRPORT)

        self.assertLess(g.lateral_deviation, -0.5)
        self.assertEqual(g.lateral_state, LateralState.LEFT)
        self.assertEqual(g.vertical_state, VerticalState.DOWN)
        self.assertEqual(g.update_interval_ms, 1000)
        self.assertEqual(format_visual_announcement(g), "Left, Down")

    def test_far_off_course_stops_monitoring(self):
        lat, lon = reciprocal_point(RUNWAY, 5.0)
        lat, lon = destination_point(lat, lon, RUNWAY.heading_true + 90.0, 1.0)
        aircraft = AircraftPosition(lat=lat, lon=lon, alt_ft=2033.0, heading_mag_deg=324.5)
        g = calculate_visual_guidance(aircraft, RUNWAY, AIRPORT)

        self.assertFalse(g.should_continue)
        self.assertTrue(g.stop_reason.startswith("Too far off course - "))


class TestPhaseGuidance(unittest.TestCase):
    def aircraft_at(self, back_nm, right_nm=0.0, alt_ft=None, heading_mag=324.5):
        lat, lon = reciprocal_point(RUNWAY, back_nm)
        if right_nm:
            side_heading = RUNWAY.heading_true + (90.0 if right_nm > 0 else -90.0)
            lat, lon = destination_point(lat, lon, side_heading, abs(right_nm))
        if alt_ft is None:
            alt_ft = back_nm * 320.0 + 433
        return AircraftPosition(lat=lat, lon=lon, alt_ft=alt_ft, heading_mag_deg=heading_mag)

    def test_initial_approach_gives_direct_to_heading(self):
        g = calculate_visual_guidance(self.aircraft_at(15.0, heading_mag=200.0), RUNWAY, AIRPORT)

        self.assertEqual(g.phase, ApproachPhase.INITIAL_APPROACH)
        self.assertAlmostEqual(g.distance_to_intercept, 3.0, delta=0.01)
        self.assertAlmostEqual(g.intercept_heading, 324.5, delta=0.5)
        self.assertEqual(g.turn_direction, "right")
        self.assertAlmostEqual(g.heading_difference, 124.5)

        text = format_visual_phase_announcement(g)
        self.assertTrue(text.startswith("Initial approach. Turn right to heading "))
        self.assertIn("3.0 miles to centerline point, 15.0 miles to threshold.", text)
        self.assertTrue(text.endswith("On glideslope"))

    def test_intercept_turn_gives_direct_to_heading(self):
        g = calculate_visual_guidance(self.aircraft_at(5.0, -0.3, alt_ft=1000.0, heading_mag=30.0), RUNWAY, AIRPORT)

        self.assertEqual(g.phase, ApproachPhase.INTERCEPT_TURN)
        self.assertTrue(g.should_continue)
        self.assertIsNotNone(g.intercept_heading)
        self.assertEqual(g.turn_direction, "right")

        text = format_visual_phase_announcement(g)
        self.assertTrue(text.startswith("5.0 miles from threshold. Turn right to heading "))
        self.assertTrue(text.endswith(". Below glideslope"))

    def test_final_approach_has_no_direct_to(self):
        g = calculate_visual_guidance(self.aircraft_at(5.0), RUNWAY, AIRPORT)

        self.assertEqual(g.phase, ApproachPhase.FINAL_APPROACH)
        self.assertIsNone(g.intercept_heading)
        self.assertIsNone(g.distance_to_intercept)
        self.assertEqual(g.turn_direction, "")
        self.assertEqual(format_visual_phase_announcement(g), "5.0 miles. Aligned, on slope")
        self.assertEqual(format_visual_announcement(g), "Aligned, on slope")

    def test_short_final(self):
        g = calculate_visual_guidance(self.aircraft_at(0.8, alt_ft=633.0), RUNWAY, AIRPORT)

        self.assertEqual(g.phase, ApproachPhase.SHORT_FINAL)
        self.assertEqual(g.vertical_state, VerticalState.DOWN)
        self.assertIsNone(g.intercept_heading)
        self.assertEqual(format_visual_phase_announcement(g), "Short final. 0.8 miles. Down")


def test_visual_announcement_composition():
    lat, lon = reciprocal_point(RUNWAY, 5.0)
    aircraft = AircraftPosition(lat=lat, lon=lon, alt_ft=2033.0, heading_mag_deg=324.5)
    g = calculate_visual_guidance(aircraft, RUNWAY, AIRPORT)

    assert format_visual_announcement(replace(g, vertical_state=VerticalState.UP)) == "Up"
    assert format_visual_announcement(replace(g, lateral_state=LateralState.RIGHT)) == "Right"
    assert format_visual_announcement(replace(
        g, lateral_state=LateralState.LEFT, vertical_state=VerticalState.DOWN
    )) == "Left, Down"


if __name__ == '__main__':
    unittest.main()
