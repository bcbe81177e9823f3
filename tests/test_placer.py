"""Tests for the hexagonal ring placer.

Validates:
  - First placement lands on the origin
  - Later placements never come closer than min_distance
  - Results are deterministic and independent of occupied order
  - Ring 1 fills before ring 2
  - Exhausted searches fall back to the origin instead of raising
  - Bad arguments raise PlacementPreconditionError
"""

from __future__ import annotations

import math
import random
import unittest

from hive.placer import (
    Point, HexFootprint, RingCoordinate, PlacementPreconditionError,
    place, locate_slot,
    ring_point, iter_ring_coordinates, is_free,
    hexagon_vertices, hexagon_outline, contains_point,
    point_to_dict, parse_point,
)
from tests.hive_fixture import FOOTPRINT, RING_SPACING


class TestPlacerGeometryHelpers(unittest.TestCase):
    """Unit tests for low-level geometry functions."""

    def test_horizontal_spacing(self):
        fp = HexFootprint(180.0)
        self.assertAlmostEqual(fp.horizontal_spacing(0.58), 180 * math.sqrt(3) * 0.58)
        self.assertAlmostEqual(fp.horizontal_spacing(0.58), 180.83, places=2)

    def test_ring_zero_is_origin(self):
        origin = Point(12.0, -4.0)
        self.assertEqual(ring_point(origin, RingCoordinate(0, 0), 100.0), origin)

    def test_ring_point_angles(self):
        """Ring k spreads 6k slots evenly, starting along +x."""
        p = ring_point(Point(0, 0), RingCoordinate(1, 0), 100.0)
        self.assertAlmostEqual(p.x, 100.0)
        self.assertAlmostEqual(p.y, 0.0)

        p = ring_point(Point(0, 0), RingCoordinate(1, 1), 100.0)
        self.assertAlmostEqual(p.x, 50.0)
        self.assertAlmostEqual(p.y, 100.0 * math.sqrt(3) / 2)

        # Ring 2, slot 3 sits at 90° and radius 200
        p = ring_point(Point(10, 10), RingCoordinate(2, 3), 100.0)
        self.assertAlmostEqual(p.x, 10.0, places=6)
        self.assertAlmostEqual(p.y, 210.0)

    def test_slot_counts(self):
        self.assertEqual(RingCoordinate(0).slot_count, 1)
        self.assertEqual(RingCoordinate(3, 0).slot_count, 18)

    def test_iter_ring_coordinates_order(self):
        coords = list(iter_ring_coordinates(2))
        self.assertEqual(len(coords), 6 + 12)
        self.assertEqual(coords[0], RingCoordinate(1, 0))
        self.assertEqual(coords[5], RingCoordinate(1, 5))
        self.assertEqual(coords[6], RingCoordinate(2, 0))
        self.assertEqual(coords[-1], RingCoordinate(2, 11))

    def test_is_free(self):
        occupied = [Point(0, 0), Point(200, 0)]
        self.assertTrue(is_free(Point(100, 200), occupied, 180))
        self.assertFalse(is_free(Point(100, 0), occupied, 180))
        self.assertTrue(is_free(Point(180, 0), [Point(0, 0)], 180))  # exactly at the limit
        self.assertTrue(is_free(Point(5, 5), [], 180))

    def test_hexagon_vertices(self):
        verts = hexagon_vertices(Point(0, 0), 100.0)
        self.assertEqual(len(verts), 6)
        for x, y in verts:
            self.assertAlmostEqual(math.hypot(x, y), 50.0)
        # Second vertex is straight down the +y axis
        self.assertAlmostEqual(verts[1][0], 0.0, places=6)
        self.assertAlmostEqual(verts[1][1], 50.0)

    def test_hexagon_outline_area(self):
        """Regular hexagon of circumradius r has area 3√3/2 · r²."""
        poly = hexagon_outline(Point(0, 0), 100.0)
        self.assertAlmostEqual(poly.area, 1.5 * math.sqrt(3) * 50.0 ** 2, places=4)

    def test_contains_point(self):
        center = Point(90, 90)
        self.assertTrue(contains_point(center, 180, Point(90, 90)))
        self.assertTrue(contains_point(center, 180, Point(90, 1)))     # near top vertex
        self.assertFalse(contains_point(center, 180, Point(5, 5)))     # corner of frame
        self.assertFalse(contains_point(center, 180, Point(300, 90)))
        self.assertFalse(contains_point(center, 0, Point(90, 90)))


class TestPlace(unittest.TestCase):
    """The first-fit ring walk."""

    def test_seed_rule(self):
        """Nothing occupied: result is exactly the origin."""
        for origin in (Point(0, 0), Point(-37.5, 412.0), Point(1e6, -1e6)):
            self.assertEqual(place(origin, [], 180, 100), origin)
        self.assertEqual(locate_slot(Point(3, 4), [], 180), RingCoordinate(0, 0))

    def test_second_item_ring_one_angle_zero(self):
        result = place(Point(0, 0), [Point(0, 0)], 180, 100, footprint=180)
        self.assertAlmostEqual(result.x, RING_SPACING)
        self.assertAlmostEqual(result.y, 0.0)
        self.assertAlmostEqual(math.hypot(result.x, result.y), 180.83, places=2)

    def test_footprint_defaults_to_min_distance(self):
        a = place(Point(0, 0), [Point(0, 0)], 180, 100)
        b = place(Point(0, 0), [Point(0, 0)], 180, 100, footprint=HexFootprint(180))
        self.assertEqual(a, b)

    def test_accepts_tuples(self):
        result = place((0, 0), [(0, 0)], 180, 100)
        self.assertIsInstance(result, Point)
        self.assertAlmostEqual(result.x, RING_SPACING)

    def test_origin_offset(self):
        """The lattice is centred on the origin, not on (0, 0)."""
        origin = Point(200, 400)
        result = place(origin, [origin], 180, 100)
        self.assertAlmostEqual(result.x, 200 + RING_SPACING)
        self.assertAlmostEqual(result.y, 400)

    def test_sequential_fill_walks_ring_one_first(self):
        """Seven placements fill the origin, then ring 1 in slot order."""
        occupied: list[Point] = []
        for _ in range(7):
            occupied.append(place(Point(0, 0), occupied, FOOTPRINT, 100))

        self.assertEqual(occupied[0], Point(0, 0))
        for index, p in enumerate(occupied[1:]):
            expected = ring_point(Point(0, 0), RingCoordinate(1, index), RING_SPACING)
            self.assertAlmostEqual(p.x, expected.x)
            self.assertAlmostEqual(p.y, expected.y)

        # Ring 1 is full — the next one opens ring 2 at angle 0
        self.assertEqual(
            locate_slot(Point(0, 0), occupied, FOOTPRINT), RingCoordinate(2, 0))
        nxt = place(Point(0, 0), occupied, FOOTPRINT)
        self.assertAlmostEqual(nxt.x, 2 * RING_SPACING)
        self.assertAlmostEqual(nxt.y, 0.0)

    def test_never_skips_a_free_ring_one_slot(self):
        """A ring-1 gap is used before anything on ring 2."""
        ring1 = [ring_point(Point(0, 0), RingCoordinate(1, i), RING_SPACING)
                 for i in range(6)]
        occupied = [Point(0, 0)] + ring1[:3] + ring1[4:]
        coord = locate_slot(Point(0, 0), occupied, FOOTPRINT)
        self.assertEqual(coord, RingCoordinate(1, 3))

        result = place(Point(0, 0), occupied, FOOTPRINT)
        self.assertAlmostEqual(result.x, ring1[3].x)
        self.assertAlmostEqual(result.y, ring1[3].y)

    def test_non_overlap(self):
        """Every successful placement keeps min_distance from all others."""
        occupied: list[Point] = []
        for _ in range(40):
            p = place(Point(0, 0), occupied, FOOTPRINT, 100)
            for q in occupied:
                self.assertGreaterEqual(p.distance_to(q), FOOTPRINT - 1e-9)
            occupied.append(p)

    def test_non_overlap_with_scattered_obstacles(self):
        rng = random.Random(3)
        occupied = [Point(rng.uniform(-400, 400), rng.uniform(-400, 400))
                    for _ in range(12)]
        p = place(Point(0, 0), occupied, 120, 100, footprint=140)
        for q in occupied:
            self.assertGreaterEqual(p.distance_to(q), 120)

    def test_deterministic_and_order_independent(self):
        occupied: list[Point] = []
        for _ in range(10):
            occupied.append(place(Point(0, 0), occupied, FOOTPRINT))
        # Remove a few so there are gaps to fill
        occupied = occupied[:2] + occupied[4:7] + occupied[8:]

        expected = place(Point(0, 0), occupied, FOOTPRINT)
        self.assertEqual(place(Point(0, 0), occupied, FOOTPRINT), expected)

        rng = random.Random(11)
        for _ in range(5):
            shuffled = list(occupied)
            rng.shuffle(shuffled)
            self.assertEqual(place(Point(0, 0), shuffled, FOOTPRINT), expected)

    def test_does_not_mutate_occupied(self):
        occupied = [Point(0, 0), Point(RING_SPACING, 0)]
        snapshot = list(occupied)
        place(Point(0, 0), occupied, FOOTPRINT)
        self.assertEqual(occupied, snapshot)

    def test_packing_changes_spacing(self):
        result = place(Point(0, 0), [Point(0, 0)], 150, 100, footprint=180, packing=0.5)
        self.assertAlmostEqual(result.x, 180 * math.sqrt(3) * 0.5)


class TestPlaceFallback(unittest.TestCase):
    """Exhausted searches return the origin."""

    def _all_slots(self, max_rings: int) -> list[Point]:
        pts = [Point(0, 0)]
        for coord in iter_ring_coordinates(max_rings):
            pts.append(ring_point(Point(0, 0), coord, RING_SPACING))
        return pts

    def test_exhausted_returns_origin(self):
        occupied = self._all_slots(3)
        with self.assertLogs("hive.placer.engine", level="WARNING"):
            result = place(Point(0, 0), occupied, FOOTPRINT, 3)
        self.assertEqual(result, Point(0, 0))
        self.assertIsNone(locate_slot(Point(0, 0), occupied, FOOTPRINT, 3))

    def test_one_more_ring_finds_space(self):
        occupied = self._all_slots(3)
        coord = locate_slot(Point(0, 0), occupied, FOOTPRINT, 4)
        self.assertIsNotNone(coord)
        self.assertEqual(coord.ring, 4)


class TestPlacePreconditions(unittest.TestCase):
    """Bad arguments fail fast."""

    def test_bad_min_distance(self):
        for bad in (0, -1.0, math.nan, math.inf):
            with self.assertRaises(PlacementPreconditionError) as ctx:
                place(Point(0, 0), [Point(0, 0)], bad, 100)
            self.assertEqual(ctx.exception.argument, "min_distance")

    def test_non_numeric_arguments(self):
        with self.assertRaises(PlacementPreconditionError) as ctx:
            place(Point(0, 0), [Point(0, 0)], "180", 100)
        self.assertEqual(ctx.exception.argument, "min_distance")
        with self.assertRaises(PlacementPreconditionError) as ctx:
            place(Point(0, 0), [Point(0, 0)], 180, packing="0.58")
        self.assertEqual(ctx.exception.argument, "packing")
        with self.assertRaises(PlacementPreconditionError) as ctx:
            place(Point(0, 0), [Point(0, 0)], 180, footprint="wide")
        self.assertEqual(ctx.exception.argument, "footprint")

    def test_bad_max_rings(self):
        for bad in (0, -3, 2.5, True):
            with self.assertRaises(PlacementPreconditionError):
                place(Point(0, 0), [Point(0, 0)], 180, bad)

    def test_non_finite_coordinates(self):
        with self.assertRaises(PlacementPreconditionError):
            place(Point(math.nan, 0), [], 180)
        with self.assertRaises(PlacementPreconditionError) as ctx:
            place(Point(0, 0), [Point(0, 0), Point(math.inf, 1)], 180)
        self.assertEqual(ctx.exception.argument, "occupied[1]")

    def test_bad_packing(self):
        for bad in (0.49, 0.61, 1.0):
            with self.assertRaises(PlacementPreconditionError):
                place(Point(0, 0), [Point(0, 0)], 180, packing=bad)

    def test_bad_footprint(self):
        with self.assertRaises(PlacementPreconditionError):
            place(Point(0, 0), [Point(0, 0)], 180, footprint=-5)

    def test_is_a_value_error(self):
        with self.assertRaises(ValueError):
            place(Point(0, 0), [], -1)


class TestPlacementSerialization(unittest.TestCase):

    def test_point_to_dict_rounds(self):
        self.assertEqual(point_to_dict(Point(RING_SPACING, 0.0)), {"x": 180.83, "y": 0.0})

    def test_parse_point(self):
        self.assertEqual(parse_point({"x": 1, "y": 2.5}), Point(1.0, 2.5))
        self.assertEqual(parse_point([3, 4]), Point(3.0, 4.0))


if __name__ == "__main__":
    unittest.main()
