"""Tests for cloud metrics and random size generation."""

from __future__ import annotations

import math
import unittest

from tagcloud.layout import InvalidInputError, Point, Rectangle, Size
from tagcloud.metrics import (
    cloud_bounds, coverage, density, overlapping_pairs, roundness,
)
from tagcloud.sizes import random_sizes


class TestCloudMetrics(unittest.TestCase):

    def test_bounds_include_center(self):
        rects = [Rectangle(0, 0, 10, 10)]
        self.assertEqual(cloud_bounds(rects, Point(-10, 0)), Rectangle(-10, 0, 20, 10))
        self.assertEqual(cloud_bounds(rects, Point(5, 5)), Rectangle(0, 0, 10, 10))

    def test_centred_square_is_perfect(self):
        rects = [Rectangle(-5, -5, 10, 10)]
        self.assertAlmostEqual(roundness(rects, Point(0, 0)), 1.0)
        self.assertAlmostEqual(density(rects, Point(0, 0)), 1.0)
        self.assertAlmostEqual(coverage(rects, Point(0, 0)), 1.0)

    def test_off_center_roundness(self):
        # Corners at distance 5 and sqrt(125) from (0, 5)
        rects = [Rectangle(0, 0, 10, 10)]
        self.assertAlmostEqual(roundness(rects, Point(0, 5)), math.sqrt(5))

    def test_center_on_corner_is_infinite(self):
        rects = [Rectangle(0, 0, 10, 10)]
        self.assertEqual(roundness(rects, Point(0, 0)), math.inf)

    def test_density_counts_empty_space_to_center(self):
        rects = [Rectangle(0, 0, 10, 10)]
        self.assertAlmostEqual(density(rects, Point(-10, 0)), 0.5)

    def test_coverage_differs_from_density_on_overlap(self):
        rects = [Rectangle(0, 0, 10, 10), Rectangle(5, 0, 10, 10)]
        self.assertAlmostEqual(density(rects, Point(0, 0)), 200 / 150)
        self.assertAlmostEqual(coverage(rects, Point(0, 0)), 1.0)

    def test_coverage_equals_density_without_overlap(self):
        rects = [Rectangle(0, 0, 10, 10), Rectangle(10, 0, 5, 5), Rectangle(0, 10, 3, 3)]
        self.assertAlmostEqual(coverage(rects, Point(0, 0)),
                               density(rects, Point(0, 0)))

    def test_overlapping_pairs(self):
        rects = [
            Rectangle(0, 0, 10, 10),
            Rectangle(5, 0, 10, 10),
            Rectangle(10, 10, 5, 5),   # touches corner of 0, overlaps none
            Rectangle(12, 2, 2, 2),    # inside 1
        ]
        self.assertEqual(overlapping_pairs(rects), [(0, 1), (1, 3)])
        self.assertEqual(overlapping_pairs(rects[:1]), [])

    def test_empty_raises(self):
        for fn in (cloud_bounds, roundness, density, coverage):
            with self.assertRaises(InvalidInputError, msg=fn.__name__):
                fn([], Point(0, 0))


class TestRandomSizes(unittest.TestCase):

    def test_seeded_is_repeatable(self):
        self.assertEqual(random_sizes(20, seed=5), random_sizes(20, seed=5))

    def test_within_range(self):
        sizes = random_sizes(200, min_side=3, max_side=7, seed=1)
        self.assertEqual(len(sizes), 200)
        for s in sizes:
            self.assertIsInstance(s, Size)
            self.assertTrue(3 <= s.width <= 7)
            self.assertTrue(3 <= s.height <= 7)

    def test_defaults(self):
        sizes = random_sizes(seed=0)
        self.assertEqual(len(sizes), 100)
        for s in sizes:
            self.assertTrue(10 <= s.width <= 100)
            self.assertTrue(10 <= s.height <= 100)

    def test_single_value_range(self):
        self.assertEqual(random_sizes(3, min_side=4, max_side=4), [Size(4, 4)] * 3)

    def test_zero_count(self):
        self.assertEqual(random_sizes(0), [])

    def test_invalid_arguments(self):
        with self.assertRaises(InvalidInputError):
            random_sizes(-1)
        with self.assertRaises(InvalidInputError):
            random_sizes(5, min_side=0)
        with self.assertRaises(InvalidInputError):
            random_sizes(5, min_side=10, max_side=9)


if __name__ == "__main__":
    unittest.main()
