"""Tests for temporal and spatial deduplication."""

import random

import pytest

from tests.helpers import make_fix
from tracklog import deduplicate_by_distance, deduplicate_by_timestamp


class TestDeduplicateByTimestamp:
    """Tests for deduplicate_by_timestamp function."""

    def test_empty(self):
        assert deduplicate_by_timestamp([]) == []

    def test_last_write_wins(self):
        first = make_fix("123456.00", 48.0, 11.0)
        second = make_fix("123456.00", 49.0, 12.0)
        assert deduplicate_by_timestamp([first, second]) == [second]

    def test_last_write_wins_across_interleaved_records(self):
        early = make_fix("120000.000", 1.0, 1.0)
        overwritten = make_fix("120001.000", 2.0, 2.0)
        final = make_fix("120001.000", 3.0, 3.0)
        assert deduplicate_by_timestamp([overwritten, early, final]) == [early, final]

    def test_output_sorted_by_timestamp(self):
        records = [
            make_fix("235959.000", 3.0, 3.0),
            make_fix("000000.000", 1.0, 1.0),
            make_fix("120000.500", 2.0, 2.0),
        ]
        result = deduplicate_by_timestamp(records)
        assert [record.timestamp for record in result] == ["000000.000", "120000.500", "235959.000"]

    def test_accepts_iterators(self):
        records = (make_fix(f"1200{second:02d}.000", 0.0, 0.0) for second in range(3))
        assert len(deduplicate_by_timestamp(records)) == 3


class TestDeduplicateByDistance:
    """Tests for deduplicate_by_distance function."""

    def test_empty(self):
        assert deduplicate_by_distance([], 1e-5) == []

    def test_single_point_kept(self):
        point = make_fix("120000", 48.0, 11.0)
        assert deduplicate_by_distance([point], 1e-5) == [point]

    def test_first_point_always_kept(self):
        points = [make_fix("120000", 48.0, 11.0), make_fix("120001", 48.0, 11.0)]
        assert deduplicate_by_distance(points, 1e-5) == points[:1]

    def test_movement_in_latitude_only(self):
        points = [make_fix("120000", 0.0, 0.0), make_fix("120001", 0.75, 0.0)]
        assert deduplicate_by_distance(points, 0.5) == points

    def test_movement_in_longitude_only(self):
        points = [make_fix("120000", 0.0, 0.0), make_fix("120001", 0.0, -0.75)]
        assert deduplicate_by_distance(points, 0.5) == points

    def test_difference_equal_to_epsilon_is_dropped(self):
        points = [make_fix("120000", 0.0, 0.0), make_fix("120001", 0.5, -0.5)]
        assert deduplicate_by_distance(points, 0.5) == points[:1]

    def test_compares_against_last_kept_point(self):
        points = [make_fix(f"12000{index}", latitude, 0.0) for index, latitude in enumerate([0.0, 0.3, 0.6, 0.9])]
        result = deduplicate_by_distance(points, 0.5)
        assert [point.latitude for point in result] == [0.0, 0.6]

    def test_zero_epsilon_drops_only_identical_positions(self):
        points = [
            make_fix("120000", 1.0, 1.0),
            make_fix("120001", 1.0, 1.0),
            make_fix("120002", 1.0, 1.000001),
        ]
        assert deduplicate_by_distance(points, 0.0) == [points[0], points[2]]

    def test_does_not_modify_input(self):
        points = [make_fix("120000", 0.0, 0.0), make_fix("120001", 0.0, 0.0)]
        deduplicate_by_distance(points, 1.0)
        assert len(points) == 2

    @pytest.mark.parametrize("epsilon", [0.0, 1e-5, 1e-3, 0.05])
    def test_idempotent_and_adjacent_points_separated(self, epsilon):
        generator = random.Random(20240101)
        latitude, longitude = 48.0, 11.0
        points = []
        for second in range(500):
            latitude += generator.uniform(-0.02, 0.02)
            longitude += generator.uniform(-0.02, 0.02)
            points.append(make_fix(f"{second:06d}.000", latitude, longitude))

        route = deduplicate_by_distance(points, epsilon)

        assert route[0] == points[0]
        assert deduplicate_by_distance(route, epsilon) == route
        for previous, current in zip(route, route[1:]):
            assert (
                abs(current.latitude - previous.latitude) > epsilon
                or abs(current.longitude - previous.longitude) > epsilon
            )
