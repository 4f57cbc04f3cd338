import pytest

from aockit.y2021.day09 import basin_product, parse_heightmap, risk_level_sum

EXAMPLE = """2199943210
3987894921
9856789892
8767896789
9899965678
"""


def test_example_risk_level():
    assert risk_level_sum(parse_heightmap(EXAMPLE)) == 15


def test_example_basin_product():
    assert basin_product(parse_heightmap(EXAMPLE)) == 1134


def test_basin_product_is_repeatable():
    heightmap = parse_heightmap(EXAMPLE)
    assert basin_product(heightmap) == 1134
    assert basin_product(heightmap) == 1134


def test_local_minimum_detection():
    heightmap = parse_heightmap(EXAMPLE)
    assert heightmap.is_local_minimum(1, 0)
    assert not heightmap.is_local_minimum(0, 0)


def test_basin_cells_are_counted_once():
    heightmap = parse_heightmap(EXAMPLE)
    first = heightmap.basin_size(1, 0)
    assert first > 1
    assert heightmap.basin_size(1, 0) == 0


def test_basins_fit_in_non_peak_cells():
    heightmap = parse_heightmap(EXAMPLE)
    total = sum(heightmap.basin_size(x, y) for x, y in list(heightmap.low_points()))
    non_peaks = sum(1 for row in heightmap.heights for h in row if h != 9)
    assert total <= non_peaks


def test_parse_dimensions():
    heightmap = parse_heightmap(EXAMPLE)
    lines = EXAMPLE.strip().split("\n")
    assert heightmap.height == len(lines)
    assert heightmap.width == len(lines[0])


def test_ragged_map_rejected():
    with pytest.raises(ValueError):
        parse_heightmap("12\n3")


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        parse_heightmap("1a\n23")