import pytest

from common.measurements import (
    format_area,
    format_dimensions,
    meters_to_feet_inches,
    meters_to_feet_inches_string,
    square_meters_to_square_feet,
)


@pytest.mark.parametrize("meters,expected", [
    (0.0, (0, 0)),
    (1.0, (3, 3)),
    (2.8, (9, 2)),
    (3.0, (9, 10)),
])
def test_meters_to_feet_inches(meters, expected):
    assert meters_to_feet_inches(meters) == expected


def test_feet_inches_string():
    assert meters_to_feet_inches_string(1.0) == "3' 3\""


def test_area_in_square_feet():
    assert square_meters_to_square_feet(12.0) == 129
    assert format_area(12.0) == "129 sq ft"


def test_format_dimensions_order():
    assert format_dimensions(4.0, 3.0, 2.8) == "13' 1\" × 9' 10\" × 9' 2\""
