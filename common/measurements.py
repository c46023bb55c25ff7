"""
common/measurements.py
----------------------
Metric → imperial formatting for room summaries.
"""

from typing import Tuple

INCHES_PER_METER = 39.3701
SQ_FEET_PER_SQ_METER = 10.7639


def meters_to_feet_inches(meters: float) -> Tuple[int, int]:
    """Convert meters to whole (feet, inches), truncating."""
    total_inches = meters * INCHES_PER_METER
    feet = int(total_inches / 12)
    inches = int(total_inches % 12)
    return feet, inches


def meters_to_feet_inches_string(meters: float) -> str:
    feet, inches = meters_to_feet_inches(meters)
    return f"{feet}' {inches}\""


def square_meters_to_square_feet(sq_meters: float) -> int:
    return int(sq_meters * SQ_FEET_PER_SQ_METER)


def format_dimensions(width: float, depth: float, height: float) -> str:
    """Format as "W × D × H" in feet and inches."""
    w = meters_to_feet_inches_string(width)
    d = meters_to_feet_inches_string(depth)
    h = meters_to_feet_inches_string(height)
    return f"{w} × {d} × {h}"


def format_area(sq_meters: float) -> str:
    return f"{square_meters_to_square_feet(sq_meters)} sq ft"
