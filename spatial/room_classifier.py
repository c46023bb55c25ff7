"""
spatial/room_classifier.py
--------------------------
Room type from section labels, or from floor area when no label maps.
Always returns one of ROOM_TYPES.
"""

import re
from typing import Iterable, Optional

from capture.captured_room import CapturedRoom, CapturedSection

ROOM_TYPES = ["bedroom", "kitchen", "bathroom", "dining_room", "living_room"]

# Area thresholds in square meters
BATHROOM_MAX_AREA = 8.0
BEDROOM_MAX_AREA = 15.0


def normalize_label(label: str) -> str:
    """'diningRoom' / 'Dining Room' / 'dining-room' → 'dining_room'."""
    s = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", (label or "").strip())
    return re.sub(r"[\s\-]+", "_", s).lower()


def room_type_from_sections(sections: Optional[Iterable[CapturedSection]]) -> Optional[str]:
    """First section (in list order) whose label maps to a room type."""
    for section in sections or []:
        label = normalize_label(section.label)
        if label in ROOM_TYPES:
            return label
    return None


def room_type_for_area(area: float) -> str:
    if area < BATHROOM_MAX_AREA:
        return "bathroom"
    if area < BEDROOM_MAX_AREA:
        return "bedroom"
    return "living_room"


def first_wall_area(capture: CapturedRoom) -> float:
    """Width × depth of the first wall; 0.0 without walls."""
    if not capture.walls:
        return 0.0
    width, _, depth = capture.walls[0].dimensions
    return width * depth


def classify_room(capture: CapturedRoom, floor_area: Optional[float] = None) -> str:
    """
    Section labels win when one maps to a room type. Otherwise the
    area heuristic runs on `floor_area`, or on the first-wall proxy
    when no floor area is supplied.
    """
    room_type = room_type_from_sections(capture.sections)
    if room_type:
        return room_type

    area = floor_area if floor_area is not None else first_wall_area(capture)
    return room_type_for_area(area)
