"""
spatial/room_dimensions.py
--------------------------
Room bounding box from wall extents.

World extents are taken from each wall's eight world-space corners,
so rotated walls contribute their true footprint. The final box is
floored to minimum sizes so partial scans never produce a degenerate
room.
"""

import numpy as np
from typing import Iterable, Optional, Tuple, Union

from capture.captured_room import CapturedSurface
from common.vectors import Dimensions3D
from common.transformations import calculate_corners, extract_orientation, extract_position
from .spatial_classes import RoomDimensions, WallSpatialInfo

MIN_ROOM_WIDTH = 2.0
MIN_ROOM_HEIGHT = 2.4
MIN_ROOM_DEPTH = 2.0

WallLike = Union[CapturedSurface, WallSpatialInfo]


def _corner_array(wall: WallLike) -> np.ndarray:
    if isinstance(wall, WallSpatialInfo):
        corners = wall.corners
    else:
        position = extract_position(wall.matrix)
        orientation = extract_orientation(wall.matrix)
        corners = calculate_corners(position, Dimensions3D.from_array(wall.dimensions), orientation)
    return np.array([c.as_list() for c in corners], dtype=float)


def measure_extents(walls: Iterable[WallLike]) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    """(min_xyz, max_xyz) over all wall corners, or None without walls."""
    arrays = [_corner_array(w) for w in walls]
    if not arrays:
        return None
    points = np.vstack(arrays)
    return points.min(axis=0), points.max(axis=0)


def measure_footprint(walls: Iterable[WallLike]) -> Tuple[float, float, float]:
    """Unclamped (width, depth, floor area); zeros without walls."""
    extents = measure_extents(walls)
    if extents is None:
        return 0.0, 0.0, 0.0
    size = extents[1] - extents[0]
    width, depth = float(size[0]), float(size[2])
    return width, depth, width * depth


def calculate_room_dimensions(walls: Iterable[WallLike]) -> RoomDimensions:
    """
    Width / height / depth along world X / Y / Z, floored to
    2.0 × 2.4 × 2.0 m. Area is recomputed from the clamped width × depth.
    """
    extents = measure_extents(walls)
    if extents is None:
        size = np.zeros(3)
    else:
        size = extents[1] - extents[0]

    return RoomDimensions.create(
        width=max(float(size[0]), MIN_ROOM_WIDTH),
        height=max(float(size[1]), MIN_ROOM_HEIGHT),
        depth=max(float(size[2]), MIN_ROOM_DEPTH),
    )
