"""
spatial/room_scan.py
--------------------
Builds the RoomScanData aggregate for one completed capture.

Steps:
1. Room dimensions from wall extents
2. Room type from section labels or floor area
3. Surface extraction + opening → wall attachment
4. Feature counts and a readable room description

The result is immutable and consumed by the design-request stage.
"""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict

from capture.captured_room import CapturedRoom
from common.io_utils import log
from common.config import DEFAULT_ATTACHMENT_THRESHOLD
from .spatial_classes import RoomDimensions, RoomFeatures, RoomSpatialData
from .room_classifier import classify_room
from .room_dimensions import calculate_room_dimensions, measure_footprint
from .surface_extractor import extract_spatial_data
from .layout_simplifier import RoomSpatialLayout, simplify_spatial_layout


class RoomScanData(BaseModel):
    model_config = ConfigDict(frozen=True)

    capture: CapturedRoom
    room_type: str
    dimensions: RoomDimensions
    features: RoomFeatures
    spatial_data: RoomSpatialData
    room_description: str

    def simplified_spatial_layout(self) -> RoomSpatialLayout:
        return simplify_spatial_layout(self.spatial_data)

    def summary(self) -> Dict[str, Any]:
        """JSON-compatible overview (no raw capture)."""
        return {
            "room_type": self.room_type,
            "dimensions": self.dimensions.model_dump(),
            "features": self.features.model_dump(),
            "effective_wall_area": round(self.spatial_data.effective_wall_area, 3),
            "relationships": len(self.spatial_data.surface_relationships),
            "description": self.room_description,
        }


def _plural(count: int, noun: str) -> str:
    if count == 0:
        return f"no {noun}s"
    return f"{count} {noun}" + ("" if count == 1 else "s")


def describe_room(room_type: str, dimensions: RoomDimensions, features: RoomFeatures) -> str:
    """e.g. "Bedroom, 4.0m × 3.0m × 2.8m (12.0 sq m) with 4 walls, 1 door, 2 windows and no openings"."""
    name = room_type.replace("_", " ").capitalize()
    size = f"{dimensions.width:.1f}m × {dimensions.depth:.1f}m × {dimensions.height:.1f}m"
    counts = (f"{_plural(features.walls, 'wall')}, {_plural(features.doors, 'door')}, "
              f"{_plural(features.windows, 'window')} and {_plural(features.openings, 'opening')}")
    return f"{name}, {size} ({dimensions.area:.1f} sq m) with {counts}"


def count_features(capture: CapturedRoom) -> RoomFeatures:
    return RoomFeatures(
        walls=len(capture.walls),
        doors=len(capture.doors),
        windows=len(capture.windows),
        openings=len(capture.openings),
    )


def build_room_scan_data(
    capture: CapturedRoom,
    attachment_threshold: float = DEFAULT_ATTACHMENT_THRESHOLD
) -> RoomScanData:
    """Main entrypoint: derive every room-level value from one capture."""
    log(f"🏠 Processing capture: {capture!r}", "INFO")

    dimensions = calculate_room_dimensions(capture.walls)
    _, _, floor_area = measure_footprint(capture.walls)
    room_type = classify_room(capture, floor_area=floor_area)
    spatial_data = extract_spatial_data(capture, attachment_threshold)
    features = count_features(capture)
    description = describe_room(room_type, dimensions, features)

    log(f"✅ {description}", "OK")
    return RoomScanData(
        capture=capture,
        room_type=room_type,
        dimensions=dimensions,
        features=features,
        spatial_data=spatial_data,
        room_description=description,
    )
