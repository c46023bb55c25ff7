"""
spatial/surface_extractor.py
----------------------------
Converts captured surfaces into world-space spatial records.

Each raw surface (identifier, transform, local dimensions, confidence)
becomes a WallSpatialInfo or SurfaceSpatialInfo carrying position,
orientation, the 8 bounding-box corners and a confidence score.
Attachment of doors / windows / openings to walls is delegated to
spatial.relationships so every consumer shares one wall assignment.
"""

from typing import Iterable, List

from capture.captured_room import CapturedRoom, CapturedSurface
from common.io_utils import log
from common.config import DEFAULT_ATTACHMENT_THRESHOLD
from common.vectors import Dimensions3D
from common.transformations import (
    extract_position,
    extract_orientation,
    calculate_corners,
    confidence_to_score,
)
from .spatial_classes import (
    ElementType,
    RoomSpatialData,
    SurfaceSpatialInfo,
    WallSpatialInfo,
)
from .relationships import resolve_room_spatial_data


# -------------------------------------------------------------
# Single surfaces
# -------------------------------------------------------------
def _surface_geometry(raw: CapturedSurface) -> dict:
    position = extract_position(raw.matrix)
    orientation = extract_orientation(raw.matrix)
    dimensions = Dimensions3D.from_array(raw.dimensions)
    return {
        "identifier": raw.identifier,
        "position": position,
        "dimensions": dimensions,
        "orientation": orientation,
        "corners": calculate_corners(position, dimensions, orientation),
        "confidence": confidence_to_score(raw.confidence),
    }


def extract_wall(raw: CapturedSurface) -> WallSpatialInfo:
    """Wall geometry only; attached elements are filled in by the resolver."""
    return WallSpatialInfo(**_surface_geometry(raw))


def extract_surface(raw: CapturedSurface, category: ElementType) -> SurfaceSpatialInfo:
    """Door / window / opening geometry with no parent wall yet."""
    return SurfaceSpatialInfo(category=category, **_surface_geometry(raw))


# -------------------------------------------------------------
# Surface families
# -------------------------------------------------------------
def extract_walls(raw_walls: Iterable[CapturedSurface]) -> List[WallSpatialInfo]:
    return [extract_wall(w) for w in raw_walls]


def extract_surfaces(raw_surfaces: Iterable[CapturedSurface], category: ElementType) -> List[SurfaceSpatialInfo]:
    return [extract_surface(s, category) for s in raw_surfaces]


def extract_spatial_data(
    capture: CapturedRoom,
    attachment_threshold: float = DEFAULT_ATTACHMENT_THRESHOLD
) -> RoomSpatialData:
    """
    Extract all surfaces of a capture and resolve opening → wall attachment.
    Never raises on empty or partial captures.
    """
    walls = extract_walls(capture.walls)
    doors = extract_surfaces(capture.doors, ElementType.DOOR)
    windows = extract_surfaces(capture.windows, ElementType.WINDOW)
    openings = extract_surfaces(capture.openings, ElementType.OPENING)
    log(f"🧱 Extracted {len(walls)} walls, {len(doors)} doors, "
        f"{len(windows)} windows, {len(openings)} openings", "DEBUG")

    return resolve_room_spatial_data(
        walls, doors, windows, openings,
        threshold=attachment_threshold,
    )
