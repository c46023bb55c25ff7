"""
spatial/layout_simplifier.py
----------------------------
Flattens RoomSpatialData into the wire-safe RoomSpatialLayout sent to
the design generation service.

Output JSON format (snake_case keys):
{
  "walls":    [{"id", "orientation", "dimensions", "position", "attached_elements"}],
  "windows":  [{"id", "type", "dimensions", "wall_id", "position_on_wall"}],
  "doors":    [...],
  "openings": [...]
}
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from common.vectors import Dimensions3D, Position3D
from .spatial_classes import RoomSpatialData, SurfaceSpatialInfo, WallSpatialInfo


class WallOrientation(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


# ----------------------------
# Wire schema
# ----------------------------
class PositionOnWall(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_left: float = 0.0
    from_bottom: float = 0.0
    normalized_x: float = 0.0
    normalized_y: float = 0.0


class WallLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    orientation: WallOrientation
    dimensions: Dimensions3D
    position: Position3D
    attached_elements: List[str] = Field(default_factory=list)


class ElementLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    dimensions: Dimensions3D
    wall_id: str = ""
    position_on_wall: PositionOnWall = Field(default_factory=PositionOnWall)


class RoomSpatialLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    walls: List[WallLayout] = Field(default_factory=list)
    windows: List[ElementLayout] = Field(default_factory=list)
    doors: List[ElementLayout] = Field(default_factory=list)
    openings: List[ElementLayout] = Field(default_factory=list)

    def to_json(self, pretty: bool = False) -> str:
        return self.model_dump_json(indent=2 if pretty else None)


# ----------------------------
# Conversion
# ----------------------------
def wall_orientation(forward_vector: Position3D) -> WallOrientation:
    """
    Bucket a wall normal into a cardinal direction. The larger of |x| and
    |z| picks the axis (ties go to z); its sign picks the side.
    """
    fx, fz = forward_vector.x, forward_vector.z
    if abs(fx) > abs(fz):
        return WallOrientation.EAST if fx > 0 else WallOrientation.WEST
    return WallOrientation.NORTH if fz > 0 else WallOrientation.SOUTH


def simplify_wall(wall: WallSpatialInfo, spatial_data: RoomSpatialData) -> WallLayout:
    return WallLayout(
        id=wall.identifier,
        orientation=wall_orientation(wall.normal_vector),
        dimensions=wall.dimensions,
        position=wall.position,
        attached_elements=[e.identifier for e in spatial_data.elements_attached_to(wall.identifier)],
    )


def simplify_element(element: SurfaceSpatialInfo) -> ElementLayout:
    """Orphaned elements keep an empty wall_id and a zero position."""
    rel = element.relative_position_on_wall
    position = PositionOnWall()
    if rel is not None:
        position = PositionOnWall(
            from_left=rel.distance_from_left,
            from_bottom=rel.distance_from_bottom,
            normalized_x=rel.normalized_x,
            normalized_y=rel.normalized_y,
        )
    return ElementLayout(
        id=element.identifier,
        type=element.category.value,
        dimensions=element.dimensions,
        wall_id=element.parent_wall_id or "",
        position_on_wall=position,
    )


def simplify_spatial_layout(spatial_data: RoomSpatialData) -> RoomSpatialLayout:
    return RoomSpatialLayout(
        walls=[simplify_wall(w, spatial_data) for w in spatial_data.walls],
        windows=[simplify_element(w) for w in spatial_data.windows],
        doors=[simplify_element(d) for d in spatial_data.doors],
        openings=[simplify_element(o) for o in spatial_data.openings],
    )
