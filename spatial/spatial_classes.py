"""
spatial/spatial_classes.py
--------------------------
Spatial model for one scanned room.

Classes:
  - RelativePosition     : where an opening sits on its host wall
  - AttachedElement      : wall-owned reference to an attached opening
  - WallSpatialInfo      : world geometry of one wall
  - SurfaceSpatialInfo   : world geometry of a door / window / opening
  - SurfaceRelationship  : child → parent wall record
  - RoomSpatialData      : container for all surfaces + relationships
  - RoomDimensions       : room bounding box (area fixed at construction)
  - RoomFeatures         : surface counts

All models are frozen; a room's spatial data is built once per capture.
"""

from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

from common.vectors import Dimensions3D, Orientation3D, Position3D


class ElementType(str, Enum):
    DOOR = "door"
    WINDOW = "window"
    OPENING = "opening"


class RelationshipType(str, Enum):
    ATTACHED_TO = "attachedTo"
    CONTAINED_IN = "containedIn"
    ADJACENT_TO = "adjacentTo"


# -------------------------------------------------------------
# Wall-relative placement
# -------------------------------------------------------------
class RelativePosition(BaseModel):
    """Distances in meters from the wall's left / bottom edge; normalized to [0, 1]."""
    model_config = ConfigDict(frozen=True)

    distance_from_left: float = 0.0
    distance_from_bottom: float = 0.0
    normalized_x: float = Field(0.0, ge=0.0, le=1.0)
    normalized_y: float = Field(0.0, ge=0.0, le=1.0)

    @classmethod
    def zero(cls) -> "RelativePosition":
        return cls()


class AttachedElement(BaseModel):
    model_config = ConfigDict(frozen=True)

    element_id: str
    element_type: ElementType
    relative_position: RelativePosition


# -------------------------------------------------------------
# Surfaces
# -------------------------------------------------------------
class WallSpatialInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    position: Position3D
    dimensions: Dimensions3D
    orientation: Orientation3D
    corners: List[Position3D]
    attached_elements: List[AttachedElement] = Field(default_factory=list)
    confidence: float = Field(0.0, ge=0.0, le=1.0)

    @property
    def area(self) -> float:
        return self.dimensions.face_area

    @property
    def normal_vector(self) -> Position3D:
        """Outward normal: the forward basis vector."""
        return self.orientation.forward_vector

    @property
    def wall_corners(self) -> List[Position3D]:
        return self.corners


class SurfaceSpatialInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    category: ElementType
    position: Position3D
    dimensions: Dimensions3D
    orientation: Orientation3D
    corners: List[Position3D]
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    parent_wall_id: Optional[str] = None
    relative_position_on_wall: Optional[RelativePosition] = None

    @property
    def area(self) -> float:
        return self.dimensions.face_area

    @property
    def is_attached(self) -> bool:
        return self.parent_wall_id is not None

    @property
    def normalized_wall_position(self) -> Optional[Tuple[float, float]]:
        """(x, y) in [0, 1] on the parent wall, or None for orphans."""
        if self.relative_position_on_wall is None:
            return None
        rel = self.relative_position_on_wall
        return rel.normalized_x, rel.normalized_y


# -------------------------------------------------------------
# Relationships
# -------------------------------------------------------------
class SpatialConnection(BaseModel):
    model_config = ConfigDict(frozen=True)

    connection_type: str
    contact_area: Optional[float] = None
    distance: Optional[float] = None


class SurfaceRelationship(BaseModel):
    model_config = ConfigDict(frozen=True)

    child_id: str
    parent_id: str
    relationship_type: RelationshipType
    spatial_connection: SpatialConnection


# -------------------------------------------------------------
# Room container
# -------------------------------------------------------------
class RoomSpatialData(BaseModel):
    """
    The full spatial representation of a room: surfaces and the
    opening → wall relationships between them.
    """
    model_config = ConfigDict(frozen=True)

    walls: List[WallSpatialInfo] = Field(default_factory=list)
    doors: List[SurfaceSpatialInfo] = Field(default_factory=list)
    windows: List[SurfaceSpatialInfo] = Field(default_factory=list)
    openings: List[SurfaceSpatialInfo] = Field(default_factory=list)
    surface_relationships: List[SurfaceRelationship] = Field(default_factory=list)

    @property
    def elements(self) -> List[SurfaceSpatialInfo]:
        return [*self.doors, *self.windows, *self.openings]

    def wall_with_id(self, wall_id: str) -> Optional[WallSpatialInfo]:
        return next((w for w in self.walls if w.identifier == wall_id), None)

    def find_element(self, element_id: str) -> Optional[SurfaceSpatialInfo]:
        return next((e for e in self.elements if e.identifier == element_id), None)

    def doors_attached_to(self, wall_id: str) -> List[SurfaceSpatialInfo]:
        return [d for d in self.doors if d.parent_wall_id == wall_id]

    def windows_attached_to(self, wall_id: str) -> List[SurfaceSpatialInfo]:
        return [w for w in self.windows if w.parent_wall_id == wall_id]

    def openings_attached_to(self, wall_id: str) -> List[SurfaceSpatialInfo]:
        return [o for o in self.openings if o.parent_wall_id == wall_id]

    def elements_attached_to(self, wall_id: str) -> List[SurfaceSpatialInfo]:
        return [
            *self.doors_attached_to(wall_id),
            *self.windows_attached_to(wall_id),
            *self.openings_attached_to(wall_id),
        ]

    @property
    def total_wall_area(self) -> float:
        return sum(w.area for w in self.walls)

    @property
    def effective_wall_area(self) -> float:
        """Wall area minus the area of attached openings, never negative."""
        attached_area = sum(e.area for e in self.elements if e.is_attached)
        return max(0.0, self.total_wall_area - attached_area)

    def __repr__(self):
        return (f"<RoomSpatialData walls={len(self.walls)} doors={len(self.doors)} "
                f"windows={len(self.windows)} openings={len(self.openings)} "
                f"relationships={len(self.surface_relationships)}>")


# -------------------------------------------------------------
# Room summary values
# -------------------------------------------------------------
class RoomDimensions(BaseModel):
    """
    Room bounding box in meters. `area` is width × depth and is fixed
    when the value is created; use RoomDimensions.create().
    """
    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    depth: float
    area: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def _derive_area(cls, data):
        if isinstance(data, dict) and "width" in data and "depth" in data:
            data = {**data, "area": float(data["width"]) * float(data["depth"])}
        return data

    @classmethod
    def create(cls, width: float, height: float, depth: float) -> "RoomDimensions":
        return cls(width=width, height=height, depth=depth)


class RoomFeatures(BaseModel):
    model_config = ConfigDict(frozen=True)

    walls: int = 0
    doors: int = 0
    windows: int = 0
    openings: int = 0
