"""
capture/captured_room.py
------------------------
Input schema for a completed room capture.

A capture holds the four surface families produced by the scanner
(walls, doors, windows, openings) as oriented bounding boxes, plus the
optional semantic section labels newer capture formats carry.

Accepted JSON (RoomPlan export and hand-written variants):
{
  "walls":    [{"identifier": "...", "transform": [16 floats | 4x4],
                "dimensions": [w, h, d], "confidence": "high" | {"high": {}}}],
  "doors":    [...],
  "windows":  [...],
  "openings": [...],
  "sections": [{"label": "bedroom", "center": [x, y, z]}]
}
"""

import uuid
import numpy as np
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from common.io_utils import read_json, log
from common.transformations import as_matrix, pose_to_transform


# -------------------------------------------------------------
# Surfaces
# -------------------------------------------------------------
class CapturedSurface(BaseModel):
    """
    One captured wall, door, window or opening.
    Attributes:
      identifier : stable opaque ID (UUID string in RoomPlan exports)
      transform  : 4×4 world transform, rows as nested lists
      dimensions : local extents [width, height, depth]
      confidence : "high" / "medium" / "low" (anything else scores 0.0)
    """
    model_config = ConfigDict(frozen=True)

    identifier: str = Field(default_factory=lambda: str(uuid.uuid4()))
    transform: List[List[float]]
    dimensions: List[float]
    confidence: str = "high"

    @field_validator("identifier", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: Any) -> str:
        return str(value)

    @field_validator("transform", mode="before")
    @classmethod
    def _normalize_transform(cls, value: Any) -> List[List[float]]:
        return as_matrix(value).tolist()

    @field_validator("dimensions", mode="before")
    @classmethod
    def _check_dimensions(cls, value: Any) -> List[float]:
        try:
            dims = [float(v) for v in value]
        except (TypeError, ValueError) as e:
            raise ValueError(f"Dimensions must be a list of 3 numbers: {e}") from e
        if len(dims) != 3:
            raise ValueError(f"Expected 3 dimensions [width, height, depth], got {len(dims)}")
        return dims

    @field_validator("confidence", mode="before")
    @classmethod
    def _flatten_confidence(cls, value: Any) -> str:
        # RoomPlan encodes enums as {"high": {}}
        if isinstance(value, dict):
            return next(iter(value), "unknown")
        if value is None:
            return "unknown"
        return str(value)

    @property
    def matrix(self) -> np.ndarray:
        return np.asarray(self.transform, dtype=float)

    @classmethod
    def from_pose(
        cls,
        position: Sequence[float],
        dimensions: Sequence[float],
        yaw_deg: float = 0.0,
        confidence: str = "high",
        identifier: Optional[str] = None,
    ) -> "CapturedSurface":
        """Build a surface from a position and yaw instead of a full transform."""
        data = {
            "transform": pose_to_transform(position, yaw_deg),
            "dimensions": list(dimensions),
            "confidence": confidence,
        }
        if identifier is not None:
            data["identifier"] = identifier
        return cls(**data)


class CapturedSection(BaseModel):
    """A semantic room section (label + optional centre point)."""
    model_config = ConfigDict(frozen=True)

    label: str
    center: Optional[List[float]] = None

    @field_validator("label", mode="before")
    @classmethod
    def _flatten_label(cls, value: Any) -> str:
        if isinstance(value, dict):
            return next(iter(value), "unidentified")
        return str(value)


# -------------------------------------------------------------
# Capture container
# -------------------------------------------------------------
class CapturedRoom(BaseModel):
    """
    Snapshot of a completed capture session.
    `sections` is None when the capture format predates section labels.
    Surface identifiers must be unique across all four families.
    """
    model_config = ConfigDict(frozen=True)

    identifier: str = Field(default_factory=lambda: str(uuid.uuid4()))
    walls: List[CapturedSurface] = Field(default_factory=list)
    doors: List[CapturedSurface] = Field(default_factory=list)
    windows: List[CapturedSurface] = Field(default_factory=list)
    openings: List[CapturedSurface] = Field(default_factory=list)
    sections: Optional[List[CapturedSection]] = None

    @field_validator("identifier", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: Any) -> str:
        return str(value)

    @model_validator(mode="after")
    def _check_unique_identifiers(self) -> "CapturedRoom":
        # wall assignment and attachment lists are keyed by surface identifier
        seen = set()
        for surface in [*self.walls, *self.doors, *self.windows, *self.openings]:
            if surface.identifier in seen:
                raise ValueError(f"Duplicate surface identifier: {surface.identifier}")
            seen.add(surface.identifier)
        return self

    @property
    def surface_count(self) -> int:
        return len(self.walls) + len(self.doors) + len(self.windows) + len(self.openings)

    def __repr__(self):
        return (f"<CapturedRoom walls={len(self.walls)} doors={len(self.doors)} "
                f"windows={len(self.windows)} openings={len(self.openings)}>")


# -------------------------------------------------------------
# Loading
# -------------------------------------------------------------
def load_captured_room(path: Union[str, Path]) -> CapturedRoom:
    """
    Load a capture from a JSON file (RoomPlan export or the schema above).
    Raises FileNotFoundError for a missing file and pydantic's
    ValidationError for malformed surfaces.
    """
    data = read_json(path)
    room = CapturedRoom.model_validate(data)
    log(f"📥 Loaded capture {path}: {room!r}", "INFO")
    return room
