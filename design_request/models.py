"""
design_request/models.py
------------------------
Wire models exchanged with the design generation service.

- LIDARData      : room measurements + simplified spatial layout
- StyleReference : user style inputs (uploaded image URLs, links, keywords)
- DesignRequest  : one submission (lidar_data + style_reference)
- DesignResponse : a stored generation result / status row
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from spatial.spatial_classes import RoomDimensions, RoomFeatures
from spatial.layout_simplifier import RoomSpatialLayout


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LIDARPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float
    confidence: float = 1.0


class LIDARData(BaseModel):
    model_config = ConfigDict(frozen=True)

    room_dimensions: RoomDimensions
    point_cloud: List[LIDARPoint] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=utc_now)
    room_type: str = "living_room"
    room_features: RoomFeatures = Field(default_factory=RoomFeatures)
    spatial_layout: Optional[RoomSpatialLayout] = None

    def to_payload(self) -> Dict[str, Any]:
        """JSON-compatible dict; timestamp as ISO-8601."""
        return self.model_dump(mode="json")


class StyleReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    images: List[str] = Field(default_factory=list)
    instagram_url: Optional[str] = None
    pinterest_url: Optional[str] = None
    style_keywords: List[str] = Field(default_factory=list)
    user_thoughts: Optional[str] = None

    def with_images(self, image_urls: List[str]) -> "StyleReference":
        """Copy with the uploaded image URLs in place of the local ones."""
        return self.model_copy(update={"images": list(image_urls)})


class DesignRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    lidar_data: LIDARData
    style_reference: StyleReference
    timestamp: datetime = Field(default_factory=utc_now)
    user_id: Optional[str] = None


class ProcessingStatus(str, Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class DesignResponse(BaseModel):
    """
    A row from the design responses table. Timestamps arrive as ISO-8601
    strings with fractional seconds; unparsable values raise a
    ValidationError (a ValueError).
    """
    model_config = ConfigDict(frozen=True)

    id: str
    request_id: str
    generated_images: Optional[List[str]] = None
    status: ProcessingStatus
    created_at: datetime
    completed_at: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        return self.status in (ProcessingStatus.COMPLETED, ProcessingStatus.FAILED)

    @classmethod
    def processing_placeholder(cls, request_id: str) -> "DesignResponse":
        """Stand-in while no result row exists yet."""
        return cls(
            id=str(uuid.uuid4()),
            request_id=request_id,
            status=ProcessingStatus.PROCESSING,
            created_at=utc_now(),
        )

    @classmethod
    def latest_from_rows(cls, request_id: str, rows: List[Dict[str, Any]]) -> "DesignResponse":
        """First (newest) row of a status query, or a processing placeholder."""
        if not rows:
            return cls.processing_placeholder(request_id)
        return cls.model_validate(rows[0])
