"""
spatial/light_analysis.py
-------------------------
Natural-light estimate from window area relative to floor area.
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from common.vectors import Position3D
from .spatial_classes import RoomDimensions, RoomSpatialData


class LightingQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def description(self) -> str:
        return {
            LightingQuality.EXCELLENT: "Excellent natural lighting with large windows",
            LightingQuality.GOOD: "Good natural lighting",
            LightingQuality.FAIR: "Fair natural lighting",
            LightingQuality.POOR: "Limited natural lighting",
        }[self]


class NaturalLightAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_window_area: float
    window_to_floor_ratio: float
    lighting_quality: LightingQuality
    window_orientations: List[Position3D] = Field(default_factory=list)

    @property
    def has_natural_light(self) -> bool:
        return self.total_window_area > 0

    @property
    def is_well_lit(self) -> bool:
        return self.lighting_quality in (LightingQuality.EXCELLENT, LightingQuality.GOOD)


def lighting_quality_for_ratio(ratio: float) -> LightingQuality:
    if ratio > 0.15:
        return LightingQuality.EXCELLENT
    if ratio > 0.10:
        return LightingQuality.GOOD
    if ratio > 0.05:
        return LightingQuality.FAIR
    return LightingQuality.POOR


def analyze_natural_light(spatial_data: RoomSpatialData, dimensions: RoomDimensions) -> NaturalLightAnalysis:
    """
    Window area over floor area. Orientations are the normals of the
    windows' host walls; orphaned windows count toward area only.
    """
    total_window_area = sum(w.area for w in spatial_data.windows)
    orientations = []
    for window in spatial_data.windows:
        if window.parent_wall_id is None:
            continue
        wall = spatial_data.wall_with_id(window.parent_wall_id)
        if wall is not None:
            orientations.append(wall.normal_vector)

    ratio = total_window_area / dimensions.area if dimensions.area > 0 else 0.0
    return NaturalLightAnalysis(
        total_window_area=total_window_area,
        window_to_floor_ratio=ratio,
        lighting_quality=lighting_quality_for_ratio(ratio),
        window_orientations=orientations,
    )
