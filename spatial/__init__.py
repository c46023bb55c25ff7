"""
Spatial package for the roomscan pipeline
Turns a captured room into world-space surfaces, wall attachments,
room type / dimensions and the simplified layout sent downstream.
"""
from .spatial_classes import (
    ElementType,
    RelationshipType,
    RelativePosition,
    AttachedElement,
    WallSpatialInfo,
    SurfaceSpatialInfo,
    SpatialConnection,
    SurfaceRelationship,
    RoomSpatialData,
    RoomDimensions,
    RoomFeatures,
)
from .relationships import (
    find_parent_wall,
    resolve_parent_walls,
    relative_position_on_wall,
    build_attached_elements,
    build_surface_relationships,
    resolve_room_spatial_data,
)
from .surface_extractor import extract_wall, extract_surface, extract_walls, extract_surfaces, extract_spatial_data
from .room_classifier import classify_room, room_type_for_area
from .room_dimensions import calculate_room_dimensions, measure_footprint
from .layout_simplifier import (
    WallOrientation,
    WallLayout,
    ElementLayout,
    RoomSpatialLayout,
    wall_orientation,
    simplify_spatial_layout,
)
from .room_scan import RoomScanData, build_room_scan_data, describe_room
from .light_analysis import LightingQuality, NaturalLightAnalysis, analyze_natural_light

__all__ = [
    "ElementType",
    "RelationshipType",
    "RelativePosition",
    "AttachedElement",
    "WallSpatialInfo",
    "SurfaceSpatialInfo",
    "SpatialConnection",
    "SurfaceRelationship",
    "RoomSpatialData",
    "RoomDimensions",
    "RoomFeatures",
    "find_parent_wall",
    "resolve_parent_walls",
    "relative_position_on_wall",
    "build_attached_elements",
    "build_surface_relationships",
    "resolve_room_spatial_data",
    "extract_wall",
    "extract_surface",
    "extract_walls",
    "extract_surfaces",
    "extract_spatial_data",
    "classify_room",
    "room_type_for_area",
    "calculate_room_dimensions",
    "measure_footprint",
    "WallOrientation",
    "WallLayout",
    "ElementLayout",
    "RoomSpatialLayout",
    "wall_orientation",
    "simplify_spatial_layout",
    "RoomScanData",
    "build_room_scan_data",
    "describe_room",
    "LightingQuality",
    "NaturalLightAnalysis",
    "analyze_natural_light",
]
