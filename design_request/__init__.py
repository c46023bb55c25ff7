"""
Design request package for the roomscan pipeline
Wire models and payload assembly for the design generation service.
"""
from .models import (
    LIDARPoint,
    LIDARData,
    StyleReference,
    DesignRequest,
    DesignResponse,
    ProcessingStatus,
)
from .payload import build_lidar_data, build_design_request, build_webhook_payload

__all__ = [
    "LIDARPoint",
    "LIDARData",
    "StyleReference",
    "DesignRequest",
    "DesignResponse",
    "ProcessingStatus",
    "build_lidar_data",
    "build_design_request",
    "build_webhook_payload",
]
