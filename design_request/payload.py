"""
design_request/payload.py
-------------------------
Assembles outbound design-request payloads from a processed scan.

When no scan is available the demo room (4.0 × 2.8 × 3.0 m living room)
is used and `spatial_layout` is null.
"""

from typing import Any, Dict, List, Optional

from common.io_utils import log
from spatial.room_scan import RoomScanData
from spatial.spatial_classes import RoomDimensions, RoomFeatures
from .models import DesignRequest, LIDARData, StyleReference, utc_now

DEMO_ROOM_DIMENSIONS = RoomDimensions.create(width=4.0, height=2.8, depth=3.0)
DEMO_ROOM_FEATURES = RoomFeatures(walls=4, doors=1, windows=2, openings=0)
DEMO_ROOM_TYPE = "living_room"


def build_lidar_data(scan: Optional[RoomScanData]) -> LIDARData:
    if scan is None:
        log("⚠️ No scanned data available, using demo room data", "WARNING")
        return LIDARData(
            room_dimensions=DEMO_ROOM_DIMENSIONS,
            room_type=DEMO_ROOM_TYPE,
            room_features=DEMO_ROOM_FEATURES,
            spatial_layout=None,
        )

    layout = scan.simplified_spatial_layout()
    log(f"🗺️ Spatial layout: {len(layout.walls)} walls, {len(layout.doors)} doors, "
        f"{len(layout.windows)} windows, {len(layout.openings)} openings", "INFO")
    return LIDARData(
        room_dimensions=scan.dimensions,
        room_type=scan.room_type,
        room_features=scan.features,
        spatial_layout=layout,
    )


def build_design_request(
    scan: Optional[RoomScanData],
    style_reference: StyleReference,
    user_id: Optional[str] = None,
    uploaded_images: Optional[List[str]] = None
) -> DesignRequest:
    """
    `uploaded_images` are the hosted URLs of the style images; when given
    they replace the local references in `style_reference.images`.
    """
    if uploaded_images is not None:
        style_reference = style_reference.with_images(uploaded_images)
    return DesignRequest(
        lidar_data=build_lidar_data(scan),
        style_reference=style_reference,
        user_id=user_id,
    )


def build_webhook_payload(
    request_id: str,
    lidar_data: LIDARData,
    style_reference: StyleReference
) -> Dict[str, Any]:
    """Body for the generation workflow trigger."""
    return {
        "requestId": request_id,
        "lidarData": lidar_data.to_payload(),
        "styleReference": style_reference.model_dump(mode="json"),
        "timestamp": utc_now().isoformat(),
    }
