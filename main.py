"""
main.py
--------
Roomscan Pipeline Entrypoint

Stages:
1️⃣ Capture loading (capture.captured_room)
2️⃣ Spatial extraction (spatial.room_scan)
3️⃣ Design request assembly (design_request.payload)
"""

import json
import argparse
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

# --- Pipeline modules ---
from capture.captured_room import CapturedRoom, load_captured_room
from spatial.room_scan import RoomScanData, build_room_scan_data
from spatial.light_analysis import analyze_natural_light
from design_request.models import StyleReference
from design_request.payload import build_lidar_data, build_design_request

# --- Common utilities ---
from common.config import PipelineSettings, load_settings
from common.io_utils import log, read_json, setup_logging, write_outputs
from common.measurements import format_area, format_dimensions

# -----------------------------------------------------
# Environment setup
# -----------------------------------------------------

settings = load_settings()
setup_logging(settings.log_level)

# -----------------------------------------------------
# FastAPI setup
# -----------------------------------------------------

app = FastAPI(title="Roomscan Spatial API", version="1.0.0")

# -----------------------------------------------------
# Pydantic input model for /design-request
# -----------------------------------------------------

class DesignRequestInput(BaseModel):
    capture: Optional[CapturedRoom] = None  # None → demo room
    style_reference: StyleReference = Field(default_factory=StyleReference)
    user_id: Optional[str] = None
    uploaded_images: Optional[List[str]] = None  # hosted URLs replacing style_reference.images

# -----------------------------------------------------
# Core pipeline
# -----------------------------------------------------

def run_pipeline(capture: CapturedRoom, attachment_threshold: Optional[float] = None) -> RoomScanData:
    """
    Executes the spatial flow:
      capture → RoomScanData
    """
    threshold = settings.attachment_threshold
    if attachment_threshold is not None:
        # same gt=0 check the environment value goes through
        threshold = PipelineSettings(attachment_threshold=attachment_threshold).attachment_threshold
    try:
        log("🚀 Starting roomscan pipeline...", "INFO")
        scan = build_room_scan_data(capture, attachment_threshold=threshold)
        log("🎉 Pipeline completed successfully!", "OK")
        return scan
    except Exception as e:
        log(f"❌ Pipeline failed: {e}", "ERROR")
        raise


def scan_report(scan: RoomScanData) -> dict:
    light = analyze_natural_light(scan.spatial_data, scan.dimensions)
    dims = scan.dimensions
    return {
        "room": scan.summary(),
        "imperial": {
            "dimensions": format_dimensions(dims.width, dims.depth, dims.height),
            "area": format_area(dims.area),
        },
        "natural_light": {
            "total_window_area": round(light.total_window_area, 3),
            "window_to_floor_ratio": round(light.window_to_floor_ratio, 4),
            "lighting_quality": light.lighting_quality.value,
            "description": light.lighting_quality.description,
        },
        "lidar_data": build_lidar_data(scan).to_payload(),
    }

# -----------------------------------------------------
# API endpoints
# -----------------------------------------------------

@app.post("/scan")
def scan_api(capture: CapturedRoom):
    """Process a capture and return the room summary + LIDAR payload."""
    try:
        return scan_report(run_pipeline(capture))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/design-request")
def design_request_api(payload: DesignRequestInput):
    """Assemble the design request the generation service receives."""
    try:
        scan = run_pipeline(payload.capture) if payload.capture else None
        request = build_design_request(scan, payload.style_reference, payload.user_id,
                                       payload.uploaded_images)
        return request.model_dump(mode="json")
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/lidar-data/demo")
def demo_lidar_api():
    return build_lidar_data(None).to_payload()

# -----------------------------------------------------
# CLI mode
# -----------------------------------------------------

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Roomscan Spatial Pipeline CLI")
    parser.add_argument("--input", required=True, help="Path to capture JSON (RoomPlan export)")
    parser.add_argument("--out_dir", default=settings.output_dir, help="Output directory")
    parser.add_argument("--style", help="Optional style reference JSON; writes design_request.json")
    parser.add_argument("--threshold", type=float, help="Attachment threshold in meters")
    args = parser.parse_args()

    capture = load_captured_room(args.input)
    scan = run_pipeline(capture, args.threshold)

    outputs = {
        "room_scan": scan_report(scan),
        "lidar_data": build_lidar_data(scan).to_payload(),
    }
    if args.style:
        style = StyleReference.model_validate(read_json(args.style))
        outputs["design_request"] = build_design_request(scan, style).model_dump(mode="json")

    results = write_outputs(outputs, args.out_dir)

    print("\n=== Roomscan Pipeline Complete ===")
    print(json.dumps(results, indent=2))
