import pytest
from pydantic import ValidationError

from spatial.room_scan import build_room_scan_data
from design_request.models import DesignResponse, ProcessingStatus, StyleReference
from design_request.payload import (
    build_design_request,
    build_lidar_data,
    build_webhook_payload,
)


def test_demo_lidar_data_without_scan():
    lidar = build_lidar_data(None)
    assert lidar.room_type == "living_room"
    dims = lidar.room_dimensions
    assert (dims.width, dims.height, dims.depth) == (4.0, 2.8, 3.0)
    assert dims.area == pytest.approx(12.0)
    assert (lidar.room_features.walls, lidar.room_features.doors,
            lidar.room_features.windows, lidar.room_features.openings) == (4, 1, 2, 0)
    assert lidar.spatial_layout is None
    assert lidar.point_cloud == []


def test_lidar_data_from_scan(furnished_room):
    lidar = build_lidar_data(build_room_scan_data(furnished_room))
    assert lidar.room_type == "bedroom"
    assert len(lidar.spatial_layout.walls) == 4
    assert lidar.spatial_layout.openings[0].wall_id == ""


def test_lidar_payload_is_json_ready():
    payload = build_lidar_data(None).to_payload()
    assert set(payload) == {
        "room_dimensions", "point_cloud", "timestamp", "room_type", "room_features", "spatial_layout",
    }
    assert isinstance(payload["timestamp"], str)
    assert payload["spatial_layout"] is None


def test_design_request_carries_style_and_user(furnished_room):
    style = StyleReference(style_keywords=["scandinavian", "warm"], user_thoughts="more plants")
    request = build_design_request(build_room_scan_data(furnished_room), style, user_id="u-1")

    assert request.user_id == "u-1"
    assert request.style_reference.style_keywords == ["scandinavian", "warm"]
    assert request.lidar_data.room_type == "bedroom"
    assert request.id


def test_design_request_ids_are_unique():
    style = StyleReference()
    assert build_design_request(None, style).id != build_design_request(None, style).id


def test_webhook_payload_keys():
    style = StyleReference(images=["https://cdn.example.com/a.jpg"])
    body = build_webhook_payload("req-1", build_lidar_data(None), style)

    assert set(body) == {"requestId", "lidarData", "styleReference", "timestamp"}
    assert body["requestId"] == "req-1"
    assert body["styleReference"]["images"] == ["https://cdn.example.com/a.jpg"]
    assert body["lidarData"]["room_type"] == "living_room"


def test_with_images_replaces_local_paths():
    style = StyleReference(images=["/tmp/local.jpg"], pinterest_url="https://pin.it/x")
    uploaded = style.with_images(["https://cdn.example.com/1.jpg"])
    assert uploaded.images == ["https://cdn.example.com/1.jpg"]
    assert uploaded.pinterest_url == "https://pin.it/x"
    assert style.images == ["/tmp/local.jpg"]


ROW = {
    "id": "resp-1",
    "request_id": "req-1",
    "generated_images": ["https://cdn.example.com/out.png"],
    "status": "completed",
    "created_at": "2024-05-01T12:30:45.123456Z",
    "completed_at": "2024-05-01T12:31:02.5Z",
}


def test_response_parses_fractional_utc_timestamps():
    response = DesignResponse.model_validate(ROW)
    assert response.status == ProcessingStatus.COMPLETED
    assert response.is_finished
    assert response.created_at.microsecond == 123456
    assert response.created_at.utcoffset().total_seconds() == 0
    assert response.completed_at.microsecond == 500000


def test_response_rejects_bad_timestamp():
    with pytest.raises(ValueError):
        DesignResponse.model_validate({**ROW, "created_at": "yesterday-ish"})


def test_response_rejects_unknown_status():
    with pytest.raises(ValidationError):
        DesignResponse.model_validate({**ROW, "status": "sleeping"})


def test_latest_from_rows():
    assert DesignResponse.latest_from_rows("req-1", [ROW, {**ROW, "id": "older"}]).id == "resp-1"

    pending = DesignResponse.latest_from_rows("req-2", [])
    assert pending.request_id == "req-2"
    assert pending.status == ProcessingStatus.PROCESSING
    assert not pending.is_finished
    assert pending.generated_images is None


def test_uploaded_images_replace_local_references():
    style = StyleReference(images=["/tmp/a.jpg", "/tmp/b.jpg"], user_thoughts="cosy")
    request = build_design_request(None, style, uploaded_images=["https://cdn.example.com/a.jpg"])
    assert request.style_reference.images == ["https://cdn.example.com/a.jpg"]
    assert request.style_reference.user_thoughts == "cosy"

    unchanged = build_design_request(None, style)
    assert unchanged.style_reference.images == ["/tmp/a.jpg", "/tmp/b.jpg"]
