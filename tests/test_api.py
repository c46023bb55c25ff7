import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from common.config import PipelineSettings
import main


@pytest.fixture
def client():
    return TestClient(main.app)


def test_scan_endpoint(client, furnished_room):
    resp = client.post("/scan", json=furnished_room.model_dump(mode="json"))
    assert resp.status_code == 200
    body = resp.json()

    assert body["room"]["room_type"] == "bedroom"
    assert body["room"]["features"] == {"walls": 4, "doors": 1, "windows": 1, "openings": 1}
    assert body["imperial"]["area"] == "129 sq ft"
    assert body["natural_light"]["lighting_quality"] == "good"
    layout = body["lidar_data"]["spatial_layout"]
    assert {w["id"] for w in layout["walls"]} == {"wall-back", "wall-front", "wall-left", "wall-right"}


def test_scan_endpoint_rejects_bad_transform(client):
    capture = {"walls": [{"identifier": "w", "transform": [1, 2, 3], "dimensions": [1, 1, 0]}]}
    resp = client.post("/scan", json=capture)
    assert resp.status_code == 422


def test_design_request_without_capture_uses_demo_room(client):
    resp = client.post("/design-request", json={})
    assert resp.status_code == 200
    body = resp.json()
    assert body["lidar_data"]["room_type"] == "living_room"
    assert body["lidar_data"]["spatial_layout"] is None
    assert body["style_reference"]["images"] == []
    assert body["id"]


def test_design_request_with_capture(client, make_room):
    payload = {
        "capture": make_room().model_dump(mode="json"),
        "style_reference": {"style_keywords": ["industrial"]},
        "user_id": "user-42",
    }
    resp = client.post("/design-request", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["user_id"] == "user-42"
    assert body["lidar_data"]["room_type"] == "bedroom"
    assert len(body["lidar_data"]["spatial_layout"]["walls"]) == 4


def test_demo_lidar_endpoint(client):
    resp = client.get("/lidar-data/demo")
    assert resp.status_code == 200
    body = resp.json()
    assert body["room_dimensions"]["area"] == pytest.approx(12.0)
    assert body["room_features"]["windows"] == 2


def test_run_pipeline_uses_configured_threshold(furnished_room):
    scan = main.run_pipeline(furnished_room, attachment_threshold=2.0)
    assert scan.spatial_data.find_element("opening-1").is_attached


@pytest.mark.parametrize("wall", [
    {"identifier": "w", "transform": [1, 0, 0, 0] * 4, "dimensions": None},
    {"identifier": "w", "transform": [1, 0, 0, 0] * 4, "dimensions": [None, 2.8, 0.0]},
    {"identifier": "w", "transform": [None] * 16, "dimensions": [4.0, 2.8, 0.0]},
])
def test_scan_endpoint_rejects_null_geometry(client, wall):
    resp = client.post("/scan", json={"walls": [wall]})
    assert resp.status_code == 422


def test_scan_endpoint_rejects_duplicate_identifiers(client, make_room):
    capture = make_room().model_dump(mode="json")
    capture["walls"][1]["identifier"] = capture["walls"][0]["identifier"]
    resp = client.post("/scan", json=capture)
    assert resp.status_code == 422


def test_design_request_uses_uploaded_images(client):
    payload = {
        "style_reference": {"images": ["/local/photo.jpg"], "style_keywords": ["boho"]},
        "uploaded_images": ["https://cdn.example.com/photo.jpg"],
    }
    resp = client.post("/design-request", json=payload)
    assert resp.status_code == 200
    style = resp.json()["style_reference"]
    assert style["images"] == ["https://cdn.example.com/photo.jpg"]
    assert style["style_keywords"] == ["boho"]


@pytest.mark.parametrize("threshold", [0, 0.0, -1.0])
def test_run_pipeline_rejects_non_positive_threshold(furnished_room, threshold):
    with pytest.raises(ValidationError):
        main.run_pipeline(furnished_room, attachment_threshold=threshold)


def test_run_pipeline_defaults_to_settings_threshold(furnished_room, monkeypatch):
    monkeypatch.setattr(main, "settings", PipelineSettings())
    scan = main.run_pipeline(furnished_room)
    assert not scan.spatial_data.find_element("opening-1").is_attached
