import pytest

from capture.captured_room import CapturedRoom, CapturedSurface, CapturedSection


def rectangular_walls(width=4.0, depth=3.0, height=2.8):
    """Four walls facing inward around the origin: back, front, left, right."""
    return [
        CapturedSurface.from_pose([0, height / 2, -depth / 2], [width, height, 0.0], 0, identifier="wall-back"),
        CapturedSurface.from_pose([0, height / 2, depth / 2], [width, height, 0.0], 180, identifier="wall-front"),
        CapturedSurface.from_pose([-width / 2, height / 2, 0], [depth, height, 0.0], 90, identifier="wall-left"),
        CapturedSurface.from_pose([width / 2, height / 2, 0], [depth, height, 0.0], -90, identifier="wall-right"),
    ]


@pytest.fixture
def make_room():
    def _make(width=4.0, depth=3.0, height=2.8, doors=(), windows=(), openings=(), sections=None):
        return CapturedRoom(
            walls=rectangular_walls(width, depth, height),
            doors=list(doors),
            windows=list(windows),
            openings=list(openings),
            sections=sections,
        )
    return _make


@pytest.fixture
def furnished_room(make_room):
    """4 × 3 m room: window centred on the back wall, door beside it, opening mid-room."""
    window = CapturedSurface.from_pose([0, 1.4, -1.5], [1.2, 1.2, 0.0], 0, identifier="window-1")
    door = CapturedSurface.from_pose([0.5, 1.0, -1.5], [0.9, 2.0, 0.0], 0, confidence="medium", identifier="door-1")
    opening = CapturedSurface.from_pose([0, 1.4, 0], [1.0, 2.0, 0.0], 0, confidence="low", identifier="opening-1")
    return make_room(doors=[door], windows=[window], openings=[opening])


@pytest.fixture
def labelled_sections():
    return [CapturedSection(label="unidentified"), CapturedSection(label="livingRoom"),
            CapturedSection(label="bedroom")]
