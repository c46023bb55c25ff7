import math
import numpy as np
import pytest

from common.vectors import Dimensions3D, Orientation3D, Position3D
from common.transformations import (
    as_matrix,
    calculate_corners,
    confidence_to_score,
    distance,
    extract_orientation,
    extract_position,
    pose_to_transform,
)


def test_flat_transform_is_column_major():
    # RoomPlan export order: translation is the last four values
    flat = [1, 0, 0, 0,
            0, 1, 0, 0,
            0, 0, 1, 0,
            1.5, 2.0, -3.0, 1]
    pos = extract_position(flat)
    assert (pos.x, pos.y, pos.z) == (1.5, 2.0, -3.0)


def test_nested_transform_reads_translation_column():
    mat = np.eye(4)
    mat[:3, 3] = [4.0, 5.0, 6.0]
    assert extract_position(mat.tolist()) == Position3D(x=4.0, y=5.0, z=6.0)


def test_bad_transform_shape_raises():
    with pytest.raises(ValueError):
        as_matrix([1, 2, 3])


def test_orientation_is_basis_columns():
    orientation = extract_orientation(pose_to_transform([0, 0, 0], 90))
    assert orientation.right_vector.z == pytest.approx(-1.0)
    assert orientation.up_vector.y == pytest.approx(1.0)
    assert orientation.forward_vector.x == pytest.approx(1.0)


def test_corners_order_and_extent():
    corners = calculate_corners(
        Position3D(x=1.0, y=1.0, z=1.0),
        Dimensions3D(width=2.0, height=4.0, depth=6.0),
        Orientation3D.identity(),
    )
    assert len(corners) == 8
    # back face first, bottom-left → top-left
    assert corners[0] == Position3D(x=0.0, y=-1.0, z=-2.0)
    assert corners[1] == Position3D(x=2.0, y=-1.0, z=-2.0)
    assert corners[2] == Position3D(x=2.0, y=3.0, z=-2.0)
    assert corners[3] == Position3D(x=0.0, y=3.0, z=-2.0)
    assert corners[6] == Position3D(x=2.0, y=3.0, z=4.0)


def test_corners_follow_rotation():
    transform = pose_to_transform([0, 0, 0], 90)
    corners = calculate_corners(
        extract_position(transform),
        Dimensions3D(width=4.0, height=2.0, depth=0.0),
        extract_orientation(transform),
    )
    xs = [c.x for c in corners]
    zs = [c.z for c in corners]
    assert max(xs) - min(xs) == pytest.approx(0.0, abs=1e-9)
    assert max(zs) - min(zs) == pytest.approx(4.0)


def test_distance_is_euclidean():
    assert distance(Position3D(), Position3D(x=3.0, y=4.0)) == pytest.approx(5.0)
    assert Position3D(x=1.0).distance_to(Position3D(x=1.0, z=2.0)) == pytest.approx(2.0)


def test_vector_arithmetic():
    a = Position3D(x=1.0, y=2.0, z=3.0)
    b = Position3D(x=0.5, y=0.5, z=0.5)
    assert a + b == Position3D(x=1.5, y=2.5, z=3.5)
    assert a - b == Position3D(x=0.5, y=1.5, z=2.5)
    assert a * 2 == Position3D(x=2.0, y=4.0, z=6.0)
    assert Position3D().normalized() == Position3D()
    assert Position3D(x=3.0, z=4.0).normalized().length == pytest.approx(1.0)


@pytest.mark.parametrize("level,score", [
    ("high", 1.0),
    ("medium", 0.5),
    ("low", 0.1),
    ("HIGH", 1.0),
    ("unknown", 0.0),
    ("", 0.0),
    (None, 0.0),
])
def test_confidence_to_score(level, score):
    assert confidence_to_score(level) == score


def test_yaw_rotation_keeps_up_axis():
    mat = pose_to_transform([1, 2, 3], 37)
    assert mat[:3, 1] == pytest.approx([0, 1, 0])
    assert math.isclose(np.linalg.det(mat[:3, :3]), 1.0)


@pytest.mark.parametrize("transform", [[None] * 16, [[1, 0, 0, float("nan")]] * 4, [["a"] * 4] * 4])
def test_non_numeric_transform_raises_value_error(transform):
    with pytest.raises(ValueError):
        as_matrix(transform)
