"""
common/transformations.py
--------------------------
Transform and bounding-box utilities shared by the capture and spatial
stages.

Capture coordinate system (RoomPlan / ARKit):
- X (right), Y (up), Z (towards the viewer)

A surface transform is a 4×4 matrix whose first three columns are the
surface's right / up / forward basis and whose fourth column is the
world-space translation. RoomPlan exports store it as 16 floats in
column-major order.
"""

import math
import numpy as np
from typing import List, Sequence, Union

from .vectors import Dimensions3D, Orientation3D, Position3D


TransformLike = Union[np.ndarray, Sequence[float], Sequence[Sequence[float]]]

CONFIDENCE_SCORES = {
    "high": 1.0,
    "medium": 0.5,
    "low": 0.1,
}


# -------------------------------------------------------
# Matrix helpers
# -------------------------------------------------------

def as_matrix(transform: TransformLike) -> np.ndarray:
    """
    Return a (4, 4) float matrix.
    Accepts a 4×4 nested list / array, or a flat list of 16 values in
    column-major order (RoomPlan export order).
    """
    try:
        mat = np.asarray(transform, dtype=float)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Transform must contain only numbers: {e}") from e
    if mat.shape == (16,):
        mat = mat.reshape(4, 4).T
    elif mat.shape != (4, 4):
        raise ValueError(f"Expected a 4x4 transform or 16 values, got shape {mat.shape}")
    if not np.isfinite(mat).all():
        raise ValueError("Transform contains null or non-finite values")
    return mat


def rotation_matrix_yaw(degrees: float) -> np.ndarray:
    """Return a 3×3 rotation matrix for yaw around the Y (up) axis."""
    theta = math.radians(degrees)
    return np.array([
        [math.cos(theta), 0, math.sin(theta)],
        [0, 1, 0],
        [-math.sin(theta), 0, math.cos(theta)]
    ])


def pose_to_transform(position: Sequence[float], yaw_deg: float = 0.0) -> np.ndarray:
    """Compose a 4×4 world transform from a position and a yaw angle."""
    mat = np.eye(4)
    mat[:3, :3] = rotation_matrix_yaw(yaw_deg)
    mat[:3, 3] = np.asarray(position, dtype=float)
    return mat


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


# -------------------------------------------------------
# Extraction
# -------------------------------------------------------

def extract_position(transform: TransformLike) -> Position3D:
    """World-space position: the translation column of the transform."""
    mat = as_matrix(transform)
    return Position3D.from_array(mat[:3, 3])


def extract_orientation(transform: TransformLike) -> Orientation3D:
    """Right / up / forward vectors: the three basis columns of the transform."""
    mat = as_matrix(transform)
    return Orientation3D(
        right_vector=Position3D.from_array(mat[:3, 0]),
        up_vector=Position3D.from_array(mat[:3, 1]),
        forward_vector=Position3D.from_array(mat[:3, 2]),
    )


def calculate_corners(
    position: Position3D,
    dimensions: Dimensions3D,
    orientation: Orientation3D
) -> List[Position3D]:
    """
    Compute the 8 world-space corners of an oriented bounding box.

    Order: back face (-depth/2) then front face (+depth/2); each face runs
    bottom-left, bottom-right, top-right, top-left.
    """
    half_w = dimensions.width / 2
    half_h = dimensions.height / 2
    half_d = dimensions.depth / 2

    local_corners = np.array([
        [-half_w, -half_h, -half_d],
        [ half_w, -half_h, -half_d],
        [ half_w,  half_h, -half_d],
        [-half_w,  half_h, -half_d],
        [-half_w, -half_h,  half_d],
        [ half_w, -half_h,  half_d],
        [ half_w,  half_h,  half_d],
        [-half_w,  half_h,  half_d],
    ])

    # Columns are the basis vectors, so basis @ offset maps local → world
    basis = np.column_stack([
        orientation.right_vector.as_array(),
        orientation.up_vector.as_array(),
        orientation.forward_vector.as_array(),
    ])
    world = local_corners @ basis.T + position.as_array()
    return [Position3D.from_array(row) for row in world]


def distance(a: Position3D, b: Position3D) -> float:
    """Euclidean distance between two points."""
    return float(np.linalg.norm(a.as_array() - b.as_array()))


def confidence_to_score(confidence_level) -> float:
    """Map a qualitative confidence level to a score; unknown levels score 0.0."""
    if not isinstance(confidence_level, str):
        return 0.0
    return CONFIDENCE_SCORES.get(confidence_level.strip().lower(), 0.0)
