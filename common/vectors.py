"""
common/vectors.py
-----------------
Immutable 3D value types used across the capture and spatial stages.

- Position3D    : world-space point / direction (x, y, z)
- Dimensions3D  : local bounding-box extents (width=x, height=y, depth=z)
- Orientation3D : right / up / forward basis of a surface transform
"""

import numpy as np
from typing import Sequence
from pydantic import BaseModel, ConfigDict


class Position3D(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Position3D":
        return cls(x=float(values[0]), y=float(values[1]), z=float(values[2]))

    @classmethod
    def zero(cls) -> "Position3D":
        return cls()

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def as_list(self):
        return [self.x, self.y, self.z]

    def __add__(self, other: "Position3D") -> "Position3D":
        return Position3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: "Position3D") -> "Position3D":
        return Position3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __mul__(self, scalar: float) -> "Position3D":
        return Position3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: "Position3D") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self.as_array()))

    def normalized(self) -> "Position3D":
        """Unit vector in the same direction; the zero vector stays zero."""
        n = self.length
        if n == 0:
            return Position3D.zero()
        return self * (1.0 / n)

    def distance_to(self, other: "Position3D") -> float:
        return (self - other).length


class Dimensions3D(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = 0.0
    height: float = 0.0
    depth: float = 0.0

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Dimensions3D":
        return cls(width=float(values[0]), height=float(values[1]), depth=float(values[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.width, self.height, self.depth], dtype=float)

    @property
    def face_area(self) -> float:
        """Area of the width × height face."""
        return self.width * self.height


class Orientation3D(BaseModel):
    model_config = ConfigDict(frozen=True)

    right_vector: Position3D
    up_vector: Position3D
    forward_vector: Position3D

    @classmethod
    def identity(cls) -> "Orientation3D":
        return cls(
            right_vector=Position3D(x=1.0),
            up_vector=Position3D(y=1.0),
            forward_vector=Position3D(z=1.0),
        )
