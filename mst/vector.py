"""
Simple 3D Vector class for point positions.
"""

import numpy as np


class Vector3D:
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other: 'Vector3D') -> 'Vector3D':
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3D') -> 'Vector3D':
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> 'Vector3D':
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __repr__(self) -> str:
        return f"Vector3D({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __eq__(self, other: 'Vector3D') -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return bool(
            np.isclose(self.x, other.x)
            and np.isclose(self.y, other.y)
            and np.isclose(self.z, other.z)
        )

    __hash__ = None

    @property
    def magnitude(self) -> float:
        return float(np.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2))

    def distance_to(self, other: 'Vector3D') -> float:
        return (self - other).magnitude

    def lerp(self, other: 'Vector3D', t: float) -> 'Vector3D':
        return self + (other - self) * t

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_array(cls, arr: np.ndarray) -> 'Vector3D':
        return cls(arr[0], arr[1], arr[2])

    def copy(self) -> 'Vector3D':
        return Vector3D(self.x, self.y, self.z)
