# core/vector.py
import math
import random
import sys
from typing import Iterator, Tuple, Union

# Components below this magnitude are treated as zero by near_zero().
NEAR_ZERO = sys.float_info.min

Scalar = Union[int, float]


class Vector3:
    """
    A 3D vector value type used for points, directions and colors.

    Every operator returns a new vector; operands are never mutated, so
    ``a += b`` rebinds ``a`` and leaves any other reference untouched.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def random(rng: random.Random, lo: float = 0.0, hi: float = 1.0) -> "Vector3":
        return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Union["Vector3", Scalar]) -> "Vector3":
        if isinstance(other, (int, float)):
            return Vector3(self.x + other, self.y + other, self.z + other)
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __radd__(self, other: Scalar) -> "Vector3":
        return self.__add__(other)

    def __sub__(self, other: Union["Vector3", Scalar]) -> "Vector3":
        if isinstance(other, (int, float)):
            return Vector3(self.x - other, self.y - other, self.z - other)
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __rsub__(self, other: Scalar) -> "Vector3":
        return Vector3(other - self.x, other - self.y, other - self.z)

    def __mul__(self, other: Union["Vector3", Scalar]) -> "Vector3":
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Element-wise, used to filter colors by attenuation.
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: Scalar) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, other: Union["Vector3", Scalar]) -> "Vector3":
        if isinstance(other, (int, float)):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector in the same direction. A zero-length vector
        yields NaN components, the same as an IEEE 0/0 division would.
        """
        l = self.length()
        if l == 0:
            return Vector3(math.nan, math.nan, math.nan)
        return self / l

    def near_zero(self) -> bool:
        return abs(self.x) < NEAR_ZERO and abs(self.y) < NEAR_ZERO and abs(self.z) < NEAR_ZERO

    def is_close(self, other: "Vector3", abs_tol: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=abs_tol) and
                math.isclose(self.y, other.y, abs_tol=abs_tol) and
                math.isclose(self.z, other.z, abs_tol=abs_tol))

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


# Same type, named for what it holds.
Point3 = Vector3
Color = Vector3


def dot(u: Vector3, v: Vector3) -> float:
    return u.dot(v)


def cross(u: Vector3, v: Vector3) -> Vector3:
    return u.cross(v)


def unit_vector(v: Vector3) -> Vector3:
    return v.normalize()
