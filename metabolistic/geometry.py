"""Small 3D math toolkit: vectors, quaternions and rigid transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize_or_zero(self) -> Vec2:
        """Unit vector in the same direction, or zero if that is undefined."""
        n = self.length()
        if n == 0.0 or not math.isfinite(n):
            return Vec2.ZERO
        return self / n


Vec2.ZERO = Vec2(0.0, 0.0)


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    X: ClassVar[Vec3]
    Y: ClassVar[Vec3]
    Z: ClassVar[Vec3]

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize_or_zero(self) -> Vec3:
        """Unit vector in the same direction, or zero if that is undefined."""
        n = self.length()
        if n == 0.0 or not math.isfinite(n):
            return Vec3.ZERO
        return self / n

    def lerp(self, other: Vec3, t: float) -> Vec3:
        """Linear interpolation: ``self`` at t=0, ``other`` at t=1."""
        return self + (other - self) * t

    def angle_between(self, other: Vec3) -> float:
        """Unsigned angle in radians between two non-zero vectors."""
        denom = math.sqrt(self.length_squared() * other.length_squared())
        if denom == 0.0:
            raise ValueError("angle is undefined for a zero-length vector")
        cos = max(-1.0, min(1.0, self.dot(other) / denom))
        return math.acos(cos)

    def xz(self) -> Vec2:
        """The x and z components as a 2D vector."""
        return Vec2(self.x, self.z)

    def _any_orthonormal(self) -> Vec3:
        helper = Vec3.Y if abs(self.x) > 0.9 else Vec3.X
        return self.cross(helper).normalize_or_zero()


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar[Quat]

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Quat:
        unit = axis.normalize_or_zero()
        if unit == Vec3.ZERO:
            raise ValueError("rotation axis must be non-zero")
        s = math.sin(angle * 0.5)
        return Quat(unit.x * s, unit.y * s, unit.z * s, math.cos(angle * 0.5))

    @staticmethod
    def from_rotation_x(angle: float) -> Quat:
        return Quat.from_axis_angle(Vec3.X, angle)

    @staticmethod
    def from_rotation_y(angle: float) -> Quat:
        return Quat.from_axis_angle(Vec3.Y, angle)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return self.rotate(other)
        if isinstance(other, Quat):
            a, b = self, other
            return Quat(
                a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
                a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
                a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
                a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            )
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def rotate(self, v: Vec3) -> Vec3:
        """Apply this rotation to a vector."""
        u = Vec3(self.x, self.y, self.z)
        t = u.cross(v) * 2.0
        return v + t * self.w + u.cross(t)

    def _matrix(self) -> tuple[tuple[float, float, float], ...]:
        cols = (self.rotate(Vec3.X), self.rotate(Vec3.Y), self.rotate(Vec3.Z))
        return tuple(tuple(tuple(col)[row] for col in cols) for row in range(3))

    @staticmethod
    def _from_columns(c0: Vec3, c1: Vec3, c2: Vec3) -> Quat:
        m00, m10, m20 = c0
        m01, m11, m21 = c1
        m02, m12, m22 = c2
        trace = m00 + m11 + m22
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            return Quat((m21 - m12) / s, (m02 - m20) / s, (m10 - m01) / s, 0.25 * s)
        if m00 > m11 and m00 > m22:
            s = math.sqrt(1.0 + m00 - m11 - m22) * 2.0
            return Quat(0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
        if m11 > m22:
            s = math.sqrt(1.0 + m11 - m00 - m22) * 2.0
            return Quat((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
        s = math.sqrt(1.0 + m22 - m00 - m11) * 2.0
        return Quat((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)

    def to_euler_yxz(self) -> tuple[float, float, float]:
        """Decompose into (yaw, pitch, roll) applied in Y, X, Z order."""
        m = self._matrix()
        pitch = math.asin(max(-1.0, min(1.0, -m[1][2])))
        yaw = math.atan2(m[0][2], m[2][2])
        roll = math.atan2(m[1][0], m[1][1])
        return yaw, pitch, roll

    @staticmethod
    def looking_to(forward: Vec3, up: Vec3) -> Quat:
        """Rotation whose local -Z points along ``forward`` with +Y towards ``up``."""
        back = (-forward).normalize_or_zero()
        if back == Vec3.ZERO:
            back = Vec3.Z
        up_dir = up.normalize_or_zero()
        if up_dir == Vec3.ZERO:
            up_dir = Vec3.Y
        right = up_dir.cross(back).normalize_or_zero()
        if right == Vec3.ZERO:
            right = up_dir._any_orthonormal()
        true_up = back.cross(right)
        return Quat._from_columns(right, true_up, back)


Quat.IDENTITY = Quat(0.0, 0.0, 0.0, 1.0)


@dataclass
class Transform:
    """Position and orientation of an object in space."""

    translation: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)

    @staticmethod
    def from_xyz(x: float, y: float, z: float) -> Transform:
        return Transform(translation=Vec3(x, y, z))

    def forward(self) -> Vec3:
        return self.rotation.rotate(-Vec3.Z)

    def back(self) -> Vec3:
        return self.rotation.rotate(Vec3.Z)

    def right(self) -> Vec3:
        return self.rotation.rotate(Vec3.X)

    def up(self) -> Vec3:
        return self.rotation.rotate(Vec3.Y)

    def look_at(self, target: Vec3, up: Vec3) -> None:
        """Turn in place so that the forward direction points at ``target``."""
        self.rotation = Quat.looking_to(target - self.translation, up)

    def looking_at(self, target: Vec3, up: Vec3) -> Transform:
        """A copy of this transform turned towards ``target``."""
        result = Transform(self.translation, self.rotation)
        result.look_at(target, up)
        return result

    def rotate(self, rotation: Quat) -> None:
        self.rotation = rotation * self.rotation

    def rotate_around(self, point: Vec3, rotation: Quat) -> None:
        """Orbit around ``point`` by ``rotation``, turning with it."""
        self.translation = point + rotation.rotate(self.translation - point)
        self.rotate(rotation)

    def rotate_local(self, rotation: Quat) -> None:
        """Rotate about the transform's own axes."""
        self.rotation = self.rotation * rotation