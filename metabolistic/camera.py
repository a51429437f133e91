"""Orbiting follow camera that trails the player and can be panned."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from metabolistic.controller import input_map
from metabolistic.geometry import Quat, Transform, Vec2, Vec3

CAMERA_ROTATE_RATE = 0.005
FOLLOW_SPEED = 10.0
PITCH_LIMIT = math.pi / 2.0 - 0.01
PLAYER = "player"


@dataclass
class FollowCamera:
    """How the camera keeps its distance from and focus on a target."""

    distance: float = 4.272
    target: str | None = None
    target_focus_offset: Vec3 = Vec3(0.0, 0.5, 0.0)


@dataclass
class CameraRig:
    """A camera with its follow behaviour and the last point it focused on."""

    transform: Transform = field(default_factory=Transform)
    follow_camera: FollowCamera = field(default_factory=FollowCamera)
    last_focus: Vec3 = Vec3.ZERO
    bindings: dict = field(default_factory=input_map)

    def pan(self, pan_vector: Vec2, target_position: Vec3 | None = None) -> None:
        """Orbit around the focus point: x turns (yaw), y tilts (pitch, clamped)."""
        if pan_vector.length_squared() <= 0.0:
            return
        delta = pan_vector * CAMERA_ROTATE_RATE

        if self.follow_camera.target is not None and target_position is not None:
            focus = target_position + self.follow_camera.target_focus_offset
        else:
            focus = self.last_focus

        self.transform.rotate_around(focus, Quat.from_rotation_y(-delta.x))

        _, current_pitch, _ = self.transform.rotation.to_euler_yxz()
        desired_pitch = current_pitch - delta.y
        clamped_pitch = min(max(desired_pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self.transform.rotate_local(Quat.from_rotation_x(clamped_pitch - current_pitch))

    def follow(self, target_position: Vec3 | None, dt: float) -> None:
        """Move smoothly towards the follow distance and look at the target.

        ``target_position`` is ``None`` when there is no player to follow.
        """
        if target_position is None:
            return
        if self.follow_camera.target is None:
            self.follow_camera.target = PLAYER

        focus = target_position + self.follow_camera.target_focus_offset
        self.last_focus = focus

        desired = focus + self.transform.back() * self.follow_camera.distance
        t = min(max(FOLLOW_SPEED * dt, 0.0), 1.0)
        self.transform.translation = self.transform.translation.lerp(desired, t)
        self.transform.look_at(focus, Vec3.Y)


def spawn_camera() -> CameraRig:
    """The camera as it starts: above and behind the origin, looking at it."""
    transform = Transform.from_xyz(0.0, 1.5, 4.0).looking_at(Vec3.ZERO, Vec3.Y)
    return CameraRig(transform=transform)