"""The game world: floor, light, player and camera, stepped frame by frame."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field

from metabolistic.camera import CameraRig, spawn_camera
from metabolistic.controller import (
    Action,
    ActionState,
    CharacterBody,
    CharacterControllerBundle,
    apply_movement,
    input_map,
    movement_input,
    update_grounded,
)
from metabolistic.debug_info import INSPECTOR_KEY, DebugMovementInfo, Toggle
from metabolistic.geometry import Quat, Transform, Vec3

GRAVITY = 9.81


@dataclass(frozen=True)
class Floor:
    """A static square slab centred on the origin."""

    size: float = 500.0
    half_thickness: float = 0.1
    color: tuple[float, float, float] = (0.3, 0.5, 0.3)
    rigid_body: str = "static"
    static_friction: float = 1.0
    dynamic_friction: float = 1.0
    friction_combine: str = "multiply"

    @property
    def half_extents(self) -> Vec3:
        return Vec3(self.size / 2.0, self.half_thickness, self.size / 2.0)

    @property
    def top(self) -> float:
        return self.half_thickness

    def _covers(self, x: float, z: float) -> bool:
        half = self.size / 2.0
        return abs(x) <= half and abs(z) <= half


@dataclass
class PointLight:
    """A shadow-casting point light."""

    intensity: float = 1_000_000.0
    shadows_enabled: bool = True
    transform: Transform = field(default_factory=lambda: Transform.from_xyz(4.0, 8.0, 4.0))


@dataclass
class _Player:
    transform: Transform
    radius: float
    color: tuple[float, float, float]
    bundle: CharacterControllerBundle
    body: CharacterBody
    bindings: dict


def spawn_player() -> _Player:
    """The player ball as it starts, resting just above the floor."""
    radius = 0.5
    bundle = CharacterControllerBundle(collider_radius=radius).with_movement(
        0.5, 5.0, 7.0, math.pi * 0.45
    )
    m = bundle.movement
    body = CharacterBody(
        acceleration=m.acceleration,
        jump_impulse=m.jump_impulse,
        max_slope_angle=m.max_slope_angle,
        damping=m.damping,
    )
    return _Player(
        transform=Transform.from_xyz(0.0, 1.0, 0.0),
        radius=radius,
        color=(0.8, 0.7, 0.6),
        bundle=bundle,
        body=body,
        bindings=input_map(),
    )


def _inverse(q: Quat) -> Quat:
    return Quat(-q.x, -q.y, -q.z, q.w)


def _normalized(q: Quat) -> Quat:
    n = math.sqrt(q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w)
    return Quat(q.x / n, q.y / n, q.z / n, q.w / n)


@dataclass
class World:
    """Everything in the scene, advanced by :meth:`step`."""

    floor: Floor = field(default_factory=Floor)
    light: PointLight = field(default_factory=PointLight)
    player: _Player = field(default_factory=spawn_player)
    camera: CameraRig = field(default_factory=spawn_camera)
    ambient_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    ambient_brightness: float = 500.0
    gravity: float = GRAVITY
    debug: DebugMovementInfo = field(default_factory=DebugMovementInfo)
    debug_ui: Toggle = field(default_factory=Toggle)
    inspector: Toggle = field(default_factory=lambda: Toggle(key=INSPECTOR_KEY))
    time: float = 0.0

    def step(self, action_state: ActionState, dt: float) -> None:
        """Advance one frame: camera pan, input, movement, physics, camera follow."""
        if dt < 0.0:
            raise ValueError("time step must not be negative")
        player = self.player
        body = player.body

        self.camera.pan(action_state.axis_pair(Action.PAN), player.transform.translation)
        events = movement_input(action_state, self.camera.transform)
        self.debug.read_movement_actions(events)
        update_grounded(body, self._ground_hits())
        apply_movement(body, events)
        self.debug.read_angular(body.external_torque, body.angular_velocity)

        self._integrate(dt)

        self.camera.follow(player.transform.translation, dt)
        self.time += dt

    def _ground_hits(self) -> list[Vec3]:
        """Hit normals, in the body's local space, of the downward ground cast."""
        player = self.player
        center = player.transform.translation
        if not self.floor._covers(center.x, center.z):
            return []
        gap = center.y - player.bundle.caster_radius - self.floor.top
        if gap > player.bundle.caster_max_distance:
            return []
        return [_inverse(player.body.rotation).rotate(-Vec3.Y)]

    def _integrate(self, dt: float) -> None:
        player = self.player
        body = player.body
        r = player.radius
        mass = 4.0 / 3.0 * math.pi * r**3
        inertia = 0.4 * mass * r * r

        ang = body.angular_velocity + body.external_torque * (dt / inertia)
        ang = ang * (1.0 / (1.0 + body.damping * dt))

        vel = body.linear_velocity + Vec3(0.0, -self.gravity * dt, 0.0)
        pos = player.transform.translation + vel * dt

        if self.floor._covers(pos.x, pos.z) and pos.y - r <= self.floor.top:
            pos = Vec3(pos.x, self.floor.top + r, pos.z)
            vy = max(vel.y, 0.0)
            vel = Vec3(-ang.z * r, vy, ang.x * r)

        speed = ang.length()
        if speed > 0.0 and dt > 0.0:
            spin = Quat.from_axis_angle(ang, speed * dt)
            body.rotation = _normalized(spin * body.rotation)

        body.angular_velocity = ang
        body.linear_velocity = vel
        if not body.torque_persistent:
            body.external_torque = Vec3.ZERO
        player.transform.translation = pos
        player.transform.rotation = body.rotation


def setup() -> World:
    """Build the starting scene."""
    return World()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="metabolistic", description="Run the rolling-ball world without input."
    )
    parser.add_argument("--steps", type=int, default=600, help="frames to simulate")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="seconds per frame")
    args = parser.parse_args(argv)
    if args.steps < 0:
        parser.error("--steps must not be negative")
    if args.dt < 0.0:
        parser.error("--dt must not be negative")

    world = setup()
    idle = ActionState()
    for _ in range(args.steps):
        world.step(idle, args.dt)
    p = world.player.transform.translation
    print(
        f"t={world.time:.2f} player=({p.x:.3f}, {p.y:.3f}, {p.z:.3f}) "
        f"grounded={world.player.body.grounded}"
    )
    return 0