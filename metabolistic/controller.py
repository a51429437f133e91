"""Input actions and the rolling-ball character controller."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace

from metabolistic.geometry import Quat, Transform, Vec2, Vec3


class Action(enum.Enum):
    """Player input actions."""

    JUMP = "jump"
    MOVE = "move"
    PAN = "pan"


_DUAL_AXIS = frozenset({Action.MOVE, Action.PAN})


def input_map() -> dict[Action, object]:
    """Default bindings: space to jump, WASD to move, mouse motion to pan.

    The move binding lists the keys for up, down, left and right.
    """
    return {
        Action.JUMP: "Space",
        Action.MOVE: ("KeyW", "KeyS", "KeyA", "KeyD"),
        Action.PAN: "MouseMove",
    }


@dataclass
class ActionState:
    """Current values of the player's actions for one frame."""

    axes: dict[Action, Vec2] = field(default_factory=dict)
    just_pressed_actions: frozenset[Action] = frozenset()

    def axis_pair(self, action: Action) -> Vec2:
        if action not in _DUAL_AXIS:
            raise ValueError(f"{action.name} is not a dual-axis action")
        return self.axes.get(action, Vec2.ZERO)

    def just_pressed(self, action: Action) -> bool:
        return action in self.just_pressed_actions


@dataclass(frozen=True)
class Move:
    """Request to roll in a horizontal direction (x, z plane)."""

    direction: Vec2


@dataclass(frozen=True)
class Jump:
    """Request to jump."""


@dataclass(frozen=True)
class MovementBundle:
    """Movement tuning for a character."""

    acceleration: float = 1.0
    damping: float = 0.9
    jump_impulse: float = 7.0
    max_slope_angle: float = math.pi * 0.45


@dataclass(frozen=True)
class CharacterControllerBundle:
    """Everything a spherical character controller is spawned with."""

    collider_radius: float
    rigid_body: str = "dynamic"
    static_friction: float = 0.9
    dynamic_friction: float = 0.9
    friction_combine: str = "average"
    external_torque: Vec3 = Vec3.ZERO
    caster_scale: float = 0.99
    caster_direction: Vec3 = Vec3(0.0, -1.0, 0.0)
    caster_max_distance: float = 0.2
    movement: MovementBundle = MovementBundle()

    @property
    def caster_radius(self) -> float:
        """Radius of the ground caster, slightly smaller than the collider."""
        return self.collider_radius * self.caster_scale

    def with_movement(
        self,
        acceleration: float,
        damping: float,
        jump_impulse: float,
        max_slope_angle: float,
    ) -> CharacterControllerBundle:
        return replace(
            self,
            movement=MovementBundle(acceleration, damping, jump_impulse, max_slope_angle),
        )


@dataclass
class CharacterBody:
    """Mutable physical state of a character controller."""

    acceleration: float = 1.0
    jump_impulse: float = 7.0
    max_slope_angle: float | None = math.pi * 0.45
    damping: float = 0.9
    rotation: Quat = field(default_factory=Quat)
    external_torque: Vec3 = Vec3.ZERO
    torque_persistent: bool = True
    linear_velocity: Vec3 = Vec3.ZERO
    angular_velocity: Vec3 = Vec3.ZERO
    grounded: bool = False


def movement_input(action_state: ActionState, camera_transform: Transform) -> list[Move | Jump]:
    """Turn raw input into movement events relative to the camera's view."""
    forward = camera_transform.forward().xz().normalize_or_zero()
    right = camera_transform.right().xz().normalize_or_zero()
    events: list[Move | Jump] = []

    input_direction = action_state.axis_pair(Action.MOVE)
    if input_direction != Vec2.ZERO:
        move_direction = (forward * input_direction.y + right * input_direction.x).normalize_or_zero()
        if move_direction != Vec2.ZERO:
            events.append(Move(move_direction))

    if action_state.just_pressed(Action.JUMP):
        events.append(Jump())
    return events


def update_grounded(body: CharacterBody, hit_normals) -> bool:
    """Set and return whether any ground hit is shallow enough to stand on.

    ``hit_normals`` are the hit normals in the character's local space.
    """
    limit = body.max_slope_angle

    def walkable(normal: Vec3) -> bool:
        if limit is None:
            return True
        return abs(body.rotation.rotate(-normal).angle_between(Vec3.Y)) <= limit

    body.grounded = any(walkable(n) for n in hit_normals)
    return body.grounded


def apply_movement(body: CharacterBody, events) -> None:
    """Apply movement events: roll by torque, jump when grounded."""
    active_spin = False
    for event in events:
        match event:
            case Move(direction=direction):
                torque = Vec3(direction.y, 0.0, -direction.x) * body.acceleration
                body.external_torque = body.external_torque + torque
                body.torque_persistent = False
                active_spin = True
            case Jump():
                if body.grounded:
                    v = body.linear_velocity
                    body.linear_velocity = Vec3(v.x, body.jump_impulse, v.z)
            case _:
                raise TypeError(f"unknown movement event: {event!r}")
    if not active_spin:
        body.external_torque = Vec3.ZERO