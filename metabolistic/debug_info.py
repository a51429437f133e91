"""Debug overlay state: latest movement input and toggles for debug panels."""

from __future__ import annotations

from dataclasses import dataclass

from metabolistic.controller import Jump, Move
from metabolistic.geometry import Vec2, Vec3

TOGGLE_KEY = "Backquote"
INSPECTOR_KEY = "F1"


@dataclass
class Toggle:
    """An on/off switch bound to a key, off at start."""

    key: str = TOGGLE_KEY
    enabled: bool = False

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled


def _fmt(v) -> str:
    return ", ".join(f"{c:.2f}" for c in v)


@dataclass
class DebugMovementInfo:
    """The latest movement actions and rotation of the player."""

    last_move_direction: Vec2 | None = None
    jumped_this_frame: bool = False
    external_torque: Vec3 | None = None
    angular_velocity: Vec3 | None = None

    def read_movement_actions(self, events) -> None:
        """Record one frame's movement events; the last move wins."""
        self.jumped_this_frame = False
        latest = None
        for event in events:
            match event:
                case Move(direction=direction):
                    latest = direction
                case Jump():
                    self.jumped_this_frame = True
                case _:
                    raise TypeError(f"unknown movement event: {event!r}")
        self.last_move_direction = latest

    def read_angular(self, torque: Vec3, angular_velocity: Vec3) -> None:
        self.external_torque = torque
        self.angular_velocity = angular_velocity

    def lines(self) -> list[str]:
        """The text shown in the debug window."""
        move = self.last_move_direction
        torque = self.external_torque
        ang = self.angular_velocity
        return [
            f"Move Direction: {_fmt(move)}" if move is not None else "Move Direction: None",
            f"Jumped: {'true' if self.jumped_this_frame else 'false'}",
            f"External Torque: {_fmt(torque)}" if torque is not None else "External Torque: None",
            f"Angular Velocity: {_fmt(ang)}" if ang is not None else "Angular Velocity: None",
        ]