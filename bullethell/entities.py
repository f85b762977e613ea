"""Things drawn on screen: moving game objects and fixed interface elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pygame.math import Vector2


def _as_color(color: Any) -> tuple[float, float, float]:
    values = tuple(float(c) for c in color)
    if len(values) != 3:
        raise ValueError(f"a color needs three components, got {len(values)}")
    return values


@dataclass
class GameObject:
    """A sprite with a position, size, velocity, rotation and tint."""

    position: Vector2
    size: Vector2
    sprite: Any
    color: tuple[float, float, float]
    velocity: Vector2
    rotation: float = 0.0
    destroyed: bool = False

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.size = Vector2(self.size)
        self.velocity = Vector2(self.velocity)
        self.color = _as_color(self.color)

    def draw_sprite(self, renderer: Any) -> Any:
        """Draw this object's sprite with the given renderer."""
        return renderer.draw_sprite(self.sprite, self.position, self.size, self.rotation, self.color)


@dataclass
class UserInterface:
    """An unrotated on-screen element such as a health bar."""

    position: Vector2
    size: Vector2
    sprite: Any
    color: tuple[float, float, float]

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.size = Vector2(self.size)
        self.color = _as_color(self.color)

    def draw_sprite(self, renderer: Any) -> Any:
        """Draw this element's sprite with the given renderer."""
        return renderer.draw_sprite(self.sprite, self.position, self.size, 0.0, self.color)