"""Draws textured, tinted, rotated sprites onto a surface."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame


def _channel(value: float) -> int:
    return int(round(min(1.0, max(0.0, float(value))) * 255))


def _model_corners(
    position: Sequence[float], size: tuple[int, int], rotate: float
) -> list[tuple[float, float]]:
    """World positions of the unit quad's corners after scale, rotate, translate."""
    angle = math.radians(rotate)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    px, py = float(position[0]), float(position[1])
    corners = []
    for cx, cy in ((0, 0), (1, 0), (0, 1), (1, 1)):
        x, y = cx * size[0], cy * size[1]
        corners.append((px + x * cos_a - y * sin_a, py + x * sin_a + y * cos_a))
    return corners


class SpriteRenderer:
    """Renders sprites onto ``target`` in world coordinates with y pointing up.

    The world origin is the bottom-left corner of the target. A sprite's
    position is the corner it rotates about, sizes are in pixels and
    rotation is in degrees, counter-clockwise.
    """

    def __init__(self, target: pygame.Surface) -> None:
        self.target = target

    def draw_sprite(
        self,
        texture: pygame.Surface,
        position: Sequence[float],
        size: Sequence[float],
        rotate: float,
        color: Sequence[float],
    ) -> pygame.Rect:
        """Draw ``texture`` scaled to ``size`` and tinted by ``color``; return the area drawn."""
        width, height = round(size[0]), round(size[1])
        screen_height = self.target.get_height()
        if width <= 0 or height <= 0:
            return pygame.Rect(round(position[0]), round(screen_height - position[1]), 0, 0)

        image = pygame.transform.scale(texture, (width, height))
        # The quad's texture coordinates mirror the image left to right.
        image = pygame.transform.flip(image, True, False)
        tint = (_channel(color[0]), _channel(color[1]), _channel(color[2]), 255)
        image.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)
        if rotate % 360:
            image = pygame.transform.rotate(image, rotate)

        corners = _model_corners(position, (width, height), rotate)
        left = min(x for x, _ in corners)
        top = max(y for _, y in corners)
        return self.target.blit(image, (round(left), round(screen_height - top)))