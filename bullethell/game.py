"""The game itself: the player, its health bar, input handling and drawing."""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path
from typing import Any

import pygame
from pygame.math import Vector2

from bullethell.audio import Audio
from bullethell.entities import GameObject, UserInterface
from bullethell.input import Input
from bullethell.resources import ResourceManager
from bullethell.sprite_renderer import SpriteRenderer


class TextureKey(IntEnum):
    """Keys under which the game's textures are stored."""

    PLAYER = 0
    HEALTH_BAR = 1
    CURRENT_HEALTH = 2
    PLAYER_ALT = 3


class MusicKey(IntEnum):
    """Keys under which the game's music is stored."""

    ANXIETY = 0


TEXTURE_FILES = {
    TextureKey.PLAYER: Path("Textures/player.png"),
    TextureKey.PLAYER_ALT: Path("Textures/image.png"),
    TextureKey.HEALTH_BAR: Path("Textures/Health bar.png"),
    TextureKey.CURRENT_HEALTH: Path("Textures/Current health.png"),
}
MUSIC_FILES = {MusicKey.ANXIETY: Path("Music/Anxiety.wav")}
SOUND_EFFECT = Path("Sounds/sound.wav")

MUSIC_VOLUME = 0.15
PLAYER_SPEED = 450.0
MAX_HEALTH = 200

GREEN = (0.0, 1.0, 0.0)
YELLOW = (1.0, 1.0, 0.0)
RED = (1.0, 0.0, 0.0)
WHITE = (1.0, 1.0, 1.0)

_UP_KEYS = (pygame.K_w, pygame.K_UP)
_DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)
_LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
_RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)


def health_color(health: float) -> tuple[float, float, float]:
    """Colour of the health bar: green when high, yellow in the middle, red when low."""
    if health >= 132:
        return GREEN
    if health >= 66:
        return YELLOW
    return RED


class Game:
    """One player ship whose health drains over time, drawn onto ``target``."""

    def __init__(
        self,
        target: pygame.Surface,
        resources: ResourceManager | None = None,
        audio: Any = None,
        input_state: Input | None = None,
        asset_dir: str | os.PathLike[str] = ".",
    ) -> None:
        self.target = target
        self.resources = resources if resources is not None else ResourceManager()
        self.audio = audio if audio is not None else Audio()
        self.input = input_state if input_state is not None else Input()
        self.asset_dir = Path(asset_dir)

        self.game_width = float(target.get_width())
        self.game_height = float(target.get_height())
        self.player_health = MAX_HEALTH
        self.timer = 0.0

        self.player: GameObject | None = None
        self.health_bars: list[UserInterface] = []
        self.player_renderer: SpriteRenderer | None = None
        self.health_renderers: list[SpriteRenderer] = []

    def initialize_game(self) -> None:
        """Load every resource, start the music and place the player and health bar."""
        self.input.reset()

        for key, relative in TEXTURE_FILES.items():
            self.resources.load_texture(self.asset_dir / relative, key)

        music = self.resources.load_music(self.asset_dir / MUSIC_FILES[MusicKey.ANXIETY], MusicKey.ANXIETY)
        self.audio.play_music(music)
        music.set_volume(MUSIC_VOLUME)

        self.player_renderer = SpriteRenderer(self.target)
        self.health_renderers = [SpriteRenderer(self.target), SpriteRenderer(self.target)]

        self.player = GameObject(
            Vector2(self.game_width / 2, 100.0),
            Vector2(100.0, 100.0),
            self.resources.get_texture(TextureKey.PLAYER),
            WHITE,
            Vector2(0.0, 0.0),
        )
        self.health_bars = [
            UserInterface(
                Vector2(10.0, 850.0),
                Vector2(200.0, 25.0),
                self.resources.get_texture(TextureKey.HEALTH_BAR),
                WHITE,
            ),
            UserInterface(
                Vector2(10.0, 850.0),
                Vector2(200.0, 25.0),
                self.resources.get_texture(TextureKey.CURRENT_HEALTH),
                WHITE,
            ),
        ]

    def _require_started(self) -> GameObject:
        if self.player is None:
            raise RuntimeError("the game is not initialized")
        return self.player

    def update_game(self, delta_time: float) -> None:
        """Clear the screen, move the player and drain health."""
        player = self._require_started()
        self.target.fill((0, 0, 0))

        player.position += player.velocity * delta_time

        current = self.health_bars[1]
        current.size.x = self.player_health

        if self.player_health <= 0:
            self.player_health = 0
        else:
            # Health is a whole number: the drain is truncated toward zero.
            self.player_health = int(self.player_health - 1.0 * delta_time)
            current.color = health_color(self.player_health)

    def handle_input(self, delta_time: float) -> None:
        """Play a sound on space and steer the player with WASD or the arrows."""
        player = self._require_started()

        if self.input.is_key_pressed(pygame.K_SPACE):
            self.audio.play_sound(self.asset_dir / SOUND_EFFECT)

        direction = Vector2(0.0, 0.0)
        if any(self.input.is_key_down(k) for k in _UP_KEYS):
            direction.y = 1.0
        if any(self.input.is_key_down(k) for k in _DOWN_KEYS):
            direction.y = -1.0
        if any(self.input.is_key_down(k) for k in _LEFT_KEYS):
            direction.x = -1.0
        if any(self.input.is_key_down(k) for k in _RIGHT_KEYS):
            direction.x = 1.0

        if direction.length_squared() > 0:
            direction = direction.normalize()
        player.velocity = direction * PLAYER_SPEED

    def render_game(self, delta_time: float) -> None:
        """Advance the animation timer and draw the player and health bar."""
        self._require_started()
        self.timer += delta_time

        self._animate_sprite()

        textures = (TextureKey.HEALTH_BAR, TextureKey.CURRENT_HEALTH)
        for renderer, bar, key in zip(self.health_renderers, self.health_bars, textures):
            renderer.draw_sprite(self.resources.get_texture(key), bar.position, bar.size, 0.0, bar.color)

        for bar in self.health_bars:
            for renderer in self.health_renderers:
                bar.draw_sprite(renderer)

    def _animate_sprite(self) -> None:
        player = self.player
        if self.timer <= 1:
            key = TextureKey.PLAYER
        elif self.timer <= 2:
            key = TextureKey.PLAYER_ALT
        else:
            self.timer = 0.0
            return
        self.player_renderer.draw_sprite(
            self.resources.get_texture(key), player.position, player.size, player.rotation, player.color
        )