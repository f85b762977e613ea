"""Storage for loaded textures and music, looked up by key."""

from __future__ import annotations

import os
from collections.abc import Callable, Hashable
from typing import Any

import pygame


class ResourceError(Exception):
    """Raised when a resource cannot be loaded or is not stored."""


class ResourceManager:
    """Loads textures and music from files and keeps them under a key."""

    def __init__(
        self,
        image_loader: Callable[[str], Any] | None = None,
        sound_factory: Callable[[str], Any] | None = None,
    ) -> None:
        self._image_loader = image_loader if image_loader is not None else pygame.image.load
        self._sound_factory = sound_factory if sound_factory is not None else pygame.mixer.Sound
        self.textures: dict[Hashable, Any] = {}
        self.music: dict[Hashable, Any] = {}

    def load_texture(self, file: str | os.PathLike[str], key: Hashable) -> Any:
        """Load an image file, store it under ``key`` and return it."""
        path = os.fspath(file)
        try:
            texture = self._image_loader(path)
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"can't find texture path at: {path}") from exc
        self.textures[key] = texture
        return texture

    def get_texture(self, key: Hashable) -> Any:
        """Return the texture stored under ``key``."""
        try:
            return self.textures[key]
        except KeyError:
            raise ResourceError(f"this mapped texture key is not found: {key}") from None

    def load_music(self, file: str | os.PathLike[str], key: Hashable) -> Any:
        """Load a music file, store it under ``key`` and return it."""
        path = os.fspath(file)
        try:
            track = self._sound_factory(path)
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"failed to load music file: {path}") from exc
        self.music[key] = track
        return track

    def get_music(self, key: Hashable) -> Any:
        """Return the music stored under ``key``."""
        try:
            return self.music[key]
        except KeyError:
            raise ResourceError(f"this mapped music key is not found: {key}") from None

    def clear(self) -> None:
        """Stop all music and release every stored resource."""
        for track in self.music.values():
            track.stop()
        self.music.clear()
        self.textures.clear()