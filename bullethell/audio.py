"""Sound effects and music playback."""

from __future__ import annotations

import os
from typing import Any

import pygame


class AudioError(Exception):
    """Raised when the audio engine cannot start or a sound cannot be played."""


class Audio:
    """A small audio engine: one-shot sound effects and looping music."""

    def __init__(self, mixer: Any = None) -> None:
        self._mixer = mixer if mixer is not None else pygame.mixer
        self._sounds: dict[str, Any] = {}
        self.initialized = False

    def initialize(self) -> None:
        """Start the audio engine."""
        try:
            self._mixer.init()
        except pygame.error as exc:
            raise AudioError(f"could not start the audio engine: {exc}") from exc
        self.initialized = True

    def _require_engine(self) -> None:
        if not self.initialized:
            raise AudioError("the audio engine is not initialized")

    def play_sound(self, sound_path: str | os.PathLike[str]) -> Any:
        """Play the sound file once, loading it on first use, and return it."""
        self._require_engine()
        path = os.fspath(sound_path)
        sound = self._sounds.get(path)
        if sound is None:
            try:
                sound = self._mixer.Sound(path)
            except (pygame.error, OSError) as exc:
                raise AudioError(f"failed to load sound file: {path}") from exc
            self._sounds[path] = sound
        sound.play()
        return sound

    def play_music(self, music: Any) -> None:
        """Start a loaded music track, looping forever."""
        self._require_engine()
        music.play(loops=-1)

    def clear(self) -> None:
        """Shut the audio engine down and drop cached sounds."""
        self._sounds.clear()
        if self.initialized:
            self._mixer.quit()
            self.initialized = False

    def __enter__(self) -> Audio:
        self.initialize()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()