"""The game window, its main loop and the command that starts it."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Callable
from typing import Any

import pygame

from bullethell.audio import Audio, AudioError
from bullethell.game import Game
from bullethell.input import Input
from bullethell.resources import ResourceManager

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 900
WINDOW_TITLE = "Bullet Hell Application"


class Window:
    """Owns the display surface, feeds input to the game and runs frames."""

    def __init__(
        self,
        audio: Any = None,
        resources: ResourceManager | None = None,
        clock: Callable[[], float] | None = None,
        asset_dir: str | os.PathLike[str] = ".",
    ) -> None:
        self.audio = audio if audio is not None else Audio()
        self.resources = resources if resources is not None else ResourceManager()
        self.input = Input()
        self.asset_dir = asset_dir
        self._clock = clock if clock is not None else time.perf_counter
        self._start = 0.0
        self._last_frame = 0.0
        self._held: set[int] = set()
        self.surface: pygame.Surface | None = None
        self.game: Game | None = None
        self.should_close = False

    def initialize_window(self, width: int, height: int, title: str) -> None:
        """Open the window and start the game in it."""
        pygame.display.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._start = self._clock()
        self._last_frame = 0.0
        self.should_close = False
        self._held.clear()
        self.game = Game(
            self.surface,
            resources=self.resources,
            audio=self.audio,
            input_state=self.input,
            asset_dir=self.asset_dir,
        )
        self.game.initialize_game()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event: track keys and close on quit or escape."""
        if event.type == pygame.QUIT:
            self.should_close = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.should_close = True
            self._held.add(event.key)
        elif event.type == pygame.KEYUP:
            self._held.discard(event.key)

    def update_window(self) -> None:
        """Run one frame: measure time, process events, update and draw the game."""
        if self.game is None:
            raise RuntimeError("the window is not initialized")
        now = self._clock() - self._start
        delta_time = now - self._last_frame
        self._last_frame = now

        for event in pygame.event.get():
            self.handle_event(event)
        self.input.update(self._held)

        self.game.update_game(delta_time)
        self.game.handle_input(delta_time)
        self.game.render_game(delta_time)

        pygame.display.flip()

    def run(self) -> None:
        """Run frames until the window is asked to close, then close it."""
        try:
            while not self.should_close:
                self.update_window()
        finally:
            self.close()

    def close(self) -> None:
        """Release every resource and shut the display down."""
        self.resources.clear()
        self.game = None
        self.surface = None
        pygame.display.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the audio engine, open the window and play until it closes."""
    parser = argparse.ArgumentParser(prog="bullethell", description="A small bullet hell game.")
    parser.add_argument("--assets", default=".", help="directory holding Textures, Music and Sounds")
    args = parser.parse_args(argv)

    audio = Audio()
    try:
        audio.initialize()
    except AudioError as exc:
        print(f"Failed to initialize audio: {exc}", file=sys.stderr)
        return 1

    try:
        window = Window(audio=audio, asset_dir=args.assets)
        window.initialize_window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        window.run()
    finally:
        audio.clear()
    return 0