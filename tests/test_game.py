from pathlib import Path

import pygame
import pytest

from bullethell.game import (
    GREEN,
    MUSIC_VOLUME,
    RED,
    YELLOW,
    Game,
    MusicKey,
    TextureKey,
    health_color,
)
from bullethell.input import Input
from bullethell.resources import ResourceManager


class FakeSound:
    def __init__(self):
        self.volume = 1.0
        self.plays = []
        self.stopped = False

    def play(self, loops=0):
        self.plays.append(loops)

    def set_volume(self, value):
        self.volume = value

    def stop(self):
        self.stopped = True


class FakeAudio:
    def __init__(self):
        self.sounds = []
        self.music = []

    def play_sound(self, path):
        self.sounds.append(Path(path))

    def play_music(self, music):
        self.music.append(music)
        music.play(loops=-1)


def _solid(color):
    surface = pygame.Surface((8, 8))
    surface.fill(color)
    return surface


@pytest.fixture
def game():
    textures = {
        "player.png": _solid((255, 0, 0)),
        "image.png": _solid((0, 0, 255)),
        "Health bar.png": _solid((255, 255, 255)),
        "Current health.png": _solid((255, 255, 255)),
    }
    sounds = {}

    def load_sound(path):
        sounds[Path(path).name] = FakeSound()
        return sounds[Path(path).name]

    resources = ResourceManager(
        image_loader=lambda path: textures[Path(path).name],
        sound_factory=load_sound,
    )
    g = Game(pygame.Surface((1200, 900)), resources=resources, audio=FakeAudio(), input_state=Input())
    g.initialize_game()
    return g


def test_health_color_thresholds():
    assert health_color(200) == GREEN
    assert health_color(132) == GREEN
    assert health_color(131) == YELLOW
    assert health_color(66) == YELLOW
    assert health_color(65) == RED
    assert health_color(0) == RED


def test_initialize_places_player_and_bars(game):
    assert tuple(game.player.position) == (600.0, 100.0)
    assert tuple(game.player.size) == (100.0, 100.0)
    assert len(game.health_bars) == 2
    for bar in game.health_bars:
        assert tuple(bar.position) == (10.0, 850.0)
        assert tuple(bar.size) == (200.0, 25.0)


def test_initialize_starts_music_looping(game):
    music = game.resources.get_music(MusicKey.ANXIETY)
    assert game.audio.music == [music]
    assert music.plays == [-1]
    assert music.volume == MUSIC_VOLUME


def test_initialize_loads_all_textures(game):
    assert set(game.resources.textures) == set(TextureKey)


def test_update_before_initialize_raises():
    g = Game(pygame.Surface((100, 100)), resources=ResourceManager(), audio=FakeAudio())
    with pytest.raises(RuntimeError):
        g.update_game(0.1)


def test_update_drains_health_and_sets_bar(game):
    game.update_game(0.016)
    assert game.player_health == 199
    assert game.health_bars[1].size.x == 200
    assert game.health_bars[1].color == GREEN


def test_update_colors_follow_health(game):
    game.player_health = 100
    game.update_game(0.5)
    assert game.health_bars[1].size.x == 100
    assert game.health_bars[1].color == YELLOW
    game.player_health = 30
    game.update_game(0.5)
    assert game.health_bars[1].color == RED


def test_health_never_below_zero(game):
    game.player_health = 0
    game.update_game(5.0)
    assert game.player_health == 0


def test_update_moves_player_by_velocity(game):
    game.player.velocity.update(10.0, -20.0)
    start = tuple(game.player.position)
    game.update_game(0.5)
    assert tuple(game.player.position) == (start[0] + 5.0, start[1] - 10.0)


def test_handle_input_up(game):
    game.input.update({pygame.K_w})
    game.handle_input(0.1)
    assert tuple(game.player.velocity) == (0.0, 450.0)


def test_handle_input_arrow_left(game):
    game.input.update({pygame.K_LEFT})
    game.handle_input(0.1)
    assert tuple(game.player.velocity) == (-450.0, 0.0)


def test_handle_input_diagonal_keeps_speed(game):
    game.input.update({pygame.K_d, pygame.K_UP})
    game.handle_input(0.1)
    assert game.player.velocity.length() == pytest.approx(450.0)
    assert game.player.velocity.x == pytest.approx(game.player.velocity.y)


def test_handle_input_no_keys_stops(game):
    game.player.velocity.update(3.0, 3.0)
    game.input.update(set())
    game.handle_input(0.1)
    assert tuple(game.player.velocity) == (0.0, 0.0)


def test_space_plays_sound_once_per_press(game):
    game.input.update({pygame.K_SPACE})
    game.handle_input(0.1)
    game.input.update({pygame.K_SPACE})
    game.handle_input(0.1)
    assert len(game.audio.sounds) == 1
    assert game.audio.sounds[0].parts[-2:] == ("Sounds", "sound.wav")


def test_render_animates_between_textures(game):
    game.render_game(0.5)
    assert tuple(game.target.get_at((650, 750)))[:3] == (255, 0, 0)
    game.render_game(1.0)
    assert tuple(game.target.get_at((650, 750)))[:3] == (0, 0, 255)


def test_render_resets_timer_after_two_seconds(game):
    game.render_game(2.5)
    assert game.timer == 0.0
    game.render_game(0.25)
    assert game.timer == 0.25


def test_render_draws_health_bar(game):
    game.render_game(0.1)
    assert tuple(game.target.get_at((20, 37)))[:3] == (255, 255, 255)