"""Keyboard state tracking across frames."""

from __future__ import annotations

from collections.abc import Iterable


class Input:
    """Remembers which keys are held this frame and the frame before.

    Call :meth:`update` once per frame with the key codes that are held down.
    The queries then tell apart a key that has just gone down, one that is
    held, one that has just been let go and one that is up.
    """

    def __init__(self) -> None:
        self._current: frozenset[int] = frozenset()
        self._previous: frozenset[int] = frozenset()

    def reset(self) -> None:
        """Mark every key as released in both the current and previous frame."""
        self._current = frozenset()
        self._previous = frozenset()

    def update(self, pressed: Iterable[int]) -> None:
        """Start a new frame in which exactly the keys in ``pressed`` are held."""
        self._previous = self._current
        self._current = frozenset(pressed)

    def is_key_pressed(self, key: int) -> bool:
        """True if the key went from released to pressed on this frame."""
        return key in self._current and key not in self._previous

    def is_key_down(self, key: int) -> bool:
        """True while the key is held."""
        return key in self._current

    def is_key_released(self, key: int) -> bool:
        """True if the key went from pressed to released on this frame."""
        return key not in self._current and key in self._previous

    def is_key_up(self, key: int) -> bool:
        """True while the key is not held."""
        return key not in self._current