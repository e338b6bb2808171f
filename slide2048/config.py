"""
Configuration for the sliding-tile game engine and its reference window.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration of a game.

    Attributes are validated at construction; an invalid configuration is a fatal error.
    """

    # ##>: Board dimensions.
    rows: int = 4
    cols: int = 4

    # ##>: Spacing between cells, in pixels. Slides travel one cell plus one gap per step.
    gap: int = 8

    # ##>: Input handling.
    throttle_ms: int = 200  # At most one accepted key press per window (leading edge)
    swipe_threshold: int = 50  # Minimal pixel displacement before a swipe resolves

    # ##>: Seed for the spawn generator (None for OS entropy).
    seed: int | None = None

    def __post_init__(self):
        for name in ('rows', 'cols'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f'{name} must be a positive integer, got {value!r}')
        for name in ('gap', 'throttle_ms', 'swipe_threshold'):
            if getattr(self, name) < 0:
                raise ValueError(f'{name} must be non-negative, got {getattr(self, name)!r}')


@dataclass(frozen=True)
class WindowConfig:
    """
    Configuration of the matplotlib window.
    """

    title: str = '2048 Game'
    tile_size: int = 64  # Pixels
    duration_ms: int = 100  # Length of one animation
    frames: int = 6  # Redraws per animation

    def __post_init__(self):
        if self.tile_size <= 0:
            raise ValueError(f'tile_size must be positive, got {self.tile_size!r}')
        if self.duration_ms < 0:
            raise ValueError(f'duration_ms must be non-negative, got {self.duration_ms!r}')
        if self.frames <= 0:
            raise ValueError(f'frames must be positive, got {self.frames!r}')
