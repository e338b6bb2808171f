# -*- coding: utf-8 -*-
"""
Sliding-tile merge puzzle (2048) with animated transitions.

The `GameController` coordinates the grid, the slide-and-merge moves, tile spawning and the animation
choreography, and publishes grid changed, tiles merged and tile clicked events.
"""

from .animation import AnimationChoreographer, MergeNotice, Pop, Slide, Visualizer, Zoom
from .config import GameConfig, WindowConfig
from .controller import GameController, LayoutHint
from .core import Direction, GridState, SpawnPolicy, is_terminal, resolve
from .events import EventHook

__all__ = [
    "AnimationChoreographer",
    "Direction",
    "EventHook",
    "GameConfig",
    "GameController",
    "GridState",
    "LayoutHint",
    "MergeNotice",
    "Pop",
    "Slide",
    "SpawnPolicy",
    "Visualizer",
    "WindowConfig",
    "Zoom",
    "is_terminal",
    "resolve",
]
