# -*- coding: utf-8 -*-
"""
Animation operations and the choreographer that plays them before committing a frame.
"""

from .choreographer import AnimationChoreographer, Visualizer
from .operations import MERGE_OPACITY, AnimationOp, MergeNotice, Pop, Slide, Zoom

__all__ = [
    "AnimationChoreographer",
    "Visualizer",
    "AnimationOp",
    "MergeNotice",
    "MERGE_OPACITY",
    "Pop",
    "Slide",
    "Zoom",
]
