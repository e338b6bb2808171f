# -*- coding: utf-8 -*-
"""
This module provides the reference visualizer: a `WindowBoard` class showing the board with Matplotlib.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
