"""
Visual transitions requested by the engine for a single frame, and the notice emitted when two tiles merge.

Operations never touch the grid: by the time they are queued, the grid is already in its post-move state.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

Cell = tuple[int, int]

# ##>: Opacity a merged tile fades to while sliding into its destination.
MERGE_OPACITY = 0.2


@dataclass(frozen=True)
class Zoom:
    """A tile appears (or disappears when ``reverse`` is set), optionally showing a new value."""

    kind: ClassVar[str] = 'zoom'

    target: Cell
    value: int | None = None
    reverse: bool = False


@dataclass(frozen=True)
class Slide:
    """
    A tile travels by ``delta`` cells.

    ``delta`` is ``(dx, dy)``: column offset first, then row offset. Each cell crossed adds ``extra_spacing``
    pixels on top of the tile size. ``opacity`` is the opacity the tile ends with (None keeps it opaque).
    """

    kind: ClassVar[str] = 'slide'

    target: Cell
    delta: tuple[int, int]
    extra_spacing: int = 0
    opacity: float | None = None


@dataclass(frozen=True)
class Pop:
    """A tile pulses after receiving a merge."""

    kind: ClassVar[str] = 'pop'

    target: Cell


AnimationOp = Union[Zoom, Slide, Pop]


@dataclass(frozen=True)
class MergeNotice:
    """Two tiles combined: ``source`` was absorbed into ``destination``, which now holds ``value``."""

    source: Cell
    destination: Cell
    value: int
