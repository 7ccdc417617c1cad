"""FrameBuffer - bounded sequence of animation frames.

The editor draws into a single "live" grid that lives outside the buffer.
Every transition that changes the current frame first commits the live
grid into ``frames[current_frame]`` and then hands back a fresh copy of
the new current frame as the next live grid. All frame changes go
through :meth:`FrameBuffer.apply`, so no transition can skip the commit.

Transition table:

    ============  =====================  ==========================  ===========
    Transition    Allowed when           Effect on current_frame     Commits
    ============  =====================  ==========================  ===========
    NEW           length < MAX_FRAMES    append blank, go to last    yes
    DUPLICATE     length < MAX_FRAMES    append live copy, go last   yes
    PREV          current_frame > 0      -1                          yes
    NEXT          current_frame < last   +1                          yes
    TICK          length > 1             +1 mod length (wraps)       yes
    DELETE        length > 1             stays (clamped to last)     no
    ============  =====================  ==========================  ===========

A transition that is not allowed is a no-op: the live grid is returned
unchanged and nothing is committed.
"""

from __future__ import annotations

import logging
import time
from enum import Enum, auto
from typing import Callable, Iterator, Sequence

from bitmap_paint.core.constants import (
    DEFAULT_FRAME_DELAY_MS,
    FRAME_DELAY_STEP_MS,
    MAX_FRAME_DELAY_MS,
    MAX_FRAMES,
    MIN_FRAME_DELAY_MS,
)
from bitmap_paint.core.errors import InvalidSize, SizeExceeded
from bitmap_paint.core.grid import PixelGrid

logger = logging.getLogger(__name__)


def _now_ms() -> float:
    return time.monotonic() * 1000.0


def clamp_delay(delay_ms: int) -> int:
    """Clamp a frame delay to the supported range, snapped to the 50 ms step."""
    snapped = round(delay_ms / FRAME_DELAY_STEP_MS) * FRAME_DELAY_STEP_MS
    return max(MIN_FRAME_DELAY_MS, min(MAX_FRAME_DELAY_MS, snapped))


class FrameTransition(Enum):
    """Frame-changing transitions of the animation state machine."""
    NEW = auto()
    DUPLICATE = auto()
    PREV = auto()
    NEXT = auto()
    TICK = auto()
    DELETE = auto()


class FrameBuffer:
    """
    Ordered, bounded sequence of equally sized frames plus playback state.

    Invariants:
        - 1 <= length <= MAX_FRAMES
        - 0 <= current_frame < length
        - every frame has the dimensions of the first one
        - MIN_FRAME_DELAY_MS <= frame_delay <= MAX_FRAME_DELAY_MS

    Example:
        frames = FrameBuffer(PixelGrid(16, 8))
        live = frames.live_copy()
        live.set(0, 0, Pixel.ON)
        live = frames.new_frame(live)   # frame 0 keeps the edit
    """

    def __init__(
        self,
        first: PixelGrid,
        frame_delay: int = DEFAULT_FRAME_DELAY_MS,
        clock: Callable[[], float] = _now_ms,
    ):
        """
        Start a buffer holding a single frame.

        Args:
            first: Content of frame 0 (copied; sets the animation dimensions)
            frame_delay: Playback delay in milliseconds
            clock: Millisecond clock used for playback timing
        """
        self._frames: list[PixelGrid] = [first.clone()]
        self._current = 0
        self._playing = False
        self._frame_delay = clamp_delay(frame_delay)
        self._clock = clock
        self._last_tick = clock()

        self._transitions: dict[
            FrameTransition,
            tuple[Callable[[], bool], Callable[[PixelGrid], None], bool],
        ] = {
            FrameTransition.NEW: (self._has_room, self._append_blank, True),
            FrameTransition.DUPLICATE: (self._has_room, self._append_copy, True),
            FrameTransition.PREV: (lambda: self._current > 0, self._step_back, True),
            FrameTransition.NEXT: (
                lambda: self._current < len(self._frames) - 1,
                self._step_forward,
                True,
            ),
            FrameTransition.TICK: (lambda: len(self._frames) > 1, self._wrap_forward, True),
            FrameTransition.DELETE: (lambda: len(self._frames) > 1, self._remove_current, False),
        }

    @classmethod
    def from_frames(
        cls,
        frames: Sequence[PixelGrid],
        frame_delay: int = DEFAULT_FRAME_DELAY_MS,
        clock: Callable[[], float] = _now_ms,
    ) -> FrameBuffer:
        """
        Build a buffer from existing frames (copied).

        Raises:
            InvalidSize: If no frames are given, or frames differ in size
            SizeExceeded: If more than MAX_FRAMES frames are given
        """
        if not frames:
            raise InvalidSize("An animation needs at least one frame")
        if len(frames) > MAX_FRAMES:
            raise SizeExceeded(f"{len(frames)} frames exceeds maximum of {MAX_FRAMES}")
        size = frames[0].size
        for index, frame in enumerate(frames):
            if frame.size != size:
                raise InvalidSize(
                    f"Frame {index + 1} is {frame.width}x{frame.height}, "
                    f"expected {size[0]}x{size[1]}"
                )

        buffer = cls(frames[0], frame_delay=frame_delay, clock=clock)
        buffer._frames.extend(frame.clone() for frame in frames[1:])
        return buffer

    # -------------------------------------------------------------------------
    # Read-only status
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        return len(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def current_frame(self) -> int:
        return self._current

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def frame_delay(self) -> int:
        """Playback delay in milliseconds."""
        return self._frame_delay

    @property
    def width(self) -> int:
        return self._frames[0].width

    @property
    def height(self) -> int:
        return self._frames[0].height

    def frame(self, index: int) -> PixelGrid:
        """Get a copy of the committed content of a frame."""
        return self._frames[index].clone()

    def __iter__(self) -> Iterator[PixelGrid]:
        """Iterate over the committed frames (not copies; do not mutate)."""
        return iter(self._frames)

    def live_copy(self) -> PixelGrid:
        """A fresh live grid holding the current frame's content."""
        return self._frames[self._current].clone()

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def commit(self, live: PixelGrid) -> None:
        """Store the live grid's content into the current frame."""
        if live.size != self._frames[0].size:
            raise InvalidSize(
                f"Live grid is {live.width}x{live.height}, "
                f"animation is {self.width}x{self.height}"
            )
        self._frames[self._current] = live.clone()

    def apply(self, transition: FrameTransition, live: PixelGrid) -> PixelGrid:
        """
        Run a transition from the table and return the next live grid.

        Args:
            transition: Which transition to run
            live: The grid currently being edited

        Returns:
            The new live grid, or `live` itself if the transition is not
            allowed in the current state
        """
        allowed, action, commits = self._transitions[transition]
        if not allowed():
            logger.debug("%s ignored at frame %d/%d", transition.name,
                         self._current + 1, len(self._frames))
            return live

        if commits:
            self.commit(live)
        action(live)
        logger.debug("%s -> frame %d/%d", transition.name,
                     self._current + 1, len(self._frames))
        return self.live_copy()

    def new_frame(self, live: PixelGrid) -> PixelGrid:
        """Append a blank frame and switch to it. No-op at MAX_FRAMES."""
        return self.apply(FrameTransition.NEW, live)

    def duplicate_frame(self, live: PixelGrid) -> PixelGrid:
        """Append a copy of the live grid and switch to it. No-op at MAX_FRAMES."""
        return self.apply(FrameTransition.DUPLICATE, live)

    def prev_frame(self, live: PixelGrid) -> PixelGrid:
        """Switch to the previous frame. No-op on the first frame."""
        return self.apply(FrameTransition.PREV, live)

    def next_frame(self, live: PixelGrid) -> PixelGrid:
        """Switch to the next frame. No-op on the last frame."""
        return self.apply(FrameTransition.NEXT, live)

    def delete_frame(self, live: PixelGrid) -> PixelGrid:
        """Remove the current frame, discarding its edits. No-op with one frame."""
        return self.apply(FrameTransition.DELETE, live)

    def tick(self, live: PixelGrid) -> PixelGrid:
        """Advance playback by one frame, wrapping at the end."""
        result = self.apply(FrameTransition.TICK, live)
        self._last_tick = self._clock()
        return result

    def _has_room(self) -> bool:
        return len(self._frames) < MAX_FRAMES

    def _append_blank(self, live: PixelGrid) -> None:
        self._frames.append(PixelGrid(self.width, self.height))
        self._current = len(self._frames) - 1

    def _append_copy(self, live: PixelGrid) -> None:
        self._frames.append(live.clone())
        self._current = len(self._frames) - 1

    def _step_back(self, live: PixelGrid) -> None:
        self._current -= 1

    def _step_forward(self, live: PixelGrid) -> None:
        self._current += 1

    def _wrap_forward(self, live: PixelGrid) -> None:
        self._current = (self._current + 1) % len(self._frames)

    def _remove_current(self, live: PixelGrid) -> None:
        del self._frames[self._current]
        self._current = min(self._current, len(self._frames) - 1)

    # -------------------------------------------------------------------------
    # Playback
    # -------------------------------------------------------------------------

    def toggle_play(self) -> bool:
        """Flip the playing flag. Returns the new state."""
        self._playing = not self._playing
        if self._playing:
            self._last_tick = self._clock()
        return self._playing

    def adjust_speed(self, delta: int) -> int:
        """
        Change the frame delay by `delta` milliseconds.

        The result is clamped to [MIN_FRAME_DELAY_MS, MAX_FRAME_DELAY_MS]
        in FRAME_DELAY_STEP_MS steps. Returns the new delay.
        """
        self._frame_delay = clamp_delay(self._frame_delay + delta)
        return self._frame_delay

    def due(self) -> bool:
        """Whether a playback tick should happen now."""
        if not self._playing or len(self._frames) < 2:
            return False
        return self._clock() - self._last_tick >= self._frame_delay
