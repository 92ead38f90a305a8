"""
Per-frame render loop for running animations outside a game engine.

A RenderLoop owns a ``render_stepped`` signal and fires it once per call to
``step`` with the time elapsed since the previous frame. Controllers read the
loop's clock, so stepping with a FrameClock gives fully deterministic frames.
"""

import logging
import time

from rainbow_loop.host.signal import Signal

logger = logging.getLogger('app.render_loop')


class FrameClock:
    """Manually driven clock: time only moves when it is set or advanced."""

    def __init__(self, start=0.0):
        self.now = float(start)

    def __call__(self):
        return self.now

    def set(self, now):
        self.now = float(now)

    def advance(self, seconds):
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards by {seconds}")
        self.now += seconds
        return self.now


class RenderLoop:
    def __init__(self, clock=None):
        """
        Args:
            clock: Callable returning the current time in seconds.
                Defaults to time.monotonic.
        """
        self.clock = clock or time.monotonic
        self.render_stepped = Signal('RenderStepped')
        self.frame_count = 0
        self._last_time = None

    def step(self, now=None):
        """
        Render one frame.

        Args:
            now: Optional frame time; only valid when the loop runs on a
                FrameClock, which is moved to this time first

        Returns:
            The time elapsed since the previous frame (0 for the first one)
        """
        if now is not None:
            if not isinstance(self.clock, FrameClock):
                raise TypeError("An explicit frame time needs a FrameClock")
            self.clock.set(now)

        current = self.clock()
        delta = 0.0 if self._last_time is None else current - self._last_time
        self._last_time = current
        self.frame_count += 1
        self.render_stepped.fire(delta)
        return delta

    def run(self, duration, fps):
        """
        Step a FrameClock-driven loop at a fixed frame rate.

        Yields the time of each rendered frame, after the frame has fired.
        """
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        if not isinstance(self.clock, FrameClock):
            raise TypeError("RenderLoop.run needs a FrameClock")

        start = self.clock()
        n_frames = int(round(duration * fps))
        logger.debug(f"Running {n_frames} frames at {fps} fps")
        for i in range(n_frames):
            t = start + i / fps
            self.step(t)
            yield t
