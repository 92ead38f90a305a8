"""Looping rainbow animation for gradient-capable UI elements.

``add_rainbow_loop`` decorates an element with a gradient and subscribes to
the render loop. On every frame the controller derives a phase from the time
elapsed since the start and pushes the matching rotation of the rainbow into
the element's gradient. The returned LoopController pauses, resumes and stops
the animation.
"""

import enum
import logging
import math

from rainbow_loop.config.loop_config import DEFAULT_PERIOD, DEFAULT_ROTATION
from rainbow_loop.gradient.color_sequence import offset_gradient, rainbow_gradient
from rainbow_loop.host.capability import GradientCapable

logger = logging.getLogger('app.rainbow_loop')


class LoopState(enum.Enum):
    RUNNING = 'running'
    PAUSED = 'paused'
    STOPPED = 'stopped'


class LoopController:
    """
    Drives one gradient decoration on one target.

    Use ``add_rainbow_loop`` to create controllers; it validates the target
    and prepares the decoration before handing it over.
    """

    def __init__(self, target, gradient, render_loop, period, clock):
        self.target = target
        self.gradient = gradient
        self.period = period
        self._clock = clock
        self._start_time = clock()
        self._frozen_at = None
        self._state = LoopState.RUNNING
        self._connection = render_loop.render_stepped.connect(self._on_render_step)

    @property
    def state(self):
        return self._state

    @property
    def offset(self):
        """Phase in [0, 1) the animation is at; frozen while paused or stopped."""
        now = self._frozen_at if self._frozen_at is not None else self._clock()
        return ((now - self._start_time) / self.period) % 1.0

    def is_running(self):
        return self._state is LoopState.RUNNING

    def is_paused(self):
        return self._state is LoopState.PAUSED

    def pause(self):
        if self._state is not LoopState.RUNNING:
            return
        self._frozen_at = self._clock()
        self._state = LoopState.PAUSED
        logger.debug(f"Paused rainbow loop on {self.target!r} at offset {self.offset:.3f}")

    def resume(self):
        if self._state is not LoopState.PAUSED:
            return
        elapsed = (self._frozen_at - self._start_time) % self.period
        self._start_time = self._clock() - elapsed
        self._frozen_at = None
        self._state = LoopState.RUNNING
        logger.debug(f"Resumed rainbow loop on {self.target!r} at offset {self.offset:.3f}")

    def stop(self):
        """Stop for good: unsubscribe from the render loop and remove the gradient."""
        if self._state is not LoopState.STOPPED:
            if self._frozen_at is None:
                self._frozen_at = self._clock()
            self._state = LoopState.STOPPED
            logger.info(f"Stopped rainbow loop on {self.target!r}")
        if self._connection is not None:
            self._connection.disconnect()
            self._connection = None
        if self.gradient is not None:
            self.gradient.destroy()
            self.gradient = None

    def _on_render_step(self, delta_time=None):
        if not self.target.is_attached():
            logger.info(f"{self.target!r} is no longer attached, stopping its rainbow loop")
            self.stop()
            return
        if self._state is not LoopState.RUNNING:
            return
        self.gradient.color = offset_gradient(self.offset)

    def __repr__(self):
        return f"LoopController(target={self.target!r}, period={self.period}, state={self._state.value})"


def add_rainbow_loop(target, render_loop, period=DEFAULT_PERIOD, rotation=DEFAULT_ROTATION, clock=None):
    """
    Add a looping rainbow gradient to a UI element.

    Args:
        target: Element implementing GradientCapable (frame, label, stroke...)
        render_loop: Host render loop providing the ``render_stepped`` signal
        period: Seconds per full trip around the color wheel
        rotation: Gradient rotation in degrees (0 = left to right, 90 = top to bottom)
        clock: Callable returning seconds; defaults to the render loop's clock

    Returns:
        A running LoopController, or None if the target or period is invalid
    """
    if target is None or not isinstance(target, GradientCapable):
        logger.warning(f"Rainbow loop target must be a gradient-capable element, got {target!r}")
        return None
    if not (period > 0 and math.isfinite(period)):
        logger.warning(f"Rainbow loop period must be a positive finite number, got {period}")
        return None

    gradient = target.find_gradient()
    if gradient is None:
        gradient = target.create_gradient(rotation, rainbow_gradient())
    else:
        gradient.rotation = rotation
        gradient.color = rainbow_gradient()

    controller = LoopController(target, gradient, render_loop, period, clock or render_loop.clock)
    logger.info(f"Started rainbow loop on {target!r} (period={period}s, rotation={rotation})")
    return controller
