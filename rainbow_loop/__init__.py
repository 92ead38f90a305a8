"""Looping rainbow gradient animation for UI elements."""

from rainbow_loop.animation.loop_controller import LoopController, LoopState, add_rainbow_loop
from rainbow_loop.gradient.color_sequence import ColorSequence, ColorStop, offset_gradient, rainbow_gradient
from rainbow_loop.host.capability import GradientCapable
from rainbow_loop.host.render_loop import FrameClock, RenderLoop

__version__ = "0.1.0"
