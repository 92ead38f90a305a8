"""Rainbow color table and its time-offset rotations.

A gradient is an ordered, cyclic run of color stops: the stop after the last
one is the first one again. ``offset_gradient`` rotates the rainbow table
around that cycle, which is what makes the colors appear to flow.
"""

from collections import namedtuple

from rainbow_loop.config.loop_config import RAINBOW_STOPS
from rainbow_loop.gradient.color_utils import parse_hex

ColorStop = namedtuple('ColorStop', ['position', 'color'])


class ColorSequence:
    """Immutable sequence of color stops sorted ascending by position."""

    def __init__(self, stops):
        stops = tuple(ColorStop(float(position), tuple(color)) for position, color in stops)
        if not stops:
            raise ValueError("A color sequence needs at least one stop")
        for stop in stops:
            if not 0.0 <= stop.position <= 1.0:
                raise ValueError(f"Stop position out of range [0, 1]: {stop.position}")
        for previous, current in zip(stops, stops[1:]):
            if current.position < previous.position:
                raise ValueError("Stops must be sorted ascending by position")
        self._stops = stops

    @property
    def stops(self):
        return self._stops

    @property
    def positions(self):
        return [stop.position for stop in self._stops]

    @property
    def colors(self):
        return [stop.color for stop in self._stops]

    def __iter__(self):
        return iter(self._stops)

    def __len__(self):
        return len(self._stops)

    def __getitem__(self, index):
        return self._stops[index]

    def __eq__(self, other):
        if not isinstance(other, ColorSequence):
            return NotImplemented
        return self._stops == other._stops

    def __hash__(self):
        return hash(self._stops)

    def __repr__(self):
        return f"ColorSequence({list(self._stops)!r})"


RAINBOW_TABLE = tuple(ColorStop(position, parse_hex(hex_color)) for position, hex_color in RAINBOW_STOPS)


def rainbow_gradient():
    """The 6-stop rainbow: red, orange, yellow, green, blue, purple."""
    return ColorSequence(RAINBOW_TABLE)


def offset_gradient(offset=0.0):
    """
    Rotate the rainbow table by ``offset`` around the color cycle.

    Only the fractional part of ``offset`` matters. Every stop moves forward
    by the offset and any position past 1.0 wraps back to the start. Stops
    landing on the same position keep their table order (the sort is stable).

    Args:
        offset: Phase of the rotation, normally in [0, 1)

    Returns:
        A new ColorSequence; the rainbow table itself is never modified
    """
    offset = offset % 1.0
    shifted = []
    for stop in RAINBOW_TABLE:
        position = stop.position + offset
        if position > 1.0:
            position -= 1.0
        shifted.append(ColorStop(position, stop.color))
    shifted.sort(key=lambda stop: stop.position)
    return ColorSequence(shifted)
