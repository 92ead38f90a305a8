import numpy as np


def parse_hex(hex_color):
    """Convert a ``#rrggbb`` (or ``rrggbb``) string into an RGB tuple."""
    value = hex_color.strip().lstrip('#')
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid hex color: {hex_color!r}")


def _cyclic_keypoints(sequence):
    # Pad both ends with the neighbour across the wrap so interpolation
    # before the first stop and after the last one blends first<->last.
    positions = [stop.position for stop in sequence]
    colors = [stop.color for stop in sequence]
    xp = np.array([positions[-1] - 1.0] + positions + [positions[0] + 1.0])
    fp = np.array([colors[-1]] + colors + [colors[0]], dtype=np.float64)
    return xp, fp


def sample_gradient(sequence, positions):
    """
    Sample a color sequence at one or more positions.

    The sequence is treated as cyclic: positions between the last stop and
    the first one are blended across the wrap, and positions outside [0, 1]
    are folded back with modulo 1.

    Args:
        sequence: A ColorSequence (or any iterable of ColorStop)
        positions: Array-like of positions

    Returns:
        uint8 array of shape positions.shape + (3,)
    """
    positions = np.asarray(positions, dtype=np.float64)
    outside = (positions < 0.0) | (positions > 1.0)
    positions = np.where(outside, np.mod(positions, 1.0), positions)

    xp, fp = _cyclic_keypoints(list(sequence))
    channels = [np.interp(positions, xp, fp[:, c]) for c in range(3)]
    return np.clip(np.rint(np.stack(channels, axis=-1)), 0, 255).astype(np.uint8)


def sample_color(sequence, position):
    """Interpolated RGB tuple of a color sequence at a single position."""
    return tuple(int(c) for c in sample_gradient(sequence, [position])[0])
