"""Rasterize an element tree into RGB frames.

Elements are drawn parent first, children in insertion order. A GuiObject
fills its rectangle with its background color, or with its UIGradient when it
has one. A TextLabel draws its text on top; with a gradient and no background
the gradient colors the glyphs instead. A UIStroke draws a border around its
parent's rectangle.
"""

import math

import cv2
import numpy as np

from rainbow_loop.gradient.color_utils import sample_gradient
from rainbow_loop.host.elements import GuiObject, TextLabel, UIGradient, UIStroke

FONT = cv2.FONT_HERSHEY_SIMPLEX


def gradient_image(gradient, width, height):
    """
    Paint a UIGradient onto a width x height RGB image.

    Positions run from 0 to 1 along the rotation direction (0 degrees is
    left to right, 90 degrees is top to bottom, y pointing down).
    """
    if width <= 0 or height <= 0:
        return np.zeros((max(height, 0), max(width, 0), 3), dtype=np.uint8)

    angle = math.radians(gradient.rotation)
    # Snap so 90 and 180 degrees give exact axis-aligned directions
    dx, dy = round(math.cos(angle), 12), round(math.sin(angle), 12)

    xs = np.arange(width, dtype=np.float64) + 0.5 - width / 2.0
    ys = np.arange(height, dtype=np.float64) + 0.5 - height / 2.0
    grid_x, grid_y = np.meshgrid(xs, ys)

    half_extent = abs(dx) * width / 2.0 + abs(dy) * height / 2.0
    positions = 0.5 + (grid_x * dx + grid_y * dy) / (2.0 * half_extent)
    return sample_gradient(gradient.color, np.clip(positions, 0.0, 1.0))


def render_element(element):
    """The fill of a GuiObject as an H x W x 3 uint8 image."""
    width, height = element.size
    gradient = element.find_gradient()
    if gradient is not None and gradient.color is not None:
        return gradient_image(gradient, width, height)
    color = element.background if element.background is not None else (0, 0, 0)
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:] = color
    return image


def _blend(canvas, image, mask, x, y):
    # Copy image pixels where mask is set, clipped to the canvas
    h, w = mask.shape
    x0, y0 = max(x, 0), max(y, 0)
    x1, y1 = min(x + w, canvas.shape[1]), min(y + h, canvas.shape[0])
    if x0 >= x1 or y0 >= y1:
        return
    region = canvas[y0:y1, x0:x1]
    src = image[y0 - y:y1 - y, x0 - x:x1 - x]
    sel = mask[y0 - y:y1 - y, x0 - x:x1 - x] > 0
    region[sel] = src[sel]


def _text_mask(label):
    width, height = label.size
    mask = np.zeros((height, width), dtype=np.uint8)
    if not label.text or width == 0 or height == 0:
        return mask
    thickness = max(1, int(round(label.text_scale * 2)))
    (text_w, text_h), baseline = cv2.getTextSize(label.text, FONT, label.text_scale, thickness)
    origin = ((width - text_w) // 2, (height + text_h) // 2 - baseline // 2)
    cv2.putText(mask, label.text, origin, FONT, label.text_scale, 255, thickness, cv2.LINE_AA)
    return mask


def _draw_gui_object(canvas, element):
    width, height = element.size
    if width == 0 or height == 0:
        return
    x, y = element.absolute_position
    gradient = element.find_gradient()
    has_gradient = gradient is not None and gradient.color is not None

    if element.background is not None:
        fill = render_element(element)
        _blend(canvas, fill, np.full((height, width), 255, dtype=np.uint8), x, y)

    if isinstance(element, TextLabel) and element.text:
        mask = _text_mask(element)
        if has_gradient and element.background is None:
            text_image = gradient_image(gradient, width, height)
        else:
            text_image = np.zeros((height, width, 3), dtype=np.uint8)
            text_image[:] = element.text_color
        _blend(canvas, text_image, mask, x, y)


def _draw_stroke(canvas, stroke):
    owner = stroke.parent
    if not isinstance(owner, GuiObject) or stroke.thickness == 0:
        return
    t = stroke.thickness
    width, height = owner.size
    x, y = owner.absolute_position
    outer_w, outer_h = width + 2 * t, height + 2 * t

    mask = np.full((outer_h, outer_w), 255, dtype=np.uint8)
    cv2.rectangle(mask, (t, t), (t + width - 1, t + height - 1), 0, -1)

    gradient = stroke.find_gradient()
    if gradient is not None and gradient.color is not None:
        image = gradient_image(gradient, outer_w, outer_h)
    else:
        image = np.zeros((outer_h, outer_w, 3), dtype=np.uint8)
        image[:] = stroke.color
    _blend(canvas, image, mask, x - t, y - t)


def _draw(canvas, node):
    if isinstance(node, GuiObject):
        if not node.visible:
            return
        _draw_gui_object(canvas, node)
    elif isinstance(node, UIStroke):
        _draw_stroke(canvas, node)
    elif isinstance(node, UIGradient):
        return
    for child in node.children:
        _draw(canvas, child)


def render_scene(root, size, background=(0, 0, 0)):
    """
    Render every attached element under ``root`` onto a new canvas.

    Args:
        root: ScreenGui (or any instance) whose subtree is drawn
        size: (width, height) of the canvas
        background: RGB color of the empty canvas

    Returns:
        uint8 RGB frame of shape (height, width, 3)
    """
    width, height = size
    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    canvas[:] = background
    if root.is_attached():
        for child in root.children:
            _draw(canvas, child)
    return canvas
