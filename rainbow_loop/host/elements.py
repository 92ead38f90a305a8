"""
Element tree for the headless host.

Instances form a tree through ``parent``. Only elements whose ancestor chain
reaches a ScreenGui are attached (and drawn). GuiObject and UIStroke can carry
a UIGradient child, which is the decoration rainbow loops animate.
"""

from rainbow_loop.host.capability import GradientCapable
from rainbow_loop.host.signal import Signal


class Instance:
    def __init__(self, name=None, parent=None):
        self.name = name or type(self).__name__
        self.children = []
        self._parent = None
        self.destroyed = False
        if parent is not None:
            self.parent = parent

    @property
    def parent(self):
        return self._parent

    @parent.setter
    def parent(self, new_parent):
        if new_parent is self._parent:
            return
        if self.destroyed and new_parent is not None:
            raise ValueError(f"{self.name} has been destroyed and cannot be re-parented")
        if self._parent is not None:
            self._parent.children.remove(self)
        self._parent = new_parent
        if new_parent is not None:
            new_parent.children.append(self)

    def find_first_child_of_class(self, cls):
        for child in self.children:
            if isinstance(child, cls):
                return child
        return None

    def find_first_child(self, name):
        for child in self.children:
            if child.name == name:
                return child
        return None

    def descendants(self):
        for child in self.children:
            yield child
            yield from child.descendants()

    def is_attached(self):
        node = self._parent
        while node is not None:
            if isinstance(node, ScreenGui):
                return True
            node = node.parent
        return False

    def destroy(self):
        """Detach this instance and its whole subtree. Idempotent."""
        if self.destroyed:
            return
        for child in list(self.children):
            child.destroy()
        self.parent = None
        self.destroyed = True

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class ScreenGui(Instance):
    """Root of a drawable tree."""

    def is_attached(self):
        return not self.destroyed


class UIGradient(Instance):
    def __init__(self, rotation=0, color=None, parent=None, name=None):
        super().__init__(name=name, parent=parent)
        self.rotation = rotation
        self.color = color


class _GradientHost(GradientCapable):
    def find_gradient(self):
        return self.find_first_child_of_class(UIGradient)

    def create_gradient(self, rotation, color):
        return UIGradient(rotation=rotation, color=color, parent=self)


class GuiObject(Instance, _GradientHost):
    """
    Rectangular element.

    Args:
        position: (x, y) offset in pixels relative to the parent GuiObject
        size: (width, height) in pixels
        background: RGB fill, or None for a transparent background
    """

    def __init__(self, name=None, position=(0, 0), size=(0, 0), background=None, visible=True, parent=None):
        if size[0] < 0 or size[1] < 0:
            raise ValueError(f"Size must not be negative, got {size}")
        super().__init__(name=name, parent=parent)
        self.position = tuple(position)
        self.size = tuple(size)
        self.background = background
        self.visible = visible

    @property
    def absolute_position(self):
        x, y = self.position
        node = self.parent
        while isinstance(node, GuiObject):
            x += node.position[0]
            y += node.position[1]
            node = node.parent
        return x, y


class Frame(GuiObject):
    pass


class TextLabel(GuiObject):
    def __init__(self, name=None, text='', text_color=(255, 255, 255), text_scale=0.8, **kwargs):
        super().__init__(name=name, **kwargs)
        self.text = text
        self.text_color = text_color
        self.text_scale = text_scale


class TextButton(TextLabel):
    def __init__(self, name=None, **kwargs):
        super().__init__(name=name, **kwargs)
        self.clicked = Signal('Clicked')

    def click(self):
        """Deliver a click to everything connected to ``clicked``."""
        self.clicked.fire()

    def destroy(self):
        self.clicked.disconnect_all()
        super().destroy()


class UIStroke(Instance, _GradientHost):
    """Border drawn around the parent GuiObject."""

    def __init__(self, name=None, thickness=1, color=(255, 255, 255), parent=None):
        if thickness < 0:
            raise ValueError(f"Stroke thickness must not be negative, got {thickness}")
        super().__init__(name=name, parent=parent)
        self.thickness = thickness
        self.color = color
