from abc import ABC, abstractmethod


class GradientCapable(ABC):
    """
    Interface an element must implement to carry a rainbow loop.

    The element owns at most one gradient decoration. The decoration returned
    by ``find_gradient``/``create_gradient`` exposes mutable ``rotation`` and
    ``color`` attributes and a ``destroy()`` method.
    """

    @abstractmethod
    def find_gradient(self):
        """Return the element's existing gradient decoration, or None."""

    @abstractmethod
    def create_gradient(self, rotation, color):
        """Create and attach a new gradient decoration and return it."""

    @abstractmethod
    def is_attached(self):
        """True while the element still belongs to a live parent context."""
