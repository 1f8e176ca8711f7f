"""
Bridge: decouple an abstraction from its implementation so the two can
vary independently.

Without it, shapes times renderers grows into a cartesian product of
classes (RasterCircle, VectorCircle, RasterSquare, ...).
"""

from abc import ABC, abstractmethod


class Renderer(ABC):
    """Implementor."""

    @abstractmethod
    def render_circle(self, radius: float) -> None:
        pass

    @abstractmethod
    def render_square(self, side: int) -> None:
        pass


class RasterRenderer(Renderer):
    def render_circle(self, radius: float) -> None:
        print(f"rendering circle as raster: {radius}")

    def render_square(self, side: int) -> None:
        print(f"rendering square as raster: {side}")


class VectorRenderer(Renderer):
    def render_circle(self, radius: float) -> None:
        print(f"rendering circle as vector: {radius}")

    def render_square(self, side: int) -> None:
        print(f"rendering square as vector: {side}")


class Shape(ABC):
    """Abstraction; holds the bridge to a renderer."""

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    @abstractmethod
    def render(self) -> None:
        pass

    @abstractmethod
    def resize(self, factor) -> None:
        pass


class Circle(Shape):
    def __init__(self, renderer: Renderer, radius: float):
        super().__init__(renderer)
        self.radius = radius

    def render(self) -> None:
        self.renderer.render_circle(self.radius)

    def resize(self, factor) -> None:
        self.radius *= factor


class Square(Shape):
    def __init__(self, renderer: Renderer, side: int):
        super().__init__(renderer)
        self.side = side

    def render(self) -> None:
        self.renderer.render_square(self.side)

    def resize(self, factor) -> None:
        self.side = int(self.side * factor)


def run():
    print("\nBridge\n")

    circle = Circle(RasterRenderer(), 5.0)
    square = Square(VectorRenderer(), 5)
    circle.render()
    square.render()

    circle.resize(2)
    circle.render()
