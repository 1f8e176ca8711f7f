"""
L - Liskov Substitution: a subtype must be usable wherever its base type is.

A Square that inherits from a mutable Rectangle breaks code written
against Rectangle, because setting one side silently changes the other.
Modelling both as immutable shapes with an area keeps them substitutable.
"""

from abc import ABC, abstractmethod


class Rectangle:
    def __init__(self, width: int = 0, height: int = 0):
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int):
        self._width = value

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int):
        self._height = value

    @property
    def area(self) -> int:
        return self._width * self._height

    def __str__(self):
        return f"Width: {self.width}, Height: {self.height}"


class Square(Rectangle):
    """Keeps both sides equal, which is exactly what breaks substitution."""

    def __init__(self, size: int = 0):
        super().__init__(size, size)

    @Rectangle.width.setter
    def width(self, value: int):
        self._width = self._height = value

    @Rectangle.height.setter
    def height(self, value: int):
        self._width = self._height = value


def use_it(rc: Rectangle) -> tuple:
    """Return (expected, actual) area after stretching the height to 10."""
    w = rc.width
    rc.height = 10
    return w * 10, rc.area


class Shape(ABC):
    @property
    @abstractmethod
    def area(self) -> int:
        pass


class Rect(Shape):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    @property
    def area(self) -> int:
        return self.width * self.height


class Sq(Shape):
    def __init__(self, side: int):
        self.side = side

    @property
    def area(self) -> int:
        return self.side * self.side


def run():
    print("\nLiskov Substitution\n")

    rc = Rectangle(2, 3)
    expected, actual = use_it(rc)
    print(f"{rc} | Expected area: {expected} | Got: {actual}")

    sq = Square(5)
    expected, actual = use_it(sq)
    print(f"{sq} | Expected area: {expected} | Got: {actual}")

    for shape in (Rect(2, 5), Sq(5)):
        print(f"{type(shape).__name__} area: {shape.area}")
