"""
Flyweight: reduce the cost of creating and manipulating a large number
of similar objects.

Intrinsic state (a figure's name and lines) is shared; extrinsic state
(color, position) is passed in on every call.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float


class Figure(ABC):
    def __init__(self, name: str):
        self.name = name
        self.lines: List[Line] = []

    def add_line(self, line: Line) -> None:
        self.lines.append(line)

    def draw(self, color: str, x: float, y: float) -> None:
        print(f"Drawing {color} {self.name} at position x:{x} y:{y}.")


class SquareFigure(Figure):
    pass


class TriangleFigure(Figure):
    pass


class CustomFigure(Figure):
    pass


class FigureFactory:
    """Hands out one shared Figure per name."""

    def __init__(self):
        self.figures: Dict[str, Figure] = {}

        square = SquareFigure("square")
        for line in (Line(0, 0, 5, 0), Line(0, 5, 5, 5), Line(0, 0, 0, 5), Line(5, 0, 5, 5)):
            square.add_line(line)
        self.figures[square.name] = square

        triangle = TriangleFigure("triangle")
        for line in (Line(0, 0, 0, 5), Line(0, 0, 5, 0), Line(0, 5, 5, 0)):
            triangle.add_line(line)
        self.figures[triangle.name] = triangle

    def get_figure(self, name: str) -> Figure:
        if name in self.figures:
            print(f"reused {name} figure")
            return self.figures[name]

        figure = CustomFigure(name)
        self.figures[name] = figure
        print(f"created new {name} figure")
        return figure

    def __str__(self):
        return "\n".join(self.figures)


# -- Text formatting: ranges over one shared string instead of a flag per char

class FormattedText:
    class TextRange:
        def __init__(self, start: int, end: int, capitalize: bool = False):
            self.start = start
            self.end = end
            self.capitalize = capitalize

        def covers(self, position: int) -> bool:
            return self.start <= position <= self.end

    def __init__(self, plain_text: str):
        self.plain_text = plain_text
        self.formatting: List['FormattedText.TextRange'] = []

    def get_range(self, start: int, end: int) -> 'FormattedText.TextRange':
        text_range = self.TextRange(start, end)
        self.formatting.append(text_range)
        return text_range

    def __str__(self):
        chars = []
        for i, c in enumerate(self.plain_text):
            if any(r.covers(i) and r.capitalize for r in self.formatting):
                c = c.upper()
            chars.append(c)
        return "".join(chars)


def run():
    print("\nFlyweight\n")

    factory = FigureFactory()
    position = 0.0
    for name in ("square", "triangle", "portrait", "rainbow"):
        first, second = factory.get_figure(name), factory.get_figure(name)
        position += 1
        first.draw("blue", position, position)
        position += 1
        second.draw("red", position, position)

    print(factory)

    text = FormattedText("This is a brave new world")
    text.get_range(10, 15).capitalize = True
    print(text)
