"""
Adapter: let types with incompatible interfaces work together by
wrapping an existing type in the interface that is required.

The printer only understands point based (raster) images. Vector images
are made of lines, so VectorToRasterAdapter rasterizes them into points.
Rasterizing is repeated for identical lines, so the adapter memoizes
points in a cache keyed by a content hash of each line.
"""

import hashlib
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

import numpy as np

logger = logging.getLogger('GoFPatterns.Adapter')


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Line:
    x1: int
    y1: int
    x2: int
    y2: int


class VectorImage:
    """Adaptee: an image made of lines."""

    def __init__(self, lines: Optional[List[Line]] = None):
        self.lines = list(lines or [])

    def add_line(self, line: Line):
        self.lines.append(line)


def new_line(length: int) -> VectorImage:
    """Diagonal line from the origin."""
    return VectorImage([Line(0, 0, length, length)])


def new_rectangle(width: int, height: int) -> VectorImage:
    w, h = width - 1, height - 1
    return VectorImage([
        Line(0, 0, w, 0),  # bottom
        Line(0, 0, 0, h),  # left
        Line(0, h, w, h),  # top
        Line(w, 0, w, h),  # right
    ])


class PointSource(ABC):
    """Target interface required by draw_image."""

    @abstractmethod
    def get_points(self) -> List[Point]:
        pass


class RasterImage(PointSource):
    def __init__(self, points: Optional[List[Point]] = None):
        self.points = list(points or [])

    def add_point(self, point: Point):
        self.points.append(point)

    def get_points(self) -> List[Point]:
        return self.points


def draw_image(source: PointSource) -> str:
    """
    Render points as text, one ``.`` per point.

    The canvas is sized by the largest coordinates. Rows are emitted top
    down so y grows upwards, and every row ends with a newline.

    Raises:
        ValueError: if a point has a negative coordinate
    """
    points = source.get_points()
    if not points:
        return ""

    negative = [p for p in points if p.x < 0 or p.y < 0]
    if negative:
        raise ValueError(f"cannot draw points with negative coordinates: {negative[0]}")

    max_x = max(p.x for p in points)
    max_y = max(p.y for p in points)
    canvas = np.full((max_y + 1, max_x + 1), ' ', dtype='<U1')
    for p in points:
        canvas[p.y, p.x] = '.'

    return "".join("".join(row) + "\n" for row in canvas[::-1])


class LinesCache:
    """Unbounded memo of rasterized lines keyed by an MD5 content hash."""

    def __init__(self):
        self.cache: Dict[str, List[Point]] = {}

    def get_sum(self, line: Line) -> str:
        payload = json.dumps(asdict(line), sort_keys=True).encode()
        return hashlib.md5(payload).hexdigest()

    def retrieve(self, line_sum: str) -> Optional[List[Point]]:
        return self.cache.get(line_sum)

    def store(self, line_sum: str, points: List[Point]) -> None:
        self.cache[line_sum] = points


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def rasterize(line: Line) -> List[Point]:
    """
    Convert a horizontal, vertical or 45 degree diagonal line to points.

    Endpoints are inclusive and either direction is accepted. Other
    slopes produce no points.
    """
    dx, dy = line.x2 - line.x1, line.y2 - line.y1
    if dx != 0 and dy != 0 and abs(dx) != abs(dy):
        logger.debug("Skipping non axis-aligned, non diagonal line %s", line)
        return []

    steps = max(abs(dx), abs(dy))
    step_x, step_y = _sign(dx), _sign(dy)
    return [Point(line.x1 + i * step_x, line.y1 + i * step_y) for i in range(steps + 1)]


class VectorToRasterAdapter(PointSource):
    def __init__(self, image: VectorImage, cache: LinesCache):
        self.cache = cache
        self.points: List[Point] = []
        for line in image.lines:
            self._add_line(line)

    def _add_line(self, line: Line):
        line_sum = self.cache.get_sum(line)
        points = self.cache.retrieve(line_sum)
        if points is not None:
            print("got points from cache")
            self.points.extend(points)
            return

        print("converting lines to points")
        points = rasterize(line)
        self.cache.store(line_sum, points)
        self.points.extend(points)

    def get_points(self) -> List[Point]:
        return self.points


# -- Generic value adapter: adapt a literal dimension to a vector type

class Vector:
    """
    Fixed size vector; subclasses bind the dimension and component type.

    Missing components default to zero and extra ones are dropped.
    """

    dimension = 0
    component_type = int

    def __init__(self, *values):
        data = [self.component_type(v) for v in values[:self.dimension]]
        data.extend(self.component_type(0) for _ in range(self.dimension - len(data)))
        self.data = data

    @classmethod
    def create(cls, *values) -> 'Vector':
        return cls(*values)

    def __getitem__(self, index: int):
        return self.data[index]

    def __setitem__(self, index: int, value):
        self.data[index] = self.component_type(value)

    def __add__(self, other: 'Vector') -> 'Vector':
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self.data, other.data)))

    def __eq__(self, other):
        return type(other) is type(self) and self.data == other.data

    def __str__(self):
        return "".join(f"{i} - {value} \n" for i, value in enumerate(self.data))


def make_vector_type(name: str, dimension: int, component_type: type) -> type:
    return type(name, (Vector,), {'dimension': dimension, 'component_type': component_type})


Vector2i = make_vector_type('Vector2i', 2, int)
Vector3f = make_vector_type('Vector3f', 3, float)


def run():
    print("\nAdapter\n")

    raster = RasterImage([
        Point(2, 1), Point(7, 1),
        Point(4, 2), Point(5, 2),
        Point(4, 3), Point(5, 3),
    ])
    print(draw_image(raster))

    rectangle = new_rectangle(10, 10)
    cache = LinesCache()
    adapter = VectorToRasterAdapter(rectangle, cache)
    VectorToRasterAdapter(rectangle, cache)
    print(draw_image(adapter))

    v1 = Vector2i()
    v1[0] = 2
    v1[1] = 2
    v2 = Vector2i(2, 2)
    print(v1 + v2, end="")

    vf = Vector3f.create(1.1, 2.2, 3.3)
    print(vf + vf, end="")
