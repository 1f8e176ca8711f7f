"""
O - Open-Closed: open for extension, closed for modification.

ProductFilter grows a new method for every criterion (and every
combination of criteria). The specification based BetterFilter never
changes; new criteria are new Specification classes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List


class Color(Enum):
    BLACK = "black"
    BLUE = "blue"
    METALLIC = "metallic"


class Size(Enum):
    SMALL = "S"
    MEDIUM = "M"
    LARGE = "L"


@dataclass
class Product:
    name: str
    color: Color
    size: Size


class ProductFilter:
    """Filter that has to be modified for every new criterion."""

    def filter_by_size(self, products: Iterable[Product], size: Size) -> List[Product]:
        return [p for p in products if p.size == size]

    def filter_by_color(self, products: Iterable[Product], color: Color) -> List[Product]:
        return [p for p in products if p.color == color]

    # filter_by_size_and_color, filter_by_size_or_color, ...


class Specification(ABC):
    """A predicate over items, combinable with ``&``."""

    @abstractmethod
    def is_satisfied(self, item) -> bool:
        pass

    def __and__(self, other: 'Specification') -> 'AndSpecification':
        return AndSpecification(self, other)


class ColorSpecification(Specification):
    def __init__(self, color: Color):
        self.color = color

    def is_satisfied(self, item) -> bool:
        return item.color == self.color


class SizeSpecification(Specification):
    def __init__(self, size: Size):
        self.size = size

    def is_satisfied(self, item) -> bool:
        return item.size == self.size


class AndSpecification(Specification):
    """Combinator satisfied only when every wrapped specification is."""

    def __init__(self, *specifications: Specification):
        self.specifications = specifications

    def is_satisfied(self, item) -> bool:
        return all(spec.is_satisfied(item) for spec in self.specifications)


class Filter(ABC):
    @abstractmethod
    def filter(self, items: Iterable, spec: Specification) -> Iterator:
        pass


class BetterFilter(Filter):
    def filter(self, items: Iterable, spec: Specification) -> Iterator:
        for item in items:
            if spec.is_satisfied(item):
                yield item


def _names(products: Iterable[Product]) -> str:
    return ", ".join(p.name for p in products)


def run():
    print("\nOpen-Closed\n")

    products = [
        Product("Little Black Dress", Color.BLACK, Size.SMALL),
        Product("Sword of Isildur", Color.METALLIC, Size.LARGE),
        Product("BMW M3 GTR", Color.BLACK, Size.LARGE),
    ]
    for product in products:
        print(f"{product.name} | {product.color.value} | {product.size.value}")

    # before
    pf = ProductFilter()
    print(f"[B] Large Products: {_names(pf.filter_by_size(products, Size.LARGE))}")
    print(f"[B] Black Products: {_names(pf.filter_by_color(products, Color.BLACK))}")

    # after
    bf = BetterFilter()
    large = SizeSpecification(Size.LARGE)
    black = ColorSpecification(Color.BLACK)
    print(f"[G] Large Products: {_names(bf.filter(products, large))}")
    print(f"[G] Black Products: {_names(bf.filter(products, black))}")
    print(f"[G] Large Black Products: {_names(bf.filter(products, large & black))}")
