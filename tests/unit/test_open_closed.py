"""
Tests for product filtering with specifications.
"""

import pytest

from gofpatterns.solid import open_closed
from gofpatterns.solid.open_closed import (
    AndSpecification, BetterFilter, Color, ColorSpecification, Product,
    ProductFilter, Size, SizeSpecification,
)


@pytest.fixture
def products():
    return [
        Product("Little Black Dress", Color.BLACK, Size.SMALL),
        Product("Sword of Isildur", Color.METALLIC, Size.LARGE),
        Product("BMW M3 GTR", Color.BLACK, Size.LARGE),
    ]


def names(items):
    return [p.name for p in items]


def test_product_filter(products):
    pf = ProductFilter()
    assert names(pf.filter_by_size(products, Size.LARGE)) == ["Sword of Isildur", "BMW M3 GTR"]
    assert names(pf.filter_by_color(products, Color.BLACK)) == ["Little Black Dress", "BMW M3 GTR"]


def test_better_filter_single_specification(products):
    bf = BetterFilter()
    assert names(bf.filter(products, ColorSpecification(Color.METALLIC))) == ["Sword of Isildur"]


def test_and_operator_combines_specifications(products):
    spec = SizeSpecification(Size.LARGE) & ColorSpecification(Color.BLACK)
    assert isinstance(spec, AndSpecification)
    assert names(BetterFilter().filter(products, spec)) == ["BMW M3 GTR"]


def test_and_specification_accepts_many(products):
    spec = AndSpecification(
        SizeSpecification(Size.SMALL),
        ColorSpecification(Color.BLACK),
        ColorSpecification(Color.BLUE),
    )
    assert names(BetterFilter().filter(products, spec)) == []


def test_run(capsys):
    open_closed.run()
    out = capsys.readouterr().out
    assert "Little Black Dress | black | S" in out
    assert "[B] Large Products: Sword of Isildur, BMW M3 GTR" in out
    assert "[G] Black Products: Little Black Dress, BMW M3 GTR" in out
    assert "[G] Large Black Products: BMW M3 GTR" in out
