"""
Tests for pizza decorators.
"""

from gofpatterns.structural import decorator
from gofpatterns.structural.decorator import BulgarianPizza, CheesePizza, ItalianPizza, TomatoPizza


def test_plain_pizza():
    pizza = ItalianPizza("Margherita", 20)
    assert (pizza.name, pizza.price, pizza.component()) == ("Margherita", 20, "Italian")


def test_stacked_decorators():
    pizza = TomatoPizza(CheesePizza(ItalianPizza("Margherita", 20), 4), 3)
    assert pizza.name == "Margherita, with Cheese, with Tomatoes"
    assert pizza.price == 27
    assert pizza.component() == "Tomatoes(Cheese(Italian))"


def test_decorator_leaves_wrapped_pizza_untouched():
    base = BulgarianPizza("Banica", 16)
    CheesePizza(base, 3)
    assert base.price == 16
    assert base.name == "Banica"


def test_run(capsys):
    decorator.run()
    out = capsys.readouterr().out
    assert "Banica, with Cheese $19\nCheese(Bulgarian)" in out
    assert "Margherita, with Cheese, with Tomatoes $27" in out
