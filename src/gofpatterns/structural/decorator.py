"""
Decorator: dynamically add behaviour to an object without altering its
class.

New functionality stays separate from the component and the component's
class is never reopened.
"""

from abc import ABC, abstractmethod


class Pizza(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def price(self) -> int:
        pass

    @abstractmethod
    def component(self) -> str:
        pass


class _OriginPizza(Pizza):
    origin = ""

    def __init__(self, name: str, price: int):
        self._name = name
        self._price = price

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> int:
        return self._price

    def component(self) -> str:
        return self.origin


class ItalianPizza(_OriginPizza):
    origin = "Italian"


class BulgarianPizza(_OriginPizza):
    origin = "Bulgarian"


class PizzaDecorator(Pizza):
    topping = ""

    def __init__(self, pizza: Pizza, price: int):
        self.pizza = pizza
        self.topping_price = price

    @property
    def name(self) -> str:
        return f"{self.pizza.name}, with {self.topping}"

    @property
    def price(self) -> int:
        return self.pizza.price + self.topping_price

    def component(self) -> str:
        return f"{self.topping}({self.pizza.component()})"


class CheesePizza(PizzaDecorator):
    topping = "Cheese"


class TomatoPizza(PizzaDecorator):
    topping = "Tomatoes"


def run():
    print("\nDecorator\n")

    banica = CheesePizza(BulgarianPizza("Banica", 16), 3)
    print(f"{banica.name} ${banica.price}")
    print(banica.component())

    margherita = TomatoPizza(CheesePizza(ItalianPizza("Margherita", 20), 4), 3)
    print(f"{margherita.name} ${margherita.price}")
    print(margherita.component())
