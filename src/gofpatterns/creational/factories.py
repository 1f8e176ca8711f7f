"""
Factories: components responsible solely for the wholesale (not
piecewise) creation of objects.

Object creation can be outsourced to:
- a separate function (factory function / factory method)
- a separate class (factory)
- a hierarchy of factories (abstract factory)

Factories can also keep track of what they created, which enables bulk
replacement of already handed-out objects.
"""

import logging
import math
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

logger = logging.getLogger('GoFPatterns.Factories')


# -- Factory function / interface factory

class Introducer(ABC):
    @abstractmethod
    def introduce(self) -> str:
        pass


class FrenchPerson(Introducer):
    def __init__(self, first_name: str, last_name: str):
        self.first_name = first_name
        self.last_name = last_name
        self.nationality = "French"

    def introduce(self) -> str:
        text = f"My name is {self.first_name} {self.last_name}, I'm {self.nationality}!"
        print(text)
        return text


def new_french_person(first_name: str, last_name: str) -> FrenchPerson:
    return FrenchPerson(first_name, last_name)


def new_introducer(first_name: str, last_name: str) -> Introducer:
    """Factory that only exposes the Introducer interface to callers."""
    return FrenchPerson(first_name, last_name)


# -- Factory generators

class Department(Enum):
    MARKETING = "marketing"
    ENGINEERING = "engineering"


class Role(Enum):
    MARKETING_ANALYST = "marketing analyst"
    SOFTWARE_ENGINEER = "software engineer"


@dataclass
class Employee:
    name: str
    department: Department
    role: Role

    def __str__(self):
        return f"Name: {self.name} | Department: {self.department.value} | Role: {self.role.value}"


class EmployeeFactory:
    """Structural factory generator: the configuration lives on the instance."""

    def __init__(self, department: Department, role: Role):
        self.department = department
        self.role = role

    def create(self, name: str) -> Employee:
        return Employee(name, self.department, self.role)


def employee_factory(department: Department, role: Role) -> Callable[[str], Employee]:
    """Functional factory generator: the configuration lives in a closure."""
    def create(name: str) -> Employee:
        return Employee(name, department, role)
    return create


_ROLE_DEPARTMENTS = {
    Role.MARKETING_ANALYST: Department.MARKETING,
    Role.SOFTWARE_ENGINEER: Department.ENGINEERING,
}


def new_employee_for_role(role: Role) -> Employee:
    """Prototype factory: a preconfigured employee with an empty name."""
    if role not in _ROLE_DEPARTMENTS:
        raise ValueError(f"invalid role: {role!r}")
    return Employee("", _ROLE_DEPARTMENTS[role], role)


# -- Factory methods, factory class and inner factory

class Point:
    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y

    @classmethod
    def new_cartesian(cls, x: float, y: float) -> 'Point':
        return cls(x, y)

    @classmethod
    def new_polar(cls, rho: float, theta: float) -> 'Point':
        return cls(rho * math.cos(theta), rho * math.sin(theta))

    def __str__(self):
        return f"x: {self.x:.2f}, y: {self.y:.2f}"

    class _Factory:
        """Inner factory, reachable as ``Point.factory``."""

        @staticmethod
        def new_cartesian(x: float, y: float) -> 'Point':
            return Point(x, y)

        @staticmethod
        def new_polar(rho: float, theta: float) -> 'Point':
            return Point(rho * math.cos(theta), rho * math.sin(theta))

    factory = _Factory()


class PointFactory:
    """Separates point construction from point behaviour."""

    @staticmethod
    def new_cartesian(x: float, y: float) -> Point:
        return Point(x, y)

    @staticmethod
    def new_polar(rho: float, theta: float) -> Point:
        return Point(rho * math.cos(theta), rho * math.sin(theta))


# -- Abstract factory

class HotDrink(ABC):
    @abstractmethod
    def consume(self) -> str:
        pass


class Tea(HotDrink):
    def __init__(self, amount: int):
        self.amount = amount

    def consume(self) -> str:
        text = f"This tea is delicious ({self.amount}ml)"
        print(text)
        return text


class Coffee(HotDrink):
    def __init__(self, amount: int):
        self.amount = amount

    def consume(self) -> str:
        text = f"This coffee is delicious ({self.amount}ml)"
        print(text)
        return text


class HotDrinkFactory(ABC):
    @abstractmethod
    def prepare(self, amount: int) -> HotDrink:
        pass


class TeaFactory(HotDrinkFactory):
    def prepare(self, amount: int) -> HotDrink:
        print(f"Put in tea bag, boil water, pour {amount}ml, enjoy!")
        return Tea(amount)


class CoffeeFactory(HotDrinkFactory):
    def prepare(self, amount: int) -> HotDrink:
        print(f"Grind some beans, boil water, pour {amount}ml, enjoy!")
        return Coffee(amount)


class HotDrinkMachine:
    """Discovers every concrete HotDrinkFactory subclass at construction."""

    def __init__(self):
        self.factories: List[Tuple[str, HotDrinkFactory]] = []
        for factory_class in HotDrinkFactory.__subclasses__():
            name = factory_class.__name__.replace('Factory', '')
            self.factories.append((name, factory_class()))
        logger.debug("Discovered %d drink factories", len(self.factories))

    def available_drinks(self) -> List[str]:
        return [name for name, _ in self.factories]

    def make_drink(self, index: int, amount: int) -> HotDrink:
        if not 0 <= index < len(self.factories):
            raise IndexError(f"no drink at index {index}, choose 0-{len(self.factories) - 1}")
        name, factory = self.factories[index]
        logger.debug("Preparing %s", name)
        return factory.prepare(amount)


# -- Object tracking and bulk replacement

class ThemeColor(Enum):
    LIGHT = "light"
    DARK = "dark"


class Theme(ABC):
    origin = "unknown"
    text_color = ""
    bg_color = ""


class LightTheme(Theme):
    origin = "light"
    text_color = "#222"
    bg_color = "#fff"


class DarkTheme(Theme):
    origin = "dark"
    text_color = "#ffe"
    bg_color = "#444"


def _create_theme(color: ThemeColor) -> Theme:
    if color == ThemeColor.DARK:
        return DarkTheme()
    if color == ThemeColor.LIGHT:
        return LightTheme()
    raise ValueError(f"unknown theme color: {color!r}")


def _describe(theme: Theme) -> str:
    return f"Origin: {theme.origin} | Text: {theme.text_color} | BG: {theme.bg_color}"


class TrackingThemeFactory:
    """Keeps weak references to every theme it created."""

    def __init__(self):
        self._refs: List[weakref.ref] = []

    def create_theme(self, color: ThemeColor) -> Theme:
        theme = _create_theme(color)
        self._refs.append(weakref.ref(theme))
        return theme

    def _live_themes(self) -> List[Theme]:
        self._refs = [ref for ref in self._refs if ref() is not None]
        return [ref() for ref in self._refs]

    def info(self) -> str:
        return "".join(_describe(theme) + "\n" for theme in self._live_themes())


class Ref:
    """Mutable holder so a factory can swap what callers point at."""

    def __init__(self, value):
        self.value = value


class ReplaceableThemeFactory:
    def __init__(self):
        self._refs: List[weakref.ref] = []

    def create_theme(self, color: ThemeColor) -> Ref:
        ref = Ref(_create_theme(color))
        self._refs.append(weakref.ref(ref))
        return ref

    def _live_refs(self) -> List[Ref]:
        self._refs = [weak for weak in self._refs if weak() is not None]
        return [weak() for weak in self._refs]

    def replace_themes(self, color: ThemeColor) -> None:
        for ref in self._live_refs():
            ref.value = _create_theme(color)

    def info(self) -> str:
        return "".join(_describe(ref.value) + "\n" for ref in self._live_refs())


def run():
    print("\nFactories\n")

    # factory function
    new_french_person("Charles", "de Gaulle").introduce()
    # interface factory
    new_introducer("Jeanne", "d'Arc").introduce()

    # factory generators
    marketing = EmployeeFactory(Department.MARKETING, Role.MARKETING_ANALYST)
    engineering = employee_factory(Department.ENGINEERING, Role.SOFTWARE_ENGINEER)
    prototype = new_employee_for_role(Role.SOFTWARE_ENGINEER)
    prototype.name = "Jane"
    for employee in (marketing.create("Anna"), engineering("Tom"), prototype):
        print(employee)

    # factory methods
    print(Point.new_cartesian(5.0, 5.0))
    print(PointFactory.new_polar(1.0, math.pi / 2))
    print(Point.factory.new_polar(2.0, math.pi))

    # abstract factory
    machine = HotDrinkMachine()
    print("Available drinks: " + ", ".join(machine.available_drinks()))
    machine.make_drink(0, 200).consume()

    # object tracking
    tracking = TrackingThemeFactory()
    light = tracking.create_theme(ThemeColor.LIGHT)
    dark = tracking.create_theme(ThemeColor.DARK)
    print(tracking.info(), end="")

    # bulk replacement
    replaceable = ReplaceableThemeFactory()
    first = replaceable.create_theme(ThemeColor.LIGHT)
    second = replaceable.create_theme(ThemeColor.DARK)
    print(replaceable.info(), end="")
    replaceable.replace_themes(ThemeColor.LIGHT)
    print(replaceable.info(), end="")
