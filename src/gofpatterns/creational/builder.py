"""
Builder: when piecewise object construction is complicated, provide an
API for doing it succinctly.

Some objects are simple and can be created in a single constructor call.
Others are not, and a constructor with a dozen arguments is not
productive. A builder constructs the object step by step.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

from ..error_handler_util import ErrorHandlerUtil, QueryBuilderError

logger = logging.getLogger('GoFPatterns.Builder')
errors = ErrorHandlerUtil.create_error_context('Builder')

MOCK_QUERY_RESULT = "Rickiest Rick of all Ricks"


# -- Builder with fluent interface

class QueryBuilder:
    """Builds a SQL-like query one clause at a time."""

    def __init__(self):
        self.query = ""

    def from_(self, table: str) -> 'QueryBuilder':
        self.query += f"FROM {table} "
        return self

    def select(self, columns: str) -> 'QueryBuilder':
        self.query += f"SELECT {columns} "
        return self

    def where(self, clause: str, *args: str) -> 'QueryBuilder':
        """
        Append a WHERE clause, replacing each ``?`` with the next argument.

        Raises:
            QueryBuilderError: if there are more placeholders than arguments.
                The query is reset before raising.
        """
        parts = clause.split("?")
        if len(parts) - 1 > len(args):
            self.query = ""
            errors.log_and_raise(
                f"missing argument for clause {clause!r}",
                exception_class=QueryBuilderError
            )
        filled = parts[0]
        for arg, part in zip(args, parts[1:]):
            filled += arg + part
        self.query += f"WHERE {filled}"
        return self

    def find(self) -> str:
        """Terminate the query and 'execute' it against a mock store."""
        self.query += ";"
        logger.debug("Executing %s", self.query)
        return MOCK_QUERY_RESULT


class CodeBuilder:
    def __init__(self, class_name: str):
        self.class_name = class_name
        self.fields: List[str] = []

    def add_field(self, name: str, type_name: str) -> 'CodeBuilder':
        self.fields.append(f"    {name}: {type_name}")
        return self

    def __str__(self):
        lines = [f"class {self.class_name}:"]
        lines.extend(self.fields or ["    pass"])
        return "\n".join(lines)


# -- Fluent interface and inheritance

class Person:
    def __init__(self):
        self.name: Optional[str] = None
        self.position: Optional[str] = None

    @staticmethod
    def new() -> 'PersonJobBuilder':
        return PersonJobBuilder()

    def __str__(self):
        return f"Name: {self.name} | Position: {self.position}"


class PersonBuilder:
    def __init__(self, person: Optional[Person] = None):
        self.person = person or Person()

    def build(self) -> Person:
        return self.person


class PersonInfoBuilder(PersonBuilder):
    def called(self, name: str):
        self.person.name = name
        return self


class PersonJobBuilder(PersonInfoBuilder):
    def works_as(self, position: str):
        self.person.position = position
        return self


# -- Stepwise builder

class CarType(Enum):
    SEDAN = "Sedan"
    CROSSOVER = "Crossover"


WHEEL_SIZES = {
    CarType.SEDAN: range(15, 18),
    CarType.CROSSOVER: range(17, 21),
}


class Car:
    def __init__(self):
        self.type: Optional[CarType] = None
        self.wheel_size = 0

    def __str__(self):
        return f"Type: {self.type.value} | WheelSize: {self.wheel_size}"


class CarBuilder:
    """Each step returns an object exposing only the next step."""

    class _SpecifyCarType:
        def __init__(self, car: Car):
            self._car = car

        def of_type(self, car_type: CarType) -> 'CarBuilder._SpecifyWheelSize':
            self._car.type = car_type
            return CarBuilder._SpecifyWheelSize(self._car)

    class _SpecifyWheelSize:
        def __init__(self, car: Car):
            self._car = car

        def with_wheels(self, size: int) -> 'CarBuilder._BuildCar':
            if size not in WHEEL_SIZES[self._car.type]:
                raise ValueError(f"invalid wheel size {size} for {self._car.type.value}")
            self._car.wheel_size = size
            return CarBuilder._BuildCar(self._car)

    class _BuildCar:
        def __init__(self, car: Car):
            self._car = car

        def build(self) -> Car:
            return self._car

    @staticmethod
    def create() -> '_SpecifyCarType':
        return CarBuilder._SpecifyCarType(Car())


# -- Functional builder

class Cat:
    def __init__(self):
        self.name: Optional[str] = None
        self.hobby: Optional[str] = None

    def __str__(self):
        return f"Name: {self.name} | Hobby: {self.hobby}"


class FunctionalBuilder:
    """Records actions and replays them on a fresh subject in build()."""

    subject_class = object

    def __init__(self):
        self._actions: List[Callable] = []

    def do(self, action: Callable):
        self._actions.append(action)
        return self

    def build(self):
        subject = self.subject_class()
        for action in self._actions:
            action(subject)
        return subject


class CatBuilder(FunctionalBuilder):
    subject_class = Cat

    def called(self, name: str) -> 'CatBuilder':
        return self.do(lambda cat: setattr(cat, 'name', name))


def likes(builder: CatBuilder, hobby: str) -> CatBuilder:
    """Extends CatBuilder without modifying it."""
    return builder.do(lambda cat: setattr(cat, 'hobby', hobby))


CatBuilder.likes = likes


# -- Faceted builder

class Employee:
    def __init__(self):
        # address
        self.street_address = None
        self.postcode = None
        self.city = None
        # employment
        self.company_name = None
        self.position = None
        self.annual_income = None

    def __str__(self):
        return (f"Address: {self.street_address}, {self.city} {self.postcode} | "
                f"Job: {self.company_name} as {self.position} earning {self.annual_income}")


class EmployeeBuilder:
    """Facade over the facet builders; every facet shares one employee."""

    def __init__(self, employee: Optional[Employee] = None):
        self.employee = employee if employee is not None else Employee()

    @property
    def lives(self) -> 'EmployeeAddressBuilder':
        return EmployeeAddressBuilder(self.employee)

    @property
    def works(self) -> 'EmployeeJobBuilder':
        return EmployeeJobBuilder(self.employee)

    def build(self) -> Employee:
        return self.employee


class EmployeeAddressBuilder(EmployeeBuilder):
    def at(self, street_address: str) -> 'EmployeeAddressBuilder':
        self.employee.street_address = street_address
        return self

    def in_city(self, city: str) -> 'EmployeeAddressBuilder':
        self.employee.city = city
        return self

    def with_postal_code(self, postcode: str) -> 'EmployeeAddressBuilder':
        self.employee.postcode = postcode
        return self


class EmployeeJobBuilder(EmployeeBuilder):
    def at_company(self, company_name: str) -> 'EmployeeJobBuilder':
        self.employee.company_name = company_name
        return self

    def as_position(self, position: str) -> 'EmployeeJobBuilder':
        self.employee.position = position
        return self

    def earning(self, annual_income: int) -> 'EmployeeJobBuilder':
        self.employee.annual_income = annual_income
        return self


def run():
    print("\nBuilder\n")

    qb = QueryBuilder()
    user = qb.from_("users").select("user.name").where("user.id = ?", "abc_123").find()
    print(f"Query: {qb.query} Result: {user}")

    try:
        QueryBuilder().from_("users").where("user.id = ? AND user.age > ?", "abc_123")
    except QueryBuilderError as e:
        print(f"error occurred: {e}")

    print(CodeBuilder("Person").add_field("name", "str").add_field("age", "int"))

    print(Person.new().called("Tommy").works_as("Creator").build())

    print(CarBuilder.create().of_type(CarType.SEDAN).with_wheels(15).build())

    print(CatBuilder().called("Tom").likes("to chase Jerry").build())

    employee = (EmployeeBuilder()
                .lives.at("501 N VIRGIL").in_city("Los Angeles").with_postal_code("90004-2315")
                .works.at_company("Hufflepuff").as_position("Puffmaker").earning(123000)
                .build())
    print(employee)
