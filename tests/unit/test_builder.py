"""
Tests for the builder variants.
"""

import pytest

from gofpatterns.creational import builder
from gofpatterns.creational.builder import (
    CarBuilder, CarType, CatBuilder, CodeBuilder, EmployeeBuilder, MOCK_QUERY_RESULT,
    Person, QueryBuilder, QueryBuilderError,
)


class TestQueryBuilder:
    def test_fluent_query(self):
        qb = QueryBuilder()
        result = qb.from_("users").select("user.name").where("user.id = ?", "abc_123").find()
        assert result == MOCK_QUERY_RESULT
        assert qb.query == "FROM users SELECT user.name WHERE user.id = abc_123;"

    def test_multiple_placeholders(self):
        qb = QueryBuilder().where("a = ? AND b = ?", "1", "2")
        assert qb.query == "WHERE a = 1 AND b = 2"

    def test_missing_argument_resets_and_raises(self):
        qb = QueryBuilder().from_("users")
        with pytest.raises(QueryBuilderError, match="missing argument"):
            qb.where("a = ? AND b = ?", "1")
        assert qb.query == ""

    def test_query_builder_error_is_value_error(self):
        assert issubclass(QueryBuilderError, ValueError)


def test_code_builder():
    code = CodeBuilder("Person").add_field("name", "str").add_field("age", "int")
    assert str(code) == "class Person:\n    name: str\n    age: int"
    assert str(CodeBuilder("Empty")) == "class Empty:\n    pass"


def test_builder_inheritance():
    person = Person.new().called("Tommy").works_as("Creator").build()
    assert str(person) == "Name: Tommy | Position: Creator"


class TestStepwiseBuilder:
    def test_build_car(self):
        car = CarBuilder.create().of_type(CarType.SEDAN).with_wheels(15).build()
        assert str(car) == "Type: Sedan | WheelSize: 15"

    @pytest.mark.parametrize("car_type,size", [(CarType.SEDAN, 19), (CarType.CROSSOVER, 15)])
    def test_invalid_wheel_size(self, car_type, size):
        with pytest.raises(ValueError):
            CarBuilder.create().of_type(car_type).with_wheels(size)


def test_functional_builder_extension():
    cat = CatBuilder().called("Tom").likes("to chase Jerry").build()
    assert str(cat) == "Name: Tom | Hobby: to chase Jerry"


def test_functional_builder_builds_fresh_subject_each_time():
    cat_builder = CatBuilder().called("Tom")
    assert cat_builder.build() is not cat_builder.build()


def test_faceted_builder():
    employee = (EmployeeBuilder()
                .lives.at("501 N VIRGIL").in_city("Los Angeles").with_postal_code("90004")
                .works.at_company("Hufflepuff").as_position("Puffmaker").earning(123000)
                .build())
    assert str(employee) == (
        "Address: 501 N VIRGIL, Los Angeles 90004 | Job: Hufflepuff as Puffmaker earning 123000"
    )


def test_run(capsys):
    builder.run()
    out = capsys.readouterr().out
    assert "Query: FROM users SELECT user.name WHERE user.id = abc_123; Result: Rickiest Rick of all Ricks" in out
    assert "error occurred: missing argument" in out
    assert "Type: Sedan | WheelSize: 15" in out
