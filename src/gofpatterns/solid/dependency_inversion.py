"""
D - Dependency Inversion.

1. High-level modules should not depend on low-level modules; both
   should depend on abstractions.
2. Abstractions should not depend on details; details should depend on
   abstractions.

Research (high level) only knows the RelationshipBrowser abstraction, so
Relationships (low level) is free to change how it stores kinships.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List, Tuple


class Relationship(Enum):
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"


class Person:
    def __init__(self, name: str):
        self.name = name


class RelationshipBrowser(ABC):
    @abstractmethod
    def find_all_children_of(self, name: str) -> Iterator[str]:
        pass

    @abstractmethod
    def find_all_siblings_of(self, name: str) -> Iterator[str]:
        pass


class Relationships(RelationshipBrowser):
    """Low-level storage of kinships."""

    def __init__(self):
        self.relations: List[Tuple[Person, Relationship, Person]] = []

    def add_parent_and_child(self, parent: Person, child: Person):
        self.relations.append((parent, Relationship.PARENT, child))
        self.relations.append((child, Relationship.CHILD, parent))

    def add_siblings(self, first: Person, second: Person):
        self.relations.append((first, Relationship.SIBLING, second))
        self.relations.append((second, Relationship.SIBLING, first))

    def _find(self, name: str, relationship: Relationship) -> Iterator[str]:
        for source, rel, target in self.relations:
            if source.name == name and rel == relationship:
                yield target.name

    def find_all_children_of(self, name: str) -> Iterator[str]:
        return self._find(name, Relationship.PARENT)

    def find_all_siblings_of(self, name: str) -> Iterator[str]:
        return self._find(name, Relationship.SIBLING)


class Research:
    """High-level module, depends on the browser abstraction only."""

    def __init__(self, browser: RelationshipBrowser):
        self.browser = browser

    def report_children(self, name: str) -> List[str]:
        lines = [f"{name} is a {Relationship.PARENT.value} of {child}"
                 for child in self.browser.find_all_children_of(name)]
        for line in lines:
            print(line)
        return lines

    def report_siblings(self, name: str) -> List[str]:
        lines = [f"{name} is a {Relationship.SIBLING.value} of {sibling}"
                 for sibling in self.browser.find_all_siblings_of(name)]
        for line in lines:
            print(line)
        return lines


# Chores depend on anything that can be assigned work.

class Assignable(ABC):
    name: str

    @abstractmethod
    def work(self) -> bool:
        pass


class Worker(Assignable):
    def __init__(self, name: str):
        if not name:
            raise ValueError("name is required")
        self.name = name

    def work(self) -> bool:
        return True


class Robot(Assignable):
    def __init__(self, name: str):
        if not name:
            raise ValueError("name is required")
        self.name = name

    def work(self) -> bool:
        return True


class Chore:
    def __init__(self, description: str, assignee: Assignable):
        if not description:
            raise ValueError("description is required")
        if assignee is None:
            raise ValueError("assignee is required")
        self.description = description
        self.assignee = assignee
        self.done = False

    def complete(self):
        self.done = self.assignee.work()

    def __str__(self):
        return f"--\nChore: {self.description}\nAssignee: {self.assignee.name}\nDone: {self.done}\n--"


def run():
    print("\nDependency Inversion\n")

    dad = Person("Anakin Skywalker")
    son = Person("Luke Skywalker")
    daughter = Person("Leia Amidala Skywalker")

    relationships = Relationships()
    relationships.add_parent_and_child(dad, son)
    relationships.add_parent_and_child(dad, daughter)
    relationships.add_siblings(son, daughter)

    research = Research(relationships)
    research.report_children(dad.name)
    research.report_siblings(son.name)

    moon = Chore("Go to the moon!", Worker("Tom"))
    beach = Chore("Go to the beach!", Robot("Jerry"))
    moon.complete()
    print(moon)
    print(beach)
