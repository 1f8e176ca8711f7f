"""
Singleton: restrict object creation for a class to a single instance.

For some components it only makes sense to have one instance in the
system (a repository, a factory), or construction is expensive and every
consumer should share the same instance.

Also shown: why a hard dependency on a singleton hurts testing, the
monostate variant, and an ambient context.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger('GoFPatterns.Singleton')

CITY_POPULATIONS = {
    "Beijing": "21,542,000",
    "Tokyo": "13,929,286",
    "Kinshasa": "12,691,000",
    "Moscow": "12,506,468",
    "Jakarta": "10,075,310",
    "Seoul": "9,838,892",
    "Cairo": "9,848,576",
    "London": "8,908,081",
    "Tehran": "8,693,706",
    "Baghdad": "6,719,500",
}


class SingletonDatabase:
    """In-memory city population database, constructed once per process."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._load()
            cls._instance = instance
        return cls._instance

    def _load(self):
        print("Initializing database")
        self._connection = sqlite3.connect(':memory:')
        with self.connection() as conn:
            conn.execute("CREATE TABLE cities (name TEXT PRIMARY KEY, population TEXT NOT NULL)")
            conn.executemany("INSERT INTO cities VALUES (?, ?)", CITY_POPULATIONS.items())
        logger.debug("Loaded %d cities", len(CITY_POPULATIONS))

    @contextmanager
    def connection(self):
        """Yield the connection, committing on success."""
        conn = self._connection
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def get_population(self, city: str) -> str:
        with self.connection() as conn:
            row = conn.execute("SELECT population FROM cities WHERE name = ?", (city,)).fetchone()
        return row[0] if row else ""

    @classmethod
    def reset(cls):
        """Forget the instance; used by tests."""
        if cls._instance is not None:
            cls._instance._connection.close()
        cls._instance = None


def _to_int(population: str) -> int:
    return int(population.replace(",", "")) if population else 0


class SingletonRecordFinder:
    """Hard-wired to the real database, so tests depend on live data."""

    def total_population(self, cities: Iterable[str]) -> int:
        db = SingletonDatabase()
        return sum(_to_int(db.get_population(city)) for city in cities)


class ConfigurableRecordFinder:
    def __init__(self, db):
        self.db = db

    def total_population(self, cities: Iterable[str]) -> int:
        return sum(_to_int(self.db.get_population(city)) for city in cities)


class DummyDatabase:
    populations = {"alpha": "1", "beta": "2", "gamma": "3"}

    def get_population(self, city: str) -> str:
        return self.populations.get(city, "")


# -- Monostate: many instances, one shared state

class CityMonostate:
    _shared_state: Dict[str, str] = {}

    def __init__(self):
        self.__dict__ = self._shared_state
        self.__dict__.setdefault('city_name', "")
        self.__dict__.setdefault('population', "")

    def __str__(self):
        return f"City Name: {self.city_name} | Population: {self.population}"


# -- Ambient context

class BuildingContext:
    """Context manager whose innermost instance is visible to every Wall."""

    _stack: List['BuildingContext'] = []

    def __init__(self, wall_height: int):
        self.wall_height = wall_height

    @classmethod
    def current(cls) -> 'BuildingContext':
        return cls._stack[-1] if cls._stack else _DEFAULT_CONTEXT

    def __enter__(self):
        self._stack.append(self)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._stack.pop()
        return False


_DEFAULT_CONTEXT = BuildingContext(0)


class Point:
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y


class Wall:
    def __init__(self, start: Point, end: Point, height: Optional[int] = None):
        self.start = start
        self.end = end
        self.height = height if height is not None else BuildingContext.current().wall_height


class Building:
    def __init__(self):
        self.walls: List[Wall] = []

    def add_wall(self, wall: Wall):
        self.walls.append(wall)

    def __str__(self):
        return "".join(
            f"Start: {w.start.x},{w.start.y} End: {w.end.x},{w.end.y} Height: {w.height}\n"
            for w in self.walls
        )


def run():
    print("\nSingleton\n")

    db = SingletonDatabase()
    SingletonDatabase()  # same instance, no second initialization
    city = "Tokyo"
    print(f"City: {city} | Population {db.get_population(city)}")

    finder = ConfigurableRecordFinder(DummyDatabase())
    print(f"Dummy total population: {finder.total_population(['alpha', 'gamma'])}")

    # monostate
    first, second = CityMonostate(), CityMonostate()
    first.city_name = "London"
    first.population = "8,908,081"
    print(f"{first} | {second}")

    # ambient context
    building = Building()
    with BuildingContext(3000):
        building.add_wall(Wall(Point(0, 0), Point(5000, 0)))
        with BuildingContext(3500):
            building.add_wall(Wall(Point(0, 5000), Point(5000, 5000)))
        building.add_wall(Wall(Point(0, 0), Point(0, 5000)))
    print(building, end="")
