"""
Prototype: create objects by cloning an existing object.

Complicated objects are rarely designed from scratch; an existing,
partially or fully constructed object is copied (deep clone) and then
customized. Cloning must be convenient.
"""

import json
import pickle
from typing import List, Optional


class Address:
    def __init__(self, city: str, street: str):
        self.city = city
        self.street = street

    def copy(self) -> 'Address':
        return Address(self.city, self.street)

    def to_dict(self) -> dict:
        return {'city': self.city, 'street': self.street}


class Person:
    def __init__(self, name: str, address: Address, friends: Optional[List[str]] = None):
        self.name = name
        self.address = address
        self.friends = list(friends or [])

    def copy(self) -> 'Person':
        """Deep copy written by hand, every nested object copies itself."""
        return Person(self.name, self.address.copy(), list(self.friends))

    def copy_via_json(self) -> 'Person':
        data = json.loads(json.dumps({
            'name': self.name,
            'address': self.address.to_dict(),
            'friends': self.friends,
        }))
        return Person(data['name'], Address(**data['address']), data['friends'])

    def copy_via_pickle(self) -> 'Person':
        return pickle.loads(pickle.dumps(self))

    def __str__(self):
        return (f"Name: {self.name} | City: {self.address.city} | "
                f"Street: {self.address.street} | Friends: {', '.join(self.friends)}")


# prototype used by the factory below
LONDON_PERSON = Person("", Address("London", ""))


def new_london_person(name: str, street: str) -> Person:
    person = LONDON_PERSON.copy_via_json()
    person.name = name
    person.address.street = street
    return person


def run():
    print("\nPrototype\n")

    p1 = Person("Sherlock", Address("Belfast", "Baker Street"), ["Dr John H. Watson"])

    p2 = p1.copy()
    p2.address.city = "Brighton"
    p2.friends.append("Mrs Hudson")

    p3 = p2.copy_via_pickle()
    p3.address.city = "Birmingham"
    p3.friends.append("Molly Hooper")

    p4 = new_london_person("Sherlock", "Baker Street")
    p4.friends = p3.friends + ["Greg Lestrade"]

    for person in (p1, p2, p3, p4):
        print(person)
