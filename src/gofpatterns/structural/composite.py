"""
Composite: compose zero or more similar objects so they can be
manipulated as one object.

Individual objects and compositions of them are treated uniformly.
"""

from collections.abc import Iterable
from typing import List


# -- File system tree

class Component:
    def __init__(self, name: str):
        self.name = name

    def add(self, component: 'Component') -> None:
        pass

    def remove(self, component: 'Component') -> None:
        pass


class File(Component):
    """Leaf; add and remove are no-ops."""


class Directory(Component):
    def __init__(self, name: str):
        super().__init__(name)
        self.children: List[Component] = []

    def add(self, component: Component) -> None:
        self.children.append(component)

    def remove(self, component: Component) -> None:
        if component in self.children:
            self.children.remove(component)

    def _list(self, lines: List[str], depth: int) -> None:
        lines.append(f"{' ' * depth}/{self.name}")
        for child in self.children:
            if isinstance(child, Directory):
                child._list(lines, depth + 1)
            else:
                lines.append(f"{' ' * (depth + 1)}/{child.name}")

    def __str__(self):
        lines: List[str] = []
        self._list(lines, 0)
        return "".join(line + "\n" for line in lines)


# -- Neural network: a single neuron and a layer share connect_to

class Connectable(Iterable):
    def connect_to(self, other: Iterable) -> None:
        if self is other:
            return
        for source in self:
            for target in other:
                source.outputs.append(target)
                target.inputs.append(source)


class Neuron(Connectable):
    def __init__(self, value: float = 0.0):
        self.value = value
        self.inputs: List['Neuron'] = []
        self.outputs: List['Neuron'] = []

    def __iter__(self):
        yield self


class NeuronLayer(list, Connectable):
    def __init__(self, count: int = 0):
        super().__init__(Neuron() for _ in range(count))


def run():
    print("\nComposite\n")

    developer = Directory("Developer")
    projects = Directory("projects")
    patterns = Directory("gof-design-patterns")
    structures = Directory("data-structures")

    for name in ("adapter.py", "builder.py", "composite.py"):
        patterns.add(File(name))
    for name in ("binary_tree.py", "graph.py"):
        structures.add(File(name))

    projects.add(structures)
    projects.add(patterns)
    developer.add(projects)
    print(developer, end="")

    n1, n2 = Neuron(), Neuron()
    l1, l2 = NeuronLayer(3), NeuronLayer(4)

    n1.connect_to(n2)
    n2.connect_to(l1)
    l2.connect_to(n1)
    l1.connect_to(l2)
    l1.connect_to(l1)

    print(f"n1 in: {len(n1.inputs)} out: {len(n1.outputs)}")
    print(f"l1[0] in: {len(l1[0].inputs)} out: {len(l1[0].outputs)}")
