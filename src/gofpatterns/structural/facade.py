"""
Facade: provide a simplified interface to a large body of code.

One point of interaction between a client and a complex system reduces
the number of dependencies the client has to know about.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

import numpy as np

from ..error_handler_util import ErrorHandlerUtil, MagicSquareError
from ..settings import get_magic_square_attempts

logger = logging.getLogger('GoFPatterns.Facade')
errors = ErrorHandlerUtil.create_error_context('Facade')


# -- IDE: editor, compiler, runtime and command line behind one call

class TextEditor:
    def __init__(self):
        self._saved: List[str] = []
        self._current = ""

    def write_text(self, text: str) -> str:
        self._current = (self._saved[-1] if self._saved else "") + text
        return self._current

    def save_text(self) -> str:
        self._saved.append(self._current)
        return self._saved[-1]


class Compiler:
    def compile(self, code: str) -> str:
        return f"compiled({code})"


class Runtime:
    def execute(self, binary: str) -> str:
        return f"executed({binary})"


class CommandLine:
    def output(self, result: str) -> None:
        print(f"output({result})")


class IDE(ABC):
    @abstractmethod
    def run(self, code: str) -> None:
        pass


class IDEFacade(IDE):
    def __init__(self, editor: TextEditor, compiler: Compiler, runtime: Runtime, cmd: CommandLine):
        self.editor = editor
        self.compiler = compiler
        self.runtime = runtime
        self.cmd = cmd

    def run(self, code: str) -> None:
        self.editor.write_text(code)
        source = self.editor.save_text()
        binary = self.compiler.compile(source)
        result = self.runtime.execute(binary)
        self.cmd.output(result)


class Developer:
    def __init__(self, tool: IDE):
        self.tool = tool

    def create_application(self, code: str) -> None:
        self.tool.run(code)


# -- Magic square: generator, splitter and verifier behind one call

class Generator:
    """Produces candidate squares holding the numbers 1..size*size."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def generate(self, size: int) -> np.ndarray:
        if size % 2 == 1:
            return self._siamese(size)
        return self.rng.permutation(size * size).reshape(size, size) + 1

    def _siamese(self, size: int) -> np.ndarray:
        square = np.zeros((size, size), dtype=int)
        row, col = 0, size // 2
        for value in range(1, size * size + 1):
            square[row, col] = value
            next_row, next_col = (row - 1) % size, (col + 1) % size
            if square[next_row, next_col]:
                next_row, next_col = (row + 1) % size, col
            row, col = next_row, next_col

        # one of the eight symmetries of the square, all of them magic
        square = np.rot90(square, int(self.rng.integers(4)))
        if self.rng.integers(2):
            square = np.fliplr(square)
        return square


class Splitter:
    """Yields every line whose sum must match: rows, columns, diagonals."""

    def split(self, square: np.ndarray) -> Iterator[np.ndarray]:
        yield from square
        yield from square.T
        yield np.diagonal(square)
        yield np.diagonal(np.fliplr(square))


class Verifier:
    def verify(self, lines: Iterator[np.ndarray]) -> bool:
        sums = {int(line.sum()) for line in lines}
        return len(sums) == 1


class MagicSquareGenerator:
    def __init__(self, generator: Optional[Generator] = None,
                 splitter: Optional[Splitter] = None,
                 verifier: Optional[Verifier] = None,
                 max_attempts: Optional[int] = None):
        self.generator = generator or Generator()
        self.splitter = splitter or Splitter()
        self.verifier = verifier or Verifier()
        self.max_attempts = max_attempts if max_attempts is not None else get_magic_square_attempts()

    def generate(self, size: int) -> np.ndarray:
        """
        Return a verified magic square of the given size.

        Raises:
            ValueError: if size is not positive.
            MagicSquareError: if no candidate verifies within max_attempts.
        """
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")

        for attempt in range(1, self.max_attempts + 1):
            square = self.generator.generate(size)
            if self.verifier.verify(self.splitter.split(square)):
                logger.debug("Verified %dx%d magic square on attempt %d", size, size, attempt)
                return square

        errors.log_and_raise_operation_error(
            "Magic square generation",
            f"no {size}x{size} candidate verified in {self.max_attempts} attempts",
            exception_class=MagicSquareError
        )


def run():
    print("\nFacade\n")

    ide = IDEFacade(TextEditor(), Compiler(), Runtime(), CommandLine())
    Developer(ide).create_application("Hello, world!")

    square = MagicSquareGenerator().generate(3)
    for row in square:
        print(" ".join(str(int(v)) for v in row))
    print(f"Magic constant: {int(square[0].sum())}")
