"""
Tests for the IDE facade and the magic square generator.
"""

from unittest.mock import Mock

import numpy as np
import pytest

from gofpatterns.settings import ENV_MAGIC_SQUARE_ATTEMPTS
from gofpatterns.structural import facade
from gofpatterns.structural.facade import (
    CommandLine, Compiler, Developer, Generator, IDEFacade, MagicSquareError,
    MagicSquareGenerator, Runtime, Splitter, TextEditor, Verifier,
)


class TestIDEFacade:
    def test_create_application(self, capsys):
        ide = IDEFacade(TextEditor(), Compiler(), Runtime(), CommandLine())
        Developer(ide).create_application("Hello, world!")
        assert capsys.readouterr().out == "output(executed(compiled(Hello, world!)))\n"

    def test_editor_appends_to_last_save(self):
        editor = TextEditor()
        editor.write_text("a")
        editor.save_text()
        assert editor.write_text("b") == "ab"
        assert editor.save_text() == "ab"


class TestSplitterAndVerifier:
    def test_splitter_yields_rows_columns_and_diagonals(self):
        square = np.arange(1, 10).reshape(3, 3)
        lines = [list(line) for line in Splitter().split(square)]
        assert len(lines) == 8
        assert lines[0] == [1, 2, 3]
        assert lines[3] == [1, 4, 7]
        assert lines[6] == [1, 5, 9]
        assert lines[7] == [3, 5, 7]

    def test_verifier_accepts_lo_shu(self):
        lo_shu = np.array([[2, 7, 6], [9, 5, 1], [4, 3, 8]])
        assert Verifier().verify(Splitter().split(lo_shu))

    def test_verifier_rejects_sequential(self):
        assert not Verifier().verify(Splitter().split(np.arange(1, 10).reshape(3, 3)))


class TestMagicSquareGenerator:
    @pytest.mark.parametrize("size", [1, 3, 5, 7])
    def test_odd_sizes_verify(self, size):
        square = MagicSquareGenerator(Generator(np.random.default_rng(7))).generate(size)
        assert sorted(square.flatten().tolist()) == list(range(1, size * size + 1))
        expected = size * (size * size + 1) // 2
        assert all(int(line.sum()) == expected for line in Splitter().split(square))

    def test_size_two_exhausts_attempts(self):
        generator = MagicSquareGenerator(max_attempts=5)
        with pytest.raises(MagicSquareError, match="in 5 attempts"):
            generator.generate(2)

    def test_attempts_are_bounded(self):
        candidate_source = Mock(spec=Generator)
        candidate_source.generate.return_value = np.arange(1, 10).reshape(3, 3)
        with pytest.raises(MagicSquareError):
            MagicSquareGenerator(candidate_source, max_attempts=3).generate(3)
        assert candidate_source.generate.call_count == 3

    def test_attempts_default_from_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_MAGIC_SQUARE_ATTEMPTS, "12")
        assert MagicSquareGenerator().max_attempts == 12

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            MagicSquareGenerator().generate(0)


def test_run(capsys):
    facade.run()
    out = capsys.readouterr().out
    assert "output(executed(compiled(Hello, world!)))" in out
    assert "Magic constant: 15" in out
