"""
Tests for book proxies.
"""

import pytest

from gofpatterns.structural import proxy
from gofpatterns.structural.proxy import (
    CachingBookProxy, LoggingBookProxy, PaperBook, PreviewBookProxy, Student,
)


@pytest.fixture
def book():
    return PaperBook("Plague", ["one", "two", "three", "four"])


def test_paper_book_past_the_end(book):
    assert book.read_page(3) == "four"
    assert book.read_page(4) == ""


def test_logging_proxy_prints_timestamps(book, capsys):
    logged = LoggingBookProxy(book)
    assert logged.title == "Plague"
    assert logged.read_page(1) == "two"
    out = capsys.readouterr().out
    assert " - book title: Plague" in out
    assert " - reading book page 1" in out


def test_caching_proxy(book, capsys):
    cached = CachingBookProxy(book)
    assert cached.read_page(0) == "one"
    assert cached.read_page(0) == "one"
    assert capsys.readouterr().out == "Saved page to cache.\nRetrieved page from cache.\n"


def test_preview_proxy_limits_pages(book):
    preview = PreviewBookProxy(book, 1)
    assert preview.read_page(1) == "two"
    assert preview.read_page(2) == ""


def test_student_reads_until_empty_page(book, capsys):
    Student("Albert").read_book(PreviewBookProxy(book, 2))
    assert capsys.readouterr().out == (
        "Reading book: Plague\nReading: one\nReading: two\nReading: three\n"
    )


def test_run(capsys):
    proxy.run()
    out = capsys.readouterr().out
    assert out.count("Reading book: Plague") == 3
    assert "Retrieved page from cache." in out
    assert "a thoroughly negative place, in short?" in out
