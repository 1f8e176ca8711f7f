"""
Proxy: provide a placeholder for another object to control access to
it.

Shown here: a logging proxy, a virtual (caching) proxy and a protection
(preview) proxy, stacked around the same book.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List

PLAGUE_PAGES = [
    "The unusual events described in this chronicle occurred in 194- at Oran.",
    "Everyone agreed that, considering their somewhat extraordinary character, "
    "they were out of place there.",
    "For its ordinariness is what strikes one first about the town of Oran, which is "
    "merely a large French port on the Algerian coast, headquarters of the Prefect of "
    "a French Department.",
    "The town itself, let us admit, is ugly. It has a smug, placid air and you need time "
    "to discover what it is that makes it different from so many business centers in "
    "other parts of the world.",
    "How to conjure up a picture, for instance, of a town without pigeons, without any "
    "trees or gardens, where you never hear the beat of wings or the rustle of leaves, "
    "a thoroughly negative place, in short?",
]


class Book(ABC):
    @property
    @abstractmethod
    def title(self) -> str:
        pass

    @abstractmethod
    def read_page(self, page: int) -> str:
        pass


class PaperBook(Book):
    def __init__(self, title: str, pages: List[str]):
        self._title = title
        self.pages = list(pages)

    @property
    def title(self) -> str:
        return self._title

    def read_page(self, page: int) -> str:
        if page < 0 or page >= len(self.pages):
            return ""
        return self.pages[page]


class LoggingBookProxy(Book):
    def __init__(self, book: Book):
        self.book = book

    @property
    def title(self) -> str:
        print(f"{datetime.now():%Y-%m-%d %H:%M:%S} - book title: {self.book.title}")
        return self.book.title

    def read_page(self, page: int) -> str:
        print(f"{datetime.now():%Y-%m-%d %H:%M:%S} - reading book page {page}")
        return self.book.read_page(page)


class CachingBookProxy(Book):
    def __init__(self, book: Book):
        self.book = book
        self.cache: Dict[int, str] = {}

    @property
    def title(self) -> str:
        return self.book.title

    def read_page(self, page: int) -> str:
        if page in self.cache:
            print("Retrieved page from cache.")
            return self.cache[page]

        print("Saved page to cache.")
        self.cache[page] = self.book.read_page(page)
        return self.cache[page]


class PreviewBookProxy(Book):
    """Only pages up to and including last_page are readable."""

    def __init__(self, book: Book, last_page: int):
        self.book = book
        self.last_page = last_page

    @property
    def title(self) -> str:
        return self.book.title

    def read_page(self, page: int) -> str:
        if page > self.last_page:
            return ""
        return self.book.read_page(page)


class Student:
    def __init__(self, name: str):
        self.name = name

    def read_book(self, book: Book) -> None:
        print(f"Reading book: {book.title}")
        page = 0
        while True:
            text = book.read_page(page)
            if not text:
                break
            print(f"Reading: {text}")
            page += 1


def run():
    print("\nProxy\n")

    book = PaperBook("Plague", PLAGUE_PAGES)
    student = Student("Albert")
    student.read_book(book)

    preview = PreviewBookProxy(CachingBookProxy(LoggingBookProxy(book)), 2)
    student.read_book(preview)
    student.read_book(preview)
