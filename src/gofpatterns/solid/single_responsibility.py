"""
S - Single Responsibility: a class should have one reason to change.

The Journal only manages entries. Persisting them is a separate concern
handled by LocalRepository, so changing the storage never touches the
journal and vice versa.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..error_handler_util import ErrorHandlerUtil
from ..settings import get_journal_path

logger = logging.getLogger('GoFPatterns.SingleResponsibility')
errors = ErrorHandlerUtil.create_error_context('SingleResponsibility')


class Journal:
    """Keeps numbered journal entries and nothing else."""

    def __init__(self):
        self.entries: List[str] = []
        self._counter = 0

    @property
    def count(self) -> int:
        return len(self.entries)

    def add_entry(self, text: str) -> int:
        self._counter += 1
        self.entries.append(f"{self._counter}: {text}")
        return self._counter

    def remove_entry(self, index: int) -> None:
        # out of range indexes are ignored
        if 0 <= index < len(self.entries):
            del self.entries[index]

    def parse(self, text: str) -> None:
        """Replace the entries with the lines of ``text``."""
        self.entries = text.split("\n") if text else []
        self._counter = len(self.entries)

    def __str__(self):
        return "\n".join(self.entries)

    # Adding save/load methods here would give the journal a second reason to change.


class LocalRepository:
    """
    Saves and loads plain text to a local file.

    File system errors are logged and swallowed: saving does nothing and
    loading returns an empty string.
    """

    def __init__(self, path: Optional[str]):
        if not path:
            raise ValueError("path is required")
        self.path = Path(path)

    def save_text(self, contents: str, overwrite: bool = False) -> None:
        def _save():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if overwrite or not self.path.exists():
                self.path.write_text(contents)
                return
            with self.path.open('a') as f:
                f.write(contents + "\n")

        errors.handle_with_fallback(
            _save,
            error_message=f"Could not save text to {self.path}",
            exceptions=(OSError,)
        )

    def load_text(self) -> str:
        return errors.handle_with_fallback(
            self.path.read_text,
            fallback_value="",
            error_message=f"Could not load text from {self.path}",
            exceptions=(OSError,)
        )

    def clear(self) -> None:
        self.save_text("", overwrite=True)


def run():
    print("\nSingle Responsibility\n")

    journal = Journal()
    journal.add_entry("journal entry one")
    journal.add_entry("journal entry two")
    print("Journal Content: \n" + str(journal))

    path = get_journal_path()
    logger.debug("Using journal file %s", path)
    repository = LocalRepository(path)
    repository.save_text(str(journal), overwrite=True)
    print("File Content: \n" + repository.load_text())

    repository.clear()
