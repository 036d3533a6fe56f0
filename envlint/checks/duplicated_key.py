"""Reports keys that appear more than once in a file."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class DuplicatedKeyChecker(Check):
    """Warns when a key has already been seen earlier in the file."""

    name = "DuplicatedKey"
    template = "The {} key is duplicated"

    def __init__(self) -> None:
        self._keys: set[str] = set()

    def run(self, line: LineEntry) -> Warning | None:
        key = line.key()
        if key is None:
            return None
        if key in self._keys:
            return self.warning(line, self.template.replace("{}", key))
        self._keys.add(key)
        return None