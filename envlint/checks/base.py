"""The interface shared by the checks that look at one line at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod

from envlint.line_entry import LineEntry
from envlint.warning import Warning


class Check(ABC):
    """A check fed the lines of a file one by one, in order."""

    name: str = ""
    skip_comments: bool = True

    @abstractmethod
    def run(self, line: LineEntry) -> Warning | None:
        """Inspect a line; return a warning if it has a problem."""

    def warning(self, line: LineEntry, message: str) -> Warning:
        """Build a warning from this check for the given line."""
        return Warning(line=line, check_name=self.name, message=message)