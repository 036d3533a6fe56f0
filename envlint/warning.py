"""A problem found by a check on one line."""

from __future__ import annotations

from dataclasses import dataclass

from envlint.common import italic, red_bold
from envlint.line_entry import LineEntry


@dataclass
class Warning:
    """A check's finding, tied to the line it was found on."""

    line: LineEntry
    check_name: str
    message: str

    def line_number(self) -> int:
        """The number of the line the warning refers to."""
        return self.line.number

    def __str__(self) -> str:
        location = italic(f"{self.line.file}:{self.line.number}")
        return f"{location} {red_bold(self.check_name)}: {self.message}"