"""Reports lines that start with a character that cannot begin a key."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class LeadingCharacterChecker(Check):
    """Warns when a non-blank line does not start with a letter or ``_``."""

    name = "LeadingCharacter"
    template = "Invalid leading character detected"

    def run(self, line: LineEntry) -> Warning | None:
        if line.is_empty():
            return None
        first = line.raw_string[:1]
        if first.isalpha() or first == "_":
            return None
        return self.warning(line, self.template)