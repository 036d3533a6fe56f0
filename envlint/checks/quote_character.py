"""Reports values wrapped in or containing quote characters."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class QuoteCharacterChecker(Check):
    """Warns when a value without whitespace or ``\\n`` holds quotes."""

    name = "QuoteCharacter"
    template = "The value has quote characters (', \")"

    def run(self, line: LineEntry) -> Warning | None:
        value = line.value()
        if value is None:
            return None
        if "\\n" in value or any(char.isspace() for char in value):
            return None
        if '"' in value or "'" in value:
            return self.warning(line, self.template)
        return None