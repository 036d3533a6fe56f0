"""Reports lines that end with a space."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class TrailingWhitespaceChecker(Check):
    """Warns when a line ends with a space character."""

    name = "TrailingWhitespace"
    template = "Trailing whitespace detected"

    def run(self, line: LineEntry) -> Warning | None:
        if line.raw_string.endswith(" "):
            return self.warning(line, self.template)
        return None