"""Reports lines that have a key but no equal sign."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class KeyWithoutValueChecker(Check):
    """Warns when a non-blank line lacks an equal sign."""

    name = "KeyWithoutValue"
    template = "The {} key should be with a value or have an equal sign"

    def run(self, line: LineEntry) -> Warning | None:
        if line.is_empty() or "=" in line.raw_string:
            return None
        key = line.key()
        subject = key if key is not None else line.raw_string
        return self.warning(line, self.template.replace("{}", subject))