"""Reports spaces around the equal sign."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class SpaceCharacterChecker(Check):
    """Warns when a space sits directly before or after the equal sign."""

    name = "SpaceCharacter"
    template = "The line has spaces around equal sign"

    def run(self, line: LineEntry) -> Warning | None:
        parts = line.raw_string.split("=")
        if len(parts) == 2:
            key, value = parts
            if key.endswith(" ") or value.startswith(" "):
                return self.warning(line, self.template)
        return None