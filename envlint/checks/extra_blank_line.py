"""Reports consecutive blank lines."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class ExtraBlankLineChecker(Check):
    """Warns on a blank line that directly follows another blank line."""

    name = "ExtraBlankLine"
    template = "Extra blank line detected"

    def __init__(self) -> None:
        self._last_blank_number: int | None = None

    def run(self, line: LineEntry) -> Warning | None:
        if not line.is_empty():
            return None

        is_extra = (
            self._last_blank_number is not None
            and self._last_blank_number + 1 == line.number
        )
        self._last_blank_number = line.number

        if is_extra:
            return self.warning(line, self.template)
        return None