"""Reports keys that are not written in upper case."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class LowercaseKeyChecker(Check):
    """Warns when a key contains lower-case letters."""

    name = "LowercaseKey"
    template = "The {} key should be in uppercase"

    def run(self, line: LineEntry) -> Warning | None:
        key = line.key()
        if key is None or key.upper() == key:
            return None
        return self.warning(line, self.template.replace("{}", key))