"""Reports keys whose words are joined by something other than an underscore."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.common import remove_invalid_leading_chars
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class IncorrectDelimiterChecker(Check):
    """Warns when a key holds characters other than letters, digits and ``_``."""

    name = "IncorrectDelimiter"
    template = "The {} key has incorrect delimiter"

    def run(self, line: LineEntry) -> Warning | None:
        key = line.key()
        if key is None:
            return None

        # Invalid leading characters are reported by another check.
        cleaned_key = remove_invalid_leading_chars(key).strip()
        if any(not char.isalnum() and char != "_" for char in cleaned_key):
            return self.warning(line, self.template.replace("{}", key))
        return None