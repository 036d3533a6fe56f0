"""Reports files that do not end with a newline."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.common import LF
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class EndingBlankLineChecker(Check):
    """Warns when the last line of a file is not terminated by a newline."""

    name = "EndingBlankLine"
    template = "No blank line at the end of the file"
    skip_comments = False

    def run(self, line: LineEntry) -> Warning | None:
        if line.is_last_line() and not line.raw_string.endswith(LF):
            return self.warning(line, self.template)
        return None