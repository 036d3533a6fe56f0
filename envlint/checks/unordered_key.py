"""Reports keys that break alphabetical order within a group."""

from __future__ import annotations

from envlint.checks.base import Check
from envlint.line_entry import LineEntry
from envlint.warning import Warning


class UnorderedKeyChecker(Check):
    """Warns when a key is out of order within its group of lines.

    Groups are separated by blank lines, control comments and lines that
    substitute a key already seen in the current group.
    """

    name = "UnorderedKey"
    template = "The {1} key should go before the {2} key"
    skip_comments = False

    def __init__(self) -> None:
        self._keys: list[str] = []

    def _message(self, key: str, another_key: str) -> str:
        return self.template.replace("{1}", key).replace("{2}", another_key)

    def run(self, line: LineEntry) -> Warning | None:
        has_substitution_in_group = any(
            key in self._keys for key in line.substitution_keys()
        )
        if (
            line.is_empty()
            or line.control_comment() is not None
            or has_substitution_in_group
        ):
            self._keys.clear()
            return None

        key = line.key()
        if key is None:
            return None
        self._keys.append(key)

        sorted_keys = sorted(self._keys)
        if sorted_keys == self._keys:
            return None

        position = sorted_keys.index(key) + 1
        if position >= len(sorted_keys):
            return None
        return self.warning(line, self._message(key, sorted_keys[position]))