"""Parsing of ``dotenv-linter:on`` / ``dotenv-linter:off`` control comments."""

from __future__ import annotations

from dataclasses import dataclass, field

PREFIX = "dotenv-linter"
ON = "on"
OFF = "off"


@dataclass(frozen=True)
class Comment:
    """A control comment that turns a set of checks on or off."""

    disabled: bool
    checks: list[str] = field(default_factory=list)


def parse(s: str) -> Comment | None:
    """Parse a comment line; return None if it is not a control comment."""
    line_comment = s.lstrip()[1:].strip()

    marker = f"{PREFIX}:"
    if not line_comment.startswith(marker):
        return None

    words = line_comment[len(marker):].split()
    if not words:
        return None

    flag, *raw_checks = words
    if flag not in (ON, OFF):
        return None

    checks = [name for word in raw_checks for name in word.split(",") if name]
    return Comment(disabled=flag == OFF, checks=checks)