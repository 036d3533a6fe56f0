"""Data used when comparing the keys of several .env files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from envlint.common import italic, red_bold


@dataclass
class CompareFileType:
    """A file taking part in a comparison, with its keys and missing keys."""

    path: Path
    keys: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


@dataclass
class CompareWarning:
    """Keys that a file lacks compared with the others."""

    path: Path
    missing_keys: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        keys = ", ".join(red_bold(key) for key in self.missing_keys)
        return f"{italic(str(self.path))} is missing keys: {keys}"