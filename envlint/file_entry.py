"""A .env file on disk and the lines read from it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from envlint.common import LF

EXCLUDED_FILES = (".envrc",)

_PATTERN = ".env"


def _file_name(path: Path) -> str | None:
    name = Path(path).name
    if not name or name == "..":
        return None
    return name


def _split_lines(content: str) -> list[str]:
    if not content:
        return []
    parts = content.split(LF)
    ends_with_lf = content.endswith(LF)
    if ends_with_lf:
        parts.pop()
    terminated = len(parts) if ends_with_lf else len(parts) - 1
    return [
        part[:-1] if position < terminated and part.endswith("\r") else part
        for position, part in enumerate(parts)
    ]


@dataclass(frozen=True, order=True)
class FileEntry:
    """A file to be checked, with its name and its number of lines."""

    path: Path
    file_name: str
    total_lines: int

    def __str__(self) -> str:
        return str(self.path)

    @classmethod
    def from_path(cls, path) -> tuple[FileEntry, list[str]] | None:
        """Read a file; return the entry and its lines, or None if unreadable."""
        path = Path(path)
        file_name = _file_name(path)
        if file_name is None:
            return None
        try:
            content = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError):
            return None

        lines = _split_lines(content)
        # A trailing newline counts as its own (blank) final line.
        if content.endswith(LF):
            lines.append(LF)

        return cls(path=path, file_name=file_name, total_lines=len(lines)), lines

    @staticmethod
    def is_env_file(path) -> bool:
        """Tell whether the file name matches the .env pattern."""
        name = _file_name(Path(path))
        return (
            name is not None
            and name not in EXCLUDED_FILES
            and (name.startswith(_PATTERN) or name.endswith(_PATTERN))
            and not name.endswith(".bak")
        )