"""A single line of a .env file and the parts that can be read from it."""

from __future__ import annotations

from dataclasses import dataclass

from envlint.comment import Comment, parse
from envlint.file_entry import FileEntry

_EXPORT_PREFIX = "export "


def _is_escaped(prefix: str) -> bool:
    """Tell whether the character after ``prefix`` is escaped by a backslash."""
    trailing = len(prefix) - len(prefix.rstrip("\\"))
    return trailing % 2 == 1


def _is_key_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char == "_"


def _split_key(raw_key: str) -> tuple[str, str]:
    """Split text that follows a ``$`` into the key and the rest."""
    if raw_key.startswith("{"):
        inner = raw_key[1:]
        end = inner.find("}")
        if end != -1:
            return inner[:end], inner[end:]
    for index, char in enumerate(raw_key):
        if not _is_key_char(char):
            return raw_key[:index], raw_key[index:]
    return raw_key, ""


@dataclass
class LineEntry:
    """A numbered line of a file, as read from disk."""

    number: int
    file: FileEntry
    raw_string: str
    is_deleted: bool = False

    def is_empty_or_comment(self) -> bool:
        """Tell whether the line is blank or a comment."""
        return self.is_empty() or self.is_comment()

    def is_empty(self) -> bool:
        """Tell whether the line holds only whitespace."""
        return not self.trimmed_string()

    def is_comment(self) -> bool:
        """Tell whether the line is a comment."""
        return self.trimmed_string().startswith("#")

    def key(self) -> str | None:
        """The key of the line, without any ``export`` prefix."""
        if self.is_empty_or_comment():
            return None
        stripped = self._stripped_export_string()
        return stripped.split("=", 1)[0]

    def value(self) -> str | None:
        """Everything after the first equal sign, or None if there is none."""
        if self.is_empty_or_comment():
            return None
        _, sep, rest = self.raw_string.partition("=")
        return rest if sep else None

    def trimmed_string(self) -> str:
        """The line without surrounding whitespace."""
        return self.raw_string.strip()

    def _stripped_export_string(self) -> str:
        trimmed = self.trimmed_string()
        if trimmed.startswith(_EXPORT_PREFIX):
            return trimmed[len(_EXPORT_PREFIX):].strip()
        return trimmed

    def is_last_line(self) -> bool:
        """Tell whether this is the last line of its file."""
        return self.file.total_lines == self.number

    def mark_as_deleted(self) -> None:
        """Flag the line as removed by a fixer."""
        self.is_deleted = True

    def control_comment(self) -> Comment | None:
        """The control comment on this line, if it is one."""
        if not self.is_comment():
            return None
        return parse(self.raw_string)

    def substitution_keys(self) -> list[str]:
        """Keys referenced through ``$KEY`` or ``${KEY}`` in the value."""
        keys: list[str] = []
        value = self.value()
        if value is None:
            return keys
        value = value.strip()
        if value.startswith("'"):
            return keys

        if value.startswith('"'):
            if value.endswith('"') and not _is_escaped(value[:-1]):
                value = value[1:-1]
            else:
                return keys

        while (index := value.find("$")) != -1:
            prefix, raw_key = value[:index], value[index + 1:]
            if _is_escaped(prefix):
                value = raw_key
                continue
            key, rest = _split_key(raw_key)
            if not key:
                return keys
            keys.append(key)
            value = rest
        return keys