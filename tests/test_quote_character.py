from pathlib import Path

from envlint.checks.quote_character import QuoteCharacterChecker
from envlint.file_entry import FileEntry
from envlint.line_entry import LineEntry
from envlint.warning import Warning

MESSAGE = "The value has quote characters (', \")"


def line_entry(number, total_lines, raw_string):
    file = FileEntry(path=Path(".env"), file_name=".env", total_lines=total_lines)
    return LineEntry(number=number, file=file, raw_string=raw_string)


def warn(number, total, raw):
    return Warning(line_entry(number, total, raw), "QuoteCharacter", MESSAGE)


def run_asserts(asserts):
    checker = QuoteCharacterChecker()
    for line, expected in asserts:
        assert checker.run(line) == expected


def test_with_single_quote():
    run_asserts(
        [
            (line_entry(1, 4, "FOO=BAR"), None),
            (line_entry(2, 4, "FOO='BAR'"), warn(2, 4, "FOO='BAR'")),
            (line_entry(3, 4, "FOO='B\"AR'"), warn(3, 4, "FOO='B\"AR'")),
            (line_entry(4, 4, "FOO='BAR BAR'"), None),
        ]
    )


def test_with_double_quote():
    run_asserts(
        [
            (line_entry(1, 3, "FOO=BAR"), None),
            (line_entry(2, 3, 'FOO="BAR"'), warn(2, 3, 'FOO="BAR"')),
            (line_entry(3, 3, 'FOO="BAR BAR"'), None),
        ]
    )


def test_with_no_quotes():
    run_asserts([(line_entry(1, 1, "FOO=BAR"), None)])


def test_escaped_newline_in_value_is_allowed():
    assert QuoteCharacterChecker().run(line_entry(1, 1, 'FOO="A\\nB"')) is None