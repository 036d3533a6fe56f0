from pathlib import Path

from envlint.checks.runner import available_check_names, checklist, run
from envlint.file_entry import FileEntry
from envlint.line_entry import LineEntry
from envlint.warning import Warning


def line_entry(number, total_lines, raw_string):
    file = FileEntry(path=Path(".env"), file_name=".env", total_lines=total_lines)
    return LineEntry(number=number, file=file, raw_string=raw_string)


def blank_line_entry(number, total_lines):
    return line_entry(number, total_lines, "\n")


def make_warning(line, check_name, message):
    return Warning(line=line, check_name=check_name, message=message)


def test_run_with_empty_list():
    assert run([], []) == []


def test_run_with_empty_line():
    assert run([blank_line_entry(1, 1)], []) == []


def test_run_with_comment_line():
    lines = [line_entry(1, 2, "# Comment = 'Value'"), blank_line_entry(2, 2)]
    assert run(lines, []) == []


def test_run_with_valid_line():
    lines = [line_entry(1, 2, "FOO=BAR"), blank_line_entry(2, 2)]
    assert run(lines, []) == []


def test_run_with_invalid_line():
    line = line_entry(1, 2, "FOO")
    expected = [
        make_warning(
            line,
            "KeyWithoutValue",
            "The FOO key should be with a value or have an equal sign",
        )
    ]
    assert run([line, blank_line_entry(2, 2)], []) == expected


def test_run_without_blank_line():
    line = line_entry(1, 1, "FOO=BAR")
    expected = [
        make_warning(line, "EndingBlankLine", "No blank line at the end of the file")
    ]
    assert run([line], []) == expected


def test_skip_one_check():
    line1 = line_entry(1, 3, "FOO\n")
    line2 = line_entry(2, 3, "1FOO\n")
    expected = [
        make_warning(line2, "LeadingCharacter", "Invalid leading character detected")
    ]
    lines = [line1, line2, blank_line_entry(3, 3)]
    assert run(lines, ["KeyWithoutValue", "UnorderedKey"]) == expected


def test_skip_all_checks():
    lines = [line_entry(1, 1, "FOO")]
    assert run(lines, ["KeyWithoutValue", "EndingBlankLine"]) == []


def test_skip_one_check_via_comment():
    line1 = line_entry(1, 4, "# dotenv-linter:off KeyWithoutValue\n")
    line2 = line_entry(2, 4, "FOO\n")
    line3 = line_entry(3, 4, "1FOO\n")
    expected = [
        make_warning(line3, "LeadingCharacter", "Invalid leading character detected")
    ]
    lines = [line1, line2, line3, blank_line_entry(4, 4)]
    assert run(lines, ["UnorderedKey"]) == expected


def test_skip_collision():
    line1 = line_entry(1, 4, "# dotenv-linter:on KeyWithoutValue\n")
    line2 = line_entry(2, 4, "FOO\n")
    line3 = line_entry(3, 4, "1FOO\n")
    expected = [
        make_warning(line3, "LeadingCharacter", "Invalid leading character detected")
    ]
    lines = [line1, line2, line3, blank_line_entry(4, 4)]
    assert run(lines, ["KeyWithoutValue", "UnorderedKey"]) == expected


def test_on_and_off_same_checks():
    line1 = line_entry(1, 5, "# dotenv-linter:off KeyWithoutValue, LeadingCharacter\n")
    line2 = line_entry(2, 5, "FOO\n")
    line3 = line_entry(3, 5, "# dotenv-linter:on LeadingCharacter\n")
    line4 = line_entry(4, 5, "1FOO\n")
    expected = [
        make_warning(line4, "LeadingCharacter", "Invalid leading character detected")
    ]
    lines = [line1, line2, line3, line4, blank_line_entry(5, 5)]
    assert run(lines, []) == expected


def test_only_simple_comment():
    line = line_entry(1, 1, "# Simple comment")
    expected = [
        make_warning(line, "EndingBlankLine", "No blank line at the end of the file")
    ]
    assert run([line], []) == expected


def test_check_name_list():
    names = available_check_names()
    for check in checklist():
        assert check.name in names


def test_available_check_names_order():
    assert available_check_names() == [
        "DuplicatedKey",
        "EndingBlankLine",
        "ExtraBlankLine",
        "IncorrectDelimiter",
        "KeyWithoutValue",
        "LeadingCharacter",
        "LowercaseKey",
        "QuoteCharacter",
        "SpaceCharacter",
        "TrailingWhitespace",
        "UnorderedKey",
    ]


def test_unordered_key_with_control_comment():
    lines = [
        line_entry(1, 7, "FOO=BAR"),
        line_entry(2, 7, "# dotenv-linter:off LowercaseKey"),
        line_entry(3, 7, "Bar=FOO"),
        line_entry(4, 7, "bar=FOO"),
        line_entry(5, 7, "# dotenv-linter:on LowercaseKey"),
        line_entry(6, 7, "X=X"),
        blank_line_entry(7, 7),
    ]
    assert run(lines, []) == []


def test_runs_are_independent():
    lines = [line_entry(1, 2, "FOO=BAR"), blank_line_entry(2, 2)]
    run(lines, [])
    # A second run starts with fresh checks, so no duplicate is reported.
    assert run(lines, []) == []


def test_duplicated_key_reported_once_per_repeat():
    line1 = line_entry(1, 3, "FOO=BAR")
    line2 = line_entry(2, 3, "FOO=BAR")
    expected = [make_warning(line2, "DuplicatedKey", "The FOO key is duplicated")]
    assert run([line1, line2, blank_line_entry(3, 3)], []) == expected