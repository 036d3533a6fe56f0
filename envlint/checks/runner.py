"""Runs every single-line check over the lines of a file."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from envlint.checks.base import Check
from envlint.checks.duplicated_key import DuplicatedKeyChecker
from envlint.checks.ending_blank_line import EndingBlankLineChecker
from envlint.checks.extra_blank_line import ExtraBlankLineChecker
from envlint.checks.incorrect_delimiter import IncorrectDelimiterChecker
from envlint.checks.key_without_value import KeyWithoutValueChecker
from envlint.checks.leading_character import LeadingCharacterChecker
from envlint.checks.lowercase_key import LowercaseKeyChecker
from envlint.checks.quote_character import QuoteCharacterChecker
from envlint.checks.space_character import SpaceCharacterChecker
from envlint.checks.trailing_whitespace import TrailingWhitespaceChecker
from envlint.checks.unordered_key import UnorderedKeyChecker
from envlint.line_entry import LineEntry
from envlint.warning import Warning

_CHECK_TYPES: tuple[type[Check], ...] = (
    DuplicatedKeyChecker,
    EndingBlankLineChecker,
    ExtraBlankLineChecker,
    IncorrectDelimiterChecker,
    KeyWithoutValueChecker,
    LeadingCharacterChecker,
    LowercaseKeyChecker,
    QuoteCharacterChecker,
    SpaceCharacterChecker,
    TrailingWhitespaceChecker,
    UnorderedKeyChecker,
)


def checklist() -> list[Check]:
    """Fresh instances of every available check, in their fixed order."""
    return [check_type() for check_type in _CHECK_TYPES]


def available_check_names() -> list[str]:
    """Names of all available checks."""
    return [check.name for check in checklist()]


def run(lines: Sequence[LineEntry], skip_checks: Iterable[str] = ()) -> list[Warning]:
    """Run the checks over the lines of one file and collect their warnings.

    Checks named in ``skip_checks`` are not run at all; control comments in
    the file turn checks off and on again for the lines that follow them.
    """
    skipped = set(skip_checks)
    checks = [check for check in checklist() if check.name not in skipped]

    disabled: list[str] = []
    warnings: list[Warning] = []

    for line in lines:
        comment = line.control_comment()
        if comment is not None:
            if comment.disabled:
                disabled.extend(comment.checks)
            else:
                disabled = [name for name in disabled if name not in comment.checks]

        is_comment = line.is_comment()
        for check in checks:
            if is_comment and check.skip_comments:
                continue
            if check.name in disabled:
                continue
            warning = check.run(line)
            if warning is not None:
                warnings.append(warning)

    return warnings