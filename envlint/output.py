"""Console reporting for the check, fix and compare commands."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from envlint.common import green_bold, red_bold
from envlint.compare import CompareWarning
from envlint.file_entry import FileEntry
from envlint.warning import Warning

BACKUP_PREFIX = "Original file was backed up to: "


def _quoted(path) -> str:
    """Render a path in double quotes with quotes and backslashes escaped."""
    text = os.fsdecode(path)
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class CheckOutput:
    """Reports the progress and the results of checking files."""

    is_quiet_mode: bool
    files_count: int

    def print_nothing_to_check(self) -> None:
        """Report that there is nothing to check."""
        if not self.is_quiet_mode:
            print("Nothing to check")

    def print_processing_info(self, file: FileEntry) -> None:
        """Report the file being checked."""
        if not self.is_quiet_mode:
            print(f"Checking {file}")

    def print_warnings(self, warnings: Sequence[Warning], file_index: int) -> None:
        """Print the warnings of one file, then a separator unless it is the last."""
        for warning in warnings:
            print(warning)

        if self.is_quiet_mode:
            return

        is_last_file = file_index == self.files_count - 1
        if warnings and not is_last_file:
            print()

    def print_total(self, total: int) -> None:
        """Print the number of problems found."""
        if self.is_quiet_mode:
            return

        if total:
            problems = "problem" if total == 1 else "problems"
            print(f"\n{red_bold(f'Found {total} {problems}')}")
        else:
            print(f"\n{green_bold('No problems found')}")


@dataclass
class CompareOutput:
    """Reports the progress and the results of comparing files."""

    is_quiet_mode: bool

    def print_processing_info(self, file: FileEntry) -> None:
        """Report the file being compared."""
        if not self.is_quiet_mode:
            print(f"Comparing {file}")

    def print_warnings(self, warnings: Sequence[CompareWarning]) -> None:
        """Print each comparison warning on its own line."""
        for warning in warnings:
            print(warning)

    def print_nothing_to_compare(self) -> None:
        """Report that there are no files to compare."""
        if not self.is_quiet_mode:
            print("Nothing to compare")


@dataclass
class FixOutput:
    """Reports the progress and the results of fixing files."""

    is_quiet_mode: bool
    files_count: int

    def print_processing_info(self, file: FileEntry) -> None:
        """Report the file being fixed."""
        if not self.is_quiet_mode:
            print(f"Fixing {file}")

    def print_total(self, total: int) -> None:
        """Print the number of fixed warnings."""
        if total:
            print(f"\nAll warnings are fixed. Total: {total}")
        else:
            print("\nNo warnings found")

    def print_backup(self, backup_path) -> None:
        """Print where the original file was backed up."""
        print(f"{BACKUP_PREFIX}{_quoted(backup_path)}")
        if not self.is_quiet_mode:
            print()

    def print_warnings(self, warnings: Sequence[Warning], file_index: int) -> None:
        """Print the warnings of one file, then a separator unless it is the last."""
        if self.is_quiet_mode:
            return

        for warning in warnings:
            print(warning)
        is_last_file = file_index == self.files_count - 1
        if warnings and not is_last_file:
            print()

    def print_nothing_to_fix(self) -> None:
        """Report that no files were found to fix."""
        if self.is_quiet_mode or self.files_count > 0:
            return
        print("Nothing to fix")