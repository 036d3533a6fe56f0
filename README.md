# envlint

`envlint` checks the lines of `.env` files for common mistakes and
reports each one as a warning tied to a file and a line number. It is a
library: it reads files, runs checks and formats results.

## Checks

| Name                 | What it reports                                                     |
|----------------------|---------------------------------------------------------------------|
| `DuplicatedKey`      | a key that was already defined earlier in the file                  |
| `EndingBlankLine`    | a last line that is not terminated by a newline                     |
| `ExtraBlankLine`     | a blank line directly after another blank line                      |
| `IncorrectDelimiter` | a key holding characters other than letters, digits and `_` (invalid leading characters are left to `LeadingCharacter`) |
| `KeyWithoutValue`    | a non-blank line without an equal sign                              |
| `LeadingCharacter`   | a non-blank line that starts with something other than a letter or `_` |
| `LowercaseKey`       | a key that is not written in uppercase                              |
| `QuoteCharacter`     | a value containing `'` or `"` while holding no whitespace and no `\n` |
| `SpaceCharacter`     | a space directly before or after the equal sign                     |
| `TrailingWhitespace` | a line ending with a space                                          |
| `UnorderedKey`       | a key that is out of alphabetical order within its group            |

Keys inside a group are expected to be sorted; a blank line, a control
comment, or a value that refers to a key already seen in the group
(`$KEY` or `${KEY}`) starts a new group. A leading `export ` is ignored
when reading a key.

Comment lines are skipped by every check except `EndingBlankLine` and
`UnorderedKey`.

The list of names is available at run time:

```python
from envlint.checks.runner import available_check_names

print(available_check_names())
```

## Linting a file

```python
from pathlib import Path

from envlint.checks.runner import run
from envlint.file_entry import FileEntry
from envlint.line_entry import LineEntry

loaded = FileEntry.from_path(Path(".env"))
if loaded is not None:
    file, lines = loaded
    entries = [LineEntry(number, file, text) for number, text in enumerate(lines, start=1)]
    for warning in run(entries, ["UnorderedKey"]):
        print(warning)
```

`FileEntry.from_path` returns `None` when the path has no file name or
the file cannot be read as UTF-8. A file that ends with a newline gets a
final blank line in the list it returns.

`run` takes the line entries and the names of checks to skip, and
returns the warnings in line order. Printing a warning gives
`path:line CheckName: message`, with the location in italics and the
check name in bold red (ANSI escape sequences). A `Warning` also has
`check_name`, `message`, `line` and `line_number()`.

`FileEntry.is_env_file(path)` tells whether a file name looks like an
env file: it starts or ends with `.env` (`.env`, `.env.local`,
`prod.env`), does not end with `.bak`, and is not `.envrc`.

## Turning checks off inside a file

Control comments switch checks off, and on again, for the lines that
follow them:

```
# dotenv-linter:off LowercaseKey, UnorderedKey
foo=bar
Baz=qux
# dotenv-linter:on LowercaseKey
```

Check names may be separated by spaces, commas or both.
`envlint.comment.parse` turns such a line into a `Comment` with
`disabled` and `checks`, or returns `None` for any other comment.

## Output helpers

`envlint.output` holds three reporters that print to standard output:

- `CheckOutput(is_quiet_mode, files_count)` prints `Checking <file>`,
  warnings, a blank separator between files, `Nothing to check`, and the
  total (`Found N problem(s)` or `No problems found`).
- `FixOutput(is_quiet_mode, files_count)` prints `Fixing <file>`,
  warnings, `Original file was backed up to: "<path>"`,
  `Nothing to fix`, and the total of fixed warnings.
- `CompareOutput(is_quiet_mode)` prints `Comparing <file>`,
  `Nothing to compare`, and `CompareWarning`s of the form
  `<path> is missing keys: A, B`.

In quiet mode only warnings (and, for `FixOutput`, the backup path and
total) are printed.

`envlint.compare` has the `CompareFileType` and `CompareWarning` data
classes used for comparing keys across files.

## What is not included

There is no command-line program: files must be found, loaded and
passed to `run` from Python. Nothing in the package rewrites `.env`
files or makes backups — `FixOutput` only prints messages about fixes —
and nothing computes which keys one file lacks compared with another;
`CompareWarning` only holds and formats such a result.