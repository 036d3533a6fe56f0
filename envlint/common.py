"""Shared helpers: key normalisation and terminal colouring."""

LF = "\n"

_RESET = "\x1b[0m"
_ITALIC = "\x1b[3m"
_RED_BOLD = "\x1b[1;31m"
_GREEN_BOLD = "\x1b[1;32m"


def remove_invalid_leading_chars(string: str) -> str:
    """Drop leading characters that are neither letters nor underscores."""
    for index, char in enumerate(string):
        if char.isalpha() or char == "_":
            return string[index:]
    return ""


def _styled(style: str, text: str) -> str:
    return f"{style}{text}{_RESET}"


def italic(text: str) -> str:
    """Wrap text in the ANSI sequence for italics."""
    return _styled(_ITALIC, text)


def red_bold(text: str) -> str:
    """Wrap text in the ANSI sequence for bold red."""
    return _styled(_RED_BOLD, text)


def green_bold(text: str) -> str:
    """Wrap text in the ANSI sequence for bold green."""
    return _styled(_GREEN_BOLD, text)