"""Linter for .env files: file and line parsing, checks, and console reporting."""

__version__ = "0.1.0"