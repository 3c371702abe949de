# mzqclib/errors.py
"""Exceptions raised by mzqclib."""

from typing import Optional


class MzQCError(Exception):
    """Base class for all mzqclib errors."""


class MzQCIOError(MzQCError, OSError):
    """A path could not be opened for reading or writing."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ParseError(MzQCError, ValueError):
    """Input bytes are not well-formed JSON."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class SchemaViolation(MzQCError):
    """
    The structural validator rejected a document.

    Attributes:
        rule: The ValidationRule that failed first.
        reason: Human-readable description of the failure.
    """

    def __init__(self, rule, reason: str):
        super().__init__(f"Document does not conform to mzQC schema: {reason}")
        self.rule = rule
        self.reason = reason


class CacheLoadError(MzQCError, OSError):
    """An ontology source could not be opened."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
