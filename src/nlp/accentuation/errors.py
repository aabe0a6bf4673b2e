"""
Accentuation Error Types

All failures raised by the accentuation engine derive from AccentuationError.
CaseNotFoundError is recoverable by the caller (ask for a different case);
the remaining errors mean the analyzer produced data the engine cannot render.
"""

from typing import Iterable, Optional


class AccentuationError(Exception):
    """Base class for accentuation failures."""


class CaseNotFoundError(AccentuationError, LookupError):
    """No stress option matches the requested grammatical case."""

    def __init__(self, case: str, available_cases: Optional[Iterable[str]] = None):
        self.case = getattr(case, "value", case)
        self.available_cases = list(available_cases or [])
        message = f"Unable to find stress option for case '{self.case}'"
        if self.available_cases:
            message += f" (available: {', '.join(self.available_cases)})"
        super().__init__(message)


class IndexOutOfRangeError(AccentuationError, IndexError):
    """Stressed letter index does not point inside the word."""

    def __init__(self, word: str, index: int):
        self.word = word
        self.index = index
        super().__init__(
            f"Stressed letter index {index} is out of range for '{word}' "
            f"({len(word)} code points)"
        )


class MissingMappingError(AccentuationError, LookupError):
    """Character has no accented form for the selected stress type."""

    def __init__(self, char: str, stress_type: int):
        self.char = char
        self.stress_type = stress_type
        super().__init__(
            f"No diacritic for '{char}' (U+{ord(char):04X}) with stress type {stress_type}"
        )


class InvalidStressTypeError(AccentuationError, ValueError):
    """Stress type is outside the known pitch-accent classes."""

    def __init__(self, stress_type):
        self.stress_type = stress_type
        super().__init__(f"Invalid stress type: {stress_type!r} (expected 0, 1 or 2)")


class AnalyzerError(AccentuationError):
    """Phonological analyzer is unavailable or returned malformed data."""
