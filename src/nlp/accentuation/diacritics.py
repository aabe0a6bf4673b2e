#!/usr/bin/env python3
"""
Lithuanian Diacritic Tables

Maps a base letter to its accented rendering for each pitch-accent class.
Several accented forms have no precomposed code point and are written as the
base letter followed by a combining mark, so a single input letter may render
as two code points.

Combining marks used:
    U+0300 COMBINING GRAVE ACCENT
    U+0301 COMBINING ACUTE ACCENT
    U+0303 COMBINING TILDE
"""

from types import MappingProxyType
from typing import Mapping
from logging import getLogger

from src.nlp.accentuation.errors import InvalidStressTypeError, MissingMappingError
from src.nlp.accentuation.types import StressType

logger = getLogger(__name__)


COMBINING_GRAVE = '\u0300'
COMBINING_ACUTE = '\u0301'
COMBINING_TILDE = '\u0303'


# Class 0: short stressed vowels take a grave accent
SHORT_STRESS_TABLE: Mapping[str, str] = MappingProxyType({
    'a': '\u00e0',                # à
    'i': '\u00ec',                # ì
    'u': 'u' + COMBINING_GRAVE,
})

# Class 1: acute on long vowels; plain e takes the nasal base (ę́)
ACUTE_STRESS_TABLE: Mapping[str, str] = MappingProxyType({
    'ū': 'ū' + COMBINING_ACUTE,
    'e': 'ę' + COMBINING_ACUTE,
    'ė': 'ė' + COMBINING_ACUTE,
    'į': 'į' + COMBINING_ACUTE,
    'ą': 'ą' + COMBINING_ACUTE,
    'ų': 'ų' + COMBINING_ACUTE,
})

# Class 2: tilde, including the sonorants l, m, r of mixed diphthongs
CIRCUMFLEX_STRESS_TABLE: Mapping[str, str] = MappingProxyType({
    'ą': 'ą' + COMBINING_TILDE,
    'e': '\u1ebd',                # ẽ
    'ė': 'ė' + COMBINING_TILDE,
    'ę': 'ę' + COMBINING_TILDE,
    'į': 'į' + COMBINING_TILDE,
    'l': 'l' + COMBINING_TILDE,
    'm': 'm' + COMBINING_TILDE,
    'o': '\u00f5',                # õ
    'r': 'r' + COMBINING_TILDE,
    'ų': 'ų' + COMBINING_TILDE,
    'ū': 'ū' + COMBINING_TILDE,
    'y': '\u1ef9',                # ỹ
})

DIACRITIC_TABLES: Mapping[StressType, Mapping[str, str]] = MappingProxyType({
    StressType.SHORT: SHORT_STRESS_TABLE,
    StressType.ACUTE: ACUTE_STRESS_TABLE,
    StressType.CIRCUMFLEX: CIRCUMFLEX_STRESS_TABLE,
})


def get_diacritic_table(stress_type: int) -> Mapping[str, str]:
    """
    Return the diacritic table for a stress type.

    Args:
        stress_type: Pitch-accent class (0, 1 or 2)

    Raises:
        InvalidStressTypeError: stress_type is not a known class
    """
    # bool is an int subclass; True must not select table 1
    if isinstance(stress_type, bool) or not isinstance(stress_type, int):
        raise InvalidStressTypeError(stress_type)

    table = DIACRITIC_TABLES.get(stress_type)
    if table is None:
        raise InvalidStressTypeError(stress_type)
    return table


def apply_diacritic(char: str, stress_type: int) -> str:
    """
    Accent a single letter.

    Args:
        char: Base letter (one code point)
        stress_type: Pitch-accent class selecting the table

    Returns:
        Accented letter, possibly followed by a combining mark

    Example:
        >>> apply_diacritic("o", 2)
        'õ'

    Raises:
        InvalidStressTypeError: stress_type is not a known class
        MissingMappingError: char has no accented form in that class
    """
    table = get_diacritic_table(stress_type)
    try:
        return table[char]
    except KeyError:
        logger.debug(f"No mapping for '{char}' in stress table {stress_type}")
        raise MissingMappingError(char, int(stress_type)) from None
