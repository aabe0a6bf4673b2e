"""
English to Lithuanian grammatical case names.

Pairs with the accentuation service, which expects the Lithuanian labels the
analyzer emits.

Example:
    >>> translate_case_name("Nominative")
    'Vardininkas'
    >>> translate_case_name("INSTRUMENTAL")
    'Įnagininkas'
"""

from types import MappingProxyType
from typing import Mapping

from src.nlp.accentuation.types import GrammaticalCase


UNKNOWN_CASE = "UNKNOWN"

CASE_NAMES: Mapping[str, str] = MappingProxyType({
    "nominative": GrammaticalCase.NOMINATIVE.value,
    "genitive": GrammaticalCase.GENITIVE.value,
    "dative": GrammaticalCase.DATIVE.value,
    "accusative": GrammaticalCase.ACCUSATIVE.value,
    "instrumental": GrammaticalCase.INSTRUMENTAL.value,
    "locative": GrammaticalCase.LOCATIVE.value,
    "vocative": GrammaticalCase.VOCATIVE.value,
})


def translate_case_name(english_name: str) -> str:
    """
    Convert an English case name into its Lithuanian label.

    Lookup is case-insensitive. Unrecognized names return UNKNOWN_CASE
    instead of raising, so the result can be passed straight to the
    selector, which will then report CaseNotFoundError.
    """
    return CASE_NAMES.get(english_name.lower(), UNKNOWN_CASE)


def is_known_case_name(english_name: str) -> bool:
    """True if english_name (any letter casing) is one of the seven cases."""
    return english_name.lower() in CASE_NAMES
