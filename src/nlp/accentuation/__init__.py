"""
Accentuation Package

Renders Lithuanian words with pitch-accent diacritics (grave, acute, tilde)
for a requested grammatical case.

Usage:
    from src.nlp.accentuation import get_accentuation, translate_case_name

    get_accentuation("gera", translate_case_name("nominative"))  # 'gerà'
"""

from .errors import (
    AccentuationError,
    AnalyzerError,
    CaseNotFoundError,
    IndexOutOfRangeError,
    InvalidStressTypeError,
    MissingMappingError,
)
from .types import GrammaticalCase, StressOption, StressType
from .config import AccentuationConfig
from .diacritics import DIACRITIC_TABLES, apply_diacritic, get_diacritic_table
from .case_names import CASE_NAMES, UNKNOWN_CASE, is_known_case_name, translate_case_name
from .selector import select_stress_option
from .renderer import render_accented_word, render_stress_option
from .accentuation_service import (
    LithuanianAccentuationService,
    get_accentuation,
    get_default_service,
)

__all__ = [
    "AccentuationError",
    "AnalyzerError",
    "CaseNotFoundError",
    "IndexOutOfRangeError",
    "InvalidStressTypeError",
    "MissingMappingError",
    "GrammaticalCase",
    "StressOption",
    "StressType",
    "AccentuationConfig",
    "DIACRITIC_TABLES",
    "apply_diacritic",
    "get_diacritic_table",
    "CASE_NAMES",
    "UNKNOWN_CASE",
    "is_known_case_name",
    "translate_case_name",
    "select_stress_option",
    "render_accented_word",
    "render_stress_option",
    "LithuanianAccentuationService",
    "get_accentuation",
    "get_default_service",
]
