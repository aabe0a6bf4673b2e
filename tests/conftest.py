"""
Shared fixtures: analyzer output recorded for a few words.
"""

import pytest

from src.nlp.accentuation import LithuanianAccentuationService
from src.nlp.analyzer_service import StaticStressAnalyzer


# Candidate options as phonology_engine decodes them (extra keys included)
ANALYZER_FIXTURES = {
    "gera": [
        {"grammatical_case": "Vardininkas", "stress_type": 0, "stressed_letter_index": 3,
         "decoded_option": "Vardininkas (3)"},
        {"grammatical_case": "UNKNOWN", "stress_type": 2, "stressed_letter_index": 1},
        {"grammatical_case": "Vardininkas", "stress_type": 2, "stressed_letter_index": 1},
    ],
    "žodį": [
        {"grammatical_case": "Galininkas", "stress_type": 2, "stressed_letter_index": 1},
    ],
    "ranką": [
        {"grammatical_case": "Galininkas", "stress_type": 0, "stressed_letter_index": 1},
    ],
    "broken": [
        {"grammatical_case": "Vardininkas", "stress_type": 0, "stressed_letter_index": 9},
        {"grammatical_case": "Kilmininkas", "stress_type": 1, "stressed_letter_index": 0},
        {"grammatical_case": "Naudininkas", "stress_type": 5, "stressed_letter_index": 0},
    ],
}


@pytest.fixture
def analyzer():
    return StaticStressAnalyzer(ANALYZER_FIXTURES)


@pytest.fixture
def service(analyzer):
    """Accentuation service over the fixture analyzer."""
    with LithuanianAccentuationService(analyzer=analyzer) as s:
        yield s
