"""
Fixture-backed analyzer.

Serves stress options from an in-memory mapping, for tests and for running
without the phonology engine installed.
"""

from typing import Any, Dict, List, Mapping, Sequence, Union
from logging import getLogger

from src.nlp.accentuation.types import StressOption
from src.nlp.analyzer_service.base import parse_stress_options

logger = getLogger(__name__)


class StaticStressAnalyzer:
    """
    StressAnalyzer over a fixed word -> options mapping.

    Example:
        analyzer = StaticStressAnalyzer({
            "gera": [
                {"grammatical_case": "Vardininkas", "stress_type": 0, "stressed_letter_index": 3},
            ],
        })
    """

    def __init__(self, options_by_word: Mapping[str, Sequence[Union[Mapping[str, Any], StressOption]]]):
        # Validate eagerly so bad fixtures fail at construction
        self._options: Dict[str, List[StressOption]] = {
            word: parse_stress_options(word, records)
            for word, records in options_by_word.items()
        }
        logger.debug(f"Static analyzer loaded with {len(self._options)} word(s)")

    def analyze(self, word: str) -> List[StressOption]:
        options = self._options.get(word)
        if options is None:
            logger.debug(f"Word not found: {word}")
            return []
        return list(options)

    def close(self):
        pass
