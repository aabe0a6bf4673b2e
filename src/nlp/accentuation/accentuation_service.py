#!/usr/bin/env python3
"""
Lithuanian Accentuation Service

Renders a Lithuanian word with the pitch-accent mark for a grammatical case.
Stress placement comes from a phonological analyzer; this service selects the
option for the requested case and inserts the diacritic.

Usage:
    from src.nlp.accentuation import LithuanianAccentuationService

    with LithuanianAccentuationService() as service:
        service.get_accentuation("gera", "Vardininkas")        # 'gerà'
        service.get_accentuation_for_english_case("gera", "nominative")

Or with the module-level shortcut (shared default service):
    from src.nlp.accentuation import get_accentuation
    get_accentuation("žodį", "Galininkas")                      # 'žõdį'
"""

import threading
from typing import TYPE_CHECKING, Dict, List, Optional
from logging import getLogger

from src.nlp.accentuation.case_names import translate_case_name
from src.nlp.accentuation.config import AccentuationConfig
from src.nlp.accentuation.errors import (
    CaseNotFoundError,
    IndexOutOfRangeError,
    InvalidStressTypeError,
    MissingMappingError,
)
from src.nlp.accentuation.renderer import render_stress_option
from src.nlp.accentuation.selector import select_stress_option
from src.nlp.accentuation.types import StressOption
from src.nlp.utils.normalize_unicode import normalize_word

if TYPE_CHECKING:
    from src.nlp.analyzer_service.base import StressAnalyzer

logger = getLogger(__name__)


class LithuanianAccentuationService:
    """
    Service for accenting Lithuanian words by grammatical case.

    Features:
    - Pluggable analyzer (phonology_engine by default, fixtures in tests)
    - Case selection by exact Lithuanian label or by English case name
    - Code-point exact diacritic insertion (grave, acute, tilde)

    Errors from selection and rendering propagate unchanged. Rendering errors
    mean the analyzer returned an impossible placement and are logged with
    the word, case and option before being re-raised.
    """

    def __init__(
        self,
        analyzer: Optional["StressAnalyzer"] = None,
        config: Optional[AccentuationConfig] = None
    ):
        """
        Initialize accentuation service.

        Args:
            analyzer: Source of stress options.
                      If None, uses PhonologyEngineAnalyzer built from config.
            config: Service configuration (defaults to AccentuationConfig())
        """
        self.config = config or AccentuationConfig()

        if analyzer is None:
            # Imported here: the analyzer package depends on this package's types
            from src.nlp.analyzer_service.phonology_engine_analyzer import PhonologyEngineAnalyzer
            analyzer = PhonologyEngineAnalyzer(config=self.config)

        self.analyzer = analyzer
        logger.info(f"Accentuation service initialized with analyzer: {type(analyzer).__name__}")

    def prepare_word(self, word: str) -> str:
        """Apply configured normalization to an input word."""
        return normalize_word(
            word,
            nfc=self.config.normalize_unicode,
            lowercase=self.config.lowercase_input
        )

    def get_stress_options(self, word: str) -> List[StressOption]:
        """
        Get all candidate stress options for a word.

        Raises:
            AnalyzerError: Analyzer unavailable or returned malformed data
        """
        return self.analyzer.analyze(self.prepare_word(word))

    def get_accentuation(self, word: str, case: str) -> str:
        """
        Accent a word for a grammatical case.

        Args:
            word: Lithuanian word (e.g., "gera")
            case: Lithuanian case label, matched exactly (e.g., "Vardininkas")

        Returns:
            Word with one diacritic inserted (e.g., "gerà"). Other code points
            are returned as given unless config.normalize_unicode is set, in
            which case the result is NFC.

        Raises:
            CaseNotFoundError: Analyzer offers no option for case
            IndexOutOfRangeError: Option points outside the word
            MissingMappingError: Stressed letter cannot carry the option's mark
            InvalidStressTypeError: Option has an unknown stress type
            AnalyzerError: Analyzer unavailable or returned malformed data
        """
        case = getattr(case, "value", case)
        prepared = self.prepare_word(word)
        options = self.analyzer.analyze(prepared)

        try:
            option = select_stress_option(options, case)
        except CaseNotFoundError as e:
            logger.debug(f"No stress option for '{word}' in case '{case}': {e}")
            raise

        return self._render(prepared, case, option)

    def get_accentuation_for_english_case(self, word: str, english_case: str) -> str:
        """
        Accent a word for a case given by its English name (e.g., "Accusative").

        Unknown names are translated to "UNKNOWN" and passed on unchanged.
        """
        return self.get_accentuation(word, translate_case_name(english_case))

    def get_all_accentuations(self, word: str) -> Dict[str, str]:
        """
        Accent a word for every case the analyzer offers.

        Returns:
            Dict of case label -> accented word, in analyzer order.
            The first option for each case wins, as in get_accentuation().

            Example for "gera":
            {"Vardininkas": "gerà", ...}
        """
        prepared = self.prepare_word(word)
        accentuations: Dict[str, str] = {}

        for option in self.analyzer.analyze(prepared):
            if option.grammatical_case in accentuations:
                continue
            accentuations[option.grammatical_case] = self._render(
                prepared, option.grammatical_case, option
            )

        return accentuations

    def _render(self, word: str, case: str, option: StressOption) -> str:
        try:
            return render_stress_option(word, option)
        except (IndexOutOfRangeError, MissingMappingError, InvalidStressTypeError) as e:
            logger.error(
                f"Analyzer returned unrenderable stress option for '{word}' "
                f"(case={case}, stress_type={option.stress_type}, "
                f"index={option.stressed_letter_index}): {e}"
            )
            raise

    def close(self):
        """Close the underlying analyzer."""
        if self.analyzer is not None:
            self.analyzer.close()
            logger.info("Accentuation service closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


_default_service: Optional[LithuanianAccentuationService] = None
_default_service_lock = threading.Lock()


def get_default_service() -> LithuanianAccentuationService:
    """Return the shared service used by get_accentuation(), creating it once."""
    global _default_service
    if _default_service is None:
        with _default_service_lock:
            if _default_service is None:
                _default_service = LithuanianAccentuationService()
    return _default_service


def get_accentuation(word: str, case: str) -> str:
    """
    Takes a word and a case, and returns it with Lithuanian accent marks.

    Example:
        >>> get_accentuation("gera", "Vardininkas")
        'gerà'
    """
    return get_default_service().get_accentuation(word, case)
