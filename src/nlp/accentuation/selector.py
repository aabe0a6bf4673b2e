"""
Stress option selection.

Picks the analyzer candidate for a grammatical case. Matching is exact string
equality on grammatical_case; callers starting from an English name should
run translate_case_name() first.
"""

from typing import Iterable
from logging import getLogger

from src.nlp.accentuation.errors import CaseNotFoundError
from src.nlp.accentuation.types import StressOption

logger = getLogger(__name__)


def select_stress_option(options: Iterable[StressOption], target_case: str) -> StressOption:
    """
    Return the first option whose grammatical_case equals target_case.

    The analyzer's ordering is authoritative: if a case occurs more than
    once, later entries are ignored.

    Args:
        options: Candidate stress options in analyzer order
        target_case: Lithuanian case label (e.g., "Vardininkas")

    Returns:
        Matching StressOption

    Raises:
        CaseNotFoundError: No option has the requested case
    """
    # GrammaticalCase members format as "GrammaticalCase.X" in f-strings
    target_case = getattr(target_case, "value", target_case)
    seen_cases = []

    for option in options:
        if option.grammatical_case == target_case:
            logger.debug(
                f"Selected option for '{target_case}': type={option.stress_type}, "
                f"index={option.stressed_letter_index}"
            )
            return option
        seen_cases.append(option.grammatical_case)

    raise CaseNotFoundError(target_case, seen_cases)
