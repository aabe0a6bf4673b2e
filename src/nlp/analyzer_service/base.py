"""
Analyzer collaborator interface.

The accentuation service never computes stress itself; it asks an analyzer
for candidate stress options. Any object with analyze() and close() works.
"""

from typing import Any, Iterable, List, Mapping, Protocol, Union, runtime_checkable
from logging import getLogger

from pydantic import ValidationError

from src.nlp.accentuation.errors import AnalyzerError
from src.nlp.accentuation.types import StressOption

logger = getLogger(__name__)


@runtime_checkable
class StressAnalyzer(Protocol):
    """Source of candidate stress options for a word."""

    def analyze(self, word: str) -> List[StressOption]:
        ...

    def close(self) -> None:
        ...


def parse_stress_options(
    word: str,
    records: Iterable[Union[Mapping[str, Any], StressOption]]
) -> List[StressOption]:
    """
    Validate raw analyzer records into StressOption models.

    Args:
        word: Word the records belong to (for error messages)
        records: Dicts with grammatical_case, stress_type and
                 stressed_letter_index (extra keys are ignored)

    Returns:
        StressOptions in the same order as records

    Raises:
        AnalyzerError: A record is missing fields or has invalid values
    """
    options = []
    for position, record in enumerate(records):
        if isinstance(record, StressOption):
            options.append(record)
            continue
        try:
            options.append(StressOption.model_validate(record))
        except ValidationError as e:
            logger.error(f"Malformed stress option #{position} for '{word}': {record!r}")
            raise AnalyzerError(
                f"Analyzer returned malformed stress option #{position} for '{word}': {e}"
            ) from e
    return options
