#!/usr/bin/env python3
"""
Accentuation Data Types

Pydantic models and enums describing the stress options produced by the
phonological analyzer.

Example analyzer record:
    {
        "grammatical_case": "Vardininkas",
        "stress_type": 0,
        "stressed_letter_index": 3
    }
"""

from enum import Enum, IntEnum
from pydantic import BaseModel, Field, ConfigDict, StrictInt


class StressType(IntEnum):
    """Lithuanian pitch-accent classes."""
    SHORT = 0       # grave on short vowels
    ACUTE = 1       # acute on long and nasal vowels
    CIRCUMFLEX = 2  # tilde, also on l, m, r


class GrammaticalCase(str, Enum):
    NOMINATIVE = "Vardininkas"
    GENITIVE = "Kilmininkas"
    DATIVE = "Naudininkas"
    ACCUSATIVE = "Galininkas"
    INSTRUMENTAL = "Įnagininkas"
    LOCATIVE = "Vietininkas"
    VOCATIVE = "Šauksmininkas"


class StressOption(BaseModel):
    """
    One candidate stress placement for a word form.

    grammatical_case is kept as a plain string: the analyzer may emit labels
    outside GrammaticalCase and selection compares them verbatim.
    """

    grammatical_case: str = Field(
        ...,
        description="Lithuanian case label as emitted by the analyzer",
        examples=["Vardininkas", "Galininkas"]
    )
    # Strict: bools and numeric strings are rejected, out-of-range ints are
    # left for the renderer to report as InvalidStressTypeError
    stress_type: StrictInt = Field(
        ...,
        description="Pitch-accent class (0 = grave, 1 = acute, 2 = tilde)",
        examples=[0, 1, 2]
    )
    stressed_letter_index: int = Field(
        ...,
        ge=0,
        description="Index of the stressed letter in Unicode code points (0-indexed)",
        examples=[1, 3]
    )

    model_config = ConfigDict(extra="ignore", frozen=True)
