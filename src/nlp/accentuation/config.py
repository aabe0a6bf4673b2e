"""
Configuration for the accentuation service.
"""

from pydantic import BaseModel, Field, ConfigDict


class AccentuationConfig(BaseModel):
    """Configuration for LithuanianAccentuationService and its default analyzer."""
    normalize_unicode: bool = Field(
        default=False,
        description=(
            "NFC-normalize input words so decomposed letters (e + U+0328) count as one code point. "
            "The rendered word is then returned in NFC, not as given."
        )
    )
    lowercase_input: bool = Field(
        default=False,
        description="Lower-case input words before analysis (diacritic tables hold lower-case letters only)"
    )
    analyzer_module: str = Field(
        default="phonology_engine",
        description="Module providing the phonological analyzer"
    )
    analyzer_class: str = Field(
        default="PhonologyEngine",
        description="Analyzer class inside analyzer_module"
    )

    model_config = ConfigDict(extra="forbid", frozen=True)
