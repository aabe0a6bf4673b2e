"""
Analyzer Service Package

Sources of candidate stress options for the accentuation service.

Usage:
    from src.nlp.analyzer_service import PhonologyEngineAnalyzer

    analyzer = PhonologyEngineAnalyzer()
    for option in analyzer.analyze("gera"):
        print(option.grammatical_case, option.stress_type, option.stressed_letter_index)
"""

from .base import StressAnalyzer, parse_stress_options
from .phonology_engine_analyzer import PhonologyEngineAnalyzer
from .static_analyzer import StaticStressAnalyzer

__all__ = [
    "StressAnalyzer",
    "parse_stress_options",
    "PhonologyEngineAnalyzer",
    "StaticStressAnalyzer",
]
