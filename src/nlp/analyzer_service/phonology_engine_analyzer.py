#!/usr/bin/env python3
"""
Phonology Engine Analyzer

Adapter for the `phonology_engine` package (Lithuanian phonological
analyzer). The engine's process() returns an iterator over processed text
chunks; for a single word the candidate stress options sit at:

    next(engine.process(word))[0][0]["stress_options"]["decoded_options"]

Each decoded option is a dict such as:
    {"grammatical_case": "Vardininkas", "stress_type": 0, "stressed_letter_index": 3, ...}

Install with: pip install phonology-engine
"""

import importlib
import threading
from typing import Any, List, Optional
from logging import getLogger

from src.nlp.accentuation.config import AccentuationConfig
from src.nlp.accentuation.errors import AnalyzerError
from src.nlp.accentuation.types import StressOption
from src.nlp.analyzer_service.base import parse_stress_options

logger = getLogger(__name__)


class PhonologyEngineAnalyzer:
    """
    StressAnalyzer backed by phonology_engine.PhonologyEngine.

    The engine is created on first use, so constructing the analyzer never
    fails even when the package is not installed.

    Usage:
        with PhonologyEngineAnalyzer() as analyzer:
            options = analyzer.analyze("gera")
    """

    def __init__(self, engine: Optional[Any] = None, config: Optional[AccentuationConfig] = None):
        """
        Initialize analyzer.

        Args:
            engine: Ready engine object with a process() method.
                    If None, one is created from config on first use.
            config: Where to import the engine from (defaults to phonology_engine.PhonologyEngine)
        """
        self.config = config or AccentuationConfig()
        self._engine = engine
        self._engine_lock = threading.Lock()

    @property
    def engine(self) -> Any:
        # One engine per analyzer even when first calls race
        if self._engine is None:
            with self._engine_lock:
                if self._engine is None:
                    self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Any:
        module_name = self.config.analyzer_module
        class_name = self.config.analyzer_class
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise AnalyzerError(
                f"Phonological analyzer module '{module_name}' is not installed. "
                f"Install it with: pip install phonology-engine"
            ) from e

        try:
            engine_class = getattr(module, class_name)
        except AttributeError as e:
            raise AnalyzerError(f"Module '{module_name}' has no analyzer class '{class_name}'") from e

        try:
            engine = engine_class()
        except Exception as e:
            raise AnalyzerError(f"Failed to initialize {module_name}.{class_name}: {e}") from e

        logger.info(f"Phonology engine initialized: {module_name}.{class_name}")
        return engine

    def analyze(self, word: str) -> List[StressOption]:
        """
        Get candidate stress options for a word.

        Args:
            word: Lithuanian word (e.g., "gera")

        Returns:
            StressOptions in engine order

        Raises:
            AnalyzerError: Engine unavailable or output has an unexpected shape
        """
        try:
            processed = next(iter(self.engine.process(word)))
            records = processed[0][0]["stress_options"]["decoded_options"]
            options = parse_stress_options(word, records)
        except AnalyzerError:
            raise
        except StopIteration as e:
            raise AnalyzerError(f"Phonology engine returned no output for '{word}'") from e
        except (AttributeError, KeyError, IndexError, TypeError) as e:
            raise AnalyzerError(
                f"Unexpected phonology engine output for '{word}': {type(e).__name__}: {e}"
            ) from e

        logger.debug(f"Analyzer returned {len(options)} stress option(s) for '{word}'")
        return options

    def close(self):
        """Release the engine."""
        if self._engine is not None:
            self._engine = None
            logger.info("Phonology engine closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
