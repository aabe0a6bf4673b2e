#!/usr/bin/env python3
"""
Tests for Lithuanian Accentuation Service

Uses recorded analyzer output (see conftest.py), so the phonology engine
does not need to be installed.
"""

import logging

import pytest

from src.nlp.accentuation import accentuation_service
from src.nlp.accentuation import (
    AccentuationConfig,
    AnalyzerError,
    CaseNotFoundError,
    GrammaticalCase,
    IndexOutOfRangeError,
    InvalidStressTypeError,
    LithuanianAccentuationService,
    MissingMappingError,
    get_accentuation,
)
from src.nlp.analyzer_service import PhonologyEngineAnalyzer, StaticStressAnalyzer


class TestGetAccentuation:
    """Accenting words by Lithuanian case label."""

    @pytest.mark.parametrize("word,case,expected", [
        ("gera", "Vardininkas", "gerà"),
        ("gera", "UNKNOWN", "gẽra"),
        ("žodį", "Galininkas", "žõdį"),
        ("ranką", "Galininkas", "rànką"),
    ])
    def test_accentuation(self, service, word, case, expected):
        result = service.get_accentuation(word, case)
        print(f"\n  {word:10} [{case}] → {result}")
        assert result == expected

    def test_enum_case(self, service):
        assert service.get_accentuation("žodį", GrammaticalCase.ACCUSATIVE) == "žõdį"

    def test_case_not_found(self, service):
        with pytest.raises(CaseNotFoundError) as exc_info:
            service.get_accentuation("gera", "Kilmininkas")

        assert exc_info.value.case == "Kilmininkas"

    def test_case_not_found_with_enum_case(self, service):
        with pytest.raises(CaseNotFoundError) as exc_info:
            service.get_accentuation("gera", GrammaticalCase.GENITIVE)

        assert exc_info.value.case == "Kilmininkas"
        assert "'Kilmininkas'" in str(exc_info.value)
        assert "GrammaticalCase" not in str(exc_info.value)

    def test_unknown_word_has_no_cases(self, service):
        with pytest.raises(CaseNotFoundError):
            service.get_accentuation("nežinomas", "Vardininkas")

    def test_index_out_of_range_is_logged(self, service, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(IndexOutOfRangeError):
                service.get_accentuation("broken", "Vardininkas")

        assert "broken" in caplog.text
        assert "Vardininkas" in caplog.text

    def test_missing_mapping(self, service):
        with pytest.raises(MissingMappingError):
            service.get_accentuation("broken", "Kilmininkas")

    def test_invalid_stress_type(self, service):
        with pytest.raises(InvalidStressTypeError):
            service.get_accentuation("broken", "Naudininkas")

    def test_decomposed_input_is_kept_as_given(self, service):
        # Recorded output is keyed by the precomposed spelling
        with pytest.raises(CaseNotFoundError):
            service.get_accentuation("z\u030codi\u0328", "Galininkas")

    def test_decomposed_input_normalized_when_enabled(self, analyzer):
        service = LithuanianAccentuationService(
            analyzer=analyzer,
            config=AccentuationConfig(normalize_unicode=True)
        )
        result = service.get_accentuation("z\u030codi\u0328", "Galininkas")

        assert result == "\u017e\u00f5d\u012f"
        assert len(result) == 4

    def test_lowercase_input(self, analyzer):
        service = LithuanianAccentuationService(
            analyzer=analyzer,
            config=AccentuationConfig(lowercase_input=True)
        )
        assert service.get_accentuation("GERA", "Vardininkas") == "gerà"


class TestEnglishCaseNames:

    def test_english_case(self, service):
        assert service.get_accentuation_for_english_case("žodį", "Accusative") == "žõdį"

    def test_unknown_english_case_falls_through_to_sentinel(self, service):
        # "UNKNOWN" happens to be a label in the recorded output for "gera"
        assert service.get_accentuation_for_english_case("gera", "ablative") == "gẽra"

    def test_unknown_english_case_not_found(self, service):
        with pytest.raises(CaseNotFoundError):
            service.get_accentuation_for_english_case("žodį", "ablative")


class TestAllAccentuations:

    def test_first_option_per_case(self, service):
        assert service.get_all_accentuations("gera") == {
            "Vardininkas": "gerà",
            "UNKNOWN": "gẽra",
        }

    def test_unknown_word(self, service):
        assert service.get_all_accentuations("nežinomas") == {}

    def test_contract_error_propagates(self, service):
        with pytest.raises(IndexOutOfRangeError):
            service.get_all_accentuations("broken")

    def test_get_stress_options(self, service):
        options = service.get_stress_options("gera")
        assert [o.grammatical_case for o in options] == ["Vardininkas", "UNKNOWN", "Vardininkas"]


class TestServiceLifecycle:

    def test_default_analyzer_is_phonology_engine(self):
        service = LithuanianAccentuationService()
        assert isinstance(service.analyzer, PhonologyEngineAnalyzer)
        service.close()

    def test_close_closes_analyzer(self):
        class ClosingAnalyzer(StaticStressAnalyzer):
            closed = False

            def close(self):
                self.closed = True

        analyzer = ClosingAnalyzer({})
        with LithuanianAccentuationService(analyzer=analyzer):
            pass

        assert analyzer.closed

    def test_analyzer_error_propagates(self):
        config = AccentuationConfig(analyzer_module="no_such_phonology_module")
        with LithuanianAccentuationService(config=config) as service:
            with pytest.raises(AnalyzerError):
                service.get_accentuation("gera", "Vardininkas")


class TestModuleFunctions:

    def test_get_accentuation_uses_default_service(self, service, monkeypatch):
        monkeypatch.setattr(accentuation_service, "_default_service", service)
        assert get_accentuation("gera", "Vardininkas") == "gerà"

    def test_default_service_created_once(self, monkeypatch):
        monkeypatch.setattr(accentuation_service, "_default_service", None)
        first = accentuation_service.get_default_service()
        second = accentuation_service.get_default_service()
        assert first is second
