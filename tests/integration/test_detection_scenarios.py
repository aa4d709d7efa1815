"""Integration tests for end-to-end language detection."""

from __future__ import annotations

from pathlib import Path

import pytest

import langsift
from langsift import FilterList, Language, Options, Script

_UKRAINIAN_TEXT = "Це було дуже добре, і вона також знає, що він не прийде до міста"
_PARAGRAPHS_DIR = Path(__file__).resolve().parents[1] / "fixtures" / "texts" / "bird_migration"
_LONG_LATIN_CODES = ("eng", "fra", "deu", "spa", "por", "ita", "nld")
_SHORTER_CODES = ("pol", "rus", "ukr", "bul")


def _paragraph(code: str) -> str:
    return (_PARAGRAPHS_DIR / f"{code}.txt").read_text(encoding="utf-8").strip()


def test_french_text_detects_french(french_text: str) -> None:
    """French sample should detect as French Latin text."""
    info = langsift.detect(french_text)

    assert info is not None
    assert (info.language, info.script) == (Language.FRA, Script.LATIN)
    assert info.confidence > 0


def test_russian_text_detects_russian(russian_text: str) -> None:
    """Russian sample should detect as Russian Cyrillic text."""
    info = langsift.detect(russian_text)

    assert info is not None
    assert (info.language, info.script) == (Language.RUS, Script.CYRILLIC)


def test_ukrainian_text_detects_ukrainian() -> None:
    """Ukrainian sample should not be confused with Russian."""
    assert langsift.detect_lang(_UKRAINIAN_TEXT) is Language.UKR


def test_long_english_text_is_reliable() -> None:
    """Long unambiguous English text should clear the reliability bar."""
    text = _paragraph("eng")
    info = langsift.detect(text)

    assert sum(character.isascii() and character.isalpha() for character in text) >= 300
    assert info is not None
    assert info.language is Language.ENG
    assert info.confidence > 0.5
    assert info.is_reliable()


def test_confidence_stays_in_unit_interval(french_text: str, russian_text: str) -> None:
    """Every detected confidence should lie in [0, 1]."""
    results = langsift.detect_many([french_text, russian_text, _paragraph("eng"), "Γεια σου"])

    assert all(info is not None and 0.0 <= info.confidence <= 1.0 for info in results)


def test_allow_list_result_is_always_allowed(french_text: str) -> None:
    """Results should never fall outside the allow-list."""
    allowed = {Language.ENG, Language.DEU}
    options = Options(filter_list=FilterList.allow(allowed))

    info = langsift.detect_with_options(french_text, options)

    assert info is not None and info.language in allowed


def test_deny_list_result_is_never_denied(russian_text: str) -> None:
    """Results should never be a denied language."""
    options = Options(filter_list=FilterList.deny([Language.RUS]))

    info = langsift.detect_with_options(russian_text, options)

    assert info is not None and info.language in {Language.UKR, Language.BUL}


def test_punctuation_only_text_has_no_result() -> None:
    """Input without letters should give no result."""
    assert langsift.detect("123456 !!! ???") is None


def test_detector_is_reusable(french_text: str, russian_text: str) -> None:
    """A configured detector should give the same answers on reuse."""
    detector = langsift.Detector.with_denylist([Language.ENG])

    first = detector.detect_many([french_text, russian_text])
    second = detector.detect_many([french_text, russian_text])

    assert first == second


@pytest.mark.parametrize("code", _LONG_LATIN_CODES)
def test_long_latin_paragraph_is_confident(code: str) -> None:
    """Long Latin paragraphs should detect their language confidently."""
    text = _paragraph(code)
    info = langsift.detect(text)

    assert sum(character.isalpha() for character in text) >= 300
    assert info is not None
    assert info.language is Language.from_code(code)
    assert info.confidence > 0.5


@pytest.mark.parametrize("code", _SHORTER_CODES)
def test_paragraph_detects_its_language(code: str) -> None:
    """Shorter paragraphs should still detect their own language."""
    assert langsift.detect_lang(_paragraph(code)) is Language.from_code(code)
