"""Unit tests for detection orchestration."""

from __future__ import annotations

import pytest

from core.errors import NoCandidatesError, NotEnoughTextError
from core.types import Info
from detection.detector import (
    Detector,
    detect,
    detect_lang,
    detect_many,
    detect_query,
    detect_script,
    detect_with_options,
)
from detection.filter_list import FilterList
from detection.query import Options, Query
from profiles.languages import Language
from profiles.scripts import Script


def test_detect_returns_none_for_empty_text() -> None:
    """Empty input should not produce a result."""
    assert detect("") is None


def test_detect_returns_none_for_punctuation_only_text() -> None:
    """Digits and punctuation should not produce a result."""
    assert detect("123456 !!! ???") is None


def test_detect_query_raises_for_empty_text() -> None:
    """Pipeline should signal empty input explicitly."""
    with pytest.raises(NotEnoughTextError):
        detect_query(Query(text=""))


def test_detect_query_raises_for_text_without_letters() -> None:
    """Digits and punctuation alone should be rejected before script tallying."""
    with pytest.raises(NotEnoughTextError, match="no letters"):
        detect_query(Query(text="2024-01-01 12:00 !!!"))


def test_detect_greek_directly() -> None:
    """A single-language script should resolve with full confidence."""
    info = detect("Καλημέρα κόσμε")

    assert info == Info(language=Language.ELL, script=Script.GREEK, confidence=1.0)


def test_detect_korean_directly() -> None:
    """Hangul should resolve to Korean."""
    assert detect_lang("안녕하세요 세계") is Language.KOR


def test_detect_japanese_from_kana() -> None:
    """Hiragana-only text should resolve to Japanese."""
    info = detect("ひらがなです")

    assert info is not None
    assert (info.language, info.script) == (Language.JPN, Script.HIRAGANA)


def test_detect_japanese_when_han_mixes_with_kana() -> None:
    """Han-dominant text with kana should resolve to Japanese."""
    info = detect("東京は日本の首都です")

    assert info is not None
    assert (info.language, info.script) == (Language.JPN, Script.MANDARIN)


def test_detect_mandarin_from_han_only() -> None:
    """Han text without kana should resolve to Mandarin."""
    assert detect_lang("我们都是中国人") is Language.CMN


def test_direct_result_must_pass_filter_list() -> None:
    """A filtered-out direct language should give no result."""
    options = Options(filter_list=FilterList.allow([Language.ENG]))

    assert detect_with_options("Καλημέρα κόσμε", options) is None


def test_detect_query_raises_when_filter_empties_script(french_text: str) -> None:
    """Filtering every candidate of the script should fail."""
    options = Options(filter_list=FilterList.allow([Language.RUS]))
    query = Query(text=french_text, options=options)

    with pytest.raises(NoCandidatesError):
        detect_query(query)


def test_single_candidate_gets_fixed_confidence() -> None:
    """One remaining candidate should report the fixed confidence."""
    options = Options(filter_list=FilterList.allow([Language.ENG]))

    info = detect_with_options("the people of the city", options)

    assert info is not None
    assert (info.language, info.confidence) == (Language.ENG, 0.5)


def test_detect_is_idempotent(russian_text: str) -> None:
    """Repeated calls should return identical results."""
    assert detect(russian_text) == detect(russian_text)


def test_detect_script_returns_dominant_script(russian_text: str) -> None:
    """Script-only detection should skip language scoring."""
    assert detect_script(russian_text) is Script.CYRILLIC
    assert detect_script("!!!") is None


def test_detect_many_keeps_input_order(french_text: str, russian_text: str) -> None:
    """Batch results should align with inputs, None for failures."""
    results = detect_many([french_text, "", russian_text])

    assert [info.language if info else None for info in results] == [
        Language.FRA,
        None,
        Language.RUS,
    ]


def test_detector_with_allowlist_only_answers_allowed() -> None:
    """Allow-listed detector should pick among allowed languages."""
    detector = Detector.with_allowlist([Language.FRA, Language.SPA])

    assert detector.detect_lang("the people of the city") in {Language.FRA, Language.SPA}


def test_detector_with_denylist_never_answers_denied(french_text: str) -> None:
    """Deny-listed detector should never return a denied language."""
    detector = Detector.with_denylist([Language.FRA])

    info = detector.detect(french_text)

    assert info is not None and info.language is not Language.FRA


def test_detector_applies_script_restriction() -> None:
    """Detector options should apply to script detection."""
    detector = Detector(Options(allowed_scripts=frozenset({Script.CYRILLIC})))

    assert detector.detect_script("hello world мир") is Script.CYRILLIC
    assert detector.detect_many(["hello"]) == [None]
