"""Detection orchestration.

This module sequences normalization, script classification and either
the direct single-script lookup or trigram scoring into one result.
Failures surface as DetectionError subclasses from ``detect_query`` and
as None from the convenience functions.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import DIRECT_CONFIDENCE
from core.errors import DetectionError, NoCandidatesError, NotEnoughTextError
from core.logging_config import get_logger
from core.types import Info, Method
from detection.confidence import confidence_from_scores
from detection.filter_list import FilterList, candidates_for_script
from detection.profile_distance import score_candidates
from detection.query import Options, Query
from detection.script_detection import ScriptDetection, detect_dominant_script
from detection.text_normalizer import NormalizedText
from detection.trigram_extraction import extract_trigrams
from profiles.languages import Language, languages_for_script
from profiles.scripts import Script

_LOGGER = get_logger(__name__)
_KANA_SCRIPTS = (Script.HIRAGANA, Script.KATAKANA)


def detect_query(query: Query) -> Info:
    """Run the full detection pipeline for one query.

    Args:
        query: Text and options.

    Returns:
        Detected language, script and confidence.

    Raises:
        NotEnoughTextError: If the text has no usable letters.
        NoCandidatesError: If filtering removes every candidate.
    """
    text = NormalizedText(query.text)
    if text.is_empty():
        raise NotEnoughTextError("Input text has no letters. Provide text with letters to detect.")
    detection = detect_dominant_script(
        text,
        allowed_scripts=query.options.allowed_scripts,
        min_text_length=query.options.min_text_length,
    )
    _LOGGER.debug(
        "script_classified",
        script=detection.script.value,
        method=detection.method.value,
        counts={script.value: count for script, count in detection.counts},
    )
    if detection.method is Method.DIRECT:
        return _direct_result(detection, query.options.filter_list)
    return _scored_result(text, detection, query.options.filter_list)


def _direct_result(detection: ScriptDetection, filter_list: FilterList) -> Info:
    language = _resolve_direct_language(detection)
    if not filter_list.is_allowed(language):
        raise NoCandidatesError(
            f"Script {detection.script.value} maps only to {language.code}, "
            "which the filter list excludes."
        )
    return Info(language=language, script=detection.script, confidence=DIRECT_CONFIDENCE)


def _resolve_direct_language(detection: ScriptDetection) -> Language:
    if detection.script is Script.MANDARIN:
        if any(detection.count_for(script) > 0 for script in _KANA_SCRIPTS):
            return Language.JPN
    return languages_for_script(detection.script)[0]


def _scored_result(
    text: NormalizedText,
    detection: ScriptDetection,
    filter_list: FilterList,
) -> Info:
    ranking = extract_trigrams(text, detection.script)
    candidates = candidates_for_script(detection.script, filter_list)
    scores = score_candidates(ranking, candidates)
    confidence = confidence_from_scores(scores, len(ranking))
    _LOGGER.debug(
        "candidates_scored",
        script=detection.script.value,
        trigrams=len(ranking),
        distances={score.language.code: score.distance for score in scores},
    )
    return Info(language=scores[0].language, script=detection.script, confidence=confidence)


def detect(text: str) -> Info | None:
    """Detect language and script with default options.

    Args:
        text: Raw input text.

    Returns:
        Detection result, or None when detection fails.
    """
    return detect_with_options(text, Options())


def detect_with_options(text: str, options: Options) -> Info | None:
    """Detect language and script under caller constraints.

    Args:
        text: Raw input text.
        options: Filter list and length constraints.

    Returns:
        Detection result, or None when detection fails.
    """
    try:
        return detect_query(Query(text=text, options=options))
    except DetectionError as error:
        _LOGGER.debug("detection_failed", error_type=type(error).__name__, reason=str(error))
        return None


def detect_lang(text: str) -> Language | None:
    """Detect only the language of a text."""
    info = detect(text)
    return info.language if info is not None else None


def detect_script(text: str, options: Options | None = None) -> Script | None:
    """Detect only the dominant script of a text.

    Args:
        text: Raw input text.
        options: Optional constraints; only script-related fields apply.

    Returns:
        Dominant script, or None when the text has no scripted letters.
    """
    resolved = options or Options()
    try:
        detection = detect_dominant_script(
            NormalizedText(text),
            allowed_scripts=resolved.allowed_scripts,
            min_text_length=resolved.min_text_length,
        )
    except NotEnoughTextError:
        return None
    return detection.script


def detect_many(texts: Iterable[str], options: Options | None = None) -> list[Info | None]:
    """Detect languages for multiple texts.

    Args:
        texts: Iterable of raw texts.
        options: Constraints shared by every text.

    Returns:
        Results aligned to the input order.
    """
    resolved = options or Options()
    return [detect_with_options(text, resolved) for text in texts]


class Detector:
    """Reusable detector bound to one set of options."""

    def __init__(self, options: Options | None = None) -> None:
        self._options = options or Options()

    @classmethod
    def with_allowlist(cls, languages: Iterable[Language]) -> "Detector":
        """Build a detector restricted to the given languages."""
        return cls(Options(filter_list=FilterList.allow(languages)))

    @classmethod
    def with_denylist(cls, languages: Iterable[Language]) -> "Detector":
        """Build a detector that never answers the given languages."""
        return cls(Options(filter_list=FilterList.deny(languages)))

    @property
    def options(self) -> Options:
        """Options applied to every call."""
        return self._options

    def detect(self, text: str) -> Info | None:
        """Detect language and script of a text."""
        return detect_with_options(text, self._options)

    def detect_lang(self, text: str) -> Language | None:
        """Detect only the language of a text."""
        info = self.detect(text)
        return info.language if info is not None else None

    def detect_script(self, text: str) -> Script | None:
        """Detect only the dominant script of a text."""
        return detect_script(text, self._options)

    def detect_many(self, texts: Iterable[str]) -> list[Info | None]:
        """Detect languages for multiple texts in input order."""
        return detect_many(texts, self._options)
