"""Dominant script detection.

This module tallies letters per script, picks the dominant script and
decides whether that script alone determines the language.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import AbstractSet

from core.constants import DEFAULT_MIN_TEXT_LENGTH
from core.errors import NotEnoughTextError
from core.types import Method
from detection.text_normalizer import NormalizedText
from profiles.languages import is_determinate_script
from profiles.scripts import Script, classify_char


@dataclass(frozen=True)
class ScriptDetection:
    """Outcome of script classification.

    Attributes:
        script: Dominant script.
        method: DIRECT for single-language scripts, NGRAM_BASED otherwise.
        counts: Per-script letter tally in script ordinal order.
    """

    script: Script
    method: Method
    counts: tuple[tuple[Script, int], ...]

    @property
    def total(self) -> int:
        """Number of scripted letters seen."""
        return sum(count for _, count in self.counts)

    def count_for(self, script: Script) -> int:
        """Return the tally of one script, zero when absent."""
        for counted_script, count in self.counts:
            if counted_script is script:
                return count
        return 0


def count_scripts(
    text: NormalizedText,
    allowed_scripts: AbstractSet[Script] | None = None,
) -> Counter[Script]:
    """Tally letters per script.

    Args:
        text: Normalized input text.
        allowed_scripts: Optional set of scripts to count; others are ignored.

    Returns:
        Counter keyed by script. Unmapped letters are not counted.
    """
    counts: Counter[Script] = Counter()
    for character in text.iter_letters():
        script = classify_char(character)
        if script is None:
            continue
        if allowed_scripts is not None and script not in allowed_scripts:
            continue
        counts[script] += 1
    return counts


def detect_dominant_script(
    text: NormalizedText,
    allowed_scripts: AbstractSet[Script] | None = None,
    min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
) -> ScriptDetection:
    """Classify the dominant script of a text and the detection method.

    A script holding more than half of all scripted letters wins. When
    no script has a majority the highest count wins, and equal counts go
    to the script defined first in ``Script``.

    Args:
        text: Normalized input text.
        allowed_scripts: Optional set of scripts to consider.
        min_text_length: Minimum number of scripted letters required.

    Returns:
        Dominant script, method and tally.

    Raises:
        NotEnoughTextError: If fewer than min_text_length letters carry a script.
    """
    counts = count_scripts(text, allowed_scripts)
    total = sum(counts.values())
    if total == 0:
        raise NotEnoughTextError(
            "Input has no letters of a supported script. Provide alphabetic text to detect."
        )
    if total < min_text_length:
        raise NotEnoughTextError(
            f"Input has {total} scripted letters, fewer than the required {min_text_length}. "
            "Provide a longer text or lower min_text_length."
        )
    script = _pick_dominant(counts, total)
    method = Method.DIRECT if is_determinate_script(script) else Method.NGRAM_BASED
    ordered_counts = tuple(sorted(counts.items(), key=lambda item: item[0].ordinal))
    return ScriptDetection(script=script, method=method, counts=ordered_counts)


def _pick_dominant(counts: Counter[Script], total: int) -> Script:
    for script, count in counts.items():
        if count * 2 > total:
            return script
    return max(counts, key=lambda script: (counts[script], -script.ordinal))
