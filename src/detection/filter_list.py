"""Caller-supplied language allow and deny lists.

This module narrows the candidate languages before scoring. A filter
holds either an allow-set or a deny-set, never both; an empty allow-set
means no restriction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.errors import LangsiftOptionsError
from profiles.languages import ALL_LANGUAGES, Language, languages_for_script
from profiles.scripts import Script


@dataclass(frozen=True)
class FilterList:
    """Allow-list or deny-list of languages.

    Attributes:
        allowed: Languages permitted; empty means every language.
        denied: Languages excluded.
    """

    allowed: frozenset[Language] = frozenset()
    denied: frozenset[Language] = frozenset()

    def __post_init__(self) -> None:
        if self.allowed and self.denied:
            raise LangsiftOptionsError(
                "A filter list cannot hold both allowed and denied languages. "
                "Use either an allow-list or a deny-list."
            )

    @classmethod
    def all(cls) -> "FilterList":
        """Filter that keeps every language."""
        return cls()

    @classmethod
    def allow(cls, languages: Iterable[Language]) -> "FilterList":
        """Filter that keeps only the given languages."""
        return cls(allowed=frozenset(languages))

    @classmethod
    def deny(cls, languages: Iterable[Language]) -> "FilterList":
        """Filter that drops the given languages."""
        return cls(denied=frozenset(languages))

    def is_allowed(self, language: Language) -> bool:
        """Check whether a language passes the filter."""
        if self.allowed:
            return language in self.allowed
        return language not in self.denied

    def candidates(self, languages: Iterable[Language] = ALL_LANGUAGES) -> frozenset[Language]:
        """Apply the filter to a language set.

        Args:
            languages: Full candidate set.

        Returns:
            Allow-set intersected with the full set, the full set minus
            the deny-set, or the full set when both are empty.
        """
        full_set = frozenset(languages)
        if self.allowed:
            return full_set & self.allowed
        return full_set - self.denied


def candidates_for_script(script: Script, filter_list: FilterList) -> tuple[Language, ...]:
    """Return filtered languages selected by a script, in ordinal order.

    Args:
        script: Dominant script of the input.
        filter_list: Caller filter.

    Returns:
        Languages whose selection script is the given script.
    """
    allowed = filter_list.candidates()
    return tuple(
        language
        for language in languages_for_script(script)
        if language.script is script and language in allowed
    )
