"""Detection options and queries.

This module bundles input text with caller constraints into immutable
values consumed by the detection pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from core.constants import DEFAULT_MIN_TEXT_LENGTH
from core.errors import LangsiftOptionsError
from detection.filter_list import FilterList
from profiles.scripts import Script


@dataclass(frozen=True)
class Options:
    """Caller constraints for one detection.

    Attributes:
        filter_list: Allow-list or deny-list of candidate languages.
        min_text_length: Minimum number of scripted letters required.
        allowed_scripts: Scripts counted during script detection; None
            counts every script.
    """

    filter_list: FilterList = field(default_factory=FilterList.all)
    min_text_length: int = DEFAULT_MIN_TEXT_LENGTH
    allowed_scripts: frozenset[Script] | None = None

    def __post_init__(self) -> None:
        if self.min_text_length < 1:
            raise LangsiftOptionsError(
                f"min_text_length must be at least 1, got {self.min_text_length}."
            )
        if self.allowed_scripts is not None and not self.allowed_scripts:
            raise LangsiftOptionsError(
                "allowed_scripts cannot be empty. Pass None to allow every script."
            )

    def with_filter_list(self, filter_list: FilterList) -> "Options":
        """Return a copy using another filter list."""
        return replace(self, filter_list=filter_list)


@dataclass(frozen=True)
class Query:
    """Input text paired with detection options.

    Attributes:
        text: Caller text, kept by reference.
        options: Detection constraints.
    """

    text: str
    options: Options = field(default_factory=Options)
