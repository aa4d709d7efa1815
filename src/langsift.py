"""Public SDK surface for langsift.

This module provides a stable import path for library users.
It re-exports the detection operations and typed models.
"""

from __future__ import annotations

from core.errors import (
    DetectionError,
    LangsiftError,
    LangsiftOptionsError,
    NoCandidatesError,
    NotEnoughTextError,
)
from core.types import Info, Method
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

__all__ = [
    "DetectionError",
    "Detector",
    "FilterList",
    "Info",
    "LangsiftError",
    "LangsiftOptionsError",
    "Language",
    "Method",
    "NoCandidatesError",
    "NotEnoughTextError",
    "Options",
    "Query",
    "Script",
    "detect",
    "detect_lang",
    "detect_many",
    "detect_query",
    "detect_script",
    "detect_with_options",
]
