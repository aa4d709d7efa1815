"""langsift exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Detection failures share one base so callers can treat them as
"undetermined" without catching configuration mistakes.
"""

from __future__ import annotations


class LangsiftError(Exception):
    """Base exception for all langsift failures."""


class LangsiftConfigError(LangsiftError):
    """Raised for invalid runtime configuration."""


class LangsiftOptionsError(LangsiftError):
    """Raised for invalid detection options or options files."""


class DetectionError(LangsiftError):
    """Raised when the detection pipeline cannot produce a result."""


class NotEnoughTextError(DetectionError):
    """Raised when input has too few scripted letters to classify."""


class NoCandidatesError(DetectionError):
    """Raised when filtering leaves no language to choose from."""
