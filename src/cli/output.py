"""Result rendering shared by CLI commands."""

from __future__ import annotations

from core.constants import UNDETERMINED_MARKER
from core.types import Info


def format_result(info: Info | None) -> str:
    """Render one detection result as a tab-separated row."""
    if info is None:
        return UNDETERMINED_MARKER
    return f"{info.language.code}\t{info.script.value}\t{info.confidence:.6f}"
