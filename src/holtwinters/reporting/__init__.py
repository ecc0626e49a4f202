"""src/holtwinters/reporting/__init__.py"""

from __future__ import annotations

from .tables import RESULT_COLUMNS, result_frame, summarize_result

__all__ = [
    "RESULT_COLUMNS",
    "result_frame",
    "summarize_result",
]
