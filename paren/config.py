from __future__ import annotations
import os
from typing import Optional

COLOR_MODES = ("auto", "always", "never")


def get_recursion_limit() -> Optional[int]:
    """Python recursion limit requested through PAREN_RECURSION_LIMIT, if any."""
    raw = os.environ.get('PAREN_RECURSION_LIMIT', '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"PAREN_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"PAREN_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def get_color_mode() -> str:
    raw = os.environ.get('PAREN_COLOR', 'auto').strip().lower()
    # unknown values fall back to auto
    return raw if raw in COLOR_MODES else 'auto'
