"""Identifier cleanup for enum and member names."""

from __future__ import annotations

import re

_NON_WORD_RUN = re.compile(r"\W+")

FALLBACK_IDENTIFIER = "_"


def sanitize(raw: str) -> str:
    """Collapses each run of non-word characters into a single underscore."""

    cleaned = _NON_WORD_RUN.sub("_", raw.strip())
    return cleaned or FALLBACK_IDENTIFIER
