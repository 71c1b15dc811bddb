"""Shared alias and classification normalization.

Alias keys are the only place team names are compared loosely, so every
lookup into the alias table goes through :func:`normalize_alias`.
"""

from __future__ import annotations

import html as _html
import re

_WHITESPACE_RE = re.compile(r"\s+")


def clean_name(name) -> str:
    """Trim and collapse whitespace in a display name; ``None`` maps to ``""``."""
    if name is None:
        return ""
    return _WHITESPACE_RE.sub(" ", str(name)).strip()


def normalize_alias(name) -> str:
    """Normalize a team alias to its lookup key.

    Examples::

        >>> normalize_alias("  Texas A&amp;M ")
        'texas a&m'
        >>> normalize_alias("OHIO   STATE")
        'ohio state'
    """
    s = clean_name(name)
    if not s:
        return ""
    return clean_name(_html.unescape(s)).lower()


def normalize_classification(value) -> str:
    """Lower-case a subdivision tag, ``"unknown"`` when blank."""
    s = clean_name(value).lower()
    return s or "unknown"
