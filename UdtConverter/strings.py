# strings.py
# Copyright (c) 2025 Alex Prochot
#
# String helpers for values captured from TIA Portal UDT source.
"""Helpers that normalize raw regex captures (qualifiers, comments, bounds)."""

from __future__ import annotations
from typing import Optional

BOM = "\ufeff"


def strip_bom(content: str) -> str:
    """Drop a leading UTF-8 byte order mark left over from decoding."""
    return content[1:] if content.startswith(BOM) else content


def qualifier_enabled(value: Optional[str]) -> bool:
    """
    ExternalVisible / ExternalWritable values: anything other than a literal
    'false' (any case) counts as enabled, and so does a missing qualifier.
    """
    if value is None:
        return True
    return value.strip().lower() != "false"


def clean_text(value: Optional[str]) -> Optional[str]:
    """Strip a captured title/comment; blank text becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_bound(value: Optional[str]) -> int:
    """Convert one captured array bound to int. Raises ValueError if missing or not an integer."""
    if value is None or not value.strip():
        raise ValueError("missing array bound")
    return int(value.strip())
