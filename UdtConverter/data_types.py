# data_types.py
# Copyright (c) 2025 Alex Prochot
#
# Elementary type tables shared by the parser and the L5X writer.
"""Siemens to Rockwell elementary type translation and radix lookup."""


from __future__ import annotations
from typing import Dict, FrozenSet

from .patterns import RE_STRING_LENGTH

BOOL = "BOOL"
BIT = "BIT"
SINT = "SINT"

# Siemens name -> Rockwell name (keys upper case)
TYPE_MAP: Dict[str, str] = {
    "BYTE": "USINT",
    "WORD": "UINT",
    "DWORD": "UDINT",
    "LWORD": "ULINT",
    "TIME": "DINT",
    "LTIME": "LINT",
    "DTL": "LDT",
    "BOOL": BOOL,
    "SINT": SINT,
    "INT": "INT",
    "DINT": "DINT",
    "LINT": "LINT",
    "USINT": "USINT",
    "UINT": "UINT",
    "UDINT": "UDINT",
    "ULINT": "ULINT",
    "REAL": "REAL",
    "LREAL": "LREAL",
    "STRING": "STRING",
    "CHAR": "CHAR",
}

DECIMAL_TYPES: FrozenSet[str] = frozenset({
    "REAL", "SINT", "INT", "DINT", "LINT", "USINT", "UINT", "UDINT", "ULINT",
    BOOL, "LREAL", BIT,
})
CHAR_TYPES: FrozenSet[str] = frozenset({"CHAR", "STRING"})


def reformat_string(type_name: str) -> str:
    """
    Rewrite a custom length string such as 'String[20]' to 'STRING_20'.
    The STRING_20 type itself must be defined separately in Studio 5000.
    Anything else is returned unchanged.
    """
    m = RE_STRING_LENGTH.match(type_name.strip())
    if not m:
        return type_name
    return f"STRING_{m.group(1)}"


def convert_type(type_name: str) -> str:
    """Translate a TIA Portal type name to its Studio 5000 equivalent."""
    return TYPE_MAP.get(type_name.strip().upper()) or reformat_string(type_name)


def is_numeric_type(type_name: str) -> bool:
    return type_name.upper() in DECIMAL_TYPES


def is_char_type(type_name: str) -> bool:
    return type_name.upper() in CHAR_TYPES


def radix_for(type_name: str) -> str:
    if is_numeric_type(type_name):
        return "Decimal"
    if is_char_type(type_name):
        return "Char"
    return "NullType"
