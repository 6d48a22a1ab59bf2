# patterns.py
# Copyright (c) 2025 Alex Prochot
#
# Regex patterns used by the UDT parser.
"""Compiled regex patterns for TIA Portal UDT exports, plus the block iterator."""


from __future__ import annotations
import re
from typing import Iterator

from .errors import ParseError

_FLAGS = re.IGNORECASE | re.MULTILINE | re.VERBOSE

# Any character not starting END_TYPE or the next TYPE header, so a match stays inside its own block
_IN_BLOCK = r'(?:(?!END_TYPE\b|^[ \t]*TYPE\s+")[\s\S])'

# TYPE "<name>" at the start of a line (a UTF-8 BOM may precede the first one)
RE_UDT_HEADER = re.compile(
    r'^[ \t\ufeff]*(?P<keyword>TYPE)\s+"(?P<udt_type>[^"\r\n]*)"',
    re.IGNORECASE | re.MULTILINE,
)

# Whole UDT block, matched starting at the TYPE keyword of a header
RE_UDT_BLOCK = re.compile(
    r'''
    TYPE\s+"(?P<udt_type>[^"\r\n]*)"
    (?:\s*TITLE\s*=[ \t]*(?P<udt_title>[^\r\n]*?)[ \t]*\r?\n)?
    (?:\s*(?:(?:AUTHOR|FAMILY|NAME)\s*:[^\r\n]*|\{[^}]*\}[^\r\n]*)\r?\n)*
    (?:\s*VERSION\s*:[ \t]*(?P<udt_version>[^\r\n]*?)[ \t]*(?:\r?\n|$))?
    (?:''' + _IN_BLOCK + r'''*?\bSTRUCT\b
        (?P<udt_body>''' + _IN_BLOCK + r'''*?)
        \bEND_STRUCT\b[ \t]*;?)?
    ''' + _IN_BLOCK + r'''*?
    \bEND_TYPE\b
    ''',
    _FLAGS,
)

# Lookahead picking one qualifier out of { ... } regardless of its position
_QUALIFIER = r"(?=(?:[^}}]*?\b{key}\s*:=\s*'(?P<{group}>[^'}}]*)')?)"

# name [{ qualifiers }] : [Array[lo..hi] of] type [:= default]; [// description]
RE_MEMBER = re.compile(
    r'''
    ^[ \t]*(?P<name_quote>")?(?P<member_name>(?(name_quote)[^"\r\n]+|\w+))(?(name_quote)")[ \t]*
    (?:\{''' +
        _QUALIFIER.format(key="ExternalAccessible", group="ext_acs") +
        _QUALIFIER.format(key="ExternalVisible", group="ext_vis") +
        _QUALIFIER.format(key="ExternalWritable", group="ext_wrt") + r'''
        [^}]*
    \}[ \t]*)?
    :\s*
    (?:Array\s*\[(?P<bound_lower>[^\].]*)(?:\.\.(?P<bound_upper>[^\]]*))?\]\s*of\s+)?
    (?P<type_quote>")?(?P<member_type>(?(type_quote)[^"\r\n]+|\w+(?:[ \t]*\[[^\]\r\n]*\])?))(?(type_quote)")
    (?:\s*:=[^;\r\n]*)?
    \s*;
    [ \t]*(?://[ \t]*(?P<member_description>[^\r\n]*?))?[ \t]*\r?$
    ''',
    _FLAGS,
)

# Custom length strings, e.g. String[20]
RE_STRING_LENGTH = re.compile(r'^STRING\s*\[\s*(\d+)\s*\]$', re.IGNORECASE)

# Line comments and (* block comments *) allowed between member declarations
RE_COMMENT = re.compile(r"//[^\r\n]*|\(\*[\s\S]*?\*\)")


def iter_udt_blocks(content: str) -> Iterator[re.Match]:
    """
    Yield one RE_UDT_BLOCK match per TYPE header, in input order.
    Raises ParseError as soon as a header's block is incomplete.
    """
    for header in RE_UDT_HEADER.finditer(content):
        name = header.group("udt_type")
        m = RE_UDT_BLOCK.match(content, header.start("keyword"))
        if m is None:
            raise ParseError(f'UDT "{name}": missing END_TYPE')
        if m.group("udt_version") is None:
            raise ParseError(f'UDT "{name}": missing VERSION')
        if m.group("udt_body") is None:
            raise ParseError(f'UDT "{name}": missing STRUCT ... END_STRUCT body')
        yield m


def _check_gap(udt_name: str, gap: str) -> None:
    leftover = RE_COMMENT.sub("", gap).strip()
    if leftover:
        line = leftover.splitlines()[0].strip()
        raise ParseError(f'UDT "{udt_name}": unrecognized member declaration: {line}')


def iter_members(udt_name: str, body: str) -> Iterator[re.Match]:
    """
    Yield the RE_MEMBER matches of a STRUCT body in order.
    Anything between declarations other than whitespace or comments raises ParseError,
    so a line the member grammar cannot read is never dropped silently.
    """
    pos = 0
    for m in RE_MEMBER.finditer(body):
        _check_gap(udt_name, body[pos:m.start()])
        pos = m.end()
        yield m
    _check_gap(udt_name, body[pos:])
