# udt_parser.py
# Copyright (c) 2025 Alex Prochot
#
# Parser for TIA Portal UDT source exports.
"""Parser turning TIA Portal .udt text into Udt models with packed BOOL targets."""


from __future__ import annotations
import logging
import re
from typing import List, Optional, Tuple

from . import models
from . import data_types
from .errors import ParseError
from .patterns import iter_members, iter_udt_blocks
from .strings import (
    strip_bom,
    qualifier_enabled,
    clean_text,
    parse_bound,
)

__all__ = ["UdtParser", "ParseError", "get_udts"]

logger = logging.getLogger(__name__)


class UdtParser:
    """
    Parses one .udt export (possibly holding several TYPE blocks) and supports:
      • Translating Siemens elementary types to Rockwell types
      • Deriving ExternalAccess from ExternalVisible / ExternalWritable qualifiers
      • Packing scalar BOOLs into hidden SINT words (8 bits per word)
    Notes:
      • Hidden words are inserted at index target_num, so they collect at the
        front of the member list in target order.
      • BOOL arrays are not packed; the writer pads them to 32 bit multiples.
    """

    def __init__(self, file_content: str) -> None:
        self.file_content: str = strip_bom(file_content)
        self.udts: List[models.Udt] = []

    # ---------- Public API ----------
    def parse(self) -> List[models.Udt]:
        udts: List[models.Udt] = []
        for block in iter_udt_blocks(self.file_content):
            udt = self._parse_udt(block)
            udts.append(udt)
            logger.debug(
                "Parsed UDT %s (version %s): %d members, %d hidden",
                udt.name, udt.version, len(udt.members), len(udt.hidden_members()),
            )
        if not udts:
            raise ParseError("no UDT definitions found")
        self.udts = udts
        return self.udts

    # ---------- Internal parsing ----------
    def _parse_udt(self, block: re.Match) -> models.Udt:
        udt = models.Udt(
            name=block.group("udt_type"),
            version=block.group("udt_version").strip(),
            description=clean_text(block.group("udt_title")),
        )
        targets = models.BoolTargets()
        for member_match in iter_members(udt.name, block.group("udt_body")):
            self._add_member(udt, member_match, targets)
        return udt

    def _add_member(self, udt: models.Udt, m: re.Match, targets: models.BoolTargets) -> None:
        member = models.UdtMember(
            name=m.group("member_name"),
            data_type=data_types.convert_type(m.group("member_type")),
            description=clean_text(m.group("member_description")),
            array_bounds=self._get_bounds(udt.name, m),
            external_read=qualifier_enabled(m.group("ext_vis")),
            external_write=qualifier_enabled(m.group("ext_wrt")),
        )
        if member.is_scalar_bool:
            self._assign_target(udt, member, targets)
        udt.add_member(member)

    @staticmethod
    def _assign_target(udt: models.Udt, member: models.UdtMember, targets: models.BoolTargets) -> None:
        """
        Point a scalar BOOL at its hidden SINT word, creating the word when the
        BOOL is bit 0 of it, then advance the accumulator.
        """
        target_name = targets.target_name(udt.name)
        if targets.bit_num == 0:
            udt.members.insert(targets.target_num, models.UdtMember.hidden_word(target_name))
        member.target = target_name
        member.bit_num = targets.bit_num
        targets.inc()

    @staticmethod
    def _get_bounds(udt_name: str, m: re.Match) -> Optional[Tuple[int, int]]:
        lower, upper = m.group("bound_lower"), m.group("bound_upper")
        if lower is None and upper is None:
            return None
        where = f'UDT "{udt_name}", member "{m.group("member_name")}"'
        try:
            bounds = parse_bound(lower), parse_bound(upper)
        except ValueError as e:
            raise ParseError(f"{where}: invalid array bounds [{lower}..{upper}] ({e})") from e
        if bounds[0] < 0 or bounds[1] < bounds[0]:
            raise ParseError(f"{where}: invalid array bounds [{lower}..{upper}] (need 0 <= lower <= upper)")
        return bounds


def get_udts(content: str) -> List[models.Udt]:
    """Parse .udt text and return its UDTs in input order; the last one is the export target."""
    return UdtParser(content).parse()
