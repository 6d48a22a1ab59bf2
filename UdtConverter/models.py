# models.py
# Copyright (c) 2025 Alex Prochot
#
# Data models representing parsed UDTs, their members, and BOOL bit targets.
"""Domain models for UDTs, UDT members, and the BOOL bit-packing accumulator."""


from __future__ import annotations
from typing import List, Optional, Tuple
from dataclasses import dataclass, field

from . import data_types

# Name prefix of the hidden SINT members backing scalar BOOLs
HIDDEN_PREFIX = "ZZZZZZZZZZ"
BITS_PER_TARGET = 8


@dataclass
class UdtMember:
    """Represents a member within a UDT; scalar BOOLs point at a hidden SINT word by name and bit."""
    name: str
    data_type: str
    description: Optional[str] = None
    array_bounds: Optional[Tuple[int, int]] = None
    external_read: bool = True
    external_write: bool = True
    hidden: bool = False
    target: Optional[str] = None
    bit_num: Optional[int] = None

    @property
    def is_bool(self) -> bool:
        return self.data_type.upper() == data_types.BOOL

    @property
    def is_array(self) -> bool:
        return self.array_bounds is not None

    @property
    def is_scalar_bool(self) -> bool:
        return self.is_bool and not self.is_array

    @classmethod
    def hidden_word(cls, name: str) -> UdtMember:
        """Hidden SINT holding the bits of up to eight scalar BOOLs."""
        return cls(
            name=name,
            data_type=data_types.SINT,
            external_read=False,
            external_write=False,
            hidden=True,
        )

    def __repr__(self) -> str:
        return f"UdtMember(name={self.name!r}, data_type={self.data_type!r})"


@dataclass
class Udt:
    """Represents a user-defined type with members in emission order."""
    name: str
    version: str
    description: Optional[str] = None
    members: List[UdtMember] = field(default_factory=list)

    def add_member(self, member: UdtMember) -> None:
        self.members.append(member)

    def hidden_members(self) -> List[UdtMember]:
        return [m for m in self.members if m.hidden]

    def __repr__(self) -> str:
        return f"Udt(name={self.name!r}, members={len(self.members)})"


@dataclass
class BoolTargets:
    """
    Target number and bit number for the next scalar BOOL of one UDT.
    A fresh instance is used for every UDT.
    """
    target_num: int = 0
    bit_num: int = 0

    def target_name(self, udt_name: str) -> str:
        return f"{HIDDEN_PREFIX}{udt_name}{self.target_num}"

    def inc(self) -> None:
        """Advance to the next bit, rolling over to a new target after bit 7."""
        if self.bit_num >= BITS_PER_TARGET - 1:
            self.bit_num = 0
            self.target_num += 1
        else:
            self.bit_num += 1
