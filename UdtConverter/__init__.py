# __init__.py
# Copyright (c) 2025 Alex Prochot
#
# Package exports for the TIA Portal UDT to L5X converter.
"""Convert TIA Portal UDT exports to Studio 5000 L5X DataType files."""

from .errors import ParseError, EmissionError
from .models import Udt, UdtMember
from .udt_parser import get_udts
from .l5x_writer import L5XSettings, create_l5x

__all__ = [
    "ParseError",
    "EmissionError",
    "Udt",
    "UdtMember",
    "get_udts",
    "L5XSettings",
    "create_l5x",
]
