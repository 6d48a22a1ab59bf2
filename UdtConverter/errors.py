# errors.py
# Copyright (c) 2025 Alex Prochot
#
# Fatal error types raised by the parser and the L5X writer.
"""Exceptions that abort a conversion run."""


class ParseError(ValueError):
    """A required part of the UDT source is missing or malformed."""


class EmissionError(RuntimeError):
    """The L5X tree could not be built or serialized."""
