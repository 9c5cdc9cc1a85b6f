"""
Cheat Checker Error Hierarchy
=============================

This module defines the exception hierarchy for the cheat checker.
All exceptions inherit from CheatCheckError, allowing callers to catch
every checker-related error with a single except clause if desired.

Exception Hierarchy
-------------------
CheatCheckError (base)
├── CheatFormatError - cheat document cannot be turned into a Cheat
├── UnknownOpcodeError - opcode name not part of the instruction set
├── CatalogError - message catalog missing entries or malformed
├── RegistryError - an opcode has no validation rule bound to it
└── ConfigError - invalid configuration value

Findings Are Not Exceptions
---------------------------
Problems found *inside* a cheat (bad block length, non-hex digits,
padding violations...) are never raised. They are returned as
CheckResult values by the validator. The exceptions here only signal
that the checker itself was handed unusable input: a document it cannot
read, a catalog it cannot load, or a configuration it cannot apply.
"""

from pathlib import Path
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class CheatCheckError(Exception):
    """
    Base exception for all cheat checker errors.

        try:
            cheats = load_cheats("codes.json")
        except CheatCheckError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Input Errors
# =============================================================================

class CheatFormatError(CheatCheckError):
    """
    A cheat document is structurally unusable.

    Raised by the loader when the JSON document is invalid, a required
    key is missing, or a value has the wrong type. The error carries the
    source path and the position of the offending cheat/instruction so
    the message points at the problem.

    Attributes:
        message: The error description
        source: File the document came from (optional)
        cheat_index: Zero-based index of the cheat in the document (optional)
        line: Zero-based instruction index inside the cheat (optional)
    """

    def __init__(
        self,
        message: str,
        source: Optional[Path] = None,
        cheat_index: Optional[int] = None,
        line: Optional[int] = None,
    ):
        self.message = message
        self.source = source
        self.cheat_index = cheat_index
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format as 'source: cheat N: line M: description'.

        Example output:
            codes.json: cheat 2: line 0: missing key 'block_b'
        """
        parts = []
        if self.source is not None:
            parts.append(str(self.source))
        if self.cheat_index is not None:
            parts.append(f"cheat {self.cheat_index}")
        if self.line is not None:
            parts.append(f"line {self.line}")
        parts.append(self.message)
        return ": ".join(parts)


class UnknownOpcodeError(CheatCheckError):
    """
    Opcode name does not match any member of the instruction set.

    The loader attempts to suggest similarly-named opcodes when this error
    occurs, helping to catch typos such as 'WriteWrod'.
    """

    def __init__(self, name: str, similar: Optional[list[str]] = None):
        self.name = name
        self.similar = similar or []

        message = f"unknown opcode '{name}'"
        if self.similar:
            suggestions = ", ".join(f"'{s}'" for s in self.similar[:3])
            message += f" (did you mean {suggestions}?)"
        super().__init__(message)


# =============================================================================
# Setup Errors
# =============================================================================

class CatalogError(CheatCheckError):
    """
    Message catalog is incomplete or cannot be loaded.

    Raised when a catalog override names an unknown message id, when a
    catalog file is not valid JSON, or when a catalog lacks an entry the
    checkers need.
    """
    pass


class RegistryError(CheatCheckError):
    """
    A per-opcode table (encoding info or rule registry) misses an opcode.

    Raised when the table's module is imported, so a new opcode without
    encoding info or a rule can never reach validation.
    """
    pass


class ConfigError(CheatCheckError):
    """
    Invalid configuration value, typically from an environment variable.

    Attributes:
        key: Name of the offending setting
        value: The raw value that could not be applied
    """

    def __init__(self, key: str, value: str, reason: str):
        self.key = key
        self.value = value
        super().__init__(f"invalid value {value!r} for {key}: {reason}")
