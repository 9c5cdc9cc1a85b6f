"""
Action Replay DS Instruction Set Definition
===========================================

This module defines the closed set of cheat instruction kinds with their
encodings. A cheat line is two 8-digit hexadecimal blocks:

    XXXXXXXX YYYYYYYY
    block A  block B

The leading hex digit(s) of block A select the opcode. Most opcodes use a
single digit (0-F); the `D` family and `C0` use two; the button activator
is recognised by its full 8-digit block A (`94000130`, a 16-bit equality
test against the keypad register).

Encoding Families
-----------------
1. **Writes**: `0`/`1`/`2` write a word/short/byte at address XXXXXXX.
   Short and byte writes only use the low 16/8 bits of block B.

2. **Conditions**: `3`-`6` (word) and `7`-`A` (short) compare memory with
   block B. Short conditions carry a mask in the high half of block B.

3. **Offset and control**: `B` loads the offset register from memory,
   `C0` starts a repeat loop, `D0`-`D2` end a condition/loop/code.

4. **Dx register**: `D3`-`DC` manipulate the offset and the Dx data
   register. Everything in block A after the two opcode digits is padding.

5. **Bulk**: `E` patches a run of literal bytes, `F` copies memory.

Reference
---------
- Action Replay DS code type documentation (EnHacklopedia)
"""

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum, auto
from typing import Mapping

from cheat_checker.errors import RegistryError, UnknownOpcodeError


# =============================================================================
# Opcode Enumeration
# =============================================================================

class Opcode(Enum):
    """
    Action Replay DS instruction kinds.

    The set is closed: every member must have an entry in OPCODE_INFO and
    a rule in the check registry. Both tables verify this at import time.
    """
    # Writes
    WRITE_WORD = auto()
    WRITE_SHORT = auto()
    WRITE_BYTE = auto()

    # Word conditions
    GT_WORD = auto()
    LT_WORD = auto()
    EQ_WORD = auto()
    NE_WORD = auto()

    # Short conditions
    GT_SHORT = auto()
    LT_SHORT = auto()
    EQ_SHORT = auto()
    NE_SHORT = auto()

    # Offset and control flow
    SET_OFFSET_PTR = auto()
    REPEAT = auto()
    END_COND = auto()
    END_REPEAT = auto()
    RESET = auto()

    # Offset / Dx register
    SET_OFFSET_IMMEDIATE = auto()
    ADD_TO_DX_DATA = auto()
    SET_DX_DATA = auto()
    COPY_DX_WORD = auto()
    COPY_DX_SHORT = auto()
    COPY_DX_BYTE = auto()
    LOAD_DX_WORD = auto()
    LOAD_DX_SHORT = auto()
    LOAD_DX_BYTE = auto()
    ADD_OFFSET = auto()

    # Special
    BTN_CODE = auto()
    PATCH_CODE = auto()
    MEMORY_COPY = auto()

    def __str__(self) -> str:
        """Return the CamelCase name used in cheat documents, e.g. 'WriteWord'."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def info(self) -> "OpcodeInfo":
        """Encoding information for this opcode."""
        return OPCODE_INFO[self]

    @property
    def prefix(self) -> str:
        """Hex digits of block A that identify the opcode."""
        return OPCODE_INFO[self].prefix

    @classmethod
    def from_name(cls, name: str) -> "Opcode":
        """
        Resolve an opcode from its name.

        Accepts the enum name ('WRITE_WORD'), the CamelCase name used in
        cheat documents ('WriteWord') and dashed forms ('write-word').
        Matching ignores case, underscores and dashes.

        Raises:
            UnknownOpcodeError: No opcode has this name
        """
        key = _normalize(name)
        opcode = _BY_NORMALIZED_NAME.get(key)
        if opcode is None:
            similar = get_close_matches(key, _BY_NORMALIZED_NAME.keys(), n=3)
            raise UnknownOpcodeError(
                name, [str(_BY_NORMALIZED_NAME[s]) for s in similar]
            )
        return opcode


# =============================================================================
# Encoding Information
# =============================================================================

@dataclass(frozen=True)
class OpcodeInfo:
    """
    Encoding of one opcode.

    Attributes:
        prefix: Leading hex digits of block A that select the opcode
        layout: Canonical 'AAAAAAAA BBBBBBBB' layout; X/Y/Z/N are operands,
            literal digits are fixed
        description: What the instruction does
    """
    prefix: str
    layout: str
    description: str

    @property
    def width(self) -> int:
        """Number of block A digits taken by the opcode field."""
        return len(self.prefix)


OPCODE_INFO: dict[Opcode, OpcodeInfo] = {
    Opcode.WRITE_WORD: OpcodeInfo("0", "0XXXXXXX YYYYYYYY", "32-bit write to [XXXXXXX+offset]"),
    Opcode.WRITE_SHORT: OpcodeInfo("1", "1XXXXXXX 0000YYYY", "16-bit write to [XXXXXXX+offset]"),
    Opcode.WRITE_BYTE: OpcodeInfo("2", "2XXXXXXX 000000YY", "8-bit write to [XXXXXXX+offset]"),
    Opcode.GT_WORD: OpcodeInfo("3", "3XXXXXXX YYYYYYYY", "if YYYYYYYY > word at [XXXXXXX]"),
    Opcode.LT_WORD: OpcodeInfo("4", "4XXXXXXX YYYYYYYY", "if YYYYYYYY < word at [XXXXXXX]"),
    Opcode.EQ_WORD: OpcodeInfo("5", "5XXXXXXX YYYYYYYY", "if YYYYYYYY == word at [XXXXXXX]"),
    Opcode.NE_WORD: OpcodeInfo("6", "6XXXXXXX YYYYYYYY", "if YYYYYYYY != word at [XXXXXXX]"),
    Opcode.GT_SHORT: OpcodeInfo("7", "7XXXXXXX ZZZZYYYY", "if YYYY > (~ZZZZ & short at [XXXXXXX])"),
    Opcode.LT_SHORT: OpcodeInfo("8", "8XXXXXXX ZZZZYYYY", "if YYYY < (~ZZZZ & short at [XXXXXXX])"),
    Opcode.EQ_SHORT: OpcodeInfo("9", "9XXXXXXX ZZZZYYYY", "if YYYY == (~ZZZZ & short at [XXXXXXX])"),
    Opcode.NE_SHORT: OpcodeInfo("A", "AXXXXXXX ZZZZYYYY", "if YYYY != (~ZZZZ & short at [XXXXXXX])"),
    Opcode.SET_OFFSET_PTR: OpcodeInfo("B", "BXXXXXXX 00000000", "offset = word at [XXXXXXX+offset]"),
    Opcode.REPEAT: OpcodeInfo("C0", "C0000000 NNNNNNNN", "repeat block NNNNNNNN times"),
    Opcode.END_COND: OpcodeInfo("D0", "D0000000 00000000", "end if"),
    Opcode.END_REPEAT: OpcodeInfo("D1", "D1000000 00000000", "end repeat"),
    Opcode.RESET: OpcodeInfo("D2", "D2000000 00000000", "end code, reset offset and Dx"),
    Opcode.SET_OFFSET_IMMEDIATE: OpcodeInfo("D3", "D3000000 XXXXXXXX", "offset = XXXXXXXX"),
    Opcode.ADD_TO_DX_DATA: OpcodeInfo("D4", "D4000000 XXXXXXXX", "Dx data += XXXXXXXX"),
    Opcode.SET_DX_DATA: OpcodeInfo("D5", "D5000000 XXXXXXXX", "Dx data = XXXXXXXX"),
    Opcode.COPY_DX_WORD: OpcodeInfo("D6", "D6000000 XXXXXXXX", "word [XXXXXXXX+offset] = Dx, offset += 4"),
    Opcode.COPY_DX_SHORT: OpcodeInfo("D7", "D7000000 XXXXXXXX", "short [XXXXXXXX+offset] = Dx, offset += 2"),
    Opcode.COPY_DX_BYTE: OpcodeInfo("D8", "D8000000 XXXXXXXX", "byte [XXXXXXXX+offset] = Dx, offset += 1"),
    Opcode.LOAD_DX_WORD: OpcodeInfo("D9", "D9000000 XXXXXXXX", "Dx = word at [XXXXXXXX+offset]"),
    Opcode.LOAD_DX_SHORT: OpcodeInfo("DA", "DA000000 XXXXXXXX", "Dx = short at [XXXXXXXX+offset]"),
    Opcode.LOAD_DX_BYTE: OpcodeInfo("DB", "DB000000 XXXXXXXX", "Dx = byte at [XXXXXXXX+offset]"),
    Opcode.ADD_OFFSET: OpcodeInfo("DC", "DC000000 XXXXXXXX", "offset += XXXXXXXX"),
    Opcode.BTN_CODE: OpcodeInfo("94000130", "94000130 ZZZZ0000", "if buttons in ~ZZZZ are held"),
    Opcode.PATCH_CODE: OpcodeInfo("E", "EXXXXXXX NNNNNNNN", "write NNNNNNNN literal bytes to [XXXXXXX+offset]"),
    Opcode.MEMORY_COPY: OpcodeInfo("F", "FXXXXXXX NNNNNNNN", "copy NNNNNNNN bytes from [offset] to [XXXXXXX]"),
}


def require_all_opcodes(table: Mapping[Opcode, object], what: str) -> None:
    """
    Check that a per-opcode table covers the whole instruction set.

    Raises:
        RegistryError: Some opcode has no entry in table
    """
    missing = [op.name for op in Opcode if op not in table]
    if missing:
        raise RegistryError(f"opcodes without {what}: {', '.join(missing)}")


require_all_opcodes(OPCODE_INFO, "encoding info")


def _normalize(name: str) -> str:
    return name.strip().replace("_", "").replace("-", "").lower()


_BY_NORMALIZED_NAME: dict[str, Opcode] = {_normalize(op.name): op for op in Opcode}
