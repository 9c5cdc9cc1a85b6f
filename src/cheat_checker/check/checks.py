"""
Opcode-Specific Checkers
========================

Each checker encodes the structural invariant shared by one family of
opcodes. The registry binds every opcode to exactly one of them.

Checker Families
----------------
- **AlwaysPassChecker**: no constraint beyond the structural pre-checks.
  Used for conditions, patch and memory copy codes.

- **WriteChecker**: write width consistency. A short write is
  `1XXXXXXX 0000YYYY` and a byte write `2XXXXXXX 000000YY`; digits above
  the written width are silently dropped by the engine, so any data there
  means the written value is not what the line says. The target address
  should also be aligned to the write size.

- **ResetChecker**: boundary codes (`D0`, `D2`, `B`). `D0000000 00000000`
  and `D2000000 00000000` are fixed patterns; `B` takes an address but
  block B must stay zero.

- **ZeroAfterOpcodeChecker**: the `C0` and `D1`-`DC` codes (and the button
  activator). Only the opcode digits of block A are meaningful, the rest
  must be zero padding or the engine decodes a different instruction.

Single Result Per Rule
----------------------
A checker returns one CheckResult. When several conditions fail on one
line, the most severe is reported (checked in severity order, first
failure wins). Checkers return Pass for malformed blocks: the pre-checker
has already reported them and the bit layout cannot be interpreted.
"""

import copy

from cheat_checker.cheat.opcodes import Opcode
from cheat_checker.check.messages import DEFAULT_CATALOG, ErrorId, MessageCatalog
from cheat_checker.check.precheck import is_well_formed
from cheat_checker.check.results import CheckResult


def _is_zero(digits: str) -> bool:
    return all(c == "0" for c in digits)


# =============================================================================
# Base Checker
# =============================================================================

class Checker:
    """
    Base class for opcode rules.

    Subclasses implement check(); messages come from the catalog the
    checker was created with.

    Attributes:
        catalog: Source of error codes and message text
    """

    def __init__(self, catalog: MessageCatalog = DEFAULT_CATALOG):
        self.catalog = catalog

    def check(self, opcode: Opcode, block_a: str, block_b: str) -> CheckResult:
        """Validate one instruction's blocks against this rule."""
        raise NotImplementedError

    def with_catalog(self, catalog: MessageCatalog) -> "Checker":
        """Return this rule with its messages taken from another catalog."""
        if catalog is self.catalog:
            return self
        rebound = copy.copy(self)
        rebound.catalog = catalog
        return rebound

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AlwaysPassChecker(Checker):
    """Identity rule for opcodes without extra structural constraints."""

    def check(self, opcode: Opcode, block_a: str, block_b: str) -> CheckResult:
        return CheckResult.passed()


# =============================================================================
# Write Family
# =============================================================================

# Written width in bits
_WRITE_WIDTHS = {
    Opcode.WRITE_WORD: 32,
    Opcode.WRITE_SHORT: 16,
    Opcode.WRITE_BYTE: 8,
}


class WriteChecker(Checker):
    """
    Write size consistency for 0/1/2 codes.

    Errors when block B holds data above the written width, warns when the
    target address is not aligned to the write size.
    """

    def check(self, opcode: Opcode, block_a: str, block_b: str) -> CheckResult:
        width = _WRITE_WIDTHS.get(opcode)
        if width is None or not (is_well_formed(block_a) and is_well_formed(block_b)):
            return CheckResult.passed()

        if int(block_b, 16) >> width:
            return self.catalog.error(
                ErrorId.WRITE_DATA_OVERFLOW, opcode=str(opcode), width=width
            )

        # Low 28 bits of block A are the address
        address = int(block_a, 16) & 0x0FFFFFFF
        alignment = width // 8
        if address % alignment:
            return self.catalog.warning(
                ErrorId.WRITE_MISALIGNED, opcode=str(opcode), alignment=alignment
            )

        return CheckResult.passed()


# =============================================================================
# Reset / Boundary Family
# =============================================================================

# Opcodes whose block A is a fixed pattern (opcode digits then zeros)
_FIXED_PATTERN_OPCODES = frozenset({Opcode.RESET, Opcode.END_COND})


class ResetChecker(Checker):
    """
    Field layout of D0/D2 terminators and the B offset load.

    D0000000 00000000 and D2000000 00000000 must match exactly: a non-zero
    block A is an error. Block B is unused by all three opcodes; non-zero
    data there is only a warning.
    """

    def check(self, opcode: Opcode, block_a: str, block_b: str) -> CheckResult:
        if not (is_well_formed(block_a) and is_well_formed(block_b)):
            return CheckResult.passed()

        if opcode in _FIXED_PATTERN_OPCODES and not _is_zero(block_a[opcode.info.width:]):
            return self.catalog.error(ErrorId.RESET_FIELD_NOT_ZERO, opcode=str(opcode))

        if not _is_zero(block_b):
            return self.catalog.warning(ErrorId.UNUSED_BLOCK_NOT_ZERO, opcode=str(opcode))

        return CheckResult.passed()


# =============================================================================
# Zero Padding Family
# =============================================================================

class ZeroAfterOpcodeChecker(Checker):
    """
    Zero padding after the opcode digits of block A.

    C0000000, D1000000, D3000000 ... DC000000: anything but zeros after the
    opcode digits is an error. Two opcodes have extra block B constraints:

    - D1 (end repeat) takes no operand, block B should be zero (warning)
    - 94000130 (button activator) compares against 0000, the low half of
      block B should be zero (warning)
    """

    def check(self, opcode: Opcode, block_a: str, block_b: str) -> CheckResult:
        if not (is_well_formed(block_a) and is_well_formed(block_b)):
            return CheckResult.passed()

        info = opcode.info
        if not _is_zero(block_a[info.width:]):
            return self.catalog.error(
                ErrorId.OPCODE_PADDING_NOT_ZERO, opcode=str(opcode), prefix=info.prefix
            )

        if opcode is Opcode.END_REPEAT and not _is_zero(block_b):
            return self.catalog.warning(ErrorId.UNUSED_BLOCK_NOT_ZERO, opcode=str(opcode))

        if opcode is Opcode.BTN_CODE and not _is_zero(block_b[4:]):
            return self.catalog.warning(ErrorId.BUTTON_VALUE_NOT_ZERO, opcode=str(opcode))

        return CheckResult.passed()
