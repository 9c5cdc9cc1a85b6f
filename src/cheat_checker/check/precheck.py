"""
Structural Pre-Checks
=====================

Opcode-independent checks run on every instruction before its opcode rule:

1. Block A is exactly 8 characters
2. Block B is exactly 8 characters
3. Block A is a hexadecimal number
4. Block B is a hexadecimal number

All four run unconditionally, so one malformed line can produce up to four
errors here on top of whatever its opcode rule reports.
"""

from string import hexdigits
from typing import TYPE_CHECKING

from cheat_checker.check.messages import DEFAULT_CATALOG, ErrorId, MessageCatalog
from cheat_checker.check.results import CheckResult

if TYPE_CHECKING:
    from cheat_checker.cheat.models import Instruction


BLOCK_LENGTH = 8

_HEX_DIGITS = frozenset(hexdigits)


def is_hex(block: str) -> bool:
    """
    Return True if block is a non-empty run of hex digits (any case).

    Signs, '0x' prefixes, whitespace and '_' separators are rejected even
    though int(block, 16) would accept some of them.
    """
    return bool(block) and all(c in _HEX_DIGITS for c in block)


def is_well_formed(block: str) -> bool:
    """Return True if block is exactly 8 hex digits."""
    return len(block) == BLOCK_LENGTH and is_hex(block)


def pre_check(
    instruction: "Instruction",
    catalog: MessageCatalog = DEFAULT_CATALOG,
) -> list[CheckResult]:
    """
    Run the structural checks on one instruction.

    Returns:
        Errors found, in the order length A, length B, hex A, hex B.
        An empty list means both blocks are well-formed.
    """
    results = []
    if len(instruction.block_a) != BLOCK_LENGTH:
        results.append(catalog.error(ErrorId.WRONG_LENGTH_A))
    if len(instruction.block_b) != BLOCK_LENGTH:
        results.append(catalog.error(ErrorId.WRONG_LENGTH_B))
    if not is_hex(instruction.block_a):
        results.append(catalog.error(ErrorId.INVALID_HEX_A))
    if not is_hex(instruction.block_b):
        results.append(catalog.error(ErrorId.INVALID_HEX_B))
    return results
