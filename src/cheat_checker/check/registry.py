"""
Opcode Rule Registry
====================

Binds every opcode to exactly one checker class, grouped by encoding shape:

    Writes (0/1/2)                  -> WriteChecker
    D0, D2, B                       -> ResetChecker
    C0, D1, D3-DC, button activator -> ZeroAfterOpcodeChecker
    Conditions, E, F                -> AlwaysPassChecker

There is no default rule. The table is checked against the Opcode enum
when this module is imported, so an opcode added without a rule fails
loudly instead of being validated by the wrong checker.
"""

from cheat_checker.cheat.opcodes import Opcode, require_all_opcodes
from cheat_checker.check.checks import (
    AlwaysPassChecker,
    Checker,
    ResetChecker,
    WriteChecker,
    ZeroAfterOpcodeChecker,
)
from cheat_checker.check.messages import DEFAULT_CATALOG, MessageCatalog


RULES: dict[Opcode, type[Checker]] = {
    # Write size consistency
    Opcode.WRITE_WORD: WriteChecker,
    Opcode.WRITE_SHORT: WriteChecker,
    Opcode.WRITE_BYTE: WriteChecker,

    # Reset / boundary field layout
    Opcode.RESET: ResetChecker,
    Opcode.END_COND: ResetChecker,
    Opcode.SET_OFFSET_PTR: ResetChecker,

    # Zero padding after the opcode digits
    Opcode.REPEAT: ZeroAfterOpcodeChecker,
    Opcode.END_REPEAT: ZeroAfterOpcodeChecker,
    Opcode.SET_OFFSET_IMMEDIATE: ZeroAfterOpcodeChecker,
    Opcode.ADD_TO_DX_DATA: ZeroAfterOpcodeChecker,
    Opcode.SET_DX_DATA: ZeroAfterOpcodeChecker,
    Opcode.COPY_DX_BYTE: ZeroAfterOpcodeChecker,
    Opcode.COPY_DX_SHORT: ZeroAfterOpcodeChecker,
    Opcode.COPY_DX_WORD: ZeroAfterOpcodeChecker,
    Opcode.LOAD_DX_BYTE: ZeroAfterOpcodeChecker,
    Opcode.LOAD_DX_SHORT: ZeroAfterOpcodeChecker,
    Opcode.LOAD_DX_WORD: ZeroAfterOpcodeChecker,
    Opcode.ADD_OFFSET: ZeroAfterOpcodeChecker,
    Opcode.BTN_CODE: ZeroAfterOpcodeChecker,

    # No structural rule beyond the pre-checks yet
    Opcode.EQ_WORD: AlwaysPassChecker,
    Opcode.LT_WORD: AlwaysPassChecker,
    Opcode.GT_WORD: AlwaysPassChecker,
    Opcode.NE_WORD: AlwaysPassChecker,
    Opcode.EQ_SHORT: AlwaysPassChecker,
    Opcode.LT_SHORT: AlwaysPassChecker,
    Opcode.GT_SHORT: AlwaysPassChecker,
    Opcode.NE_SHORT: AlwaysPassChecker,
    Opcode.PATCH_CODE: AlwaysPassChecker,
    Opcode.MEMORY_COPY: AlwaysPassChecker,
}

require_all_opcodes(RULES, "a validation rule")


def rule_for(opcode: Opcode, catalog: MessageCatalog = DEFAULT_CATALOG) -> Checker:
    """
    Return the checker bound to opcode.

    Total and deterministic: every Opcode member has a rule, and the same
    opcode always yields the same checker class.

    Args:
        opcode: Instruction kind
        catalog: Message catalog the checker builds its results from
    """
    return RULES[opcode](catalog)
