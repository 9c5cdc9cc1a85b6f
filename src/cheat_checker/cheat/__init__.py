"""
Cheat Model
===========

Data structures for Action Replay DS cheats:

- **Opcode**: the closed instruction set, with its encoding table
- **Instruction**: one `XXXXXXXX YYYYYYYY` line with its decoded opcode
- **Cheat**: a named, ordered list of instructions
- **load_cheats**: build cheats from a JSON document

Quick Start
-----------
    >>> from cheat_checker.cheat import Cheat, Opcode
    >>> cheat = Cheat.create("[Max Money]", [
    ...     (Opcode.WRITE_WORD, "0213A0C4", "0098967F"),
    ...     (Opcode.RESET, "D2000000", "00000000"),
    ... ])
    >>> len(cheat)
    2
"""

# Opcodes first: the models bind rules from the check package, which in
# turn needs the opcode table.
from cheat_checker.cheat.opcodes import Opcode, OpcodeInfo, OPCODE_INFO
from cheat_checker.cheat.models import Descriptor, Instruction, Cheat
from cheat_checker.cheat.loader import load_cheats, parse_cheats, cheat_from_dict

__all__ = [
    "Opcode",
    "OpcodeInfo",
    "OPCODE_INFO",
    "Descriptor",
    "Instruction",
    "Cheat",
    "load_cheats",
    "parse_cheats",
    "cheat_from_dict",
]
