"""
Cheat Data Model
================

A Cheat is a named, ordered list of Instructions. Line numbers reported by
the validator are zero-based positions in that list.

Instructions store their blocks exactly as given. A block with the wrong
length or non-hex digits is a legal Instruction: detecting and reporting
it is the validator's job, so construction never rejects data.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from cheat_checker.cheat.opcodes import Opcode
from cheat_checker.check.checks import Checker
from cheat_checker.check.registry import rule_for


@dataclass(frozen=True)
class Descriptor:
    """Cheat header, e.g. '[Infinite Health]'."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Instruction:
    """
    One cheat line.

    Attributes:
        opcode: Instruction kind, decoded by the parser from block A
        block_a: First 8-digit hex block (opcode + address/padding)
        block_b: Second 8-digit hex block (data/operand)
        checker: Rule bound at construction; defaults to rule_for(opcode).
            Never None once the instruction exists.
    """
    opcode: Opcode
    block_a: str
    block_b: str
    checker: Optional[Checker] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.checker is None:
            object.__setattr__(self, "checker", rule_for(self.opcode))

    def __str__(self) -> str:
        return f"{self.block_a} {self.block_b}"


@dataclass(frozen=True)
class Cheat:
    """
    A named sequence of instructions.

    Attributes:
        descriptor: Cheat header
        instructions: Ordered instructions; index = reported line number
    """
    descriptor: Descriptor
    instructions: tuple[Instruction, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "instructions", tuple(self.instructions))

    @property
    def name(self) -> str:
        return self.descriptor.name

    def __len__(self) -> int:
        return len(self.instructions)

    @classmethod
    def create(
        cls,
        name: str,
        lines: Iterable[tuple[Opcode, str, str]],
    ) -> "Cheat":
        """
        Build a cheat from (opcode, block_a, block_b) triples.

        Example:
            >>> cheat = Cheat.create("[Max Money]", [
            ...     (Opcode.WRITE_WORD, "0213A0C4", "0098967F"),
            ... ])
        """
        return cls(
            Descriptor(name),
            tuple(Instruction(opcode, a, b) for opcode, a, b in lines),
        )
