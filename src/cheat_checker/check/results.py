"""
Check Result Model
==================

Every check in the pipeline returns a CheckResult, a three-valued outcome:

- **Pass**: nothing to report
- **Warning(message)**: the instruction works but looks odd
- **Error(code, message)**: the instruction is malformed

Results are ordered by severity (Error > Warning > Pass) so a set of
results can be reduced to its worst member. The validator tags every
result with the cheat line that produced it (DetailedResult).
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable


class Severity(IntEnum):
    """Result severity; the integer order is the aggregation order."""
    PASS = 0
    WARNING = 1
    ERROR = 2

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of a single check.

    Build instances through the variant constructors rather than directly:

        >>> CheckResult.passed()
        >>> CheckResult.warning("Block B is ignored by this opcode.")
        >>> CheckResult.error(1, "Block A has wrong length.")

    Two results are equal iff they are the same variant with the same
    payload. Pass carries no payload, Warning only a message.

    Attributes:
        severity: Which variant this is
        code: Error code (always 0 for Pass and Warning)
        message: Human-readable message (empty for Pass)
    """
    severity: Severity
    code: int = 0
    message: str = ""

    @classmethod
    def passed(cls) -> "CheckResult":
        return cls(Severity.PASS)

    @classmethod
    def warning(cls, message: str) -> "CheckResult":
        return cls(Severity.WARNING, 0, message)

    @classmethod
    def error(cls, code: int, message: str) -> "CheckResult":
        return cls(Severity.ERROR, code, message)

    @property
    def is_pass(self) -> bool:
        return self.severity is Severity.PASS

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        if self.is_error:
            return f"error[{self.code}]: {self.message}"
        if self.is_warning:
            return f"warning: {self.message}"
        return "pass"


def worst(results: Iterable[CheckResult]) -> CheckResult:
    """
    Return the most severe result, or Pass for an empty iterable.

    When several results share the highest severity, the first one wins.
    """
    current = CheckResult.passed()
    for result in results:
        if result.severity > current.severity:
            current = result
    return current


@dataclass(frozen=True)
class DetailedResult:
    """
    A CheckResult tagged with the cheat line that produced it.

    Attributes:
        result: The check outcome
        line: Zero-based index of the instruction within its cheat
    """
    result: CheckResult
    line: int

    @property
    def severity(self) -> Severity:
        return self.result.severity

    def __str__(self) -> str:
        return f"line {self.line}: {self.result}"
