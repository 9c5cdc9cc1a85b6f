"""
Cheat Validator
===============

Runs every check on every instruction of a cheat and reduces the findings
to one verdict.

Algorithm
---------
For each instruction at line i (zero-based):
1. Run the structural pre-checks (length and hex of both blocks)
2. Run the opcode rule bound to the instruction (re-bound to the
   validation catalog when one other than the default is given)
3. Tag each result with line i and append it, pre-check results first

The overall result is the worst-case reduction of all details:
- any Error   -> Error(0, "Instruction compiled with errors.")
- any Warning -> Warning("Instruction compiled with warnings.")
- otherwise   -> Pass

The overall result is deliberately generic. The specific diagnosis lives
in the per-line details.

Usage
-----
>>> from cheat_checker import Cheat, Opcode, validate
>>> cheat = Cheat.create("[Test]", [(Opcode.WRITE_WORD, "0AF2CD18", "CFF2AD4C")])
>>> overall, details = validate(cheat)
>>> overall.is_pass
True
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from cheat_checker.check.messages import DEFAULT_CATALOG, ErrorId, MessageCatalog
from cheat_checker.check.precheck import pre_check
from cheat_checker.check.results import CheckResult, DetailedResult, Severity, worst

if TYPE_CHECKING:
    from cheat_checker.cheat.models import Cheat

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Validation Report
# =============================================================================

@dataclass(frozen=True)
class ValidationReport:
    """
    Result of validating one cheat.

    Attributes:
        cheat: The cheat that was validated
        overall: Worst-case verdict for the whole cheat
        details: Every individual result, in line order
    """
    cheat: "Cheat"
    overall: CheckResult
    details: tuple[DetailedResult, ...]

    @property
    def errors(self) -> list[DetailedResult]:
        return [d for d in self.details if d.result.is_error]

    @property
    def warnings(self) -> list[DetailedResult]:
        return [d for d in self.details if d.result.is_warning]

    def details_for_line(self, line: int) -> list[DetailedResult]:
        """Return the details produced by one instruction."""
        return [d for d in self.details if d.line == line]


# =============================================================================
# Validation
# =============================================================================

def validate(
    cheat: "Cheat",
    catalog: MessageCatalog = DEFAULT_CATALOG,
) -> tuple[CheckResult, list[DetailedResult]]:
    """
    Validate every instruction of a cheat.

    Never raises for bad cheat data: malformed blocks and rule violations
    are returned as Error/Warning details.

    Args:
        cheat: Cheat to validate
        catalog: Messages for every result. With the default catalog,
            opcode rules keep the catalog their checker was bound with.

    Returns:
        (overall, details) where details holds, per line, the pre-check
        results followed by the opcode rule's result
    """
    details: list[DetailedResult] = []
    override = catalog is not DEFAULT_CATALOG

    for line, instruction in enumerate(cheat.instructions):
        checker = instruction.checker
        if override:
            checker = checker.with_catalog(catalog)

        current = pre_check(instruction, catalog)
        current.append(
            checker.check(
                instruction.opcode, instruction.block_a, instruction.block_b
            )
        )
        logger.debug(
            f"{cheat.descriptor.name} line {line}: {instruction.opcode} "
            f"{instruction} -> {worst(current)}"
        )
        details.extend(DetailedResult(result, line) for result in current)

    overall = _reduce(details, catalog)
    logger.debug(
        f"{cheat.descriptor.name}: {overall.severity} "
        f"({len(cheat.instructions)} instructions, {len(details)} results)"
    )
    return overall, details


def _reduce(details: list[DetailedResult], catalog: MessageCatalog) -> CheckResult:
    """Worst-case reduction with the generic overall messages."""
    severity = max((d.severity for d in details), default=Severity.PASS)
    if severity is Severity.ERROR:
        return catalog.error(ErrorId.COMPILED_WITH_ERRORS)
    if severity is Severity.WARNING:
        return catalog.warning(ErrorId.COMPILED_WITH_WARNINGS)
    return CheckResult.passed()


def validate_all(
    cheats: Iterable["Cheat"],
    catalog: MessageCatalog = DEFAULT_CATALOG,
) -> list[ValidationReport]:
    """
    Validate several cheats, e.g. every cheat of one game file.

    Returns:
        One ValidationReport per cheat, in input order
    """
    reports = []
    for cheat in cheats:
        overall, details = validate(cheat, catalog)
        reports.append(ValidationReport(cheat, overall, tuple(details)))

    failed = sum(1 for r in reports if r.overall.is_error)
    logger.info(f"Validated {len(reports)} cheats, {failed} with errors")
    return reports
