"""
Validation report formatting.

Turns ValidationReport objects into the text printed by the CLI:

    [Infinite Health]: error: Instruction compiled with errors.
      line 1 (D200000 00000000): error[1]: Block A has wrong length (expected 8 characters).
    1 error, 0 warnings
"""

from dataclasses import dataclass
from typing import Iterable

from cheat_checker.check.validator import ValidationReport


@dataclass
class Summary:
    """Totals over one or more reports."""
    cheats: int = 0
    failed: int = 0
    errors: int = 0
    warnings: int = 0

    def __str__(self) -> str:
        error_word = "error" if self.errors == 1 else "errors"
        warning_word = "warning" if self.warnings == 1 else "warnings"
        return f"{self.errors} {error_word}, {self.warnings} {warning_word}"


def summarize(reports: Iterable[ValidationReport]) -> Summary:
    summary = Summary()
    for report in reports:
        summary.cheats += 1
        if report.overall.is_error:
            summary.failed += 1
        summary.errors += len(report.errors)
        summary.warnings += len(report.warnings)
    return summary


def format_report(report: ValidationReport, show_passes: bool = False) -> str:
    """
    Format one cheat's report.

    Args:
        report: Report to format
        show_passes: Also list the Pass details of each line
    """
    overall = report.overall
    header = f"{report.cheat.descriptor.name}: {overall.severity}"
    if not overall.is_pass:
        header += f": {overall.message}"

    lines = [header]
    for detail in report.details:
        if detail.result.is_pass and not show_passes:
            continue
        instruction = report.cheat.instructions[detail.line]
        lines.append(f"  line {detail.line} ({instruction}): {detail.result}")
    lines.append(str(summarize([report])))
    return "\n".join(lines)
