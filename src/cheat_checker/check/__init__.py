"""
Cheat Validation
================

The validation pipeline: structural pre-checks, opcode-specific rules and
worst-case aggregation of their results.

This module provides:
- **validate** / **validate_all**: validate one cheat or many
- **rule_for**: the checker bound to an opcode
- **CheckResult** / **DetailedResult**: Pass/Warning/Error outcomes
- **MessageCatalog**: error codes and (localizable) message text
- **format_report**: text rendering of validation results

Quick Start
-----------
    >>> from cheat_checker.check import validate
    >>> overall, details = validate(cheat)
    >>> for detail in details:
    ...     if not detail.result.is_pass:
    ...         print(detail)
"""

# =============================================================================
# Public API Exports
# =============================================================================

from cheat_checker.check.results import (
    Severity,
    CheckResult,
    DetailedResult,
    worst,
)
from cheat_checker.check.messages import (
    ErrorId,
    CatalogEntry,
    MessageCatalog,
    DEFAULT_CATALOG,
    load_catalog,
)
from cheat_checker.check.checks import (
    Checker,
    AlwaysPassChecker,
    WriteChecker,
    ResetChecker,
    ZeroAfterOpcodeChecker,
)
from cheat_checker.check.registry import RULES, rule_for
from cheat_checker.check.precheck import (
    BLOCK_LENGTH,
    is_hex,
    is_well_formed,
    pre_check,
)
from cheat_checker.check.validator import (
    ValidationReport,
    validate,
    validate_all,
)
from cheat_checker.check.report import (
    Summary,
    summarize,
    format_report,
)

__all__ = [
    # Results
    "Severity",
    "CheckResult",
    "DetailedResult",
    "worst",
    # Messages
    "ErrorId",
    "CatalogEntry",
    "MessageCatalog",
    "DEFAULT_CATALOG",
    "load_catalog",
    # Checkers
    "Checker",
    "AlwaysPassChecker",
    "WriteChecker",
    "ResetChecker",
    "ZeroAfterOpcodeChecker",
    "RULES",
    "rule_for",
    # Pre-checks
    "BLOCK_LENGTH",
    "is_hex",
    "is_well_formed",
    "pre_check",
    # Validation
    "ValidationReport",
    "validate",
    "validate_all",
    # Reporting
    "Summary",
    "summarize",
    "format_report",
]
