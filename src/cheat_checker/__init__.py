"""
Cheat Checker - Validator for Action Replay DS Cheat Codes
==========================================================

This package validates Nintendo DS Action Replay cheats before they are
applied. Each cheat line is an opcode and two 8-digit hexadecimal blocks:

    94000130 FFFB0000
    1213A0C4 000003E7
    D2000000 00000000

The checker verifies every line structurally (block length, hex digits)
and against the encoding rules of its opcode family, and reports every
problem it finds rather than stopping at the first.

Main Components
---------------
- **cheat**: Opcode set, Instruction and Cheat models, JSON loader
- **check**: Pre-checks, opcode rules, validator and report formatting
- **cli**: The `cheatcheck` command-line tool

Quick Start
-----------
Validate a cheat:
    >>> from cheat_checker import Cheat, Opcode, validate
    >>> cheat = Cheat.create("[Infinite Health]", [
    ...     (Opcode.WRITE_SHORT, "1213A0C4", "000003E7"),
    ...     (Opcode.RESET, "D2000000", "00000000"),
    ... ])
    >>> overall, details = validate(cheat)
    >>> overall.is_pass
    True

Or use the command-line tool:
    $ cheatcheck validate codes.json
    $ cheatcheck opcodes

Version History
---------------
1.0.0 - Initial release
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================
# The cheat package must be imported before the check package: instruction
# models bind their rules through the check registry.
# =============================================================================

from cheat_checker.errors import (
    CheatCheckError,
    CheatFormatError,
    UnknownOpcodeError,
    CatalogError,
    RegistryError,
    ConfigError,
)

from cheat_checker.cheat import (
    Opcode,
    OpcodeInfo,
    OPCODE_INFO,
    Descriptor,
    Instruction,
    Cheat,
    load_cheats,
    parse_cheats,
)

from cheat_checker.check import (
    Severity,
    CheckResult,
    DetailedResult,
    ErrorId,
    MessageCatalog,
    DEFAULT_CATALOG,
    load_catalog,
    Checker,
    rule_for,
    pre_check,
    ValidationReport,
    validate,
    validate_all,
    format_report,
)

from cheat_checker.config import CheckerConfig

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "CheatCheckError",
    "CheatFormatError",
    "UnknownOpcodeError",
    "CatalogError",
    "RegistryError",
    "ConfigError",
    # Cheat model
    "Opcode",
    "OpcodeInfo",
    "OPCODE_INFO",
    "Descriptor",
    "Instruction",
    "Cheat",
    "load_cheats",
    "parse_cheats",
    # Validation
    "Severity",
    "CheckResult",
    "DetailedResult",
    "ErrorId",
    "MessageCatalog",
    "DEFAULT_CATALOG",
    "load_catalog",
    "Checker",
    "rule_for",
    "pre_check",
    "ValidationReport",
    "validate",
    "validate_all",
    "format_report",
    # Configuration
    "CheckerConfig",
]
