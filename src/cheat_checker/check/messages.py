"""
Diagnostic Message Catalog
==========================

Maps every diagnostic condition (ErrorId) to an error code and a
human-readable message template. Checkers never hard-code text: they ask
a catalog for a ready-made CheckResult.

    >>> DEFAULT_CATALOG.error(ErrorId.WRONG_LENGTH_A)
    CheckResult(severity=<Severity.ERROR: 2>, code=1, message='...')

Message templates may contain str.format fields, e.g. ``{width}``; the
checkers pass the values when building the result.

Localization
------------
Codes are fixed, messages are swappable. A catalog file is a JSON object
mapping ErrorId names to message templates:

    {
        "WRONG_LENGTH_A": "Bloc A : longueur incorrecte (8 attendus).",
        "INVALID_HEX_A": "Bloc A : hexadécimal invalide."
    }

Entries the file does not mention keep the default text.
"""

import json
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from cheat_checker.check.results import CheckResult
from cheat_checker.errors import CatalogError


class ErrorId(Enum):
    """Every condition the checker can report."""
    # Overall verdicts
    COMPILED_WITH_ERRORS = auto()
    COMPILED_WITH_WARNINGS = auto()

    # Structural (all opcodes)
    WRONG_LENGTH_A = auto()
    WRONG_LENGTH_B = auto()
    INVALID_HEX_A = auto()
    INVALID_HEX_B = auto()

    # Write family
    WRITE_DATA_OVERFLOW = auto()
    WRITE_MISALIGNED = auto()

    # Reset / boundary family
    RESET_FIELD_NOT_ZERO = auto()

    # Zero padding family
    OPCODE_PADDING_NOT_ZERO = auto()
    UNUSED_BLOCK_NOT_ZERO = auto()
    BUTTON_VALUE_NOT_ZERO = auto()


@dataclass(frozen=True)
class CatalogEntry:
    """Error code and message template for one ErrorId."""
    code: int
    message: str


_DEFAULT_ENTRIES = {
    ErrorId.COMPILED_WITH_ERRORS: CatalogEntry(0, "Instruction compiled with errors."),
    ErrorId.COMPILED_WITH_WARNINGS: CatalogEntry(0, "Instruction compiled with warnings."),
    ErrorId.WRONG_LENGTH_A: CatalogEntry(1, "Block A has wrong length (expected 8 characters)."),
    ErrorId.WRONG_LENGTH_B: CatalogEntry(2, "Block B has wrong length (expected 8 characters)."),
    ErrorId.INVALID_HEX_A: CatalogEntry(3, "Block A is not a valid hexadecimal number."),
    ErrorId.INVALID_HEX_B: CatalogEntry(4, "Block B is not a valid hexadecimal number."),
    ErrorId.WRITE_DATA_OVERFLOW: CatalogEntry(
        10, "{opcode} only writes {width} bits, but block B has data above them."
    ),
    ErrorId.WRITE_MISALIGNED: CatalogEntry(
        11, "{opcode} target address is not aligned to {alignment} bytes."
    ),
    ErrorId.RESET_FIELD_NOT_ZERO: CatalogEntry(
        20, "{opcode} must be followed by zeros in block A."
    ),
    ErrorId.OPCODE_PADDING_NOT_ZERO: CatalogEntry(
        30, "{opcode} expects zeros after the '{prefix}' opcode digits in block A."
    ),
    ErrorId.UNUSED_BLOCK_NOT_ZERO: CatalogEntry(
        31, "{opcode} ignores block B, it should be 00000000."
    ),
    ErrorId.BUTTON_VALUE_NOT_ZERO: CatalogEntry(
        32, "Button activator value (low half of block B) should be 0000."
    ),
}


@dataclass(frozen=True, eq=False)
class MessageCatalog:
    """
    Immutable mapping from ErrorId to CatalogEntry.

    A catalog must cover every ErrorId; construction fails otherwise so a
    checker can never hit a missing message during validation.
    """
    entries: Mapping[ErrorId, CatalogEntry] = field(
        default_factory=lambda: dict(_DEFAULT_ENTRIES)
    )

    def __post_init__(self) -> None:
        missing = [e.name for e in ErrorId if e not in self.entries]
        if missing:
            raise CatalogError(f"catalog has no entry for: {', '.join(missing)}")
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def code(self, error_id: ErrorId) -> int:
        return self.entries[error_id].code

    def message(self, error_id: ErrorId, **fields: object) -> str:
        """Render the message template for error_id with the given fields."""
        template = self.entries[error_id].message
        try:
            return template.format(**fields)
        except (KeyError, IndexError) as e:
            raise CatalogError(
                f"message for {error_id.name} uses unknown field {e}"
            ) from e

    def error(self, error_id: ErrorId, **fields: object) -> CheckResult:
        return CheckResult.error(self.code(error_id), self.message(error_id, **fields))

    def warning(self, error_id: ErrorId, **fields: object) -> CheckResult:
        return CheckResult.warning(self.message(error_id, **fields))

    def with_messages(self, messages: Mapping[str, str]) -> "MessageCatalog":
        """
        Return a copy with some message templates replaced.

        Args:
            messages: ErrorId name -> new message template

        Raises:
            CatalogError: A key is not an ErrorId name or a value is not a string
        """
        entries = dict(self.entries)
        for name, text in messages.items():
            try:
                error_id = ErrorId[name]
            except KeyError:
                raise CatalogError(f"unknown message id '{name}'") from None
            if not isinstance(text, str):
                raise CatalogError(f"message for '{name}' must be a string")
            entries[error_id] = CatalogEntry(entries[error_id].code, text)
        return MessageCatalog(entries)


DEFAULT_CATALOG = MessageCatalog()


def load_catalog(path: Path, base: MessageCatalog = DEFAULT_CATALOG) -> MessageCatalog:
    """
    Load message overrides from a JSON file on top of `base`.

    Raises:
        CatalogError: File unreadable, not JSON, or not a flat object of strings
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"catalog {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"catalog {path} must contain a JSON object")
    return base.with_messages(data)
