"""
Cheat Document Loader
=====================

Builds Cheat objects from JSON documents produced by a cheat file parser.
The loader does not read raw `XXXXXXXX YYYYYYYY` cheat text: it takes
instructions whose opcode has already been decoded.

Document Format
---------------
Either a single cheat object or a list of them:

    [
        {
            "name": "[Infinite Health]",
            "instructions": [
                {"opcode": "WriteShort", "block_a": "1213A0C4", "block_b": "000003E7"},
                {"opcode": "Reset", "block_a": "D2000000", "block_b": "00000000"}
            ]
        }
    ]

Block values are kept verbatim, including malformed ones; the validator
reports those. Only structural problems with the document itself (bad
JSON, missing keys, wrong types, unknown opcodes) raise CheatFormatError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from cheat_checker.cheat.models import Cheat, Descriptor, Instruction
from cheat_checker.cheat.opcodes import Opcode
from cheat_checker.check.messages import DEFAULT_CATALOG, MessageCatalog
from cheat_checker.check.registry import rule_for
from cheat_checker.errors import CheatFormatError, UnknownOpcodeError

# Logger for this module
logger = logging.getLogger(__name__)

_INSTRUCTION_KEYS = ("opcode", "block_a", "block_b")


def load_cheats(path: Path, catalog: MessageCatalog = DEFAULT_CATALOG) -> list[Cheat]:
    """
    Load every cheat from a JSON document file.

    Args:
        path: Document to read
        catalog: Catalog the instructions' checkers are bound with

    Raises:
        CheatFormatError: File unreadable or document malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CheatFormatError(f"cannot read file: {e}", source=path) from e

    cheats = parse_cheats(text, catalog=catalog, source=path)
    logger.debug(f"Loaded {len(cheats)} cheats from {path}")
    return cheats


def parse_cheats(
    text: str,
    catalog: MessageCatalog = DEFAULT_CATALOG,
    source: Optional[Path] = None,
) -> list[Cheat]:
    """
    Build cheats from a JSON document string.

    Raises:
        CheatFormatError: Document malformed
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CheatFormatError(f"invalid JSON: {e}", source=source) from e

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise CheatFormatError("expected a cheat object or a list of cheats", source=source)

    return [
        cheat_from_dict(entry, catalog, source=source, cheat_index=index)
        for index, entry in enumerate(data)
    ]


def cheat_from_dict(
    data: Any,
    catalog: MessageCatalog = DEFAULT_CATALOG,
    source: Optional[Path] = None,
    cheat_index: Optional[int] = None,
) -> Cheat:
    """Build one Cheat from its decoded JSON object."""
    if not isinstance(data, dict):
        raise CheatFormatError("cheat must be an object", source, cheat_index)

    name = data.get("name")
    if not isinstance(name, str):
        raise CheatFormatError("cheat needs a string 'name'", source, cheat_index)

    entries = data.get("instructions", [])
    if not isinstance(entries, list):
        raise CheatFormatError("'instructions' must be a list", source, cheat_index)

    instructions = []
    for line, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise CheatFormatError("instruction must be an object", source, cheat_index, line)

        for key in _INSTRUCTION_KEYS:
            if key not in entry:
                raise CheatFormatError(f"missing key '{key}'", source, cheat_index, line)
            if not isinstance(entry[key], str):
                raise CheatFormatError(f"'{key}' must be a string", source, cheat_index, line)

        try:
            opcode = Opcode.from_name(entry["opcode"])
        except UnknownOpcodeError as e:
            raise CheatFormatError(str(e), source, cheat_index, line) from e

        instructions.append(Instruction(
            opcode,
            entry["block_a"],
            entry["block_b"],
            rule_for(opcode, catalog),
        ))

    return Cheat(Descriptor(name), tuple(instructions))
