"""
Cheat Checker - Configuration
=============================

Run configuration for the command-line checker. Values come from:
- Default values (defined here)
- Environment variables (CheckerConfig.from_env)
- Command-line options, applied on top by the CLI

Environment variables (all optional):
    CHEATCHECK_STRICT: "1"/"true"/"yes" to fail on warnings
    CHEATCHECK_SHOW_PASSES: "1"/"true"/"yes" to list passing checks
    CHEATCHECK_CATALOG: Path to a JSON message catalog
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os

from cheat_checker.check.messages import DEFAULT_CATALOG, MessageCatalog, load_catalog
from cheat_checker.errors import ConfigError


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(key, value, "expected a boolean (1/0, true/false, yes/no)")


@dataclass
class CheckerConfig:
    """
    Configuration for a validation run.

    Attributes:
        strict: Treat warnings as failures when computing the exit code
        show_passes: Include Pass details in reports
        catalog_path: JSON message catalog replacing the default messages
    """
    strict: bool = False
    show_passes: bool = False
    catalog_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "CheckerConfig":
        """
        Create CheckerConfig from environment variables.

        Raises:
            ConfigError: A variable holds an unusable value
        """
        config = cls()

        if (strict := os.environ.get("CHEATCHECK_STRICT")) is not None:
            config.strict = _parse_bool("CHEATCHECK_STRICT", strict)

        if (show := os.environ.get("CHEATCHECK_SHOW_PASSES")) is not None:
            config.show_passes = _parse_bool("CHEATCHECK_SHOW_PASSES", show)

        if catalog := os.environ.get("CHEATCHECK_CATALOG"):
            config.catalog_path = Path(catalog)

        return config

    def load_catalog(self) -> MessageCatalog:
        """Return the configured catalog, or the default one."""
        if self.catalog_path is None:
            return DEFAULT_CATALOG
        return load_catalog(self.catalog_path)
