"""
Cheat Checker Command-Line Interface
====================================

This package provides the `cheatcheck` command-line tool, a Click-based
application with `validate` and `opcodes` commands.
"""

__all__ = ["cheatcheck"]
