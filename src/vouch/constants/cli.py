"""CLI text and exit codes."""

from __future__ import annotations

CLI_DESCRIPTION: str = "vouch: declarative validation for records, tuples and sum types"

EXIT_OK: int = 0
EXIT_INVALID: int = 1
EXIT_ERROR: int = 2
