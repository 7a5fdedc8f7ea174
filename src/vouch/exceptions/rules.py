"""Rule construction exceptions."""

from __future__ import annotations

from vouch.exceptions.base import VouchError


class RuleConstructionError(VouchError, ValueError):
    """Raised when a rule is built with an invalid parameter.

    This is a definition-time error (bad regex, zero divisor, min > max) and
    is never produced while validating an instance.
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.reason = message
