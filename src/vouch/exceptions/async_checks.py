"""Exceptions raised by the asynchronous post-validation stage."""

from __future__ import annotations

from vouch.exceptions.base import VouchError


class AsyncCheckError(VouchError):
    """Raised when an async check fails with an I/O error or times out.

    Violations found by async checks are still returned as data; this error
    only covers checks that could not produce an answer.
    """

    def __init__(self, path: str, cause: BaseException) -> None:
        label = path or "<root>"
        super().__init__(f"async check at {label} failed: {type(cause).__name__}: {cause}")
        self.path = path
        self.cause = cause
