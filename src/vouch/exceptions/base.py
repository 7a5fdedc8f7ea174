"""Root of the Vouch exception hierarchy."""

from __future__ import annotations


class VouchError(Exception):
    """Base class for every error raised by Vouch."""
