from __future__ import annotations


class DiceError(ValueError):
    """User-facing validation errors (fail-fast, no roll performed)."""


INVALID_NOTATION = "Invalid dice notation"
