from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from .config import get_config
from .errors import INVALID_NOTATION, DiceError
from .models import ParseFailure, ParseOk, ParseOutcome, RollTerm

logger = logging.getLogger(__name__)

# Count is required: "d6" does not match.
_DICE_RE = re.compile(r"^(?P<count>\d+)d(?P<sides>\d+)$", re.IGNORECASE | re.ASCII)


def normalize_text(text: str) -> str:
    # Collapse whitespace runs (tabs and newlines included) into single spaces.
    return re.sub(r"\s+", " ", text.strip())


def _to_int(digits: str, tok: str, what: str) -> int:
    try:
        return int(digits)
    except ValueError:
        # int() refuses digit strings past the interpreter's conversion limit.
        raise DiceError(f"{INVALID_NOTATION}: {what} in '{tok}' is too long") from None


def _parse_term(tok: str, max_count: int, max_sides: int) -> RollTerm:
    m = _DICE_RE.match(tok)
    if not m:
        raise DiceError(f"{INVALID_NOTATION}: could not understand '{tok}'. Example: '3d6 2d8'.")

    count = _to_int(m.group("count"), tok, "count")
    sides = _to_int(m.group("sides"), tok, "sides")

    if count <= 0:
        raise DiceError(f"{INVALID_NOTATION}: dice count must be at least 1 in '{tok}'")
    if sides <= 0:
        raise DiceError(f"{INVALID_NOTATION}: dice need at least 1 side in '{tok}'")
    if count > max_count:
        raise DiceError(f"{INVALID_NOTATION}: too many dice in '{tok}' (max {max_count})")
    if sides > max_sides:
        raise DiceError(f"{INVALID_NOTATION}: too many sides in '{tok}' (max {max_sides})")

    return RollTerm(count=count, sides=sides)


def parse_terms(
    text: str,
    max_count: Optional[int] = None,
    max_sides: Optional[int] = None,
    max_total: Optional[int] = None,
) -> tuple[RollTerm, ...]:
    """Parse ``text`` into roll terms. Raises DiceError on the first bad term.

    Limits left as ``None`` come from ``get_config()``.
    """
    if not text or not text.strip():
        raise DiceError(f"{INVALID_NOTATION}: empty input. Example: '3d6' or '2d6 1d20'.")

    if max_count is None or max_sides is None or max_total is None:
        config = get_config()
        max_count = config.max_count if max_count is None else max_count
        max_sides = config.max_sides if max_sides is None else max_sides
        max_total = config.max_total if max_total is None else max_total

    terms: list[RollTerm] = []
    total_dice = 0
    for tok in normalize_text(text).split(" "):
        term = _parse_term(tok, max_count, max_sides)
        total_dice += term.count
        if total_dice > max_total:
            raise DiceError(f"{INVALID_NOTATION}: too many dice in total (max {max_total})")
        terms.append(term)

    return tuple(terms)


def parse(
    raw: str,
    max_count: Optional[int] = None,
    max_sides: Optional[int] = None,
    max_total: Optional[int] = None,
) -> ParseOutcome:
    """Parse dice notation such as ``"3d6 2d8"``.

    Never raises for bad input: a malformed term turns the whole expression
    into a ``ParseFailure`` carrying a user-facing message.

    The result depends only on ``raw`` and the limits. Limits not passed in
    are read from the process-wide config, so changing the environment and
    calling ``reset_config()`` can change the outcome for the same text.
    """
    try:
        terms = parse_terms(raw, max_count=max_count, max_sides=max_sides, max_total=max_total)
    except DiceError as e:
        logger.debug(f"Rejected notation {raw!r}: {e}")
        return ParseFailure(message=str(e))
    return ParseOk(terms=terms)


def format_terms(terms: Iterable[RollTerm]) -> str:
    return " ".join(str(term) for term in terms)
