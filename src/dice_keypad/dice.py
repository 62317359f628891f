from __future__ import annotations

import logging
import math
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from .models import RollResult, RollTerm
from .parser import format_terms, normalize_text, parse_terms
from .randomness import RandomSource, SystemSource

logger = logging.getLogger(__name__)


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _roll_die(sides: int, source: RandomSource) -> int:
    return math.floor(source.draw() * sides) + 1


def evaluate(terms: Iterable[RollTerm], source: Optional[RandomSource] = None) -> tuple[RollResult, ...]:
    """Roll every term in order.

    Draws are consumed left to right, term by term, so a replaying source
    always reproduces the same results for the same terms.
    """
    rng = source if source is not None else SystemSource()
    results: list[RollResult] = []

    for term in terms:
        rolls = tuple(_roll_die(term.sides, rng) for _ in range(term.count))
        results.append(RollResult(term=term, rolls=rolls, total=sum(rolls)))

    return tuple(results)


def describe_result(result: RollResult) -> dict[str, Any]:
    """Render one result the way the results list shows it."""
    return {
        "formula": str(result.term),
        "rolls": list(result.rolls),
        "rolls_text": "Rolls: " + " ".join(str(r) for r in result.rolls),
        "total": result.total,
        "total_text": f"Total: {result.total}",
    }


def roll_from_text(text: str, source: Optional[RandomSource] = None) -> dict[str, Any]:
    """Parse, validate, then roll. Raises DiceError for invalid input."""

    terms = parse_terms(text)
    rng = source if source is not None else SystemSource()
    results = evaluate(terms, rng)

    evaluated_terms = [
        {
            "count": r.term.count,
            "sides": r.term.sides,
            "rolls": list(r.rolls),
            "subtotal": r.total,
        }
        for r in results
    ]
    total = sum(r.total for r in results)

    explanation = "; ".join(f"{r.term}: rolls {list(r.rolls)} => {r.total}" for r in results)
    explanation += f" => {total}"

    logger.info(f"Rolled {format_terms(terms)} => {total}")

    return {
        "request_id": uuid.uuid4().hex,
        "timestamp": _now_utc_iso(),
        "input": text,
        "normalized_input": normalize_text(text),
        "normalized_expression": format_terms(terms),
        "rng": {
            "source": rng.name,
            "nonce": str(uuid.uuid4()),
        },
        "terms": evaluated_terms,
        "results": [describe_result(r) for r in results],
        "total": total,
        "explanation": explanation,
    }
