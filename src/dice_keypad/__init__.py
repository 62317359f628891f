from __future__ import annotations

from .dice import describe_result, evaluate, roll_from_text
from .editor import EditBuffer
from .errors import DiceError
from .models import EditState, ParseFailure, ParseOk, ParseOutcome, RollResult, RollTerm
from .parser import format_terms, parse
from .randomness import CycleSource, RandomSource, SystemSource
from .router import Action, DiceKeypad, KeyEvent, RollOutcome, route

__all__ = [
    "Action",
    "CycleSource",
    "DiceError",
    "DiceKeypad",
    "EditBuffer",
    "EditState",
    "KeyEvent",
    "ParseFailure",
    "ParseOk",
    "ParseOutcome",
    "RandomSource",
    "RollOutcome",
    "RollResult",
    "RollTerm",
    "SystemSource",
    "describe_result",
    "evaluate",
    "format_terms",
    "parse",
    "roll_from_text",
    "route",
]
