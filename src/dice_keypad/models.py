from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from .errors import DiceError


@dataclass(frozen=True)
class RollTerm:
    count: int
    sides: int

    def __post_init__(self) -> None:
        if self.count < 1 or self.sides < 1:
            raise DiceError(f"Roll terms need a positive count and sides, got {self.count}d{self.sides}")

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"


@dataclass(frozen=True)
class RollResult:
    term: RollTerm
    rolls: tuple[int, ...]
    total: int


@dataclass(frozen=True)
class EditState:
    text: str = ""
    caret: int = 0


@dataclass(frozen=True)
class ParseOk:
    terms: tuple[RollTerm, ...]
    ok: Literal[True] = True


@dataclass(frozen=True)
class ParseFailure:
    message: str
    ok: Literal[False] = False


ParseOutcome: TypeAlias = ParseOk | ParseFailure
