from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Optional, TypeAlias

from .dice import evaluate
from .editor import EditBuffer
from .models import RollResult
from .parser import parse
from .randomness import RandomSource, SystemSource

logger = logging.getLogger(__name__)

ActionKind: TypeAlias = Literal[
    "insert",
    "delete_before",
    "move_left",
    "move_right",
    "move_home",
    "move_end",
    "submit",
    "clear_all",
]

# Keys that insert themselves; the separator is always inserted lower-case.
_INSERT_KEYS = frozenset("0123456789dD ")

_NAMED_KEYS: dict[str, ActionKind] = {
    "Backspace": "delete_before",
    "Delete": "delete_before",
    "ArrowLeft": "move_left",
    "ArrowRight": "move_right",
    "Home": "move_home",
    "End": "move_end",
    "Enter": "submit",
    "Escape": "clear_all",
}


@dataclass(frozen=True)
class KeyEvent:
    """A key press or keypad button, as the UI layer reports it."""

    key: str
    shift: bool = False
    alt: bool = False
    ctrl: bool = False
    meta: bool = False

    @property
    def has_blocking_modifier(self) -> bool:
        return self.alt or self.ctrl or self.meta


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    char: str = ""


@dataclass(frozen=True)
class RollOutcome:
    """What one submit produced: results on success, a message on failure."""

    text: str
    results: tuple[RollResult, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def total(self) -> int:
        return sum(r.total for r in self.results)


def route(event: KeyEvent) -> Optional[Action]:
    """
    Decide what a key event does, without touching any state.

    Rules:
      - alt/ctrl/meta held -> ignored, so browser and OS shortcuts still work.
      - digits, d/D, space -> insert.
      - Backspace/Delete -> delete before the caret.
      - arrows, Home, End -> caret movement.
      - Enter -> submit, Escape -> clear everything.
      - anything else -> ignored.
    """
    if event.has_blocking_modifier:
        return None

    if event.key in _INSERT_KEYS:
        return Action("insert", event.key.lower())

    kind = _NAMED_KEYS.get(event.key)
    if kind is None:
        return None
    return Action(kind)


@dataclass
class DiceKeypad:
    """
    One keypad session: the edit buffer, the randomness source and the last
    roll outcome. The UI feeds it events and renders ``buffer`` and ``outcome``.
    """

    buffer: EditBuffer = field(default_factory=EditBuffer)
    source: RandomSource = field(default_factory=SystemSource)
    outcome: Optional[RollOutcome] = None

    def handle(self, event: KeyEvent) -> Optional[Action]:
        """Route ``event`` and apply it. Returns the applied action, if any."""
        action = route(event)
        if action is not None:
            self.apply(action)
        return action

    def press(self, key: str, **modifiers: bool) -> Optional[Action]:
        return self.handle(KeyEvent(key, **modifiers))

    def apply(self, action: Action) -> None:
        if action.kind == "insert":
            self.buffer.insert(action.char)
        elif action.kind == "delete_before":
            self.buffer.delete_before()
        elif action.kind == "move_left":
            self.buffer.move_left()
        elif action.kind == "move_right":
            self.buffer.move_right()
        elif action.kind == "move_home":
            self.buffer.move_home()
        elif action.kind == "move_end":
            self.buffer.move_end()
        elif action.kind == "submit":
            self.submit()
        elif action.kind == "clear_all":
            self.clear_all()
        else:
            raise ValueError(f"Unknown action: {action.kind!r}")

    def submit(self) -> RollOutcome:
        """Roll whatever is in the buffer. The buffer itself is left as is."""
        text = self.buffer.get_text()
        parsed = parse(text)
        if parsed.ok:
            outcome = RollOutcome(text=text, results=evaluate(parsed.terms, self.source))
            logger.info(f"Rolled {text!r} => {outcome.total}")
        else:
            outcome = RollOutcome(text=text, error=parsed.message)
        self.outcome = outcome
        return outcome

    def clear_all(self) -> None:
        self.buffer.clear()
        self.outcome = None

    def load(self, text: str, roll: bool = False) -> Optional[RollOutcome]:
        """Put an externally supplied formula (e.g. from a shared link) in the buffer."""
        self.buffer.set_text(text)
        if roll:
            return self.submit()
        return None
