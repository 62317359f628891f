from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from .config import get_config
from .dice import describe_result, roll_from_text
from .errors import DiceError
from .logging_config import setup_logging
from .router import DiceKeypad, KeyEvent


mcp = FastMCP("dice-keypad")

# The keypad session shared by the keypad tools of this server process.
keypad = DiceKeypad()


def _keypad_view() -> dict[str, Any]:
    view: dict[str, Any] = {
        "text": keypad.buffer.get_text(),
        "caret": keypad.buffer.get_caret(),
        "empty": keypad.buffer.is_empty(),
        "outcome": None,
    }
    outcome = keypad.outcome
    if outcome is not None:
        view["outcome"] = {
            "text": outcome.text,
            "error": outcome.error,
            "results": [describe_result(r) for r in outcome.results],
        }
    return view


@mcp.tool()
def roll_dice(text: str):
    """Roll dice notation such as "3d6 2d8".

    Input: text (string), space-separated <count>d<sides> terms
    Output: structured JSON with per-term rolls, totals and an explanation

    Raises a hard error (exception) on invalid input.
    """

    try:
        return roll_from_text(text)
    except DiceError as e:
        raise ValueError(str(e)) from None


@mcp.tool()
def press_keys(keys: list[str], alt: bool = False, ctrl: bool = False):
    """Press keypad keys in order ("3", "d", "6", "ArrowLeft", "Backspace", "Enter", "Escape").

    Returns the buffer, caret and last roll outcome after the keys are applied.
    """

    for key in keys:
        keypad.handle(KeyEvent(key, alt=alt, ctrl=ctrl))
    return _keypad_view()


@mcp.tool()
def keypad_state():
    """Return the keypad buffer, caret and last roll outcome."""

    return _keypad_view()


@mcp.tool()
def load_formula(text: str, roll: bool = False):
    """Replace the keypad buffer with a formula, optionally rolling it right away."""

    keypad.load(text, roll=roll)
    return _keypad_view()


def run() -> None:
    config = get_config()
    setup_logging(level=config.log_level, log_file=config.log_file)
    # Default transport is stdio.
    mcp.run()


if __name__ == "__main__":
    run()
