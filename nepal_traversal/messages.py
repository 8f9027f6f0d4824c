"""
Player-facing feedback text.

The engine returns tiers and distances only; front ends that want the
stock wording render it here.
"""

from typing import Optional

from nepal_traversal.models import Guess, Puzzle
from nepal_traversal.types import GuessTier

FEEDBACK_MESSAGES = {
    "PERFECT": "🎯 Perfect! {district} is on the shortest path!",
    "CLOSE": "🔥 Very close! Adjacent to the correct path.",
    "WARM": "🌊 Getting warmer! 2 districts away.",
    "COLD": "❄️ Too far from the correct path.",
    "DUPLICATE": "🔄 You already guessed this district!",
    "INVALID": "🚫 Invalid district name.",
    "START_DISTRICT": "🚫 Cannot guess the start district.",
    "END_DISTRICT": "🚫 Cannot guess the end district.",
    "HINT_USED": "💡 Try: {hint}",
    "NO_HINTS": "💡 No more hints available!",
    "GAME_WON": "🎉 Congratulations! You found the shortest path!",
    "UNDO_SUCCESS": "Last guess undone",
    "UNDO_FAILED": "Nothing to undo",
}

_TIER_KEYS = {
    GuessTier.NEAR: "CLOSE",
    GuessTier.MEDIUM: "WARM",
    GuessTier.FAR: "COLD",
    GuessTier.DUPLICATE: "DUPLICATE",
}


def feedback_message(guess: Guess, puzzle: Optional[Puzzle] = None) -> str:
    """Stock message for a guess; pass the puzzle to name endpoint rejections."""
    if guess.tier == GuessTier.EXACT:
        return FEEDBACK_MESSAGES["PERFECT"].format(district=guess.district)

    if guess.tier == GuessTier.INVALID:
        if puzzle is not None:
            if guess.district.lower() == puzzle.start.lower():
                return FEEDBACK_MESSAGES["START_DISTRICT"]
            if guess.district.lower() == puzzle.end.lower():
                return FEEDBACK_MESSAGES["END_DISTRICT"]
        return FEEDBACK_MESSAGES["INVALID"]

    return FEEDBACK_MESSAGES[_TIER_KEYS[guess.tier]]


def hint_message(hint: Optional[str]) -> str:
    if hint is None:
        return FEEDBACK_MESSAGES["NO_HINTS"]
    return FEEDBACK_MESSAGES["HINT_USED"].format(hint=hint)


def undo_message(undone: bool) -> str:
    return FEEDBACK_MESSAGES["UNDO_SUCCESS" if undone else "UNDO_FAILED"]
