import datetime
import hashlib
import random
import re
import string
from typing import Optional

from nepal_traversal.constants import MAX_INPUT_LENGTH

_DISALLOWED = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")
_NON_LETTERS = re.compile(r"[^a-z]")


def sanitize_input(raw) -> str:
    """Trim, drop punctuation other than hyphens, collapse whitespace, cap length."""
    if not isinstance(raw, str):
        return ""
    cleaned = _DISALLOWED.sub("", raw.strip())
    cleaned = _WHITESPACE.sub(" ", cleaned)
    return cleaned[:MAX_INPUT_LENGTH]


def compact_key(raw) -> str:
    """Lowercase letters only: 'Rukum-West ' -> 'rukumwest'."""
    return _NON_LETTERS.sub("", sanitize_input(raw).lower())


def generate_puzzle_id(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    seed = "".join(rng.choices(string.ascii_letters + string.digits, k=32))
    hashed = hashlib.sha256(seed.encode()).hexdigest()
    return "generated_" + hashed[:12]


def day_of_year(date: datetime.date) -> int:
    return date.timetuple().tm_yday
