import math
import re

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def round_half_up(value: float) -> int:
    """Round .5 upwards, unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


def parse_inline_style(style: str | None) -> dict:
    """Parse a ``style`` attribute into a {property: value} dict (last one wins)."""
    declarations = {}
    if not style:
        return declarations
    for chunk in style.split(';'):
        if ':' not in chunk:
            continue
        prop, value = chunk.split(':', 1)
        prop = prop.strip().lower()
        value = value.strip()
        if prop and value:
            declarations[prop] = value
    return declarations


def leading_int(value: str | None) -> int | None:
    """Integer prefix of a CSS value: "14px" -> 14, "1.5em" -> 1, "auto" -> None."""
    if not value:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def count_split(pattern: str, text: str) -> int:
    """Number of pieces produced by splitting on a regex, empty pieces included."""
    return len(re.split(pattern, text))


def contains_any(text: str, needles) -> bool:
    return any(needle in text for needle in needles)
