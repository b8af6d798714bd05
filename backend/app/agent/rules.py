import re
from bisect import bisect_right
from collections.abc import Callable, Sequence

Rule = tuple[str, Callable[[str], str | None]]


def first_match(rules: Sequence[Rule], text: str) -> tuple[str, str] | None:
    """Evaluate `rules` in order and return `(rule_name, value)` for the first hit."""
    for rule_name, rule in rules:
        value = rule(text)
        if value:
            return rule_name, value
    return None


def capture_between(
    text: str,
    opening: re.Pattern[str],
    closing: re.Pattern[str],
    boundary: re.Pattern[str],
) -> str | None:
    """
    Return the text between the leftmost `opening` match and the first
    `closing` match after it, without crossing a `boundary`.

    Equivalent to searching `opening(.+?)closing` inside each boundary-free
    segment, but each segment is scanned once, so the cost stays linear on
    long inputs where many openings have no closing.
    """
    for segment in boundary.split(text):
        closings = [match.start() for match in closing.finditer(segment)]
        if not closings:
            continue
        start = opening.search(segment)
        if not start:
            continue
        # Later openings only see a subset of these closings
        index = bisect_right(closings, start.end())
        if index < len(closings):
            return segment[start.end() : closings[index]]
    return None
