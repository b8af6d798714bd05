import logging
import re
from collections.abc import Callable

from app.agent.rules import Rule, capture_between, first_match

logger = logging.getLogger(__name__)

GOAL_PREFIX = "To "
EXTERNAL_API_GOAL = "To call external APIs and process data"
GOAL_ACTION_VERBS = (
    "automate",
    "manage",
    "monitor",
    "track",
    "analyze",
    "process",
    "handle",
    "assist",
    "help",
    "support",
    "create",
    "generate",
    "find",
    "search",
    "notify",
    "alert",
    "update",
    "maintain",
)

STATED_GOAL_PATTERN = re.compile(
    r"\b(?:goal|objective|purpose|aim)(?:\s+is\s+to\b|\s+should\s+be\b|\s*:)\s*(?:to\s+)?"
    r"(?P<goal>[^.\n]+)",
    re.IGNORECASE,
)
MODAL_PATTERN = re.compile(r"\b(?:should|will|must|needs?\s+to)\s+(?P<goal>[^.\n]+)", re.IGNORECASE)
# "to/for X by/using/with/and", matched through capture_between
PURPOSE_OPENING = re.compile(r"\b(?:to|for)\s+", re.IGNORECASE)
PURPOSE_CLOSING = re.compile(r"\s+(?:by|using|with|and)\b", re.IGNORECASE)
SENTENCE_BOUNDARY = re.compile(r"[.\n]")
ASSISTANCE_PATTERN = re.compile(
    r"\b(?:help|assist|enable|allow)\s+(?:(?:users|user|me|people)\s+)?(?:to\s+)?"
    r"(?P<goal>[^.\n]+)",
    re.IGNORECASE,
)
NEED_AGENT_PATTERN = re.compile(r"\bI\s+need\s+an?\s+agent\s+that\s+(?P<goal>[^.\n]+)", re.IGNORECASE)
EXTERNAL_API_PATTERN = re.compile(
    r"\bcalls\s+external\s+apis\s+to\s+(?P<goal>[^.\n]+)", re.IGNORECASE
)
ACTION_CLAUSE_PATTERN = re.compile(
    r"\b(?P<verb>" + "|".join(GOAL_ACTION_VERBS) + r")\s+(?:an?\s+agent\s+)?(?:that\s+)?"
    r"(?P<goal>[^.,\n]+)",
    re.IGNORECASE,
)


def _as_goal(clause: str) -> str | None:
    clause = clause.strip()
    if not clause:
        return None
    return GOAL_PREFIX + clause.lower()


def _captured(pattern: re.Pattern[str]) -> Callable[[str], str | None]:
    def rule(text: str) -> str | None:
        match = pattern.search(text)
        return _as_goal(match.group("goal")) if match else None

    return rule


def _purpose(text: str) -> str | None:
    clause = capture_between(text, PURPOSE_OPENING, PURPOSE_CLOSING, SENTENCE_BOUNDARY)
    return _as_goal(clause) if clause else None


# Explicit phrasings, tried in this order
EXPLICIT_GOAL_RULES: tuple[Rule, ...] = (
    ("stated", _captured(STATED_GOAL_PATTERN)),
    ("modal", _captured(MODAL_PATTERN)),
    ("purpose", _purpose),
    ("assistance", _captured(ASSISTANCE_PATTERN)),
)


def _explicit_goal(text: str) -> str | None:
    matched = first_match(EXPLICIT_GOAL_RULES, text)
    return matched[1] if matched else None


def _calls_external_apis(text: str) -> str | None:
    if "that calls external apis" in text.lower():
        return EXTERNAL_API_GOAL
    return None


def _action_clause(text: str) -> str | None:
    match = ACTION_CLAUSE_PATTERN.search(text)
    if not match:
        return None
    verb = match.group("verb").lower()
    # "Create an agent that calls external APIs ..." must not become "To create ..."
    if verb == "create" and "calls external apis" in text.lower():
        return EXTERNAL_API_GOAL
    return _as_goal(f"{verb} {match.group('goal').strip()}")


def _leading_sentence(text: str) -> str | None:
    return _as_goal(text.split(".", 1)[0]) or _as_goal(text)


GOAL_RULES: tuple[Rule, ...] = (
    ("explicit", _explicit_goal),
    ("need_agent", _captured(NEED_AGENT_PATTERN)),
    ("calls_external_apis", _calls_external_apis),
    ("external_api_purpose", _captured(EXTERNAL_API_PATTERN)),
    ("action_clause", _action_clause),
    ("leading_sentence", _leading_sentence),
)


def extract_goal(description: str) -> str:
    """Derive a one-sentence objective. The result always starts with "To "."""
    matched = first_match(GOAL_RULES, description)
    if matched is None:
        # Only reachable for whitespace-only text, which callers reject upfront
        return GOAL_PREFIX + description.strip().lower()
    rule_name, goal = matched
    logger.debug("Goal rule %s matched: %r", rule_name, goal)
    return goal
