import logging
import re
from collections.abc import Callable

from app.agent.rules import Rule, capture_between, first_match

logger = logging.getLogger(__name__)

FALLBACK_NAME = "Smart Assistant Agent"
NAME_ACTION_VERBS = (
    "manage",
    "monitor",
    "track",
    "analyze",
    "process",
    "handle",
    "automate",
    "assist",
    "help",
    "support",
)
QUOTE_CHARS = "\"'“”‘’"

CALLED_PATTERN = re.compile(
    r"\bagent\s+(?:called|named)\s+[\"'“‘]?(?P<name>[^\"'“”‘’.,;!?\n]+?)[\"'”’]?"
    r"(?=\s+(?:that|which|who|to|for)\b|[.,;!?\n]|$)",
    re.IGNORECASE,
)
QUOTED_PATTERN = re.compile(r"[\"'“‘](?P<name>[^\"'“”‘’\n]+?)[\"'”’]\s+agent\b", re.IGNORECASE)
# "agent for X that ...", matched through capture_between
AGENT_FOR_OPENING = re.compile(r"\bagent\s+for\s+", re.IGNORECASE)
AGENT_FOR_CLOSING = re.compile(r"\s+(?:that|which|who)\b", re.IGNORECASE)
CLAUSE_BOUNDARY = re.compile(r"[.,;!?\n]")
# Only "[article] <one or two words> agent" at the very start, e.g. "Web crawler agent that ..."
LEADING_PHRASE_PATTERN = re.compile(
    r"^\s*(?:(?:a|an|the)\s+)?(?!(?:a|an|the|agent|create|build|make|design|develop|write|i|we)\b)"
    r"(?P<name>[\w-]+(?:\s+(?!(?:a|an|the)\b)[\w-]+)?)\s+agent\b",
    re.IGNORECASE,
)
CREATE_PATTERN = re.compile(
    r"\bcreate\s+an?\s+(?!agent\b)(?P<phrase>[\w-]+(?:\s+[\w-]+){0,3}?)\s+agent\b",
    re.IGNORECASE,
)
ACTION_VERB_PATTERN = re.compile(
    r"\b(?P<verb>" + "|".join(NAME_ACTION_VERBS) + r")",
    re.IGNORECASE,
)


def _capitalize_words(phrase: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in phrase.split())


def _clean_name(name: str) -> str | None:
    return name.strip().strip(QUOTE_CHARS).strip() or None


def _captured(pattern: re.Pattern[str]) -> Callable[[str], str | None]:
    def rule(text: str) -> str | None:
        match = pattern.search(text)
        return _clean_name(match.group("name")) if match else None

    return rule


def _agent_for(text: str) -> str | None:
    name = capture_between(text, AGENT_FOR_OPENING, AGENT_FOR_CLOSING, CLAUSE_BOUNDARY)
    return _clean_name(name) if name else None


def _domain_shortcut(text: str) -> str | None:
    lowered = text.lower()
    if "web" in lowered and ("scrap" in lowered or "crawl" in lowered):
        return "Web Scraping Agent"
    if "scheduling" in lowered:
        return "Scheduling Agent"
    if "research" in lowered:
        return "Research Agent"
    if "image" in lowered:
        return "Image Analysis Agent"
    return None


def _create_phrase(text: str) -> str | None:
    match = CREATE_PATTERN.search(text)
    if not match:
        return None
    return f"{_capitalize_words(match.group('phrase'))} Agent"


def _action_verb(text: str) -> str | None:
    match = ACTION_VERB_PATTERN.search(text)
    if not match:
        return None
    return f"{match.group('verb').capitalize()} Agent"


NAME_RULES: tuple[Rule, ...] = (
    ("called", _captured(CALLED_PATTERN)),
    ("quoted", _captured(QUOTED_PATTERN)),
    ("agent_for", _agent_for),
    ("leading_phrase", _captured(LEADING_PHRASE_PATTERN)),
    ("domain_shortcut", _domain_shortcut),
    ("create_phrase", _create_phrase),
    ("action_verb", _action_verb),
)


def extract_name(description: str) -> str:
    """Derive a short agent name. Falls back to a generic label, never empty."""
    matched = first_match(NAME_RULES, description)
    if matched is None:
        logger.debug("No name rule matched, using fallback")
        return FALLBACK_NAME
    rule_name, name = matched
    logger.debug("Name rule %s matched: %r", rule_name, name)
    return name
