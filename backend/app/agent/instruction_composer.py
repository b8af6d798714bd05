from collections.abc import Callable, Collection

from app.agent.prompts.instructions import (
    AUTOMATION_INSTRUCTION,
    BASE_INSTRUCTIONS,
    DATABASE_INSTRUCTION,
    EMAIL_INSTRUCTION,
    FILE_INSTRUCTION,
    MONITORING_INSTRUCTION,
    SCHEDULING_INSTRUCTION,
    WEB_SCRAPING_INSTRUCTION,
)

Condition = Callable[[str, Collection[str]], bool]


def _uses(tool: str) -> Condition:
    return lambda _text, tools: tool in tools


def _mentions(fragment: str) -> Condition:
    return lambda text, _tools: fragment in text


# Emission order is fixed by this table, never by the order tools were found
INSTRUCTION_RULES: tuple[tuple[Condition, str], ...] = (
    (_uses("web_scraper"), WEB_SCRAPING_INSTRUCTION),
    (_uses("email_tool"), EMAIL_INSTRUCTION),
    (_uses("database_tool"), DATABASE_INSTRUCTION),
    (_uses("file_manager"), FILE_INSTRUCTION),
    (_mentions("monitor"), MONITORING_INSTRUCTION),
    (_mentions("automat"), AUTOMATION_INSTRUCTION),
    (_mentions("schedul"), SCHEDULING_INSTRUCTION),
)


def compose_instructions(description: str, tools: Collection[str]) -> str:
    lowered = description.lower()
    sentences = list(BASE_INSTRUCTIONS)
    sentences.extend(
        sentence for condition, sentence in INSTRUCTION_RULES if condition(lowered, tools)
    )
    return " ".join(sentences)
