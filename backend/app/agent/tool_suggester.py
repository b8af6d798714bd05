from app.agent.tool_catalog import AUDIENCE_KEYWORDS, AUDIENCE_TOOL, TOOL_KEYWORDS


def suggest_tools(description: str) -> tuple[str, ...]:
    """
    Suggest tool identifiers for every catalog row with at least one keyword
    present in `description` (case-insensitive substring match).

    The result is unique and ordered by catalog position, so identical text
    always yields an identical tuple. It is empty when nothing matched.
    """
    lowered = description.lower()
    matched = {
        tool
        for tool, keywords in TOOL_KEYWORDS
        if any(keyword in lowered for keyword in keywords)
    }
    if any(keyword in lowered for keyword in AUDIENCE_KEYWORDS):
        matched.add(AUDIENCE_TOOL)
    return tuple(tool for tool, _ in TOOL_KEYWORDS if tool in matched)
