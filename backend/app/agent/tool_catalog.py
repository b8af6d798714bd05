"""Static keyword table mapping trigger substrings to tool identifiers."""

TOOL_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("email_tool", ("email", "send", "mail", "notify", "notification", "report")),
    ("web_scraper", ("web", "scrape", "website", "browse", "crawl", "fetch")),
    ("file_manager", ("file", "document", "read", "write", "save", "upload", "backup")),
    ("database_tool", ("database", "db", "store", "data", "query", "sql", "stores")),
    ("api_client", ("api", "http", "request", "call", "endpoint", "service", "calls")),
    (
        "scheduler",
        (
            "schedule",
            "timer",
            "cron",
            "periodic",
            "interval",
            "daily",
            "night",
            "appointment",
            "managing",
        ),
    ),
    ("search_tool", ("search", "find", "lookup", "google", "bing", "research")),
    ("calculator", ("calculate", "math", "compute", "formula", "number", "calculation")),
    ("image_processor", ("image", "photo", "picture", "visual", "generate")),
    ("text_processor", ("text", "translate", "language", "nlp", "process", "compiles", "findings")),
    ("calendar_tool", ("calendar", "appointment", "meeting", "event")),
    ("chat_tool", ("chat", "message", "communicate", "slack", "discord")),
)

# Any of these adds the text processor regardless of the table above
AUDIENCE_KEYWORDS: tuple[str, ...] = ("user", "people")
AUDIENCE_TOOL = "text_processor"

TOOL_VOCABULARY: frozenset[str] = frozenset(tool for tool, _ in TOOL_KEYWORDS)
