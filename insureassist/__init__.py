"""InsureAssist package."""

__all__ = [
    "assistants",
    "catalog",
    "checks",
    "cli",
    "config",
    "errors",
    "formatting",
    "gemini_client",
    "invocation",
    "preflight",
    "prompts",
    "schemas",
    "selector",
    "utils",
    "web_app",
]
