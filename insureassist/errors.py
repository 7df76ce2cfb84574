from __future__ import annotations


class InsureAssistError(Exception):
    """Base class for errors that abort a single user action."""


class ConfigurationError(InsureAssistError):
    pass


class InputValidationError(InsureAssistError, ValueError):
    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = list(fields or [])


class UnknownFeatureError(InsureAssistError, KeyError):
    def __init__(self, feature_key: str) -> None:
        super().__init__(feature_key)
        self.feature_key = feature_key

    def __str__(self) -> str:
        return f"Unknown feature: {self.feature_key}"


class NoPromptsAvailableError(InsureAssistError, LookupError):
    def __init__(self, feature_key: str) -> None:
        super().__init__(f"No prompts available for agent: {feature_key}")
        self.feature_key = feature_key


class GenerationError(InsureAssistError, RuntimeError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
