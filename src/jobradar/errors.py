# src/jobradar/errors.py
from __future__ import annotations


class JobRadarError(Exception):
    """Base exception for all jobradar errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigError(JobRadarError):
    """Raised when config is missing or invalid."""


class MissingSettingError(ConfigError):
    """Raised when a required configuration value is absent."""

    def __init__(
        self,
        setting_name: str,
        message: str | None = None,
        *,
        hint: str | None = None,
    ) -> None:
        detail = message or f"Missing required setting: {setting_name}"
        super().__init__(detail, hint=hint)
        self.setting_name = setting_name


class InputError(JobRadarError):
    """Raised when a command input cannot be read or decoded."""


class MalformedBatchShapeError(JobRadarError, ValueError):
    """Raised when a batch payload is neither a list nor a known wrapper object."""


class JobMappingError(JobRadarError, ValueError):
    """Raised when extracted job data lacks required fields."""

    def __init__(self, problems: list[str]) -> None:
        message = "Missing or invalid required fields:\n" + "\n".join(problems)
        super().__init__(message)
        self.problems = list(problems)


class TemplateNotFoundError(JobRadarError):
    """Raised when an extraction template cannot be loaded."""


class SecretaryClientError(JobRadarError):
    """Base error for Secretary service client failures."""


class SecretaryRequestError(SecretaryClientError):
    """Raised when a request is rejected before it is sent."""


class SecretaryAPIError(SecretaryClientError):
    """Raised when the Secretary service answers with an error."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code


class SecretaryTimeoutError(SecretaryClientError):
    """Raised when the Secretary service does not answer in time."""


class SecretaryNetworkError(SecretaryClientError):
    """Raised when the Secretary service cannot be reached."""


class SecretaryResponseFormatError(SecretaryClientError):
    """Raised when the response payload is not in the expected shape."""
