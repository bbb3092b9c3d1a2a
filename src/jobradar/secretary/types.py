"""Shared types for the Secretary service integration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from jobradar.errors import MissingSettingError, SecretaryResponseFormatError
from jobradar.frontmatter import FrontmatterParseResult, parse_document

DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_TEMPLATE = "ExtractJobDataFromWebsite"


# --- Config. ---
@dataclass(frozen=True, slots=True)
class SecretaryClientConfig:
    base_url: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    source_language: str = "en"
    target_language: str = "en"
    use_cache: bool = False

    @staticmethod
    def _require(settings: Mapping[str, object], key: str, env_name: str) -> str:
        value = str(settings.get(key) or "").strip()
        if not value:
            raise MissingSettingError(
                key,
                f"`{key}` must be configured before calling the Secretary service.",
                hint=(
                    f"Set `{key}` in {Path('~/.jobradar/config.toml').expanduser()} "
                    f"or export {env_name}."
                ),
            )
        return value

    @classmethod
    def from_settings(cls, settings: Mapping[str, object]) -> SecretaryClientConfig:
        base_url = cls._require(settings, "secretary_base_url", "SECRETARY_SERVICE_URL")
        api_key = cls._require(settings, "secretary_api_key", "SECRETARY_SERVICE_API_KEY")
        raw_timeout = settings.get("secretary_timeout")
        timeout = (
            float(raw_timeout)
            if isinstance(raw_timeout, (int, float)) and not isinstance(raw_timeout, bool)
            else DEFAULT_TIMEOUT_SECONDS
        )
        return cls(
            base_url=base_url.rstrip("/"),
            api_key=api_key,
            timeout=timeout,
            source_language=str(settings.get("source_language") or "en").strip() or "en",
            target_language=str(settings.get("target_language") or "en").strip() or "en",
            use_cache=bool(settings.get("use_cache", False)),
        )


# --- Request. ---
@dataclass(frozen=True, slots=True)
class TemplateExtractionRequest:
    url: str
    template: str | None = DEFAULT_TEMPLATE
    template_content: str | None = None
    source_language: str = "en"
    target_language: str = "en"
    use_cache: bool = False
    container_selector: str | None = None

    def to_form(self) -> dict[str, str]:
        form = {
            "url": self.url,
            "source_language": self.source_language or "en",
            "target_language": self.target_language or "en",
        }
        # Inline template content takes precedence over a named template.
        if self.template_content and self.template_content.strip():
            form["template_content"] = self.template_content.strip()
        else:
            form["template"] = self.template or DEFAULT_TEMPLATE
        form["use_cache"] = "true" if self.use_cache else "false"
        if self.container_selector and self.container_selector.strip():
            form["container_selector"] = self.container_selector.strip()
        return form


# --- Result. ---
@dataclass(frozen=True, slots=True)
class TemplateExtractionResponse:
    status: str
    text: str = ""
    language: str = ""
    format: str = ""
    structured_data: Any = None
    error_message: str | None = None
    raw_response: dict[str, Any] | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> TemplateExtractionResponse:
        if not isinstance(payload, dict):
            raise SecretaryResponseFormatError(
                f"Expected a JSON object from the Secretary service, got {type(payload).__name__}"
            )
        data = payload.get("data")
        if not isinstance(data, dict):
            data = {}
        error = payload.get("error")
        error_message: str | None = None
        if isinstance(error, dict):
            error_message = str(error.get("message") or "").strip() or None
        elif isinstance(error, str) and error.strip():
            error_message = error.strip()
        return cls(
            status=str(payload.get("status") or ""),
            text=str(data.get("text") or ""),
            language=str(data.get("language") or ""),
            format=str(data.get("format") or ""),
            structured_data=data.get("structured_data"),
            error_message=error_message,
            raw_response=payload,
        )

    @property
    def succeeded(self) -> bool:
        return self.status == "success"

    def parse_text(self) -> FrontmatterParseResult:
        """Decode the frontmatter of the markdown ``text`` returned by the template."""
        return parse_document(self.text)
