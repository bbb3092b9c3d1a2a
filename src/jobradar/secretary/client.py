"""HTTP client for the Secretary template transformer."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlsplit

import httpx

from jobradar.errors import (
    SecretaryAPIError,
    SecretaryNetworkError,
    SecretaryRequestError,
    SecretaryResponseFormatError,
    SecretaryTimeoutError,
)

from .types import (
    SecretaryClientConfig,
    TemplateExtractionRequest,
    TemplateExtractionResponse,
)


def _validate_url(url: str) -> None:
    parts = urlsplit(url)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise SecretaryRequestError(
            f"Invalid URL format: {url!r}",
            hint="Pass an absolute http(s) URL.",
        )


def _describe_http_error(response: httpx.Response) -> str:
    status_code = response.status_code
    message = f"Secretary service error ({status_code})"
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        error = data.get("error")
        detail = ""
        code = ""
        if isinstance(error, dict):
            detail = str(error.get("message") or "").strip()
            code = str(error.get("code") or "").strip()
        elif isinstance(error, str):
            detail = error.strip()
        if not detail:
            detail = str(data.get("message") or "").strip()
        label = " ".join(item for item in (str(status_code), code) if item)
        if detail:
            message = f"Secretary service error ({label}): {detail}"
        elif code:
            message = f"Secretary service error ({label})"
    elif response.text:
        message = f"Secretary service error ({status_code}): {response.text}"
    return message


class SecretaryClient:
    """Calls the Secretary service to turn web pages into structured job data."""

    _TEMPLATE_ENDPOINT = "/transformer/template"

    def __init__(self, config: SecretaryClientConfig):
        self._config = config
        self._logger = logging.getLogger("jobradar.secretary")
        self._http_client = httpx.Client(
            base_url=config.base_url,
            headers={
                "Accept": "application/json",
                "Authorization": f"Bearer {config.api_key}",
                "X-Secretary-Api-Key": config.api_key,
            },
            timeout=config.timeout,
        )

    def __enter__(self) -> SecretaryClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def build_request(
        self,
        url: str,
        *,
        template: str | None = None,
        template_content: str | None = None,
        container_selector: str | None = None,
    ) -> TemplateExtractionRequest:
        """Fill language and cache options from the client config."""
        return TemplateExtractionRequest(
            url=url.strip(),
            template=template,
            template_content=template_content,
            source_language=self._config.source_language,
            target_language=self._config.target_language,
            use_cache=self._config.use_cache,
            container_selector=container_selector,
        )

    def extract_from_url(
        self, request: TemplateExtractionRequest
    ) -> TemplateExtractionResponse:
        _validate_url(request.url)
        self._logger.debug(
            "Requesting template extraction (url=%s, template=%s)",
            request.url,
            request.template if not request.template_content else "<inline>",
        )
        try:
            response = self._http_client.post(
                self._TEMPLATE_ENDPOINT, data=request.to_form()
            )
        except httpx.TimeoutException as exc:
            raise SecretaryTimeoutError(
                f"Secretary service did not answer within {self._config.timeout:g}s",
                hint="Raise secretary_timeout or retry later.",
            ) from exc
        except httpx.TransportError as exc:
            raise SecretaryNetworkError(
                f"Secretary service is not reachable: {exc}",
                hint="Check secretary_base_url and the network connection.",
            ) from exc

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise SecretaryAPIError(
                _describe_http_error(exc.response),
                status_code=exc.response.status_code,
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise SecretaryResponseFormatError(
                "Secretary service returned a non-JSON body"
            ) from exc

        result = TemplateExtractionResponse.from_payload(payload)
        if result.status == "error":
            raise SecretaryAPIError(
                result.error_message or "Unknown error during template extraction"
            )
        self._logger.debug("Template extraction finished (status=%s)", result.status)
        return result

    def close(self) -> None:
        self._http_client.close()
