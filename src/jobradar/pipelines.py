"""pipelines"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jobradar import config
from jobradar.batch import normalize_batch
from jobradar.errors import InputError, JobRadarError, TemplateNotFoundError
from jobradar.frontmatter import parse_document
from jobradar.jobs import map_structured_data_to_job
from jobradar.logging import get_logger
from jobradar.secretary import SecretaryClient, SecretaryClientConfig
from jobradar.template_loader import TemplateName, load_template


def _merge_config(cli_options: Mapping[str, Any] | None) -> dict[str, Any]:
    return config.get_config(cli_options or {})


def _read_input(raw_path: Any) -> str:
    if not raw_path or raw_path == "-":
        return sys.stdin.read()
    path = Path(str(raw_path)).expanduser()
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Cannot read {path}: {exc.strerror or exc}") from exc


def _emit(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _load_template_content(
    name: TemplateName, settings: Mapping[str, Any], logger: logging.Logger
) -> str | None:
    try:
        return load_template(name, settings.get("template_dir") or None)
    except TemplateNotFoundError as exc:
        # The service knows the named templates itself.
        logger.warning("%s; sending template name instead", exc)
        return None


def _create_secretary_client(settings: Mapping[str, Any]) -> SecretaryClient:
    return SecretaryClient(SecretaryClientConfig.from_settings(settings))


def run_parse(cli_options: Mapping[str, Any] | None = None) -> int:
    """Parse command: decode the frontmatter of a Secretary markdown document."""
    settings = _merge_config(cli_options)
    logger = get_logger("jobradar", bool(settings.get("verbose")))
    cli_options = dict(cli_options or {})
    source = cli_options.get("input_path") or "-"

    result = parse_document(_read_input(source))
    if result.frontmatter is None:
        logger.info("No frontmatter block found in %s", source)
    elif result.errors:
        logger.info(
            "Decoded frontmatter of %s with %s error(s)", source, len(result.errors)
        )
    _emit(result.to_dict())

    if cli_options.get("strict") and result.errors:
        return 1
    return 0


def run_batch(cli_options: Mapping[str, Any] | None = None) -> int:
    """Batch command: normalize a decoded job list payload."""
    settings = _merge_config(cli_options)
    logger = get_logger("jobradar", bool(settings.get("verbose")))
    cli_options = dict(cli_options or {})
    source = cli_options.get("input_path") or "-"

    text = _read_input(source)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputError(f"{source} is not valid JSON: {exc}") from exc

    links = normalize_batch(payload)
    logger.info("Normalized %s job link(s) from %s", len(links), source)
    _emit([link.to_dict() for link in links])
    return 0


def run_import_list(cli_options: Mapping[str, Any] | None = None) -> int:
    """Import-list command: extract job links from an overview page."""
    settings = _merge_config(cli_options)
    logger = get_logger("jobradar", bool(settings.get("verbose")))
    cli_options = dict(cli_options or {})
    url = str(cli_options.get("url") or "")

    template_content = _load_template_content(TemplateName.JOB_LIST, settings, logger)
    with _create_secretary_client(settings) as client:
        request = client.build_request(
            url,
            template=TemplateName.JOB_LIST.value,
            template_content=template_content,
            container_selector=cli_options.get("container_selector"),
        )
        logger.info("Extracting job list from %s", request.url)
        response = client.extract_from_url(request)

    if not response.succeeded or response.structured_data is None:
        raise JobRadarError(f"No job list received for {url}")
    links = normalize_batch(response.structured_data)
    if not links:
        raise JobRadarError(
            f"No job links found at {url}",
            hint="Pass --container-selector to narrow the page to the job list.",
        )
    missing_url = sum(1 for link in links if not link.url)
    if missing_url:
        logger.warning("%s job link(s) without URL", missing_url)
    logger.info("Found %s job link(s)", len(links))
    _emit([link.to_dict() for link in links])
    return 0


def run_import_job(cli_options: Mapping[str, Any] | None = None) -> int:
    """Import-job command: extract and validate a single job posting."""
    settings = _merge_config(cli_options)
    logger = get_logger("jobradar", bool(settings.get("verbose")))
    cli_options = dict(cli_options or {})
    url = str(cli_options.get("url") or "")

    template_content = _load_template_content(TemplateName.JOB_DATA, settings, logger)
    with _create_secretary_client(settings) as client:
        request = client.build_request(
            url,
            template=TemplateName.JOB_DATA.value,
            template_content=template_content,
        )
        logger.info("Extracting job data from %s", request.url)
        response = client.extract_from_url(request)

    structured = response.structured_data
    if not isinstance(structured, Mapping):
        logger.debug("No structured_data in response; decoding text frontmatter")
        parsed = response.parse_text()
        if parsed.frontmatter is None:
            raise JobRadarError(f"No job data received for {url}")
        structured = parsed.meta

    data = dict(structured)
    data.setdefault("url", request.url)
    job = map_structured_data_to_job(data)
    logger.info("Mapped job %r (%s)", job.title, job.job_type.value)
    _emit(job.to_dict())
    return 0


def run_config_show(cli_options: Mapping[str, Any] | None = None) -> int:
    settings = _merge_config(cli_options)
    print("Effective configuration:")
    print(config.render_settings(settings))
    return 0
