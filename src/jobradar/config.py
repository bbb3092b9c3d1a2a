"""Configuration loading utilities for jobradar."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

from jobradar.errors import ConfigError

_ENV_PREFIX = "JOBRADAR_"
_DEFAULT_CONFIG = Path("~/.jobradar/config.toml").expanduser()

# Variable names used by the web app deployment.
_ENV_ALIASES: dict[str, str] = {
    "SECRETARY_SERVICE_URL": "secretary_base_url",
    "SECRETARY_SERVICE_API_KEY": "secretary_api_key",
}

_SECRET_KEYS = frozenset({"secretary_api_key"})
_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})


_DEFAULT_SETTINGS: dict[str, Any] = {
    "secretary_base_url": "",
    "secretary_api_key": "",
    "secretary_timeout": 60.0,
    "source_language": "en",
    "target_language": "en",
    "use_cache": False,
    "template_dir": "",
    "verbose": False,
}


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(str(value), ensure_ascii=False)


def mask_secret(value: str) -> str:
    if not value:
        return ""
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}...{value[-4:]}"


def _coerce_env_value(key: str, value: str) -> Any:
    """Convert an environment string to the type of the setting's default."""
    default = _DEFAULT_SETTINGS.get(key)
    if isinstance(default, bool):
        return value.strip().lower() in _TRUE_WORDS
    if isinstance(default, float):
        try:
            return float(value)
        except ValueError:
            return default
    return value.strip()


def _resolve_config_path(cli_options: Mapping[str, Any]) -> Path:
    raw_path = cli_options.get("config_path")
    if not raw_path:
        return _DEFAULT_CONFIG
    return Path(str(raw_path)).expanduser()


def _load_file_config(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid config file {path}: {exc}",
            hint="Fix the TOML syntax or pass another file with --config-path.",
        ) from exc


def _load_env_config() -> dict[str, Any]:
    # Prefixed variables override the deployment aliases.
    env_settings: dict[str, Any] = {}
    for alias, key in _ENV_ALIASES.items():
        alias_value = os.environ.get(alias, "").strip()
        if alias_value:
            env_settings[key] = alias_value
    prefixed = (
        (name[len(_ENV_PREFIX) :].lower(), raw)
        for name, raw in os.environ.items()
        if name.startswith(_ENV_PREFIX)
    )
    for key, raw in prefixed:
        env_settings[key] = _coerce_env_value(key, raw)
    return env_settings


def get_config(cli_options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge defaults, config file, environment and CLI options (later wins)."""
    options = dict(cli_options or {})
    config_path = _resolve_config_path(options)

    layers = (
        _DEFAULT_SETTINGS,
        _load_file_config(config_path),
        _load_env_config(),
        {k: v for k, v in options.items() if v is not None and k != "config_path"},
    )
    settings: dict[str, Any] = {}
    for layer in layers:
        settings.update(layer)
    settings["config_path"] = str(config_path)
    return settings


def render_settings(settings: Mapping[str, Any]) -> str:
    """Render known settings as TOML lines, masking secrets."""
    lines = [f"# config_path: {settings.get('config_path', _DEFAULT_CONFIG)}"]
    for key in _DEFAULT_SETTINGS:
        value = settings.get(key, _DEFAULT_SETTINGS[key])
        if key in _SECRET_KEYS:
            value = mask_secret(str(value or ""))
        suffix = "  # (default)" if value == _DEFAULT_SETTINGS[key] else ""
        lines.append(f"{key} = {_render_value(value)}{suffix}")
    return "\n".join(lines)
