"""
User configuration loaded from ~/.mdprint/config.yaml.

The file is optional. Every accessor falls back to the defaults in
settings.py, and invalid values are ignored rather than aborting a
conversion.

Config file format:
    highlight:
      theme: default
      languages: [python, bash, json]
    renderer:
      navigation_timeout: 30
      font_timeout: 10
      diagram_timeout: 30
      diagram_poll_interval: 1
      settle_timeout: 3
    mermaid:
      script_url: https://cdn.jsdelivr.net/npm/mermaid@10.6.1/dist/mermaid.min.js
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Tuple

import yaml

from .settings import (
    DEFAULT_THEME,
    MERMAID_SCRIPT_URL,
    SUPPORTED_LANGUAGES,
    TIMEOUTS,
    RendererTimeouts,
    get_mdprint_dir,
)

logger = logging.getLogger(__name__)

CONFIG_PATH = get_mdprint_dir() / "config.yaml"

# config key -> RendererTimeouts field
_TIMEOUT_KEYS = {
    "navigation_timeout": "navigation",
    "font_timeout": "fonts",
    "diagram_timeout": "diagrams",
    "diagram_poll_interval": "diagram_poll_interval",
    "settle_timeout": "settle",
}

# Dotted keys accepted by `mdprint config set`
CONFIG_KEYS = (
    "highlight.theme",
    "highlight.languages",
    *(f"renderer.{key}" for key in _TIMEOUT_KEYS),
    "mermaid.script_url",
)


def load_config() -> Dict[str, Any]:
    """Load the config file.

    Returns:
        Parsed mapping, or {} when the file is missing, invalid, or not a mapping
    """
    if not CONFIG_PATH.exists():
        return {}
    try:
        with open(CONFIG_PATH, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, e)
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def save_config(config: Dict[str, Any]) -> None:
    """Write config to CONFIG_PATH, creating parent directories."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_PATH, "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)


def _section(name: str) -> Dict[str, Any]:
    section = load_config().get(name)
    return section if isinstance(section, dict) else {}


def set_config_value(key: str, value: Any) -> None:
    """Store value under a dotted key such as "renderer.diagram_timeout".

    Other settings in the file are kept; comments are not.

    Raises:
        KeyError: If key is not one of CONFIG_KEYS
    """
    if key not in CONFIG_KEYS:
        raise KeyError(key)
    section_name, name = key.split(".", 1)
    config = load_config()
    section = config.get(section_name)
    if not isinstance(section, dict):
        section = {}
    section[name] = value
    config[section_name] = section
    save_config(config)


def get_highlight_config() -> Tuple[str, Tuple[str, ...]]:
    """Get (theme, languages) for the highlighter."""
    section = _section("highlight")

    theme = section.get("theme")
    if not isinstance(theme, str) or not theme:
        theme = DEFAULT_THEME

    languages = section.get("languages")
    if isinstance(languages, list) and languages and all(isinstance(l, str) for l in languages):
        languages = tuple(languages)
    else:
        languages = SUPPORTED_LANGUAGES

    return theme, languages


def get_renderer_timeouts() -> RendererTimeouts:
    """Get renderer timeouts with any configured overrides applied."""
    section = _section("renderer")
    overrides = {}
    for key, field_name in _TIMEOUT_KEYS.items():
        value = section.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        if value <= 0:
            continue
        overrides[field_name] = float(value)
    return replace(TIMEOUTS, **overrides)


def get_mermaid_script_url() -> str:
    """Get the URL the page loads Mermaid from."""
    url = _section("mermaid").get("script_url")
    if isinstance(url, str) and url:
        return url
    return MERMAID_SCRIPT_URL
