from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

USER_CONFIG_PATH = Path.home() / ".ratatodo_config.yaml"

logger = logging.getLogger("ratatodo.config")


def config_path() -> Path:
    override = os.getenv("RATATODO_CONFIG")
    if override:
        return Path(override).expanduser()
    return USER_CONFIG_PATH


def _load_config() -> Dict[str, Any]:
    path = config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", path)
        return {}
    return data


def _save_config(data: Dict[str, Any]) -> None:
    path = config_path()
    if not data:
        if path.exists():
            path.unlink()
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _set_value(key: str, value: Any) -> None:
    data = _load_config()
    if value in (None, ""):
        data.pop(key, None)
    else:
        data[key] = value
    _save_config(data)


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def set_user_theme(value: str) -> None:
    _set_value("theme", (value or "").strip())


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def set_user_lang(value: str) -> None:
    _set_value("lang", (value or "").strip())


def get_user_mono_select() -> bool:
    value = _load_config().get("mono_select", False)
    if not isinstance(value, bool):
        logger.warning("Ignoring mono_select in config: expected true/false, got %r", value)
        return False
    return value


def set_user_mono_select(value: bool) -> None:
    _set_value("mono_select", True if value else None)


def get_user_keymap() -> Dict[str, Any]:
    keymap = _load_config().get("keymap") or {}
    if not isinstance(keymap, dict):
        logger.warning("Ignoring keymap in config: expected a mapping, got %s", type(keymap).__name__)
        return {}
    return keymap
