"""Project-level config loader for the debugfmt CLI."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import cast

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "pyproject.toml"
_TOOL_SECTION = "debugfmt"


@dataclass(frozen=True, slots=True)
class DebugfmtConfig:
    """Resolved CLI configuration."""

    default_tags: tuple[str, ...] = ()
    verbosity: int = 0
    json_logs: bool = False


_ENV_OVERRIDE_MAP: dict[str, str] = {
    "DEBUGFMT_DEFAULT_TAGS": "default_tags",
    "DEBUGFMT_VERBOSITY": "verbosity",
    "DEBUGFMT_JSON_LOGS": "json_logs",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _coerce_tag_names(*, raw_value: object, source: str) -> tuple[str, ...]:
    if not isinstance(raw_value, list):
        raise ValueError(
            f"Invalid value for '{source}': expected array[str], got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )

    parsed: list[str] = []
    for item in cast("list[object]", raw_value):
        if not isinstance(item, str):
            raise ValueError(
                f"Invalid value for '{source}': expected array[str], got "
                f"{type(item).__name__} ({item!r})."
            )
        normalized = item.strip().lower()
        if not normalized:
            raise ValueError(f"Invalid value for '{source}': expected non-empty tag names.")
        parsed.append(normalized)
    return tuple(parsed)


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    if field_name == "default_tags":
        return _coerce_tag_names(raw_value=raw_value, source=source)

    if field_name == "verbosity":
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise ValueError(
                f"Invalid value for '{source}': expected int, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        if raw_value < 0:
            raise ValueError(f"Invalid value for '{source}': expected int >= 0, got {raw_value!r}.")
        return raw_value

    if not isinstance(raw_value, bool):
        raise ValueError(
            f"Invalid value for '{source}': expected bool, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    return raw_value


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    if field_name == "default_tags":
        names = [part.strip().lower() for part in raw_value.split(",")]
        return tuple(name for name in names if name)

    if field_name == "verbosity":
        try:
            parsed = int(raw_value.strip())
        except ValueError as error:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error
        if parsed < 0:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int >= 0, got {raw_value!r}."
            )
        return parsed

    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
    )


def _default_values() -> dict[str, object]:
    defaults = DebugfmtConfig()
    return {field.name: getattr(defaults, field.name) for field in fields(DebugfmtConfig)}


def _apply_toml_payload(*, values: dict[str, object], payload: dict[str, object]) -> None:
    known = set(values)
    for key, raw_value in payload.items():
        if key not in known:
            logger.warning("Ignoring unknown debugfmt config key 'tool.debugfmt.%s'.", key)
            continue
        values[key] = _coerce_file_value(
            field_name=key,
            raw_value=raw_value,
            source=f"tool.debugfmt.{key}",
        )


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def _read_tool_section(path: Path) -> dict[str, object]:
    document = cast("dict[str, object]", tomllib.loads(path.read_text(encoding="utf-8")))
    tool = document.get("tool", {})
    if not isinstance(tool, dict):
        raise ValueError(f"Invalid value for 'tool' in '{path}': expected table.")
    section = cast("dict[str, object]", tool).get(_TOOL_SECTION, {})
    if not isinstance(section, dict):
        raise ValueError(f"Invalid value for 'tool.debugfmt' in '{path}': expected table.")
    return cast("dict[str, object]", section)


def load_config(root: Path) -> DebugfmtConfig:
    """Load `[tool.debugfmt]` from `<root>/pyproject.toml` and apply env overrides."""

    values = _default_values()
    path = root / CONFIG_FILENAME
    if path.is_file():
        _apply_toml_payload(values=values, payload=_read_tool_section(path))

    _apply_env_overrides(values)
    return DebugfmtConfig(
        default_tags=cast("tuple[str, ...]", values["default_tags"]),
        verbosity=cast("int", values["verbosity"]),
        json_logs=cast("bool", values["json_logs"]),
    )
