from __future__ import annotations

"""
Builder settings from YAML/JSON files.

A settings file holds a single mapping with any of these keys:

    label: Worker
    time_format: "YYYY-MM-DD HH:mm:ss,SSS"
    file_path: /var/tmp/worker.log
    directory_name: MyApp

Unknown keys are rejected (with close-match hints) so typos do not silently
fall back to defaults. Values must be strings or null. An empty file yields
default settings.
"""

from dataclasses import dataclass, fields
import difflib
import json
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

import yaml

from .logger import Builder
from .time_format import DEFAULT_TIME_FORMAT


@dataclass(frozen=True)
class BuilderSettings:
    label: Optional[str] = None
    time_format: str = DEFAULT_TIME_FORMAT
    file_path: Optional[str] = None
    directory_name: Optional[str] = None


SETTINGS_KEYS = tuple(f.name for f in fields(BuilderSettings))


def _nearest_matches(name: str, candidates: Iterable[str], n: int = 3) -> List[str]:
    return difflib.get_close_matches(name, list(candidates), n=n)


def settings_from_mapping(data: Optional[Mapping[str, object]]) -> BuilderSettings:
    """Validate a raw mapping and return `BuilderSettings`."""
    if data is None:
        return BuilderSettings()
    if not isinstance(data, Mapping):
        raise ValueError("Logger settings must be a mapping/dictionary at top level")

    unknown = sorted(str(k) for k in data if k not in SETTINGS_KEYS)
    if unknown:
        messages = []
        for key in unknown:
            hint = _nearest_matches(key, SETTINGS_KEYS)
            if hint:
                messages.append(f"'{key}' (did you mean: {', '.join(hint)})")
            else:
                messages.append(f"'{key}'")
        raise ValueError("Logger settings contain unknown keys: " + ", ".join(messages))

    values: Dict[str, Optional[str]] = {}
    for key in SETTINGS_KEYS:
        if key not in data:
            continue
        value = data[key]
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Logger setting '{key}' must be a string or null, got {value!r}")
        values[key] = value

    # An empty time format keeps the default, matching Builder.set_time_format
    if not values.get("time_format"):
        values.pop("time_format", None)
    return BuilderSettings(**values)


def load_settings(path: Path) -> BuilderSettings:
    """Load settings from a YAML (default) or JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Logger settings file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return BuilderSettings()
    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Malformed JSON in logger settings {path}: {exc}") from exc
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed YAML in logger settings {path}: {exc}") from exc
    return settings_from_mapping(data)


def builder_from_settings(settings: BuilderSettings) -> Builder:
    return (
        Builder(settings.label)
        .set_time_format(settings.time_format)
        .set_file_path(settings.file_path)
        .set_directory_name(settings.directory_name)
    )


def load_builder(path: Path) -> Builder:
    """Shortcut for `builder_from_settings(load_settings(path))`."""
    return builder_from_settings(load_settings(path))


__all__ = [
    "BuilderSettings",
    "SETTINGS_KEYS",
    "settings_from_mapping",
    "load_settings",
    "builder_from_settings",
    "load_builder",
]
