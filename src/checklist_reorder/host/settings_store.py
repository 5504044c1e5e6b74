"""Load and save settings as JSON."""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from loguru import logger

from checklist_reorder.config import resolve_settings_file
from checklist_reorder.models.checklist import IgnoreScope
from checklist_reorder.models.settings import Settings, clamp_interval

_LIST_FIELDS = ("statuses", "sorted_statuses", "sorted_substrings", "ignore_substrings")


class SettingsError(ValueError):
    """Raised when a settings file cannot be understood."""


def settings_from_dict(data: dict[str, Any]) -> Settings:
    """Overlay stored values on top of the defaults.

    Keys missing from ``data`` keep their default value, unknown keys are
    ignored.
    """
    known = {f.name for f in fields(Settings)}
    for key in data.keys() - known:
        logger.debug("Ignoring unknown settings key {!r}", key)

    settings = Settings()
    for name in _LIST_FIELDS:
        if name in data:
            value = data[name]
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                msg = f"Setting {name!r} must be a list of strings, got {value!r}"
                raise SettingsError(msg)
            setattr(settings, name, list(value))

    if "ignore_scope" in data:
        try:
            settings.ignore_scope = IgnoreScope(data["ignore_scope"])
        except ValueError as e:
            msg = f"Unknown ignore_scope {data['ignore_scope']!r}"
            raise SettingsError(msg) from e

    if "interval_seconds" in data:
        try:
            settings.interval_seconds = clamp_interval(int(data["interval_seconds"]))
        except (TypeError, ValueError) as e:
            msg = f"interval_seconds must be an integer, got {data['interval_seconds']!r}"
            raise SettingsError(msg) from e

    if "documents" in data:
        documents = data["documents"]
        if not isinstance(documents, dict):
            msg = f"Setting 'documents' must be an object, got {documents!r}"
            raise SettingsError(msg)
        for key, enabled in documents.items():
            if not isinstance(enabled, bool):
                msg = f"Document {key!r} must map to true or false, got {enabled!r}"
                raise SettingsError(msg)
        settings.documents = {str(k): v for k, v in documents.items()}

    return settings


def settings_to_dict(settings: Settings) -> dict[str, Any]:
    data = asdict(settings)
    data["ignore_scope"] = settings.ignore_scope.value
    return data


def load_settings(path: Path | None = None) -> Settings:
    """Read settings from ``path`` (or the default location).

    A missing file yields the defaults.

    Raises:
        SettingsError: The file is not valid JSON or holds invalid values.
    """
    path = path or resolve_settings_file()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No settings file at {}, using defaults", path)
        return Settings()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"Settings file {str(path)!r} is not valid JSON: {e}"
        raise SettingsError(msg) from e
    if not isinstance(data, dict):
        msg = f"Settings file {str(path)!r} must contain a JSON object"
        raise SettingsError(msg)

    try:
        return settings_from_dict(data)
    except SettingsError as e:
        msg = f"{path}: {e}"
        raise SettingsError(msg) from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Write settings to ``path`` (or the default location) and return the path."""
    path = path or resolve_settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(settings_to_dict(settings), sort_keys=True, indent=4, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    logger.debug("Settings saved to {}", path)
    return path
