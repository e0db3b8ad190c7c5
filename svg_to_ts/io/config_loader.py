"""Load conversion configurations from YAML / JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError
from ruamel.yaml import YAML

from svg_to_ts.core.exceptions import ConfigurationError
from svg_to_ts.models.options import ConversionOptions

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json", ".svgtotsrc"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2

CONVERSIONS_KEY: Final[str] = "conversions"


def load_config(path: str | Path) -> list[ConversionOptions]:
    """
    Read a configuration file and return one ``ConversionOptions`` per run.

    The document may be a single mapping, a list of mappings, or a mapping
    with a ``conversions`` list; in the last form the remaining top-level keys
    are defaults shared by every entry.
    """
    file_path = Path(path)
    raw = _read_document(file_path)
    entries = _split_entries(raw, file_path)

    options: list[ConversionOptions] = []
    for index, entry in enumerate(entries):
        try:
            options.append(ConversionOptions.model_validate(entry))
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid conversion #{index + 1} in {file_path.name}: {exc}"
            ) from exc

    logger.debug("Loaded %d conversion(s) from %s", len(options), file_path)
    return options


def _read_document(file_path: Path) -> Any:
    if not file_path.exists():
        logger.error("Config file not found: %s", file_path)
        raise ConfigurationError(f"Config file not found: {file_path}")

    suffix = file_path.suffix.lower() or file_path.name.lower()
    if suffix not in _YAML_EXTS | _JSON_EXTS:
        raise ConfigurationError(
            f"Unsupported extension '{file_path.suffix}'. "
            f"Supported: {', '.join(sorted(_YAML_EXTS | _JSON_EXTS))}"
        )

    try:
        raw_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read config file %s: %s", file_path, exc)
        raise ConfigurationError(f"Cannot read {file_path.name}: {exc}") from exc

    try:
        if suffix in _YAML_EXTS:
            return _yaml_parser.load(raw_text)
        return json.loads(raw_text)
    except Exception as exc:
        raise ConfigurationError(f"Cannot parse {file_path.name}: {exc}") from exc


def _split_entries(raw: Any, file_path: Path) -> list[dict[str, Any]]:
    if isinstance(raw, dict) and CONVERSIONS_KEY in raw:
        shared = {k: v for k, v in raw.items() if k != CONVERSIONS_KEY}
        conversions = raw[CONVERSIONS_KEY]
        if not isinstance(conversions, list):
            raise ConfigurationError(f"'{CONVERSIONS_KEY}' must be a list")
        entries = [{**shared, **entry} for entry in _as_mappings(conversions)]
    elif isinstance(raw, dict):
        entries = [raw]
    elif isinstance(raw, list):
        entries = _as_mappings(raw)
    else:
        raise ConfigurationError(
            f"Top-level object of {file_path.name} must be a mapping or a list"
        )

    if not entries:
        raise ConfigurationError(f"No conversions defined in {file_path.name}")
    return entries


def _as_mappings(items: list[Any]) -> list[dict[str, Any]]:
    for item in items:
        if not isinstance(item, dict):
            raise ConfigurationError("Every conversion entry must be a mapping")
    return list(items)
