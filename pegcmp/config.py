"""Optional YAML configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

import yaml
from jsonschema import Draft202012Validator

from pegcmp.constants import CONFIG_FILENAME
from pegcmp.errors import (
    InvalidConfigSchemaError,
    InvalidYamlFormatError,
    MissingConfigFileError,
)
from pegcmp.models import AnnotationMode

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "annotations": {"enum": [mode.value for mode in AnnotationMode]},
        "fail_on_mismatch": {"type": "boolean"},
        "validate_reference": {"type": "boolean"},
        "summary": {"type": "boolean"},
    },
    "additionalProperties": False,
}

_VALIDATOR = Draft202012Validator(CONFIG_SCHEMA)


@dataclass(frozen=True)
class PegcmpConfig:
    annotations: AnnotationMode = AnnotationMode.REJECT
    fail_on_mismatch: bool = False
    validate_reference: bool = False
    summary: bool = False

    def override(self, **values: Any) -> PegcmpConfig:
        """Return a copy with every non-None value applied."""
        changes = {key: value for key, value in values.items() if value is not None}
        if "annotations" in changes:
            changes["annotations"] = AnnotationMode(changes["annotations"])
        return replace(self, **changes)


def _schema_error_message(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def validate_config(payload: Any, path: Path) -> None:
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(path, "must be a mapping")
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, _schema_error_message(error))


def load_config(path: Path) -> PegcmpConfig:
    if not path.exists():
        raise MissingConfigFileError(path)
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise InvalidYamlFormatError(path, str(exc).splitlines()[0]) from exc
    if payload is None:
        return PegcmpConfig()
    validate_config(payload, path)
    return PegcmpConfig().override(**payload)


def resolve_config(path: Optional[Path], cwd: Optional[Path] = None) -> PegcmpConfig:
    """Load ``path``, or the working directory's config file when present."""
    if path is not None:
        return load_config(path)
    default = (cwd or Path.cwd()) / CONFIG_FILENAME
    if default.is_file():
        return load_config(default)
    return PegcmpConfig()
