"""Load package.json into a Manifest."""

from __future__ import annotations

import json
from pathlib import Path
from collections.abc import Iterable

from jsonschema import Draft202012Validator

from ..models import Manifest

MANIFEST_FILENAME = "package.json"

# Only the fields needed to name the tarball are schema-checked here. The
# shape of "exports"/"main" is validated by the export checks, which produce
# more specific messages.
MANIFEST_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "version"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "version": {"type": "string", "minLength": 1},
    },
}


class ManifestError(RuntimeError):
    """Raised when package.json is missing or declares invalid entry points."""


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def parse(path: Path) -> Manifest:
    """Read and validate the manifest at ``path``.

    ``path`` may be the package.json file itself or the directory holding it.

    Raises:
        ManifestError: If the file is missing, is not JSON, or lacks a
            string ``name``/``version``.
    """
    if path.is_dir():
        path = path / MANIFEST_FILENAME

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"No {MANIFEST_FILENAME} found at {path}") from exc
    except OSError as exc:
        raise ManifestError(f"Failed to read {path}: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc

    validator = Draft202012Validator(MANIFEST_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise ManifestError(f"Invalid {MANIFEST_FILENAME}:\n{_format_errors(errors)}")

    return Manifest(
        name=data["name"],
        version=data["version"],
        exports=data.get("exports"),
        main=data.get("main"),
        raw=data,
    )
