"""Detect the package's declared entry points and import each one.

Entry points come from ``exports`` when present, otherwise from the legacy
``main`` field. Wildcard subpath patterns (``./*``) are not verified since
they do not name a concrete module.
"""

from __future__ import annotations

import json
from typing import Any

from .. import workflow
from ..context import ValidationContext
from ..models import ExportDescriptor, Manifest
from ..parsers.package_json import ManifestError

JSON_IMPORT_ATTRIBUTES = ', { with: { type: "json" } }'


def validate_exports(exports: Any) -> list[ExportDescriptor]:
    if isinstance(exports, str):
        raise ManifestError(
            'The "exports" field must be an object, not a string. '
            f'Use {{ ".": {json.dumps(exports)} }} instead'
        )
    if isinstance(exports, list):
        # Arrays are objects in JSON terms; their keys are the indices.
        keys = [str(index) for index in range(len(exports))]
    elif isinstance(exports, dict):
        keys = list(exports)
    else:
        raise ManifestError('Invalid "exports" type. It must be an object')
    if not keys:
        raise ManifestError("There must be at least one export")

    descriptors: list[ExportDescriptor] = []
    for key in keys:
        if "*" in key:
            continue
        if key != "." and not key.startswith("./"):
            raise ManifestError(f'Invalid exports key: "{key}". It must be "." or start with "./"')
        kind = "json" if key.endswith(".json") else "js"
        descriptors.append(ExportDescriptor(key=key, kind=kind))

    if not descriptors:
        raise ManifestError(
            'Every "exports" key is a wildcard pattern. Declare at least one concrete export'
        )
    return descriptors


def validate_main(main: Any) -> list[ExportDescriptor]:
    if main is None or main is False or main == "" or main == 0:
        raise ManifestError('Found no "exports" nor "main" field in package.json')
    if not isinstance(main, str):
        raise ManifestError('The "main" field in package.json must be a string')
    return [ExportDescriptor(key=".", kind="js")]


def resolve_export_descriptors(manifest: Manifest) -> list[ExportDescriptor]:
    """Return the entry points to verify; never empty.

    Raises:
        ManifestError: If ``exports``/``main`` are missing or malformed.
    """
    if manifest.has_exports:
        return validate_exports(manifest.exports)
    return validate_main(manifest.main)


def import_script(descriptor: ExportDescriptor, package_name: str) -> str:
    """Build the ``node -e`` snippet importing one entry point and logging it."""
    specifier = json.dumps(descriptor.specifier(package_name))
    attributes = JSON_IMPORT_ATTRIBUTES if descriptor.kind == "json" else ""
    return f"import({specifier}{attributes}).then(console.log)"


def verify_exports(ctx: ValidationContext) -> None:
    workflow.info("Detecting package exports")
    descriptors = resolve_export_descriptors(ctx.manifest)

    for descriptor in descriptors:
        label = "main" if descriptor.is_main else f"{descriptor.key} subpath"
        workflow.info(f"Testing {label} export")
        ctx.run(
            [ctx.node_bin, "-e", import_script(descriptor, ctx.manifest.name)],
            ctx.scratch_dir,
        )
