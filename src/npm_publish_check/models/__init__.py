"""Data models for the publish checks."""

from __future__ import annotations

from .manifest import ExportDescriptor, Manifest
from .results import PipelineReport, StageResult

__all__ = [
    "ExportDescriptor",
    "Manifest",
    "PipelineReport",
    "StageResult",
]
