"""Package manifest and export descriptor models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

EXPORT_KINDS = {"js", "json"}


@dataclass(frozen=True)
class Manifest:
    """The subset of ``package.json`` used by the checks."""

    name: str
    version: str
    exports: Any = None
    main: Any = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")
        if not self.version:
            raise ValueError("Package version must be non-empty")

    @property
    def has_exports(self) -> bool:
        """Mirror JavaScript truthiness: ``{}`` counts, ``""``, ``0`` and ``null`` do not."""
        value = self.exports
        return not (value is None or value is False or value == "" or value == 0)

    @property
    def tarball_name(self) -> str:
        """File name ``npm pack`` writes, e.g. ``scope-pkg-1.2.3.tgz``."""
        name = self.name
        if name.startswith("@"):
            name = name.replace("@", "", 1).replace("/", "-", 1)
        return f"{name}-{self.version}.tgz"


@dataclass(frozen=True)
class ExportDescriptor:
    """A concrete entry point to import: ``.`` or a ``./subpath`` key."""

    key: str
    kind: str = "js"

    def __post_init__(self) -> None:
        if self.kind not in EXPORT_KINDS:
            raise ValueError(f"Invalid export kind: {self.kind}")
        if self.key != "." and not self.key.startswith("./"):
            raise ValueError(f"Invalid export key: {self.key}")

    @property
    def is_main(self) -> bool:
        return self.key == "."

    def specifier(self, package_name: str) -> str:
        if self.is_main:
            return package_name
        return f"{package_name}/{self.key[2:]}"

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "kind": self.kind}
