"""Pipeline stages, in the order they run."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..context import ValidationContext
from .exports import verify_exports
from .install import install_library
from .pack import pack_library
from .published_files import check_published_files


@dataclass(slots=True, frozen=True)
class Step:
    """A named stage; ``fn`` raises on failure."""

    name: str
    fn: Callable[[ValidationContext], None]


STEPS: tuple[Step, ...] = (
    Step("Pack the library", pack_library),
    Step("Install the library", install_library),
    Step("Verify exports", verify_exports),
    Step("Check published files", check_published_files),
)

__all__ = [
    "STEPS",
    "Step",
    "check_published_files",
    "install_library",
    "pack_library",
    "verify_exports",
]
