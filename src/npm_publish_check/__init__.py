"""npm-publish-check core package.

This package provides the pack/install/verify/audit pipeline that is callable
from both the GitHub Action wrapper and the standalone CLI.
"""

__all__ = [
    "core",
]
