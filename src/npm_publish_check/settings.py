"""Runtime settings resolved from arguments and environment variables.

Each value is resolved with the priority: explicit argument, then the
matching ``NPM_VALIDATOR_*`` environment variable, then a default. The step
summary path comes from the variable the Actions runner sets.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_DIR_ENV_VAR = "NPM_VALIDATOR_PROJECT_DIR"
NPM_BIN_ENV_VAR = "NPM_VALIDATOR_NPM"
NODE_BIN_ENV_VAR = "NPM_VALIDATOR_NODE"


class ConfigError(RuntimeError):
    """Raised when the runtime configuration is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    project_dir: Path
    npm_bin: str
    node_bin: str
    step_summary: Path | None


def _env(name: str) -> str:
    return os.environ.get(name, "").strip()


def _resolve(explicit: str | None, env_var: str, default: str) -> str:
    if explicit:
        return explicit
    return _env(env_var) or default


def load_settings(
    project_dir: Path | str | None = None,
    npm_bin: str | None = None,
    node_bin: str | None = None,
) -> Settings:
    """Build Settings from explicit values and the environment.

    Raises:
        ConfigError: If the project directory does not exist or an
            executable name is blank.
    """
    if project_dir is not None:
        root = Path(project_dir)
    else:
        root = Path(_env(PROJECT_DIR_ENV_VAR) or Path.cwd())

    if not root.is_dir():
        raise ConfigError(f"Project directory not found: {root}")

    npm = _resolve(npm_bin, NPM_BIN_ENV_VAR, "npm")
    node = _resolve(node_bin, NODE_BIN_ENV_VAR, "node")
    if not npm.strip() or not node.strip():
        raise ConfigError("npm and node executables must be non-empty")

    summary = _env("GITHUB_STEP_SUMMARY")

    return Settings(
        project_dir=root.resolve(),
        npm_bin=npm,
        node_bin=node,
        step_summary=Path(summary) if summary else None,
    )
