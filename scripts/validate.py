#!/usr/bin/env python3
"""Local entrypoint to run the publish check outside of GitHub Actions.

Usage:
  python scripts/validate.py --root path/to/package [--json]

This calls the same pipeline used by the Action wrapper.
"""

from __future__ import annotations

from npm_publish_check.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
