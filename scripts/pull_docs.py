#!/usr/bin/env python3
"""
Pre-build Docs Pull Script.

Refreshes ``src/content/docs/docs`` from the upstream repository configured in
this project's ``pyproject.toml`` (``[tool.docs_sync]``):

1.  Removes the ``.cache/next`` checkout left by a previous run.
2.  Shallow-clones only the upstream ``docs`` directory.
3.  Strips numeric ordering prefixes from every file and directory name.
4.  Replaces the published content directory with the result.

Run it manually or before ``astro build``. Exits non-zero on any failure.
"""

import sys
from pathlib import Path

from docs_sync.cli.__main__ import main as cli_main

# Configuration
PROJECT_ROOT = Path(__file__).resolve().parent.parent


def main() -> None:
  """
  Main entry point. Runs one sync rooted at the project directory.
  """
  sys.exit(cli_main(["--project-root", str(PROJECT_ROOT)]))


if __name__ == "__main__":
  main()
