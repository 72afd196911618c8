"""
Entry point for module execution (``python -m docs_sync``).

Delegates to the CLI handler in ``docs_sync.cli.__main__``.
"""

import sys
from docs_sync.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
