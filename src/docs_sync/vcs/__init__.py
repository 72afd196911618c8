"""
Version-Control Subpackage.

Modules:
    - ``runner``: Blocking subprocess invocation with structured results.
    - ``git``: Shallow, sparse checkout of a single repository subtree.
"""

from docs_sync.vcs.git import SparseCheckout
from docs_sync.vcs.runner import CommandResult, CommandRunner

__all__ = ["CommandResult", "CommandRunner", "SparseCheckout"]
