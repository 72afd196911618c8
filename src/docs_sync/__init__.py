"""
docs-sync Package.

Mirrors a subdirectory of an upstream repository into a documentation site's
content tree, stripping numeric ordering prefixes (``01-install.mdx`` becomes
``install.mdx``) from every path segment.

Usage
-----

.. code-block:: python

    from pathlib import Path
    import docs_sync

    report = docs_sync.sync(project_root=Path("."))
    print(report.files_published)

Advanced Usage
^^^^^^^^^^^^^^

.. code-block:: python

    from docs_sync import DocsSyncPipeline, RemoteSource, SyncConfig

    config = SyncConfig(
        source=RemoteSource(repository_url="https://github.com/vercel/next.js", subtree_path="docs"),
        cache_dir=Path("/tmp/next-cache"),
        dest_dir=Path("src/content/docs/docs"),
    )
    DocsSyncPipeline(config).run(dry_run=True)
"""

from pathlib import Path
from typing import Optional

from docs_sync.config import RemoteSource, SyncConfig
from docs_sync.errors import CommandError, NamingCollisionError, SubtreeNotFoundError, SyncError
from docs_sync.pipeline import DocsSyncPipeline, SyncReport

__version__ = "0.1.0"


def sync(project_root: Optional[Path] = None, dry_run: bool = False) -> SyncReport:
  """
  Runs the pipeline with configuration loaded from ``project_root``.

  Args:
      project_root (Optional[Path]): Directory holding (or below) the pyproject.toml
          with a ``[tool.docs_sync]`` table. Defaults to the current directory.
      dry_run (bool): If True, compute the rename plan without publishing.

  Returns:
      SyncReport: Summary of the run.

  Raises:
      SyncError: If a git command fails or the subtree cannot be normalized.
  """
  config = SyncConfig.load(project_root=project_root)
  return DocsSyncPipeline(config).run(dry_run=dry_run)


__all__ = [
  "CommandError",
  "DocsSyncPipeline",
  "NamingCollisionError",
  "RemoteSource",
  "SubtreeNotFoundError",
  "SyncConfig",
  "SyncError",
  "SyncReport",
  "sync",
  "__version__",
]
