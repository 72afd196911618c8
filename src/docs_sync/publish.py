"""
Filesystem Publishing Helpers.

Deletes and recreates directory trees for the cache-reset, destination
invalidation and copy steps of a sync run.
"""

import shutil
from pathlib import Path

from rich.markup import escape

from docs_sync.utils.console import log_warning


def remove_tree(path: Path, label: str) -> bool:
  """
  Recursively deletes ``path`` if it exists.

  Args:
      path (Path): Directory (or stray file) to remove.
      label (str): Human name used in the log message, e.g. ``"cache"``.

  Returns:
      bool: True if something was removed.
  """
  if not path.exists() and not path.is_symlink():
    return False

  log_warning(f"Removing existing {label}: [path]{escape(str(path))}[/path]")
  if path.is_dir() and not path.is_symlink():
    shutil.rmtree(path)
  else:
    path.unlink()
  return True


def copy_tree(source: Path, dest: Path) -> int:
  """
  Copies ``source`` into ``dest``, creating intermediate directories.

  Existing paths under ``dest`` are overwritten rather than reported as errors.
  Symbolic links are copied as links.

  Args:
      source (Path): Normalized subtree to publish.
      dest (Path): Destination content directory.

  Returns:
      int: Number of files published.
  """
  dest.parent.mkdir(parents=True, exist_ok=True)
  shutil.copytree(source, dest, symlinks=True, dirs_exist_ok=True)
  return sum(1 for p in dest.rglob("*") if not p.is_dir() or p.is_symlink())
