"""
Exception Taxonomy for the Sync Pipeline.

Every expected failure of a sync run derives from :class:`SyncError` so the
CLI can report it uniformly and exit with a non-zero status. Filesystem
failures are not wrapped; they propagate as ``OSError``.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
  from docs_sync.vcs.runner import CommandResult


class SyncError(Exception):
  """Base class for failures that abort a sync run."""


class CommandError(SyncError):
  """
  Raised when a version-control command exits non-zero or cannot be launched.

  Attributes:
      result (CommandResult): The structured outcome of the failed command.
  """

  def __init__(self, result: "CommandResult"):
    self.result = result
    detail = result.stderr.strip() or result.stdout.strip() or "no output"
    super().__init__(f"Command failed ({result.returncode}): {result.command}\n{detail}")


class SubtreeNotFoundError(SyncError):
  """Raised when the checkout does not contain the requested subtree."""

  def __init__(self, subtree: Path):
    self.subtree = subtree
    super().__init__(f"Subtree not found after checkout: {subtree}")


class NamingCollisionError(SyncError):
  """
  Raised when sibling entries normalize to the same name.

  Attributes:
      directory (Path): Original relative path of the directory holding the siblings.
      name (str): The contested normalized name.
      originals (List[str]): The original sibling names, sorted.
  """

  def __init__(self, directory: Path, name: str, originals: List[str]):
    self.directory = directory
    self.name = name
    self.originals = sorted(originals)
    where = directory.as_posix() if directory.parts else "."
    super().__init__(f"Entries {self.originals} in '{where}' all normalize to '{name}'")
