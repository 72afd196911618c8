"""
File Tree Model.

Represents a checked-out subtree as nested :class:`FileTreeNode` objects so
that rename planning can run over an immutable snapshot instead of a live
directory that is being renamed underneath it.
"""

import os
from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
  """Type of a filesystem entry."""

  FILE = "file"
  DIRECTORY = "directory"


class FileTreeNode(BaseModel):
  """
  A file or directory under the mirrored subtree.
  """

  name: str = Field(description="Entry name as it exists on disk.")
  kind: NodeKind = Field(description="Whether the entry is a file or a directory.")
  children: List["FileTreeNode"] = Field(default_factory=list, description="Sorted entries of a directory.")

  @property
  def is_dir(self) -> bool:
    return self.kind == NodeKind.DIRECTORY


FileTreeNode.model_rebuild()


def scan_tree(root: Path) -> FileTreeNode:
  """
  Builds a snapshot of the directory tree rooted at ``root``.

  Symbolic links are recorded as files and never followed.

  Args:
      root (Path): Existing directory to scan.

  Returns:
      FileTreeNode: Directory node for ``root`` with children sorted by name.
  """
  node = FileTreeNode(name=root.name, kind=NodeKind.DIRECTORY)
  with os.scandir(root) as it:
    entries = sorted(it, key=lambda e: e.name)
  for entry in entries:
    if entry.is_dir(follow_symlinks=False):
      node.children.append(scan_tree(Path(entry.path)))
    else:
      node.children.append(FileTreeNode(name=entry.name, kind=NodeKind.FILE))
  return node
