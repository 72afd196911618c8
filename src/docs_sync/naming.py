"""
Ordering-Prefix Normalization.

Upstream documentation orders pages with a leading ``<digits>-`` token
(``01-install.mdx``). The published site must not carry that token, so every
path segment is rewritten with the prefix removed.

Normalization is two-phase:

1.  :func:`plan_renames` walks a :class:`~docs_sync.tree.FileTreeNode`
    snapshot and returns a :class:`RenamePlan`. Child targets are computed
    from the parent's normalized path. Sibling collisions abort here, before
    anything on disk changes.
2.  :func:`apply_plan` performs the renames deepest-first, so each rename runs
    while its parent directory still has its original name.
"""

import os
import re
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, Field
from rich.markup import escape

from docs_sync.errors import NamingCollisionError
from docs_sync.tree import FileTreeNode, NodeKind
from docs_sync.utils.console import log_success

ORDERING_PREFIX = re.compile(r"[0-9]+-(.+)", re.DOTALL)


def strip_prefix(name: str) -> str:
  """
  Removes one leading ``<digits>-`` token from a name.

  Names without a prefix, or where nothing would remain after it, are
  returned unchanged.

  Args:
      name (str): A single path segment, e.g. ``"01-install.mdx"``.

  Returns:
      str: The stripped name, e.g. ``"install.mdx"``.
  """
  match = ORDERING_PREFIX.fullmatch(name)
  return match.group(1) if match else name


def normalize_path(path: Path) -> Path:
  """
  Applies :func:`strip_prefix` to every segment of a relative path.

  Args:
      path (Path): e.g. ``10-getting-started/01-install.mdx``.

  Returns:
      Path: e.g. ``getting-started/install.mdx``.
  """
  return Path(*(strip_prefix(part) for part in path.parts)) if path.parts else path


class RenameOperation(BaseModel):
  """
  A single pending rename inside the checked-out subtree.
  """

  source: Path = Field(description="Original path relative to the subtree root.")
  target: Path = Field(description="Fully normalized path relative to the subtree root.")
  kind: NodeKind = Field(description="Entry type.")

  @property
  def new_name(self) -> str:
    return self.target.name

  @property
  def depth(self) -> int:
    return len(self.source.parts)


class RenamePlan(BaseModel):
  """
  Ordered collection of renames computed from a tree snapshot.
  """

  operations: List[RenameOperation] = Field(default_factory=list)

  def __len__(self) -> int:
    return len(self.operations)

  def bottom_up(self) -> List[RenameOperation]:
    """
    Returns the operations deepest-first.

    Returns:
        List[RenameOperation]: Operations sorted by descending depth, then by source path.
    """
    return sorted(self.operations, key=lambda op: (-op.depth, op.source.as_posix()))


def plan_renames(root: FileTreeNode) -> RenamePlan:
  """
  Computes every rename needed to normalize a tree.

  Args:
      root (FileTreeNode): Snapshot of the subtree root directory.

  Returns:
      RenamePlan: Operations in top-down traversal order.

  Raises:
      NamingCollisionError: If two siblings normalize to the same name.
  """
  plan = RenamePlan()
  _plan_directory(root, Path(), Path(), plan)
  return plan


def _plan_directory(node: FileTreeNode, original: Path, normalized: Path, plan: RenamePlan) -> None:
  claimed: Dict[str, List[str]] = {}
  for child in node.children:
    claimed.setdefault(strip_prefix(child.name), []).append(child.name)
  for new_name, originals in claimed.items():
    if len(originals) > 1:
      raise NamingCollisionError(original, new_name, originals)

  for child in node.children:
    new_name = strip_prefix(child.name)
    child_original = original / child.name
    child_normalized = normalized / new_name
    if new_name != child.name:
      plan.operations.append(RenameOperation(source=child_original, target=child_normalized, kind=child.kind))
    if child.is_dir:
      _plan_directory(child, child_original, child_normalized, plan)


def apply_plan(root: Path, plan: RenamePlan) -> int:
  """
  Performs the planned renames in place under ``root``.

  Args:
      root (Path): Directory the plan was computed for.
      plan (RenamePlan): Output of :func:`plan_renames`.

  Returns:
      int: Number of entries renamed.
  """
  count = 0
  for op in plan.bottom_up():
    old_path = root / op.source
    new_path = old_path.with_name(op.new_name)
    os.rename(old_path, new_path)
    log_success(f"Renamed: {escape(op.source.name)} → {escape(op.new_name)}")
    count += 1
  return count
