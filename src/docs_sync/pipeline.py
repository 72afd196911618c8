"""
Docs Sync Pipeline.

Produces an up-to-date, name-normalized local copy of a remote subtree and
publishes it over the destination content directory. A run is five strictly
sequential steps:

1.  Reset the cache directory.
2.  Shallow, sparse checkout of the subtree into the cache.
3.  Normalize ordering prefixes (plan, then rename bottom-up).
4.  Delete the destination directory.
5.  Copy the normalized subtree into the destination.

Steps 1-3 only touch the disposable cache, so a failure there leaves the
previously published destination untouched. There is no retry and no rollback.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from rich.markup import escape

from docs_sync.config import SyncConfig
from docs_sync.errors import SubtreeNotFoundError
from docs_sync.naming import RenamePlan, apply_plan, plan_renames
from docs_sync.publish import copy_tree, remove_tree
from docs_sync.tree import scan_tree
from docs_sync.utils.console import log_info, log_success
from docs_sync.vcs.git import SparseCheckout
from docs_sync.vcs.runner import CommandRunner


class SyncReport(BaseModel):
  """
  Summary of a completed run.
  """

  plan: RenamePlan = Field(default_factory=RenamePlan, description="Renames computed for the subtree.")
  renamed: int = Field(default=0, description="Entries actually renamed in the cache.")
  files_published: int = Field(default=0, description="Files written to the destination.")
  destination: Path = Field(description="The destination content directory.")
  dry_run: bool = Field(default=False, description="True if renaming and publishing were skipped.")


class DocsSyncPipeline:
  """
  Orchestrates a single sync run against a fixed configuration.
  """

  def __init__(self, config: SyncConfig, runner: Optional[CommandRunner] = None):
    """
    Initializes the pipeline.

    Args:
        config (SyncConfig): Source, cache and destination settings.
        runner (Optional[CommandRunner]): Executor for git commands. Injected in tests.
    """
    self.config = config
    self.checkout = SparseCheckout(config.source, runner=runner, git_executable=config.git_executable)

  def run(self, dry_run: bool = False) -> SyncReport:
    """
    Executes every step in order.

    Args:
        dry_run (bool): If True, stop after computing the rename plan.
            The cache is still refreshed; the destination is never touched.

    Returns:
        SyncReport: What was renamed and published.

    Raises:
        CommandError: If a git command fails.
        SubtreeNotFoundError: If the checkout lacks the configured subtree.
        NamingCollisionError: If sibling names normalize to the same name.
        OSError: On filesystem failures.
    """
    self.reset_cache()
    self.fetch()
    plan = self.plan()
    report = SyncReport(plan=plan, destination=self.config.dest_dir, dry_run=dry_run)
    if dry_run:
      log_info(f"Dry run: {len(plan)} rename(s) planned, destination left untouched")
      return report

    report.renamed = apply_plan(self.config.checkout_subtree, plan)
    self.invalidate_destination()
    report.files_published = self.publish()
    return report

  def reset_cache(self) -> None:
    """Step 1: deletes any previous checkout."""
    remove_tree(self.config.cache_dir, "cache")

  def fetch(self) -> None:
    """
    Step 2: clones only the configured subtree into the cache.

    Raises:
        CommandError: If a git command fails.
        SubtreeNotFoundError: If the subtree is absent after checkout.
    """
    self.config.cache_dir.parent.mkdir(parents=True, exist_ok=True)
    self.checkout.fetch(self.config.cache_dir)
    if not self.config.checkout_subtree.is_dir():
      raise SubtreeNotFoundError(self.config.checkout_subtree)

  def plan(self) -> RenamePlan:
    """
    Step 3a: computes renames for the checked-out subtree.

    Returns:
        RenamePlan: The pending renames.
    """
    return plan_renames(scan_tree(self.config.checkout_subtree))

  def invalidate_destination(self) -> None:
    """Step 4: deletes the previously published content."""
    remove_tree(self.config.dest_dir, "destination")

  def publish(self) -> int:
    """
    Step 5: copies the normalized subtree to the destination.

    Returns:
        int: Number of files published.
    """
    count = copy_tree(self.config.checkout_subtree, self.config.dest_dir)
    log_success(f"Published {count} file(s) to [path]{escape(str(self.config.dest_dir))}[/path]")
    return count
