"""
Shallow, Sparse Git Checkout.

Populates a cache directory with only the most recent commit of a remote
repository, restricted to a single subtree. Three commands are issued:

1.  ``git clone --depth 1 --no-checkout [--branch REF] URL CACHE``
2.  ``git sparse-checkout set SUBTREE`` (inside CACHE)
3.  ``git checkout`` (inside CACHE)

Any non-zero exit raises :class:`~docs_sync.errors.CommandError`.
"""

from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from docs_sync.config import RemoteSource
from docs_sync.errors import CommandError
from docs_sync.utils.console import log_info
from docs_sync.vcs.runner import CommandResult, CommandRunner


class SparseCheckout:
  """
  Drives the git client to materialize one subtree of a remote repository.
  """

  def __init__(self, source: RemoteSource, runner: Optional[CommandRunner] = None, git_executable: str = "git"):
    """
    Initializes the checkout driver.

    Args:
        source (RemoteSource): Repository and subtree to fetch.
        runner (Optional[CommandRunner]): Command executor. Defaults to a real subprocess runner.
        git_executable (str): Name or path of the git binary.
    """
    self.source = source
    self.runner = runner or CommandRunner()
    self.git = git_executable

  def clone_args(self, target: Path) -> List[str]:
    """
    Builds the shallow, checkout-less clone command.

    Args:
        target (Path): Directory to clone into.

    Returns:
        List[str]: The argument vector.
    """
    args = [self.git, "clone", "--depth", "1", "--no-checkout"]
    if self.source.ref:
      args += ["--branch", self.source.ref]
    args += [self.source.repository_url, str(target)]
    return args

  def fetch(self, target: Path) -> None:
    """
    Clones the repository into ``target`` and checks out only the subtree.

    Args:
        target (Path): Cache directory. Must not exist yet.

    Raises:
        CommandError: If any git command fails.
    """
    log_info(f"Cloning [path]{escape(self.source.repository_url)}[/path] (depth 1)")
    self._check(self.runner.run(self.clone_args(target)))

    log_info(f"Restricting checkout to [path]{escape(self.source.subtree_path)}[/path]")
    self._check(self.runner.run([self.git, "sparse-checkout", "set", self.source.subtree_path], cwd=target))
    self._check(self.runner.run([self.git, "checkout"], cwd=target))

  @staticmethod
  def _check(result: CommandResult) -> None:
    if not result.ok:
      raise CommandError(result)
