"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A fake git runner that materializes an in-memory upstream repository.
- Helpers for building and reading small file trees.
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

# Add src to path so we can import 'docs_sync' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from docs_sync.config import RemoteSource, SyncConfig  # noqa: E402
from docs_sync.vcs.runner import CommandResult, CommandRunner  # noqa: E402

UPSTREAM_DOCS = {
  "README.md": "# Upstream repo\n",
  "packages/next/index.js": "module.exports = {}\n",
  "docs/index.mdx": "# Docs\n",
  "docs/README.mdx": "readme\n",
  "docs/01-app/index.mdx": "# App Router\n",
  "docs/01-app/10-getting-started/01-installation.mdx": "npx create-next-app\n",
  "docs/01-app/10-getting-started/02-project-structure.mdx": "structure\n",
  "docs/02-pages/03-building-your-application/01-routing/index.mdx": "routing\n",
}


def write_tree(root: Path, files: Dict[str, str]) -> None:
  """Creates ``files`` (relative POSIX path -> text) under ``root``."""
  for rel, content in files.items():
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def read_tree(root: Path) -> Dict[str, str]:
  """Returns every file under ``root`` as relative POSIX path -> text."""
  return {p.relative_to(root).as_posix(): p.read_text(encoding="utf-8") for p in root.rglob("*") if p.is_file()}


class FakeGitRunner(CommandRunner):
  """
  Stands in for the git client.

  ``clone`` creates the target directory, ``sparse-checkout set`` records the
  requested subtree, and ``checkout`` writes the matching upstream files.
  """

  def __init__(self, files: Dict[str, str], fail_on: Optional[str] = None):
    self.files = files
    self.fail_on = fail_on
    self.calls: List[List[str]] = []
    self.cwds: List[Optional[Path]] = []
    self._target: Optional[Path] = None
    self._sparse: List[str] = []

  def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
    argv = [str(a) for a in args]
    self.calls.append(argv)
    self.cwds.append(cwd)
    verb = argv[1]

    if verb == self.fail_on:
      return CommandResult(args=argv, returncode=128, stderr=f"fatal: simulated {verb} failure")

    if verb == "clone":
      self._target = Path(argv[-1])
      (self._target / ".git").mkdir(parents=True)
    elif verb == "sparse-checkout":
      self._sparse = argv[3:]
    elif verb == "checkout":
      selected = {
        rel: text
        for rel, text in self.files.items()
        if "/" not in rel or any(rel.startswith(s.rstrip("/") + "/") for s in self._sparse)
      }
      write_tree(cwd, selected)
    return CommandResult(args=argv, returncode=0)


@pytest.fixture
def upstream_files() -> Dict[str, str]:
  """A copy of the default upstream layout, safe to mutate per test."""
  return dict(UPSTREAM_DOCS)


@pytest.fixture
def fake_git(upstream_files):
  """A FakeGitRunner serving ``upstream_files``."""
  return FakeGitRunner(upstream_files)


@pytest.fixture
def sync_config(tmp_path) -> SyncConfig:
  """Configuration rooted in a temporary project directory."""
  return SyncConfig(
    source=RemoteSource(repository_url="https://example.com/upstream.git", subtree_path="docs"),
    cache_dir=tmp_path / ".cache" / "next",
    dest_dir=tmp_path / "src" / "content" / "docs" / "docs",
  )
