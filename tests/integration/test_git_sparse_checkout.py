"""
Integration Tests against a real git client.

Builds a throwaway upstream repository on disk, then runs the full pipeline
over a ``file://`` URL so that ``--depth 1`` and sparse checkout are honoured
exactly as they would be for a network remote.
"""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from conftest import read_tree, write_tree
from docs_sync.config import RemoteSource, SyncConfig
from docs_sync.errors import CommandError
from docs_sync.pipeline import DocsSyncPipeline

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")

GIT_ENV = {
  "GIT_AUTHOR_NAME": "Docs Bot",
  "GIT_AUTHOR_EMAIL": "docs@example.com",
  "GIT_COMMITTER_NAME": "Docs Bot",
  "GIT_COMMITTER_EMAIL": "docs@example.com",
  "GIT_CONFIG_NOSYSTEM": "1",
}


def _git(cwd: Path, *args: str) -> None:
  env = {**os.environ, **GIT_ENV}
  subprocess.run(["git", *args], cwd=cwd, env=env, check=True, capture_output=True)


@pytest.fixture
def upstream_repo(tmp_path):
  repo = tmp_path / "upstream"
  repo.mkdir()
  write_tree(
    repo,
    {
      "README.md": "root",
      "packages/next/index.js": "code",
      "docs/index.mdx": "home",
      "docs/01-app/01-getting-started/01-installation.mdx": "install",
      "docs/01-app/01-getting-started/02-project-structure.mdx": "structure",
    },
  )
  _git(repo, "init", "-q")
  _git(repo, "add", ".")
  _git(repo, "commit", "-q", "-m", "initial")
  return repo


def _config(tmp_path: Path, repo: Path) -> SyncConfig:
  return SyncConfig(
    source=RemoteSource(repository_url=repo.as_uri(), subtree_path="docs"),
    cache_dir=tmp_path / "site" / ".cache" / "next",
    dest_dir=tmp_path / "site" / "src" / "content" / "docs" / "docs",
  )


def test_real_checkout_publishes_normalized_docs(tmp_path, upstream_repo):
  config = _config(tmp_path, upstream_repo)

  DocsSyncPipeline(config).run()

  assert read_tree(config.dest_dir) == {
    "index.mdx": "home",
    "app/getting-started/installation.mdx": "install",
    "app/getting-started/project-structure.mdx": "structure",
  }
  assert not (config.cache_dir / "packages").exists()


def test_unreachable_remote_keeps_destination(tmp_path):
  config = _config(tmp_path, tmp_path / "does-not-exist")
  write_tree(config.dest_dir, {"published.mdx": "keep me"})

  with pytest.raises(CommandError):
    DocsSyncPipeline(config).run()

  assert read_tree(config.dest_dir) == {"published.mdx": "keep me"}
