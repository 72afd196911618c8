"""
Sync Configuration Store.

Defines the immutable :class:`RemoteSource` descriptor and the
:class:`SyncConfig` container passed into the pipeline. Values are resolved
from explicit overrides (CLI flags), then the ``[tool.docs_sync]`` table of the
nearest ``pyproject.toml``, then built-in defaults.
"""

import sys
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

DEFAULT_REPOSITORY_URL = "https://github.com/vercel/next.js"
DEFAULT_SUBTREE_PATH = "docs"
DEFAULT_CACHE_DIR = Path(".cache", "next")
DEFAULT_DEST_DIR = Path("src", "content", "docs", "docs")

TOOL_SECTION = "docs_sync"


class RemoteSource(BaseModel):
  """
  Identifies which upstream repository and which internal subdirectory to mirror.
  """

  model_config = ConfigDict(frozen=True)

  repository_url: str = Field(DEFAULT_REPOSITORY_URL, description="Clone URL of the upstream repository.")
  subtree_path: str = Field(DEFAULT_SUBTREE_PATH, description="Repository-relative directory to mirror.")
  ref: Optional[str] = Field(None, description="Branch or tag to clone. None selects the remote default.")

  @field_validator("repository_url")
  @classmethod
  def validate_url(cls, v: str) -> str:
    """
    Rejects blank repository URLs.

    Args:
        v (str): Raw URL.

    Returns:
        str: The stripped URL.

    Raises:
        ValueError: If the URL is empty.
    """
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("repository_url must not be empty")
    return v_clean

  @field_validator("subtree_path")
  @classmethod
  def validate_subtree(cls, v: str) -> str:
    """
    Normalizes the subtree to a relative POSIX path.

    Args:
        v (str): Raw subtree path, e.g. ``"/docs/"``.

    Returns:
        str: The cleaned path, e.g. ``"docs"``.

    Raises:
        ValueError: If the path is empty or escapes the repository root.
    """
    v_clean = v.strip().replace("\\", "/").strip("/")
    parts = PurePosixPath(v_clean).parts if v_clean else ()
    if not parts:
      raise ValueError("subtree_path must name a directory inside the repository")
    if ".." in parts:
      raise ValueError(f"subtree_path must not contain '..': '{v}'")
    return "/".join(p for p in parts if p != ".")


class SyncConfig(BaseModel):
  """
  Complete configuration of a sync run.
  """

  source: RemoteSource = Field(default_factory=RemoteSource, description="What to mirror.")
  cache_dir: Path = Field(description="Throwaway checkout location, owned by the pipeline.")
  dest_dir: Path = Field(description="Published content directory consumed by the site generator.")
  git_executable: str = Field("git", description="Name or path of the git client.")

  @model_validator(mode="after")
  def check_disjoint(self) -> "SyncConfig":
    """
    Ensures the cache and destination cannot clobber each other.

    Returns:
        SyncConfig: The validated instance.

    Raises:
        ValueError: If either directory equals or contains the other.
    """
    cache = self.cache_dir.resolve()
    dest = self.dest_dir.resolve()
    if cache == dest or cache in dest.parents or dest in cache.parents:
      raise ValueError(f"cache_dir ({cache}) and dest_dir ({dest}) must not overlap")
    return self

  @property
  def checkout_subtree(self) -> Path:
    """
    Location of the mirrored subtree inside the cache.

    Returns:
        Path: ``cache_dir / subtree_path``.
    """
    return self.cache_dir.joinpath(*PurePosixPath(self.source.subtree_path).parts)

  @classmethod
  def load(
    cls,
    project_root: Optional[Path] = None,
    repository_url: Optional[str] = None,
    subtree_path: Optional[str] = None,
    ref: Optional[str] = None,
    cache_dir: Optional[Path] = None,
    dest_dir: Optional[Path] = None,
    git_executable: Optional[str] = None,
  ) -> "SyncConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Relative paths from the TOML file resolve against the directory holding it.
    Relative paths given as arguments resolve against ``project_root``.

    Args:
        project_root (Optional[Path]): Directory to start searching for TOML config.
            Defaults to the current working directory.
        repository_url (Optional[str]): Override for the upstream URL.
        subtree_path (Optional[str]): Override for the mirrored subtree.
        ref (Optional[str]): Override for the branch or tag.
        cache_dir (Optional[Path]): Override for the cache location.
        dest_dir (Optional[Path]): Override for the destination.
        git_executable (Optional[str]): Override for the git binary.

    Returns:
        SyncConfig: The fully resolved configuration object.
    """
    root = (project_root or Path.cwd()).resolve()
    toml_config, toml_dir = _load_toml_settings(root)
    base = toml_dir or root

    source = RemoteSource(
      repository_url=repository_url or toml_config.get("repository_url", DEFAULT_REPOSITORY_URL),
      subtree_path=subtree_path or toml_config.get("subtree_path", DEFAULT_SUBTREE_PATH),
      ref=ref or toml_config.get("ref"),
    )

    def _resolve(override: Optional[Path], key: str, default: Path) -> Path:
      if override is not None:
        return (root / override).resolve()
      return (base / Path(toml_config.get(key, default))).resolve()

    return cls(
      source=source,
      cache_dir=_resolve(cache_dir, "cache_dir", DEFAULT_CACHE_DIR),
      dest_dir=_resolve(dest_dir, "dest_dir", DEFAULT_DEST_DIR),
      git_executable=git_executable or toml_config.get("git_executable", "git"),
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.docs_sync]`` table and the directory it was found in.
      The directory is None if no pyproject.toml exists.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return data.get("tool", {}).get(TOOL_SECTION, {}), parent

  return {}, None
