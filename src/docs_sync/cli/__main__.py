"""
Main Entry Point for the docs-sync CLI.

Resolves configuration, runs the pipeline once and maps the outcome to an
exit code (0 on success, 1 on any failure).
"""

import argparse
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from docs_sync import __version__
from docs_sync.cli.report import render_plan
from docs_sync.config import SyncConfig
from docs_sync.errors import SyncError
from docs_sync.pipeline import DocsSyncPipeline
from docs_sync.utils.console import configure_logging, log_error, log_success


def build_parser() -> argparse.ArgumentParser:
  """
  Defines the command-line interface.

  Returns:
      argparse.ArgumentParser: The configured parser.
  """
  parser = argparse.ArgumentParser(
    prog="docs-sync",
    description="Mirror an upstream docs subtree into the site's content directory",
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument(
    "--project-root",
    type=Path,
    default=None,
    help="Directory used to find pyproject.toml and resolve relative paths (default: cwd)",
  )
  parser.add_argument("--repo", default=None, help="Upstream repository URL (default: from toml)")
  parser.add_argument("--subtree", default=None, help="Repository directory to mirror (default: from toml)")
  parser.add_argument("--ref", default=None, help="Branch or tag to clone (default: remote HEAD)")
  parser.add_argument("--cache-dir", type=Path, default=None, help="Checkout cache location")
  parser.add_argument("--dest-dir", type=Path, default=None, help="Published content directory")
  parser.add_argument("--git", default=None, help="git executable (default: git)")
  parser.add_argument(
    "--dry-run",
    action="store_true",
    help="Fetch and print the rename plan without touching the destination",
  )
  parser.add_argument("-v", "--verbose", action="store_true", help="Show git commands and their output")
  return parser


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  args = build_parser().parse_args(argv)
  configure_logging(verbose=args.verbose)

  try:
    config = SyncConfig.load(
      project_root=args.project_root,
      repository_url=args.repo,
      subtree_path=args.subtree,
      ref=args.ref,
      cache_dir=args.cache_dir,
      dest_dir=args.dest_dir,
      git_executable=args.git,
    )
  except (ValueError, OSError) as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return 1

  pipeline = DocsSyncPipeline(config)
  try:
    report = pipeline.run(dry_run=args.dry_run)
  except (SyncError, OSError) as e:
    log_error(escape(str(e)))
    return 1

  if report.dry_run:
    render_plan(report.plan)
  else:
    log_success(f"Synced {report.files_published} file(s), {report.renamed} rename(s)")
  return 0
