"""
Central Logging and Console Utilities.

Routes the standard `logging` library through a themed `rich` console and adds
a ``SUCCESS`` level between INFO and WARNING. The ``log_*`` helpers prefix
status markers so sync progress reads the same whichever module emits it.

Attributes:
    console (Console): The shared Rich console used by handlers and tables.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "code": "bold magenta",
  }
)

console = Console(theme=_THEME)


def configure_logging(verbose: bool = False, target: Optional[Console] = None) -> None:
  """
  Installs a RichHandler on the root logger, replacing any previous one.

  Args:
      verbose (bool): If True, emit DEBUG records (git commands and their output).
      target (Optional[Console]): Console to write to. Defaults to the module console.
  """
  root_logger = logging.getLogger()
  for handler in list(root_logger.handlers):
    if isinstance(handler, RichHandler):
      root_logger.removeHandler(handler)

  rich_handler = RichHandler(
    console=target or console,
    show_time=False,
    omit_repeated_times=False,
    show_path=False,
    markup=True,
    rich_tracebacks=True,
  )
  root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
  root_logger.addHandler(rich_handler)


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message content. Can include rich markup like [path].
  """
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """
  Logs a success message at the custom SUCCESS level.

  Args:
      msg (str): The message content.
  """
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message.

  Args:
      msg (str): The message content.
  """
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """
  Logs an error message.

  Args:
      msg (str): The message content.
  """
  logging.error(f"❌ {msg}", extra={"markup": True})
