"""
Subprocess Invocation Abstraction.

Wraps :func:`subprocess.run` so callers receive a :class:`CommandResult`
(exit code and captured output) instead of relying on inherited process I/O.
Output is decoded as UTF-8 with undecodable bytes replaced. A command
that cannot be launched at all is reported as a result with
return code 127, mirroring the shell convention for "command not found".
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field
from rich.markup import escape

LAUNCH_FAILURE_CODE = 127

logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
  """
  Outcome of a single external command.
  """

  args: List[str] = Field(description="The argument vector that was executed.")
  returncode: int = Field(description="Process exit status (127 if the process could not start).")
  stdout: str = Field(default="", description="Captured standard output.")
  stderr: str = Field(default="", description="Captured standard error.")

  @property
  def ok(self) -> bool:
    """
    Whether the command exited successfully.

    Returns:
        bool: True if the return code is zero.
    """
    return self.returncode == 0

  @property
  def command(self) -> str:
    """
    Shell-quoted rendering of the argument vector, for messages.

    Returns:
        str: The command line.
    """
    return shlex.join(self.args)


class CommandRunner:
  """
  Executes external commands synchronously and captures their output.
  """

  def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
    """
    Runs a command to completion.

    Args:
        args (Sequence[str]): Executable followed by its arguments.
        cwd (Optional[Path]): Working directory for the process.

    Returns:
        CommandResult: The exit status and captured streams.
    """
    argv = [str(a) for a in args]
    logger.debug(f"$ {escape(shlex.join(argv))}")
    try:
      proc = subprocess.run(
        argv,
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
      )
    except OSError as e:
      return CommandResult(args=argv, returncode=LAUNCH_FAILURE_CODE, stderr=str(e))

    result = CommandResult(args=argv, returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
    for line in (result.stdout + result.stderr).splitlines():
      logger.debug(f"  {escape(line)}")
    return result
