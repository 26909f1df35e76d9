"""Run an external program with varying arguments under a time limit."""

from __future__ import annotations

import enum
import logging
import shutil
import subprocess
from typing import Mapping

from ripkit.timedcall import timed_call

logger = logging.getLogger(__name__)

_INDENT = "  "
_DOING = "  [x] "
_FAKING = "  [ ] "


class SafetyLevel(enum.Enum):
    """How harmful a command is to run."""

    #: Harmless, e.g. a quick read-only command; always run.
    NO_HARM_DONE = 0
    #: Likely cannot be undone, e.g. a POST to a website.
    UNDO_IS_HARD = 1


class Verbosity(enum.Enum):
    LOW = 0
    HIGH = 1


class Behavior(enum.Enum):
    """Whether to really run commands or merely report them."""

    DO_IT = 0
    FAKE_IT = 1


class CommandRunner:
    """Runs one program with different arguments, timing each run.

    ``out`` holds the combined stdout and stderr of the most recent run.
    """

    def __init__(
        self, program: str, work_dir: str, behavior: Behavior, duration: float
    ) -> None:
        found = shutil.which(program)
        if found is None:
            raise FileNotFoundError(f"executable file not found in PATH: {program}")
        self.program = found
        self.work_dir = work_dir
        self.behavior = behavior
        self.duration = duration
        self.verbosity = Verbosity.HIGH
        self.env: dict[str, str] | None = None
        self.out = ""

    def _log(self, prefix: str, message: str) -> None:
        if self.verbosity is Verbosity.LOW:
            return
        logger.debug(prefix + message)

    def comment(self, message: str) -> None:
        """Log a remark about what the runner is about to do."""
        self._log(_INDENT, message)

    def set_env(self, env: Mapping[str, str]) -> None:
        """Use exactly these environment variables for subsequent runs."""
        self.env = dict(env)

    def run(self, safety: SafetyLevel, *args: str) -> None:
        """Run the program with args, raising RuntimeError if it fails."""
        command = " ".join((self.program, *args))
        if self.behavior is Behavior.FAKE_IT and safety is not SafetyLevel.NO_HARM_DONE:
            self._log(_INDENT + _FAKING, command)
            self.out = ""
            return
        self._log(_INDENT + _DOING, command)

        def execute() -> None:
            completed = subprocess.run(
                [self.program, *args],
                cwd=self.work_dir or None,
                env=None if self.env is None else dict(self.env),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
            self.out = completed.stdout.decode(errors="replace")
            if completed.returncode != 0:
                logger.error(self.out)
                raise RuntimeError(
                    f'failed to run "{command}": exit status {completed.returncode}'
                )

        timed_call(command, self.duration, execute)