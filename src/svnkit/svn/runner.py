"""svn subprocess wrapper — one process per call, UTF-8 locale, typed failures."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Dict, Optional, Protocol, Sequence, Union

from svnkit.svn.context import ExecutionContext, mask_secrets, prepared_args
from svnkit.svn.errors import (
    CommandTimeoutError,
    ExecutableNotFoundError,
    WorkingCopyError,
    classify_command_error,
)

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US.UTF-8"

PathLike = Union[str, Path]


class CommandRunner(Protocol):
    """Anything that can run an svn argument vector and return its stdout."""

    def run(self, args: Sequence[str], working_dir: Optional[PathLike] = None) -> str:
        ...


def utf8_env(locale: str = DEFAULT_LOCALE, base: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Return a copy of the environment forced to a UTF-8 locale."""
    env = dict(os.environ if base is None else base)
    env["LANG"] = locale
    env["LC_ALL"] = locale
    return env


def run_command(
    executable: str,
    args: Sequence[str],
    cwd: Optional[PathLike] = None,
    *,
    env: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> str:
    """Run *executable* with *args* and return stdout.

    stderr is discarded on success. A non-zero exit raises the most specific
    :class:`CommandExecutionError` for the captured stderr.
    """
    if cwd is not None and not Path(cwd).is_dir():
        raise WorkingCopyError(f"working directory does not exist: {cwd}", path=str(cwd))

    try:
        result = subprocess.run(
            [executable, *args],
            cwd=cwd,
            env=env,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as exc:
        raise ExecutableNotFoundError(executable) from exc
    except subprocess.TimeoutExpired as exc:
        command = " ".join([executable, *mask_secrets(args)])
        raise CommandTimeoutError(timeout or 0, command) from exc

    logger.debug("Exit code: %d", result.returncode)
    if result.returncode != 0:
        raise classify_command_error(result.stderr or "", result.returncode)
    return result.stdout


class SubprocessRunner:
    """Run svn as a real subprocess.

    Usage::

        runner = SubprocessRunner("svn", context=ExecutionContext(ssl_verify=False))
        xml = runner.run(["status", "--xml", "."], working_dir="/path/to/wc")
    """

    def __init__(
        self,
        executable: str = "svn",
        *,
        context: Optional[ExecutionContext] = None,
        locale: str = DEFAULT_LOCALE,
        timeout: Optional[float] = None,
    ) -> None:
        self.executable = executable
        self.context = context
        self.locale = locale
        self.timeout = timeout

    def _deadline(self) -> Optional[float]:
        if self.timeout is not None:
            return self.timeout
        return self.context.timeout if self.context is not None else None

    def run(self, args: Sequence[str], working_dir: Optional[PathLike] = None) -> str:
        where = str(working_dir) if working_dir is not None else os.getcwd()
        with prepared_args(args, self.context, where=where) as final_args:
            logger.info(
                "Running: %s %s in %s",
                self.executable, " ".join(mask_secrets(final_args)), where,
            )
            return run_command(
                self.executable,
                final_args,
                working_dir,
                env=utf8_env(self.locale),
                timeout=self._deadline(),
            )
