"""High-level svn operations: build the argument vector, run, parse."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from svnkit.svn.context import ExecutionContext
from svnkit.svn.info_parser import parse_info
from svnkit.svn.list_parser import parse_list
from svnkit.svn.log_parser import parse_log
from svnkit.svn.models import (
    CommitResult,
    InfoResult,
    ListResult,
    LogResult,
    StatusResult,
    UpdateResult,
)
from svnkit.svn.runner import DEFAULT_LOCALE, CommandRunner, PathLike, SubprocessRunner
from svnkit.svn.status_parser import parse_status

DEFAULT_LOG_LIMIT = 100
LIST_DEPTHS = ("empty", "immediates", "infinity")

_UPDATED_RE = re.compile(r"(?:Updated to|At) revision (\d+)\.")
_COMMITTED_RE = re.compile(r"Committed revision (\d+)\.")


def _last_revision(pattern: re.Pattern[str], output: str) -> int:
    matches = pattern.findall(output)
    return int(matches[-1]) if matches else 0


def _require_paths(paths: Sequence[str], operation: str) -> list[str]:
    if isinstance(paths, str):
        paths = [paths]
    if not paths:
        raise ValueError(f"No paths specified for {operation}")
    return list(paths)


class SvnClient:
    """Facade over one svn binary.

    The runner is injectable so tests can feed canned reports without
    spawning processes. Instances hold no per-call state and can be shared
    between threads.
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        *,
        binary: str = "svn",
        context: Optional[ExecutionContext] = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.runner: CommandRunner = runner or SubprocessRunner(
            binary, context=context, locale=locale
        )

    # ---- queries ----

    def status(self, path: str, *, working_dir: Optional[PathLike] = None) -> StatusResult:
        xml = self.runner.run(["status", "--xml", path], working_dir)
        return parse_status(xml, path)

    def log(
        self,
        path: str,
        limit: int = DEFAULT_LOG_LIMIT,
        start_revision: Optional[int] = None,
        end_revision: Optional[int] = None,
        *,
        working_dir: Optional[PathLike] = None,
    ) -> LogResult:
        args = ["log", "--xml", "--verbose", "-l", str(limit)]
        if start_revision is not None and end_revision is not None:
            args += ["-r", f"{start_revision}:{end_revision}"]
        elif start_revision is not None:
            args += ["-r", f"{start_revision}:HEAD"]
        args.append(path)
        return parse_log(self.runner.run(args, working_dir))

    def info(self, target: str, *, working_dir: Optional[PathLike] = None) -> InfoResult:
        return parse_info(self.runner.run(["info", "--xml", target], working_dir))

    def list(
        self,
        url: str,
        revision: Optional[str] = None,
        depth: Optional[str] = None,
        *,
        working_dir: Optional[PathLike] = None,
    ) -> ListResult:
        if depth is not None and depth not in LIST_DEPTHS:
            raise ValueError(f"Invalid list depth: {depth}")
        args = ["list", "--xml", "-v"]
        if revision:
            args += ["-r", str(revision)]
        if depth:
            args += ["--depth", depth]
        args.append(url)
        return parse_list(self.runner.run(args, working_dir), url)

    # ---- working-copy changes ----

    def update(self, path: str, *, working_dir: Optional[PathLike] = None) -> UpdateResult:
        output = self.runner.run(["update", path], working_dir)
        return UpdateResult(path=path, revision=_last_revision(_UPDATED_RE, output))

    def commit(
        self,
        paths: Sequence[str],
        message: str,
        *,
        working_dir: Optional[PathLike] = None,
    ) -> CommitResult:
        if not message or not message.strip():
            raise ValueError("Commit message is required")
        targets = _require_paths(paths, "commit")
        output = self.runner.run(["commit", "-m", message, *targets], working_dir)
        return CommitResult(revision=_last_revision(_COMMITTED_RE, output))

    def revert(self, paths: Sequence[str], *, working_dir: Optional[PathLike] = None) -> None:
        self.runner.run(["revert", *_require_paths(paths, "revert")], working_dir)

    def add(self, paths: Sequence[str], *, working_dir: Optional[PathLike] = None) -> None:
        self.runner.run(["add", *_require_paths(paths, "add")], working_dir)

    def delete(self, paths: Sequence[str], *, working_dir: Optional[PathLike] = None) -> None:
        self.runner.run(["delete", *_require_paths(paths, "delete")], working_dir)

    def cleanup(self, path: str, *, working_dir: Optional[PathLike] = None) -> None:
        self.runner.run(["cleanup", path], working_dir)
