"""Error hierarchy for command execution and report parsing.

Two families hang off :class:`SvnError`:

* :class:`CommandExecutionError` — the client exited non-zero. Its
  ``stderr`` is the tool's own diagnostic and is meant for the end user.
* :class:`ParseError` — a report could not be turned into a typed result.
  It always keeps the raw input so the failing report can be replayed in a
  test.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Iterator, List, Optional


class SvnError(Exception):
    """Base class for every error raised by svnkit."""


class ExecutableNotFoundError(SvnError):
    """Raised when the svn binary cannot be found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"{executable} is not installed or not on PATH")
        self.executable = executable


class CommandExecutionError(SvnError):
    """Raised when the client exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        stderr: str = "",
        exit_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.stderr = stderr
        self.exit_code = exit_code

    @classmethod
    def from_exit(cls, stderr: str, exit_code: int) -> "CommandExecutionError":
        message = stderr.strip() or f"exit code {exit_code}"
        return cls(message, stderr=stderr, exit_code=exit_code)


class CommandTimeoutError(CommandExecutionError):
    """Raised when a command outlives its deadline and is killed."""

    def __init__(self, timeout: float, command: str) -> None:
        super().__init__(f"command timed out after {timeout}s: {command}")
        self.timeout = timeout


class AuthenticationError(CommandExecutionError):
    def __init__(self, message: str, *, stderr: str = "", exit_code: Optional[int] = None,
                 realm: Optional[str] = None) -> None:
        super().__init__(message, stderr=stderr, exit_code=exit_code)
        self.realm = realm


class ConflictError(CommandExecutionError):
    def __init__(self, message: str, *, stderr: str = "", exit_code: Optional[int] = None,
                 conflicted_paths: Optional[List[str]] = None) -> None:
        super().__init__(message, stderr=stderr, exit_code=exit_code)
        self.conflicted_paths = conflicted_paths or []


class NetworkError(CommandExecutionError):
    def __init__(self, message: str, *, stderr: str = "", exit_code: Optional[int] = None,
                 url: Optional[str] = None) -> None:
        super().__init__(message, stderr=stderr, exit_code=exit_code)
        self.url = url


class WorkingCopyError(CommandExecutionError):
    def __init__(self, message: str, *, stderr: str = "", exit_code: Optional[int] = None,
                 path: str = "") -> None:
        super().__init__(message, stderr=stderr, exit_code=exit_code)
        self.path = path


class ParseError(SvnError):
    """Raised when a report is malformed or has an unexpected shape."""

    def __init__(
        self,
        message: str,
        raw_input: str = "",
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.raw_input = raw_input
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class EmptyInputError(ParseError):
    """Raised where an empty report is not a legitimate outcome (info)."""


# --- stderr classification ---

_REALM_RE = re.compile(r"realm:\s*(.+)", re.IGNORECASE)
_URL_RE = re.compile(r"(https?://[^\s'\"]+)", re.IGNORECASE)
_PATH_FIELD_RE = re.compile(r"path:\s*(.+)", re.IGNORECASE)
_ABS_PATH_RE = re.compile(r"[\"']?([A-Za-z]:\\[^\s\"']+|/[^\s\"']+)[\"']?")
# Quoted paths/URLs and path: fields are dropped before keyword matching
_QUOTED_LOCATION_RE = re.compile(r"(['\"])(?:[A-Za-z]:\\|/|[a-z][a-z0-9+.-]*://)[^'\"]*\1")
_AUTH_RE = re.compile(r"\b(?:authentication|authorization|access forbidden)\b")
_CONFLICT_RE = re.compile(r"\bconflict(?:s|ed)?\b")
_NETWORK_RE = re.compile(r"\b(?:connection|network|timeout|timed out|host)\b")
_WORKING_COPY_RE = re.compile(r"\b(?:working copy|locked|cleanup)\b")


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def _unique_paths(text: str) -> List[str]:
    """Return absolute paths mentioned in *text*, first occurrence order."""
    seen: dict[str, None] = {}
    for m in _ABS_PATH_RE.finditer(text):
        seen.setdefault(m.group(1), None)
    return list(seen)


def _keyword_text(stderr: str) -> str:
    """Lower-cased diagnostics with user-controlled locations removed."""
    text = _QUOTED_LOCATION_RE.sub("''", stderr)
    return _PATH_FIELD_RE.sub("path:", text).lower()


def classify_command_error(stderr: str, exit_code: int) -> CommandExecutionError:
    """Map client diagnostics to the most specific CommandExecutionError."""
    text = _keyword_text(stderr)
    summary = _first_line(stderr)

    if _AUTH_RE.search(text):
        m = _REALM_RE.search(stderr)
        return AuthenticationError(
            summary, stderr=stderr, exit_code=exit_code,
            realm=m.group(1).strip() if m else None,
        )

    if _CONFLICT_RE.search(text):
        return ConflictError(
            summary, stderr=stderr, exit_code=exit_code,
            conflicted_paths=_unique_paths(stderr),
        )

    if _NETWORK_RE.search(text):
        m = _URL_RE.search(stderr)
        return NetworkError(
            summary, stderr=stderr, exit_code=exit_code,
            url=m.group(1) if m else None,
        )

    if _WORKING_COPY_RE.search(text):
        m = _PATH_FIELD_RE.search(stderr)
        return WorkingCopyError(
            summary, stderr=stderr, exit_code=exit_code,
            path=m.group(1).strip() if m else "",
        )

    return CommandExecutionError.from_exit(stderr, exit_code)


@contextmanager
def parse_guard(report: str, raw_input: str) -> Iterator[None]:
    """Wrap unexpected failures while extracting *report* into ParseError."""
    try:
        yield
    except ParseError:
        raise
    except Exception as exc:
        raise ParseError(
            f"Failed to parse svn {report} XML", raw_input=raw_input, cause=exc
        ) from exc
