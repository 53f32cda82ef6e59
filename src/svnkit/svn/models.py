"""Typed results produced from svn reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class StatusChar(str, Enum):
    """Working-copy state of a path, keyed by its status-column symbol."""

    NONE = " "
    ADDED = "A"
    CONFLICTED = "C"
    DELETED = "D"
    IGNORED = "I"
    MODIFIED = "M"
    REPLACED = "R"
    UNVERSIONED_EXTERNAL_DIR = "X"
    UNVERSIONED = "?"
    MISSING = "!"
    OBSTRUCTED = "~"

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


class PathAction(str, Enum):
    ADDED = "A"
    DELETED = "D"
    MODIFIED = "M"
    REPLACED = "R"


class NodeKind(str, Enum):
    FILE = "file"
    DIR = "dir"


@dataclass(frozen=True)
class Lock:
    owner: str = ""
    comment: str = ""
    date: str = ""


@dataclass(frozen=True)
class StatusEntry:
    """One path from ``svn status --xml``.

    ``is_directory`` is never derived from the report; telling files and
    directories apart for deleted or missing paths needs the filesystem.
    """

    path: str
    status: StatusChar = StatusChar.NONE
    revision: Optional[int] = None  # last commit, only with a commit node
    author: Optional[str] = None
    date: Optional[str] = None
    is_directory: bool = False
    props_status: Optional[StatusChar] = None  # omitted when NONE
    lock: Optional[Lock] = None


@dataclass(frozen=True)
class StatusResult:
    path: str
    entries: Tuple[StatusEntry, ...] = ()
    revision: int = 0


@dataclass(frozen=True, slots=True)
class LogPath:
    """A changed path inside a log entry."""

    action: PathAction
    path: str
    copy_from_path: Optional[str] = None
    copy_from_revision: Optional[int] = None


@dataclass(frozen=True)
class LogEntry:
    revision: int
    author: str
    date: str
    message: str
    paths: Tuple[LogPath, ...] = ()


@dataclass(frozen=True)
class LogResult:
    """Log entries, newest first."""

    entries: Tuple[LogEntry, ...] = ()
    start_revision: int = 0
    end_revision: int = 0


@dataclass(frozen=True)
class InfoResult:
    path: str
    url: str
    repository_root: str
    repository_uuid: str
    revision: int
    node_kind: NodeKind
    last_changed_author: str
    last_changed_revision: int
    last_changed_date: str
    working_copy_root: Optional[str] = None  # only inside a checkout


@dataclass(frozen=True)
class ListEntry:
    name: str
    path: str
    kind: NodeKind = NodeKind.FILE
    size: Optional[int] = None  # files only
    revision: int = 0
    author: str = ""
    date: str = ""


@dataclass(frozen=True)
class ListResult:
    path: str
    entries: Tuple[ListEntry, ...] = ()


@dataclass(frozen=True)
class UpdateResult:
    path: str
    revision: int = 0


@dataclass(frozen=True)
class CommitResult:
    revision: int = 0
