"""svn interface layer — runner, report parsers, models, client facade."""

from svnkit.svn.client import SvnClient
from svnkit.svn.context import ExecutionContext, ProxySettings
from svnkit.svn.errors import (
    AuthenticationError,
    CommandExecutionError,
    CommandTimeoutError,
    ConflictError,
    EmptyInputError,
    ExecutableNotFoundError,
    NetworkError,
    ParseError,
    SvnError,
    WorkingCopyError,
)
from svnkit.svn.info_parser import parse_info
from svnkit.svn.list_parser import parse_list
from svnkit.svn.log_parser import parse_log
from svnkit.svn.models import (
    CommitResult,
    InfoResult,
    ListEntry,
    ListResult,
    Lock,
    LogEntry,
    LogPath,
    LogResult,
    NodeKind,
    PathAction,
    StatusChar,
    StatusEntry,
    StatusResult,
    UpdateResult,
)
from svnkit.svn.runner import CommandRunner, SubprocessRunner, run_command
from svnkit.svn.status_parser import parse_status

__all__ = [
    "AuthenticationError",
    "CommandExecutionError",
    "CommandRunner",
    "CommandTimeoutError",
    "CommitResult",
    "ConflictError",
    "EmptyInputError",
    "ExecutableNotFoundError",
    "ExecutionContext",
    "InfoResult",
    "ListEntry",
    "ListResult",
    "Lock",
    "LogEntry",
    "LogPath",
    "LogResult",
    "NetworkError",
    "NodeKind",
    "ParseError",
    "PathAction",
    "ProxySettings",
    "StatusChar",
    "StatusEntry",
    "StatusResult",
    "SubprocessRunner",
    "SvnClient",
    "SvnError",
    "UpdateResult",
    "WorkingCopyError",
    "parse_info",
    "parse_list",
    "parse_log",
    "parse_status",
    "run_command",
]
