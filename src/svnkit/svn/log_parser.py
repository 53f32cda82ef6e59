"""Parse ``svn log --xml --verbose`` into a LogResult."""

from __future__ import annotations

import logging
from typing import Any, List

from svnkit.svn.convert import (
    as_enum,
    as_list,
    as_node,
    as_optional_int,
    as_optional_str,
    as_revision,
    as_str,
    first_present,
    text_of,
)
from svnkit.svn.errors import parse_guard
from svnkit.svn.models import LogEntry, LogPath, LogResult, PathAction
from svnkit.svn.xml_tree import TEXT_KEY, parse_tree

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "unknown"

# Message tag spellings across client versions, highest priority first
MESSAGE_TAGS = ("msg", "message")


def _changed_path_text(node: Any) -> str:
    if isinstance(node, dict):
        return first_present(node, TEXT_KEY, "path") or ""
    return as_str(node)


def _parse_path(item: Any) -> LogPath:
    node = as_node(item)
    action = (text_of(node.get("action")) or "").strip().upper()
    return LogPath(
        action=as_enum(action, PathAction, PathAction.MODIFIED),
        path=_changed_path_text(item),
        copy_from_path=as_optional_str(node.get("copyfrom-path")),
        copy_from_revision=as_optional_int(node.get("copyfrom-rev")),
    )


def _parse_entry(entry: Any) -> LogEntry:
    node = as_node(entry)
    paths: List[LogPath] = []
    for container in as_list(node.get("paths")):
        for item in as_list(as_node(container).get("path")):
            if item is None:
                continue
            paths.append(_parse_path(item))

    author = as_str(node.get("author")).strip()
    return LogEntry(
        revision=as_revision(node.get("revision")),
        author=author or UNKNOWN_AUTHOR,
        date=as_str(node.get("date")),
        message=first_present(node, *MESSAGE_TAGS) or "",
        paths=tuple(paths),
    )


def parse_log(xml_text: str) -> LogResult:
    """Parse a log report; entries come back newest first.

    Raises:
        ParseError: the report is not well-formed XML.
    """
    if not xml_text or not xml_text.strip():
        return LogResult()

    with parse_guard("log", xml_text):
        tree = parse_tree(xml_text)
        raw_entries = as_list(as_node(tree.get("log")).get("logentry"))
        if not raw_entries:
            logger.debug("log report has no logentry elements")
            return LogResult()

        entries = [_parse_entry(e) for e in raw_entries if e is not None]
        entries.sort(key=lambda e: e.revision, reverse=True)

        revisions = [e.revision for e in entries]
        return LogResult(
            entries=tuple(entries),
            start_revision=min(revisions) if revisions else 0,
            end_revision=max(revisions) if revisions else 0,
        )
