"""Parse ``svn status --xml`` into a StatusResult."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from svnkit.svn.convert import (
    as_enum,
    as_int,
    as_list,
    as_node,
    as_optional_str,
    as_str,
    first_present,
)
from svnkit.svn.errors import parse_guard
from svnkit.svn.models import Lock, StatusChar, StatusEntry, StatusResult
from svnkit.svn.xml_tree import parse_tree

logger = logging.getLogger(__name__)

# ``svn status --xml`` writes words in wc-status/@item and @props; the
# single-column symbols are accepted through the enum values themselves.
_STATUS_WORDS: Dict[str, StatusChar] = {
    "none": StatusChar.NONE,
    "normal": StatusChar.NONE,
    "added": StatusChar.ADDED,
    "conflicted": StatusChar.CONFLICTED,
    "deleted": StatusChar.DELETED,
    "ignored": StatusChar.IGNORED,
    "modified": StatusChar.MODIFIED,
    "replaced": StatusChar.REPLACED,
    "external": StatusChar.UNVERSIONED_EXTERNAL_DIR,
    "unversioned-external-dir": StatusChar.UNVERSIONED_EXTERNAL_DIR,
    "unversioned": StatusChar.UNVERSIONED,
    "missing": StatusChar.MISSING,
    "obstructed": StatusChar.OBSTRUCTED,
}


def status_char(value: Any) -> StatusChar:
    """Normalize a raw item/props value; anything unknown becomes NONE."""
    return as_enum(value, StatusChar, StatusChar.NONE, _STATUS_WORDS)


def _parse_lock(node: Dict[str, Any]) -> Lock:
    return Lock(
        owner=as_str(node.get("owner")),
        comment=as_str(node.get("comment")),
        date=first_present(node, "created", "creation-date") or "",
    )


def _parse_entry(entry: Any) -> StatusEntry:
    node = as_node(entry)
    wc_status = as_node(node.get("wc-status"))

    props = status_char(wc_status.get("props"))
    commit = wc_status.get("commit")
    lock = wc_status.get("lock")

    revision: Optional[int] = None
    author: Optional[str] = None
    date: Optional[str] = None
    if commit is not None:
        commit_node = as_node(commit)
        revision = as_int(commit_node.get("revision"))
        author = as_optional_str(commit_node.get("author"))
        date = as_optional_str(commit_node.get("date"))

    return StatusEntry(
        path=as_str(node.get("path")),
        status=status_char(wc_status.get("item")),
        revision=revision,
        author=author,
        date=date,
        is_directory=False,
        props_status=props if props is not StatusChar.NONE else None,
        lock=_parse_lock(as_node(lock)) if lock is not None else None,
    )


def parse_status(xml_text: str, base_path: str) -> StatusResult:
    """Parse a status report for *base_path*.

    Empty output and reports without a target (older clients omit it for a
    clean working copy) are a legitimate empty result, not an error.

    Raises:
        ParseError: the report is not well-formed XML.
    """
    if not xml_text or not xml_text.strip():
        return StatusResult(path=base_path)

    with parse_guard("status", xml_text):
        tree = parse_tree(xml_text)
        targets = as_list(as_node(tree.get("status")).get("target"))
        if not targets:
            logger.debug("status report has no target element")
            return StatusResult(path=base_path)

        entries: List[StatusEntry] = []
        for target in targets:
            for entry in as_list(as_node(target).get("entry")):
                if entry is None:
                    continue
                entries.append(_parse_entry(entry))

        first = as_node(targets[0])
        revision = as_int(first.get("revision"), 0)
        if revision == 0:
            revision = as_int(as_node(first.get("against")).get("revision"), 0)

        return StatusResult(path=base_path, entries=tuple(entries), revision=revision)
