"""Parse ``svn list --xml -v`` into a ListResult."""

from __future__ import annotations

from typing import Any, List

from svnkit.svn.convert import (
    as_enum,
    as_int,
    as_list,
    as_node,
    as_optional_int,
    as_str,
    first_present,
)
from svnkit.svn.errors import parse_guard
from svnkit.svn.models import ListEntry, ListResult, NodeKind
from svnkit.svn.xml_tree import parse_tree


def _join(base: str, name: str) -> str:
    name = name.rstrip("/")
    if not base:
        return name
    return f"{base.rstrip('/')}/{name}"


def _parse_entry(entry: Any, base: str) -> ListEntry:
    node = as_node(entry)
    commit = as_node(node.get("commit"))
    name = as_str(node.get("name"))
    kind = as_enum(node.get("kind"), NodeKind, NodeKind.FILE)
    return ListEntry(
        name=name,
        path=first_present(node, "path") or _join(base, name),
        kind=kind,
        size=as_optional_int(node.get("size")) if kind is NodeKind.FILE else None,
        revision=as_int(commit.get("revision")),
        author=as_str(commit.get("author")),
        date=as_str(commit.get("date")),
    )


def parse_list(xml_text: str, base_path: str = "") -> ListResult:
    """Parse a repository listing of *base_path*.

    Current clients wrap each ``<list>`` in a ``<lists>`` root; a bare
    ``<list>`` root is accepted too.

    Raises:
        ParseError: the report is not well-formed XML.
    """
    if not xml_text or not xml_text.strip():
        return ListResult(path=base_path)

    with parse_guard("list", xml_text):
        tree = parse_tree(xml_text)
        if "lists" in tree:
            lists = as_list(as_node(tree["lists"]).get("list"))
        else:
            lists = as_list(tree.get("list"))
        if not lists:
            return ListResult(path=base_path)

        path = first_present(as_node(lists[0]), "path") or base_path
        entries: List[ListEntry] = []
        for listing in lists:
            node = as_node(listing)
            base = first_present(node, "path") or base_path
            for entry in as_list(node.get("entry")):
                if entry is None:
                    continue
                entries.append(_parse_entry(entry, base))

        return ListResult(path=path, entries=tuple(entries))
