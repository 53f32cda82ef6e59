"""Parse ``svn info --xml`` into an InfoResult."""

from __future__ import annotations

from svnkit.svn.convert import (
    as_enum,
    as_int,
    as_list,
    as_node,
    as_str,
    first_present,
)
from svnkit.svn.errors import EmptyInputError, parse_guard
from svnkit.svn.models import InfoResult, NodeKind
from svnkit.svn.xml_tree import parse_tree

# Current clients write wcroot-abspath; the hyphenated spelling is accepted too
WC_ROOT_TAGS = ("wcroot-abspath", "wc-root-abspath")


def parse_info(xml_text: str) -> InfoResult:
    """Describe the single node reported by ``svn info``.

    There is no meaningful empty node descriptor, so empty output or a report
    without an entry is an error. Unknown node kinds are treated as ``dir``.
    When several targets were queried, the first entry is described.

    Raises:
        EmptyInputError: the report is empty or has no info entry.
        ParseError: the report is not well-formed XML.
    """
    if not xml_text or not xml_text.strip():
        raise EmptyInputError("Empty XML input for svn info", raw_input=xml_text or "")

    with parse_guard("info", xml_text):
        tree = parse_tree(xml_text)
        if "info" not in tree:
            raise EmptyInputError("No info element found in XML", raw_input=xml_text)

        info = as_node(tree["info"])
        entries = as_list(info.get("entry"))
        if not entries:
            raise EmptyInputError("No entry element found in svn info XML", raw_input=xml_text)

        entry = as_node(entries[0])
        repository = as_node(entry.get("repository"))
        commit = as_node(entry.get("commit"))
        wc_info = as_node(entry.get("wc-info"))

        return InfoResult(
            path=as_str(entry.get("path")),
            url=first_present(entry, "url") or as_str(repository.get("url")),
            repository_root=as_str(repository.get("root")),
            repository_uuid=as_str(repository.get("uuid")),
            revision=as_int(entry.get("revision")),
            node_kind=as_enum(entry.get("kind"), NodeKind, NodeKind.DIR),
            last_changed_author=as_str(commit.get("author")),
            last_changed_revision=as_int(commit.get("revision")),
            last_changed_date=as_str(commit.get("date")),
            working_copy_root=(
                first_present(wc_info, *WC_ROOT_TAGS)
                or first_present(info, *WC_ROOT_TAGS)
            ),
        )
