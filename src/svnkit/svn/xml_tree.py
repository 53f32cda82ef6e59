"""Normalize svn XML reports into plain dict/list/str trees.

Attributes and child elements share one key space, so downstream code reads
``entry["path"]`` (attribute) and ``entry["author"]`` (child text) the same
way. Element text is stored under ``#text`` when the element also carries
attributes or children; a bare leaf element collapses to its text.

The svn schema writes a single repeated item as a bare element and several
as siblings. Tags listed in :data:`LIST_TAGS` are therefore always lists, so
callers never have to tell the 0/1/N cases apart.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Union

from lxml import etree

from svnkit.svn.errors import ParseError

TEXT_KEY = "#text"

LIST_TAGS: FrozenSet[str] = frozenset({"entry", "logentry", "path", "paths", "target"})

Node = Union[str, Dict[str, Any]]

# Hardened parser: reports may embed user-controlled paths and messages
_parser = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_blank_text=True,
    huge_tree=True,
)


def _local(tag: str) -> str:
    return etree.QName(tag).localname


def _add_child(node: Dict[str, Any], key: str, value: Node) -> None:
    if key in LIST_TAGS:
        existing = node.get(key)
        if isinstance(existing, list):
            existing.append(value)
        elif existing is None:
            node[key] = [value]
        else:
            node[key] = [existing, value]
        return
    if key not in node:
        node[key] = value
    elif isinstance(node[key], list):
        node[key].append(value)
    else:
        node[key] = [node[key], value]


def _convert(elem: etree._Element) -> Node:
    node: Dict[str, Any] = {_local(k): v for k, v in elem.attrib.items()}
    has_children = False
    for child in elem:
        if not isinstance(child.tag, str):
            continue  # comment or processing instruction
        has_children = True
        _add_child(node, _local(child.tag), _convert(child))

    text = (elem.text or "").strip()
    if not node and not has_children:
        return text
    if text:
        node[TEXT_KEY] = text
    return node


def parse_tree(xml_text: str) -> Dict[str, Any]:
    """Parse *xml_text* and return ``{root_tag: root_node}``.

    Raises:
        ParseError: the text is not well-formed XML. No repair is attempted.
    """
    try:
        root = etree.fromstring(xml_text.encode("utf-8"), _parser)
    except etree.XMLSyntaxError as exc:
        raise ParseError("Malformed XML report", raw_input=xml_text, cause=exc) from exc

    tree: Dict[str, Any] = {}
    _add_child(tree, _local(root.tag), _convert(root))
    return tree
