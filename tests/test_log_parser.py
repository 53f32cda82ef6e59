"""Tests for the log report extractor."""

import dataclasses

import pytest

from svnkit.svn.errors import ParseError
from svnkit.svn.log_parser import UNKNOWN_AUTHOR, parse_log
from svnkit.svn.models import LogPath, LogResult, PathAction


def _log(*entries: str) -> str:
    return "<log>" + "".join(entries) + "</log>"


class TestOrdering:
    def test_newest_first(self, log_xml):
        result = parse_log(log_xml)
        assert [e.revision for e in result.entries] == [9, 5, 1]

    def test_revision_bounds(self, log_xml):
        result = parse_log(log_xml)
        assert result.start_revision == 1
        assert result.end_revision == 9

    def test_single_entry(self):
        result = parse_log(_log('<logentry revision="3"><author>a</author><msg>m</msg></logentry>'))
        assert len(result.entries) == 1
        assert result.start_revision == result.end_revision == 3


class TestEntryFields:
    def test_full_entry(self, log_xml):
        entry = parse_log(log_xml).entries[1]
        assert entry.revision == 5
        assert entry.author == "alice"
        assert entry.date == "2024-01-05T12:00:00.000000Z"
        assert entry.message == "Rename old.c"
        assert entry.paths == (
            LogPath(action=PathAction.MODIFIED, path="/trunk/README"),
            LogPath(
                action=PathAction.ADDED,
                path="/trunk/new.c",
                copy_from_path="/trunk/old.c",
                copy_from_revision=3,
            ),
        )

    def test_missing_author_defaults(self, log_xml):
        entry = parse_log(log_xml).entries[2]
        assert entry.revision == 1
        assert entry.author == UNKNOWN_AUTHOR == "unknown"
        assert entry.paths == ()

    def test_message_tag_spelling(self, log_xml):
        entry = parse_log(log_xml).entries[0]
        assert entry.message == "Drop temporary branch"
        assert entry.paths[0].action is PathAction.DELETED

    def test_msg_takes_priority(self):
        xml = _log('<logentry revision="1"><msg>first</msg><message>second</message></logentry>')
        assert parse_log(xml).entries[0].message == "first"

    def test_missing_message_is_empty(self):
        xml = _log('<logentry revision="1"><author>a</author></logentry>')
        assert parse_log(xml).entries[0].message == ""

    def test_multiline_message_preserved(self):
        xml = _log('<logentry revision="1"><msg>line one\nline two</msg></logentry>')
        assert parse_log(xml).entries[0].message == "line one\nline two"

    def test_non_numeric_revision(self):
        xml = _log('<logentry revision="abc"><msg>x</msg></logentry>')
        assert parse_log(xml).entries[0].revision == 0


class TestChangedPaths:
    def _paths(self, inner: str):
        xml = _log(f'<logentry revision="1"><paths>{inner}</paths></logentry>')
        return parse_log(xml).entries[0].paths

    def test_missing_action_is_modified(self):
        assert self._paths("<path>/a</path>")[0].action is PathAction.MODIFIED

    def test_unknown_action_is_modified(self):
        assert self._paths('<path action="Q">/a</path>')[0].action is PathAction.MODIFIED

    def test_lowercase_action(self):
        assert self._paths('<path action="r">/a</path>')[0].action is PathAction.REPLACED

    def test_path_attribute_variant(self):
        assert self._paths('<path action="A" path="/from-attr"/>')[0].path == "/from-attr"

    def test_text_wins_over_attribute(self):
        assert self._paths('<path action="A" path="/attr">/text</path>')[0].path == "/text"

    def test_bad_copyfrom_rev(self):
        path = self._paths('<path action="A" copyfrom-path="/x" copyfrom-rev="n/a">/y</path>')[0]
        assert path.copy_from_path == "/x"
        assert path.copy_from_revision is None


class TestEmptyAndMalformed:
    @pytest.mark.parametrize("text", ["", "  \n"])
    def test_blank(self, text):
        assert parse_log(text) == LogResult(entries=(), start_revision=0, end_revision=0)

    def test_no_entries(self):
        assert parse_log("<log/>") == LogResult()

    def test_malformed(self):
        with pytest.raises(ParseError):
            parse_log("<log><logentry revision='1'>")

    def test_entries_are_immutable(self, log_xml):
        result = parse_log(log_xml)
        assert isinstance(result.entries, tuple)
        assert isinstance(result.entries[0].paths, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.entries[0].author = "mallory"  # type: ignore[misc]
