"""Tests for the list report extractor."""

import pytest

from svnkit.svn.errors import ParseError
from svnkit.svn.list_parser import parse_list
from svnkit.svn.models import ListEntry, ListResult, NodeKind


class TestListing:
    def test_entries(self, list_xml):
        result = parse_list(list_xml, "https://svn.example.com/repo/trunk")
        assert result.path == "https://svn.example.com/repo/trunk"
        assert result.entries == (
            ListEntry(
                name="src",
                path="https://svn.example.com/repo/trunk/src",
                kind=NodeKind.DIR,
                size=None,
                revision=50,
                author="alice",
                date="2024-02-01T00:00:00.000000Z",
            ),
            ListEntry(
                name="README",
                path="https://svn.example.com/repo/trunk/README",
                kind=NodeKind.FILE,
                size=1024,
                revision=12,
                author="bob",
                date="2023-12-24T18:00:00.000000Z",
            ),
        )

    def test_list_path_attribute_wins(self, list_xml):
        assert parse_list(list_xml, "^/trunk").path == "https://svn.example.com/repo/trunk"

    def test_bare_list_root(self):
        xml = '<list path="/r"><entry kind="file"><name>a.txt</name><size>3</size></entry></list>'
        result = parse_list(xml)
        assert result.path == "/r"
        assert result.entries[0].path == "/r/a.txt"
        assert result.entries[0].size == 3

    def test_directory_size_dropped(self):
        xml = '<lists><list path="/r"><entry kind="dir"><name>d</name><size>4096</size></entry></list></lists>'
        assert parse_list(xml).entries[0].size is None

    def test_unknown_kind_is_file(self):
        xml = '<lists><list path="/r"><entry kind="link"><name>l</name></entry></list></lists>'
        assert parse_list(xml).entries[0].kind is NodeKind.FILE

    def test_base_path_used_without_list_path(self):
        xml = "<lists><list><entry kind='file'><name>x</name></entry></list></lists>"
        result = parse_list(xml, "https://h/r/")
        assert result.path == "https://h/r/"
        assert result.entries[0].path == "https://h/r/x"

    def test_missing_commit(self):
        xml = '<lists><list path="/r"><entry kind="file"><name>x</name></entry></list></lists>'
        entry = parse_list(xml).entries[0]
        assert entry.revision == 0
        assert entry.author == ""
        assert entry.date == ""


class TestEmpty:
    def test_blank(self):
        assert parse_list("", "/r") == ListResult(path="/r", entries=())

    def test_empty_list(self):
        assert parse_list('<lists><list path="/r"></list></lists>').entries == ()

    def test_malformed(self):
        with pytest.raises(ParseError):
            parse_list("<lists><list>")
