"""Shared test fixtures — sample svn reports and a fake runner."""

from __future__ import annotations

import os
import textwrap
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pytest


class FakeRunner:
    """CommandRunner double: records calls, replies with canned output.

    *replies* maps the svn subcommand (first argument) to stdout, or to an
    exception instance to raise.
    """

    def __init__(self, replies: Optional[Dict[str, Union[str, Exception]]] = None) -> None:
        self.replies = replies or {}
        self.calls: List[List[str]] = []
        self.working_dirs: List[Optional[Union[str, Path]]] = []

    def run(self, args: Sequence[str], working_dir: Optional[Union[str, Path]] = None) -> str:
        self.calls.append(list(args))
        self.working_dirs.append(working_dir)
        reply = self.replies.get(args[0], "")
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture(autouse=True)
def _clean_svnkit_env(monkeypatch):
    """Keep SVNKIT_* variables from the host environment out of tests."""
    for name in list(os.environ):
        if name.startswith("SVNKIT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def status_xml_single() -> str:
    """A status report with one entry, no commit node."""
    return textwrap.dedent("""\
        <?xml version="1.0" encoding="UTF-8"?>
        <status>
        <target path=".">
        <entry path="notes.txt">
        <wc-status item="unversioned" props="none">
        </wc-status>
        </entry>
        </target>
        </status>
    """)


@pytest.fixture
def status_xml_mixed() -> str:
    """Status report with modified, added, locked and out-of-set entries."""
    return textwrap.dedent("""\
        <?xml version="1.0" encoding="UTF-8"?>
        <status>
        <target path="/work/wc">
        <entry path="/work/wc/src/main.c">
        <wc-status item="modified" props="modified" revision="42">
        <commit revision="40">
        <author>alice</author>
        <date>2024-03-01T10:00:00.000000Z</date>
        </commit>
        <lock>
        <token>opaquelocktoken:1234</token>
        <owner>bob</owner>
        <comment>editing</comment>
        <created>2024-03-02T09:00:00.000000Z</created>
        </lock>
        </wc-status>
        </entry>
        <entry path="/work/wc/src/new.c">
        <wc-status item="added" props="none" revision="-1">
        </wc-status>
        </entry>
        <entry path="/work/wc/weird.bin">
        <wc-status item="Z" props="Q">
        </wc-status>
        </entry>
        <against revision="57"/>
        </target>
        </status>
    """)


@pytest.fixture
def log_xml() -> str:
    """Three log entries, out of order: revisions 5, 1, 9."""
    return textwrap.dedent("""\
        <?xml version="1.0" encoding="UTF-8"?>
        <log>
        <logentry revision="5">
        <author>alice</author>
        <date>2024-01-05T12:00:00.000000Z</date>
        <paths>
        <path action="M" kind="file" text-mods="true" prop-mods="false">/trunk/README</path>
        <path action="A" kind="file" copyfrom-path="/trunk/old.c" copyfrom-rev="3">/trunk/new.c</path>
        </paths>
        <msg>Rename old.c</msg>
        </logentry>
        <logentry revision="1">
        <date>2024-01-01T00:00:00.000000Z</date>
        <msg>Initial import</msg>
        </logentry>
        <logentry revision="9">
        <author>carol</author>
        <date>2024-01-09T08:30:00.000000Z</date>
        <paths>
        <path action="D" kind="dir">/branches/tmp</path>
        </paths>
        <message>Drop temporary branch</message>
        </logentry>
        </log>
    """)


@pytest.fixture
def info_xml() -> str:
    return textwrap.dedent("""\
        <?xml version="1.0" encoding="UTF-8"?>
        <info>
        <entry kind="dir" path="." revision="57">
        <url>https://svn.example.com/repo/trunk</url>
        <relative-url>^/trunk</relative-url>
        <repository>
        <root>https://svn.example.com/repo</root>
        <uuid>13f79535-47bb-0310-9956-ffa450edef68</uuid>
        </repository>
        <wc-info>
        <wcroot-abspath>/work/wc</wcroot-abspath>
        <schedule>normal</schedule>
        <depth>infinity</depth>
        </wc-info>
        <commit revision="55">
        <author>alice</author>
        <date>2024-03-01T10:00:00.000000Z</date>
        </commit>
        </entry>
        </info>
    """)


@pytest.fixture
def list_xml() -> str:
    return textwrap.dedent("""\
        <?xml version="1.0" encoding="UTF-8"?>
        <lists>
        <list path="https://svn.example.com/repo/trunk">
        <entry kind="dir">
        <name>src</name>
        <commit revision="50">
        <author>alice</author>
        <date>2024-02-01T00:00:00.000000Z</date>
        </commit>
        </entry>
        <entry kind="file">
        <name>README</name>
        <size>1024</size>
        <commit revision="12">
        <author>bob</author>
        <date>2023-12-24T18:00:00.000000Z</date>
        </commit>
        </entry>
        </list>
        </lists>
    """)


@pytest.fixture
def make_runner():
    """Factory for a FakeRunner with canned replies."""
    return FakeRunner
