# -----------------------------------------------------------------------------
# sidediff - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of sidediff.
#
# sidediff is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------

import json

import pytest
from rich.console import Console

from sidediff.core.data.hunk import RawHunk
from sidediff.core.data.span import Span
from sidediff.core.engine.diff_builder import build_file_diff
from sidediff.core.ui.diff_view import (
    file_diffs_to_json,
    format_span,
    print_file_diffs,
)


def make_diff():
    return build_file_diff(
        "a.txt",
        b"a\nb\nX\nc\n",
        "a.txt",
        b"a\nb\nY\nc\n",
        raw_hunks=[RawHunk(3, 1, 3, 1)],
    )


def test_format_span():
    assert format_span(Span(0, 0)) == "-"
    assert format_span(Span(2, 3)) == "3"
    assert format_span(Span(2, 5)) == "3-5"


def test_json_output():
    data = json.loads(file_diffs_to_json([make_diff()]))

    assert len(data) == 1
    entry = data[0]
    assert entry["status"] == "modified"
    assert entry["before"]["path"] == "a.txt"
    assert [a["changed"] for a in entry["alignments"]] == [False, True, False]
    assert entry["alignments"][1]["before"] == {"start": 2, "end": 3}
    assert entry["alignments"][1]["source_lines"]["old_start"] == 3


def test_print_file_diffs():
    console = Console(record=True, width=120)
    print_file_diffs([make_diff()], console)

    text = console.export_text()
    assert "a.txt" in text
    assert "2 unchanged lines" in text
    assert "X" in text and "Y" in text
    assert "1 files, 1 changed regions" in text


def test_print_no_changes():
    console = Console(record=True, width=80)
    print_file_diffs([], console)
    assert "No changes." in console.export_text()


def test_print_binary_file():
    console = Console(record=True, width=80)
    diff = build_file_diff("img.png", b"\x00", "img.png", b"\x00\x01")
    print_file_diffs([diff], console)
    assert "binary" in console.export_text()


@pytest.mark.parametrize("line", ["close[/]", "arr[red]", "[bold]x[/bold]"])
def test_print_shows_bracketed_lines_verbatim(line):
    file_diff = build_file_diff("a.py", b"x = 1\n", "a.py", line.encode() + b"\n")
    console = Console(record=True, width=120)
    print_file_diffs([file_diff], console)

    assert line in console.export_text()
