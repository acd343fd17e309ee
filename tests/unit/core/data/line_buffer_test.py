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

import pytest

from sidediff.core.data.line_buffer import LineBuffer, split_lines
from sidediff.core.data.span import Span

# -----------------------------------------------------------------------------
# split_lines
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\nb", ["a", "b"]),
        ("a\nb\n", ["a", "b"]),
        ("a\n\n", ["a", ""]),
        ("\n", [""]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\rb\n", ["a\rb"]),
    ],
)
def test_split_lines(text, expected):
    assert split_lines(text) == expected


# -----------------------------------------------------------------------------
# LineBuffer
# -----------------------------------------------------------------------------


def test_absent_buffer_has_no_lines():
    buffer = LineBuffer.absent()
    assert not buffer.present
    assert len(buffer) == 0


def test_empty_text_is_present_but_empty():
    buffer = LineBuffer.from_text("")
    assert buffer.present
    assert len(buffer) == 0
    assert not buffer


def test_from_text_none_is_absent():
    assert LineBuffer.from_text(None) == LineBuffer.absent()


def test_from_bytes_decodes_with_replacement():
    buffer = LineBuffer.from_bytes(b"ok\n\xff\xfe bad\n")
    assert buffer[0] == "ok"
    assert "�" in buffer[1]


def test_from_bytes_none_is_absent():
    assert not LineBuffer.from_bytes(None).present


def test_slice_and_indexing():
    buffer = LineBuffer.from_lines(["a", "b", "c", "d"])
    assert buffer.slice(Span(1, 3)) == ("b", "c")
    assert buffer.slice(Span(2, 2)) == ()
    assert list(buffer) == ["a", "b", "c", "d"]
    assert buffer[-1] == "d"
