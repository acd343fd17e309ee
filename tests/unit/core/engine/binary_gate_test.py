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

from sidediff.constants import BINARY_SNIFF_BYTES
from sidediff.core.engine.binary_gate import any_binary, is_binary_data


def test_text_is_not_binary():
    assert not is_binary_data(b"hello\nworld\n")


def test_nul_byte_is_binary():
    assert is_binary_data(b"PK\x03\x04\x00\x00")


def test_missing_and_empty_are_not_binary():
    assert not is_binary_data(None)
    assert not is_binary_data(b"")


def test_only_the_first_block_is_inspected():
    assert is_binary_data(b"a" * (BINARY_SNIFF_BYTES - 1) + b"\x00")
    assert not is_binary_data(b"a" * BINARY_SNIFF_BYTES + b"\x00")


def test_any_binary():
    assert any_binary(b"text", b"\x00")
    assert not any_binary(None, b"text")
