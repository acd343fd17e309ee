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

from sidediff.core.file_reader.disk_file_reader import DiskFileReader


def test_reads_relative_to_root(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"x\n")
    reader = DiskFileReader(tmp_path)

    assert reader.read_bytes("a.txt") == b"x\n"
    assert reader.read_bytes("b.txt") is None


def test_directories_read_as_none(tmp_path):
    (tmp_path / "dir").mkdir()
    assert DiskFileReader(tmp_path).read_bytes("dir") is None


def test_absolute_paths(tmp_path):
    target = tmp_path / "abs.txt"
    target.write_bytes(b"abs")
    assert DiskFileReader().read_bytes(str(target)) == b"abs"


def test_exists(tmp_path):
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "a.txt").write_text("x\n")
    reader = DiskFileReader(tmp_path)

    assert reader.exists("pkg")
    assert reader.exists("pkg/a.txt")
    assert not reader.exists("missing.txt")
