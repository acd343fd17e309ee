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

from unittest.mock import Mock

import pytest

from sidediff.core.file_reader.git_file_reader import GitFileReader


@pytest.fixture
def mock_git(tmp_path):
    git = Mock()
    git.repo_path = tmp_path
    return git


def test_read_blob(mock_git):
    mock_git.run_git_text_out.return_value = "blob\n"
    mock_git.run_git_binary_out.return_value = b"content\n"

    reader = GitFileReader(mock_git)

    assert reader.read_bytes("src/a.py", "HEAD") == b"content\n"
    mock_git.run_git_text_out.assert_called_once_with(["cat-file", "-t", "HEAD:src/a.py"])
    mock_git.run_git_binary_out.assert_called_once_with(["cat-file", "blob", "HEAD:src/a.py"])


def test_read_path_normalization(mock_git):
    mock_git.run_git_text_out.return_value = "blob\n"
    mock_git.run_git_binary_out.return_value = b""

    GitFileReader(mock_git).read_bytes("path\\to\\file.txt", "abc123")

    mock_git.run_git_binary_out.assert_called_once_with(
        ["cat-file", "blob", "abc123:path/to/file.txt"]
    )


def test_missing_object_reads_as_none(mock_git):
    mock_git.run_git_text_out.return_value = None
    assert GitFileReader(mock_git).read_bytes("missing.txt", "HEAD") is None
    mock_git.run_git_binary_out.assert_not_called()


@pytest.mark.parametrize("obj_type", ["tree\n", "commit\n"])
def test_directories_and_submodules_read_as_none(mock_git, obj_type):
    mock_git.run_git_text_out.return_value = obj_type
    assert GitFileReader(mock_git).read_bytes("vendor/lib", "HEAD") is None


def test_working_tree_reads_from_disk(mock_git, tmp_path):
    (tmp_path / "notes.txt").write_bytes(b"hello\n")
    (tmp_path / "subdir").mkdir()

    reader = GitFileReader(mock_git)

    assert reader.read_bytes("notes.txt", "@") == b"hello\n"
    assert reader.read_bytes("subdir", "@") is None
    assert reader.read_bytes("absent.txt", "@") is None
    assert reader.read_text("notes.txt", "@") == "hello\n"
    mock_git.run_git_binary_out.assert_not_called()


def test_exists(mock_git, tmp_path):
    (tmp_path / "subdir").mkdir()
    reader = GitFileReader(mock_git)

    assert reader.exists("subdir", "@")
    assert not reader.exists("nothing", "@")

    mock_git.run_git_text_out.return_value = ""
    assert reader.exists("src", "HEAD")
    mock_git.run_git_text_out.assert_called_with(["cat-file", "-e", "HEAD:src"])
