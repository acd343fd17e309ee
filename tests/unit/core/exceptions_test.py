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
import typer

from sidediff.core.exceptions import (
    GitError,
    InvalidRefError,
    NotFoundError,
    ValidationError,
    file_read_failed,
    handle_sidediff_exception,
    invalid_ref,
    path_not_found,
    sidediffError,
)


def test_hierarchy():
    assert issubclass(InvalidRefError, GitError)
    assert issubclass(NotFoundError, ValidationError)
    assert issubclass(GitError, sidediffError)


def test_invalid_ref_message():
    err = invalid_ref("nope")
    assert isinstance(err, InvalidRefError)
    assert "nope" in err.message
    assert err.details


def test_path_not_found_mentions_both_refs():
    err = path_not_found("a.txt", "HEAD", "@")
    assert err.message == "File 'a.txt' not found in either HEAD or @"


def test_file_read_failed_keeps_reason():
    err = file_read_failed("a.txt", "Permission denied")
    assert err.details == "Permission denied"


def test_handler_exits_with_status_one():
    @handle_sidediff_exception
    def command():
        raise invalid_ref("bad")

    with pytest.raises(typer.Exit) as exc_info:
        command()
    assert exc_info.value.exit_code == 1


def test_handler_passes_through_results_and_other_errors():
    @handle_sidediff_exception
    def ok():
        return 42

    @handle_sidediff_exception
    def boom():
        raise RuntimeError("unexpected")

    assert ok() == 42
    with pytest.raises(RuntimeError):
        boom()
