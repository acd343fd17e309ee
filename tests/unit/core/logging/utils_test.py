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
from loguru import logger

from sidediff.core.data.alignment import Alignment
from sidediff.core.data.file_diff import FileDiff, FileSide
from sidediff.core.data.span import Span
from sidediff.core.logging.utils import log_alignments, log_file_diffs, time_block


@pytest.fixture
def messages():
    captured = []
    handler_id = logger.add(lambda m: captured.append(m.record["message"]), level="DEBUG")
    yield captured
    logger.remove(handler_id)


def test_time_block_logs_start_and_finish(messages):
    with time_block("alignment"):
        pass

    assert messages[0] == "Starting alignment"
    assert messages[1].startswith("Finished alignment. Timing(ms)=")


def test_time_block_logs_even_on_error(messages):
    with pytest.raises(RuntimeError):
        with time_block("failing"):
            raise RuntimeError("boom")

    assert messages[-1].startswith("Finished failing.")


def test_log_alignments_counts_changed(messages):
    alignments = [
        Alignment(Span(0, 1), Span(0, 1), False),
        Alignment(Span(1, 2), Span(1, 3), True),
    ]
    log_alignments("Built", "a.txt", alignments)

    assert messages == ["Built: path=a.txt alignments=2 changed=1"]


def test_log_file_diffs_counts_binary(messages):
    diffs = [
        FileDiff(FileSide("a.bin"), FileSide("a.bin"), "modified", is_binary=True),
        FileDiff(
            None,
            FileSide("b.txt"),
            "added",
            alignments=[Alignment(Span(0, 0), Span(0, 1), True)],
        ),
    ]
    log_file_diffs("Pipeline", diffs)

    assert messages == ["Pipeline: files=2 binary=1 alignments=1"]
