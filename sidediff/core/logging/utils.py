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


import contextlib
from collections.abc import Sequence
from time import perf_counter

from loguru import logger

from ..data.alignment import Alignment
from ..data.file_diff import FileDiff


@contextlib.contextmanager
def time_block(block_name: str):
    """
    A context manager to time the execution of a code block and log the result.
    """

    logger.debug(f"Starting {block_name}")
    start_time = perf_counter()

    try:
        yield
    finally:
        duration_ms = int((perf_counter() - start_time) * 1000)
        logger.debug(f"Finished {block_name}. Timing(ms)={duration_ms}")


def log_alignments(process_step: str, path: str, alignments: Sequence[Alignment]):
    changed = sum(1 for a in alignments if a.changed)

    logger.debug(
        "{process_step}: path={path} alignments={count} changed={changed}",
        process_step=process_step,
        path=path,
        count=len(alignments),
        changed=changed,
    )


def log_file_diffs(process_step: str, file_diffs: Sequence[FileDiff]):
    binary = sum(1 for d in file_diffs if d.is_binary)

    logger.debug(
        "{process_step}: files={count} binary={binary} alignments={alignments}",
        process_step=process_step,
        count=len(file_diffs),
        binary=binary,
        alignments=sum(len(d.alignments) for d in file_diffs),
    )
