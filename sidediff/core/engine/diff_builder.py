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


from collections.abc import Sequence

from loguru import logger

from ..data.file_diff import FileDiff, FileSide, FileStatus
from ..data.hunk import RawHunk
from ..data.line_buffer import LineBuffer
from .assembler import align_hunks, align_matches, compute_alignments
from .binary_gate import is_binary_data
from .hunk_normalizer import normalize_hunks


def _side(path: str | None, buffer: LineBuffer) -> FileSide | None:
    if path is None or not buffer.present:
        return None
    return FileSide(path, buffer)


def build_file_diff(
    before_path: str | None,
    before_data: bytes | None,
    after_path: str | None,
    after_data: bytes | None,
    status: FileStatus = "modified",
    raw_hunks: Sequence[RawHunk] | None = None,
    fallback_line_limit: int | None = None,
    is_binary: bool = False,
) -> FileDiff:
    """
    Build the FileDiff for one file from the raw bytes of both sides.

    Args:
        before_path: Path of the file on the before side, None if added
        before_data: Raw content before the change, None if absent
        after_path: Path of the file on the after side, None if deleted
        after_data: Raw content after the change, None if absent
        status: The change status reported by git
        raw_hunks: 1-indexed hunks from git. None selects content matching.
        fallback_line_limit: Largest side (in lines) content matching is run
            on. Larger files are reported as one changed region.
        is_binary: Set when git already reported the file as binary
    """
    if is_binary or is_binary_data(before_data) or is_binary_data(after_data):
        logger.debug("Binary content, skipping alignment for {path}", path=after_path or before_path)
        return FileDiff(
            before=FileSide(before_path) if before_data is not None and before_path else None,
            after=FileSide(after_path) if after_data is not None and after_path else None,
            status=status,
            is_binary=True,
        )

    before = LineBuffer.from_bytes(before_data)
    after = LineBuffer.from_bytes(after_data)

    if raw_hunks is not None:
        alignments = align_hunks(normalize_hunks(raw_hunks), len(before), len(after))
    elif fallback_line_limit is not None and max(len(before), len(after)) > fallback_line_limit:
        logger.debug(
            "{path} exceeds the content matching limit ({limit} lines), treating it as one change",
            path=after_path or before_path,
            limit=fallback_line_limit,
        )
        alignments = align_matches([], len(before), len(after))
    else:
        alignments = compute_alignments(before.lines, after.lines)

    return FileDiff(
        before=_side(before_path, before),
        after=_side(after_path, after),
        status=status,
        alignments=alignments,
        hunks=list(raw_hunks or []),
    )
