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


"""
Conversion of git's hunk records into the engine's 0-indexed Hunk values.

git prints hunk headers as "@@ -a,b +c,d @@" with 1-indexed starts. Two
conventions need care:

* a start of 0 anchors an empty file ("@@ -0,0 +1,3 @@") and maps to 0;
* when one side of a hunk is empty (b or d is 0), its start names the line
  *after which* the change sits, so the 0-indexed position is the start
  itself rather than start - 1.
"""

from collections.abc import Iterable

from loguru import logger

from ..data.alignment import SourceLines
from ..data.hunk import Hunk, RawHunk


def to_zero_indexed(start: int, length: int) -> int:
    if start <= 0:
        return 0
    if length == 0:
        return start
    return start - 1


def normalize_hunk(raw: RawHunk) -> Hunk:
    old_start = to_zero_indexed(raw.old_start, raw.old_len)
    new_start = to_zero_indexed(raw.new_start, raw.new_len)
    old_len = max(raw.old_len, 0)
    new_len = max(raw.new_len, 0)

    return Hunk(
        old_start=old_start,
        old_len=old_len,
        new_start=new_start,
        new_len=new_len,
        source_lines=SourceLines.from_zero_indexed(
            old_start, old_len, new_start, new_len
        ),
    )


def normalize_hunks(raw_hunks: Iterable[RawHunk]) -> list[Hunk]:
    """
    Convert raw git hunks to 0-indexed Hunks ordered by position.

    Hunks are neither merged nor deduplicated. Overlapping input is a caller
    contract violation; it is logged here and clamped by the assembler.
    """
    hunks = sorted(
        (normalize_hunk(raw) for raw in raw_hunks),
        key=lambda h: (h.old_start, h.new_start),
    )

    for prev, cur in zip(hunks, hunks[1:]):
        if cur.old_start < prev.old_end or cur.new_start < prev.new_end:
            logger.debug(
                "Overlapping hunks: {prev} then {cur}",
                prev=prev,
                cur=cur,
            )

    return hunks
