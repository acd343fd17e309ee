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
Row mapping between the two panes of a side-by-side view.

Unchanged regions map 1:1. Inside a changed region the row is mapped
proportionally and clamped to the target region, so scrolling through a large
deletion keeps the other pane parked on the (possibly empty) replacement.
"""

from collections.abc import Sequence
from typing import Literal

from ..data.alignment import Alignment

Side = Literal["before", "after"]


def other_side(side: Side) -> Side:
    return "after" if side == "before" else "before"


def find_alignment(
    row: int, alignments: Sequence[Alignment], side: Side
) -> Alignment | None:
    """Find the alignment containing `row` on `side`, or the last one past the end."""
    for alignment in alignments:
        if row < alignment.span(side).end:
            return alignment
    return alignments[-1] if alignments else None


def transfer_row(row: int, alignment: Alignment, side: Side) -> int:
    source = alignment.span(side)
    target = alignment.span(other_side(side))

    if row == source.start:
        return target.start
    if row == source.end:
        return target.end
    if row > source.end:
        return row - source.end + target.end

    if source.is_empty or target.is_empty:
        return target.start

    offset = (row - source.start) * len(target) // len(source)
    return min(target.start + offset, target.end - 1)


def map_row(row: int, alignments: Sequence[Alignment], side: Side) -> int | None:
    alignment = find_alignment(row, alignments, side)
    if alignment is None:
        return None
    return transfer_row(row, alignment, side)
