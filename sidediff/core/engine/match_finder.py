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
Content-matching fallback used when git hunk data is not available.

The search is greedy: each before line claims the leftmost unused occurrence
of the same content in the after file and the run is extended as far as the
two files agree. This gives stable results for localized edits but is not a
minimal edit script.

Cost is O(n * k) where k is the average number of occurrences of a line. Files
made mostly of one repeated line degrade toward O(n^2); callers are expected
to bound the input size (see the fallback_line_limit setting).
"""

from collections import defaultdict
from collections.abc import Sequence

from ..data.match import Match


def build_line_index(lines: Sequence[str]) -> dict[str, list[int]]:
    """Map each line's content to the ascending positions where it occurs."""
    index: dict[str, list[int]] = defaultdict(list)
    for pos, line in enumerate(lines):
        index[line].append(pos)
    return index


def _first_unused(positions: list[int], used: list[bool], cursors: dict, key: str):
    # claims are never released: every position left of the cursor is used
    i = cursors.get(key, 0)
    while i < len(positions) and used[positions[i]]:
        i += 1
    cursors[key] = i
    return positions[i] if i < len(positions) else None


def find_matches(before: Sequence[str], after: Sequence[str]) -> list[Match]:
    """
    Find disjoint runs of identical lines between two line sequences.

    Returns matches ordered by before_start. No two matches share a line on
    either side, but a later match may point to an earlier region of the
    after file than a previous one.
    """
    index = build_line_index(after)
    used = [False] * len(after)
    cursors: dict[str, int] = {}
    matches: list[Match] = []

    pos = 0
    while pos < len(before):
        positions = index.get(before[pos])
        start = (
            _first_unused(positions, used, cursors, before[pos]) if positions else None
        )

        if start is None:
            pos += 1
            continue

        length = 0
        while (
            pos + length < len(before)
            and start + length < len(after)
            and not used[start + length]
            and before[pos + length] == after[start + length]
        ):
            used[start + length] = True
            length += 1

        matches.append(Match(pos, start, length))
        pos += length

    return matches
