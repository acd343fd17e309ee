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

from ..data.alignment import Alignment


def alignments_exhaustive(
    alignments: Sequence[Alignment], before_len: int, after_len: int
) -> bool:
    """
    Returns True if the alignments partition both files.

    Exhaustive is defined per side:
    1. The before spans, in order, start at 0, each one starting where the
       previous ended, and the last one ends at before_len.
    2. The same holds for the after spans and after_len.

    An empty list is only exhaustive for two empty files.
    """

    def _covers(spans, total: int) -> bool:
        expected = 0
        for span in spans:
            if span.start != expected:
                return False
            expected = span.end
        return expected == total

    return _covers((a.before for a in alignments), before_len) and _covers(
        (a.after for a in alignments), after_len
    )


def unchanged_regions_verbatim(
    alignments: Sequence[Alignment],
    before: Sequence[str],
    after: Sequence[str],
) -> bool:
    """Returns True if every unchanged alignment pairs identical lines."""
    for alignment in alignments:
        if alignment.changed:
            continue

        if len(alignment.before) != len(alignment.after):
            return False

        before_lines = before[alignment.before.start : alignment.before.end]
        after_lines = after[alignment.after.start : alignment.after.end]
        if list(before_lines) != list(after_lines):
            return False

    return True


def alignments_valid(
    alignments: Sequence[Alignment],
    before: Sequence[str],
    after: Sequence[str],
) -> bool:
    return alignments_exhaustive(
        alignments, len(before), len(after)
    ) and unchanged_regions_verbatim(alignments, before, after)
