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
Turns changed regions (git hunks) or unchanged regions (content matches) into
an exhaustive list of alignments.

Both inputs go through the same gap-filling loop. Hunks are changed regions,
so the gaps between them are unchanged context. Matches are unchanged regions,
so the gaps between them are, by elimination, changed.

Regions that run backwards or past the end of a file are clamped rather than
rejected:

* a hunk side starting before the cursor is moved up to the cursor, and both
  sides are capped at the file length;
* a match overlapping the cursor is trimmed by the same amount on both sides
  so it stays a verbatim pairing;
* whatever ends up empty on both sides is skipped.

A gap that should be unchanged context but differs in length between the two
sides (only possible with inconsistent hunks) is emitted as changed.
"""

from collections.abc import Iterable, Sequence

from loguru import logger

from ..data.alignment import Alignment, SourceLines
from ..data.hunk import Hunk
from ..data.match import Match
from ..data.span import Span
from .match_finder import find_matches

Region = Hunk | Match


def _hunk_bounds(
    hunk: Hunk, before_pos: int, after_pos: int, before_len: int, after_len: int
) -> tuple[int, int, int, int] | None:
    b_start = min(max(hunk.old_start, before_pos), before_len)
    b_end = min(max(hunk.old_end, b_start), before_len)
    a_start = min(max(hunk.new_start, after_pos), after_len)
    a_end = min(max(hunk.new_end, a_start), after_len)

    if b_start == b_end and a_start == a_end:
        return None
    return b_start, b_end, a_start, a_end


def _match_bounds(
    match: Match, before_pos: int, after_pos: int, before_len: int, after_len: int
) -> tuple[int, int, int, int] | None:
    overlap = max(before_pos - match.before_start, after_pos - match.after_start, 0)
    b_start = match.before_start + overlap
    a_start = match.after_start + overlap
    length = min(match.length - overlap, before_len - b_start, after_len - a_start)

    if length <= 0:
        return None
    return b_start, b_start + length, a_start, a_start + length


def _append_gap(
    alignments: list[Alignment],
    before_span: Span,
    after_span: Span,
    changed: bool,
) -> None:
    if before_span.is_empty and after_span.is_empty:
        return

    if not changed and len(before_span) != len(after_span):
        logger.debug(
            "Uneven context gap {before} / {after}, marking it changed",
            before=before_span,
            after=after_span,
        )
        changed = True

    alignments.append(Alignment(before_span, after_span, changed))


def assemble_alignments(
    regions: Iterable[Region],
    before_len: int,
    after_len: int,
    *,
    regions_changed: bool,
) -> list[Alignment]:
    """
    Build the alignment list for one file pair.

    Args:
        regions: Hunks or Matches in ascending position order
        before_len: Number of lines in the before file
        after_len: Number of lines in the after file
        regions_changed: True when the regions are changed regions (hunks),
            False when they are unchanged regions (matches)

    Returns:
        Alignments whose before spans cover [0, before_len) and whose after
        spans cover [0, after_len), in order, without gaps or overlaps.
    """
    if before_len == 0 and after_len == 0:
        return []

    alignments: list[Alignment] = []
    before_pos = 0
    after_pos = 0

    for region in regions:
        if isinstance(region, Hunk):
            bounds = _hunk_bounds(region, before_pos, after_pos, before_len, after_len)
        else:
            bounds = _match_bounds(region, before_pos, after_pos, before_len, after_len)

        if bounds is None:
            logger.debug("Skipping empty or out of range region {region}", region=region)
            continue

        b_start, b_end, a_start, a_end = bounds

        _append_gap(
            alignments,
            Span(before_pos, b_start),
            Span(after_pos, a_start),
            changed=not regions_changed,
        )

        source_lines = None
        if isinstance(region, Hunk) and region.source_lines is not None:
            clamped = (b_start, b_end - b_start, a_start, a_end - a_start)
            original = (region.old_start, region.old_len, region.new_start, region.new_len)
            source_lines = (
                region.source_lines
                if clamped == original
                else SourceLines.from_zero_indexed(*clamped)
            )

        alignments.append(
            Alignment(
                Span(b_start, b_end),
                Span(a_start, a_end),
                regions_changed,
                source_lines,
            )
        )

        before_pos, after_pos = b_end, a_end

    # trailing region, or the whole file when there were no usable regions
    _append_gap(
        alignments,
        Span(before_pos, before_len),
        Span(after_pos, after_len),
        changed=not regions_changed,
    )

    return alignments


def align_hunks(
    hunks: Iterable[Hunk], before_len: int, after_len: int
) -> list[Alignment]:
    return assemble_alignments(hunks, before_len, after_len, regions_changed=True)


def align_matches(
    matches: Iterable[Match], before_len: int, after_len: int
) -> list[Alignment]:
    return assemble_alignments(matches, before_len, after_len, regions_changed=False)


def matches_from_alignments(alignments: Iterable[Alignment]) -> list[Match]:
    """Recover the unchanged regions of an alignment list as matches."""
    return [
        Match(a.before.start, a.after.start, len(a.before))
        for a in alignments
        if not a.changed
    ]


def compute_alignments(
    before: Sequence[str],
    after: Sequence[str],
    hunks: Sequence[Hunk] | None = None,
) -> list[Alignment]:
    """
    Align two line sequences.

    Uses the given hunks when available (already normalized, 0-indexed) and
    falls back to content matching otherwise. Note that an empty hunk list
    means "git saw no change", which is different from None.
    """
    if hunks is not None:
        return align_hunks(hunks, len(before), len(after))

    matches = find_matches(before, after)
    logger.debug(
        "Content matching found {count} runs over {before_len}/{after_len} lines",
        count=len(matches),
        before_len=len(before),
        after_len=len(after),
    )
    return align_matches(matches, len(before), len(after))
