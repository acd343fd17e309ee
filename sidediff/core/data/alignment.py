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


from dataclasses import dataclass

from .span import Span


@dataclass(frozen=True)
class SourceLines:
    """
    Original 1-indexed, inclusive line numbers of a changed region, as git
    reported them. A side is None when the change is empty on that side.
    """

    old_start: int | None = None
    old_end: int | None = None
    new_start: int | None = None
    new_end: int | None = None

    @staticmethod
    def from_zero_indexed(
        old_start: int, old_len: int, new_start: int, new_len: int
    ) -> "SourceLines":
        return SourceLines(
            old_start=old_start + 1 if old_len else None,
            old_end=old_start + old_len if old_len else None,
            new_start=new_start + 1 if new_len else None,
            new_end=new_start + new_len if new_len else None,
        )


@dataclass(frozen=True)
class Alignment:
    """
    Pairs a region of the before file with a region of the after file.

    A full alignment list partitions both files: every line belongs to exactly
    one alignment. Unchanged alignments have identical content on both sides.
    """

    before: Span
    after: Span
    # True if the region's content differs between before and after
    changed: bool
    # only present on changed regions that came from git hunks
    source_lines: SourceLines | None = None

    @property
    def is_insertion(self) -> bool:
        return self.before.is_empty and not self.after.is_empty

    @property
    def is_deletion(self) -> bool:
        return self.after.is_empty and not self.before.is_empty

    def span(self, side: str) -> Span:
        if side == "before":
            return self.before
        if side == "after":
            return self.after
        raise ValueError(f"Unknown side: {side}")
