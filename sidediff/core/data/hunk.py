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

from .alignment import SourceLines


@dataclass(frozen=True)
class RawHunk:
    # Exactly as git prints it in "@@ -old_start,old_len +new_start,new_len @@".
    # Starts are 1-indexed; a start of 0 anchors an empty file.
    old_start: int
    old_len: int
    new_start: int
    new_len: int

    @property
    def header(self) -> str:
        return f"@@ -{self.old_start},{self.old_len} +{self.new_start},{self.new_len} @@"


@dataclass(frozen=True)
class Hunk:
    """
    A changed region reported by git, in 0-indexed coordinates.

    `old_start + old_len` is the exclusive end in the before file and
    `new_start + new_len` the exclusive end in the after file. Lines between
    two hunks are implicitly unchanged.
    """

    old_start: int
    old_len: int
    new_start: int
    new_len: int
    source_lines: SourceLines | None = None

    @property
    def old_end(self) -> int:
        return self.old_start + self.old_len

    @property
    def new_end(self) -> int:
        return self.new_start + self.new_len

    @staticmethod
    def create_addition(line_count: int) -> "Hunk":
        return Hunk(
            old_start=0,
            old_len=0,
            new_start=0,
            new_len=line_count,
            source_lines=SourceLines.from_zero_indexed(0, 0, 0, line_count),
        )

    @staticmethod
    def create_deletion(line_count: int) -> "Hunk":
        return Hunk(
            old_start=0,
            old_len=line_count,
            new_start=0,
            new_len=0,
            source_lines=SourceLines.from_zero_indexed(0, line_count, 0, 0),
        )
