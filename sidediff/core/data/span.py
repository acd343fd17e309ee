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


@dataclass(frozen=True)
class Span:
    """
    A contiguous range of lines, 0-indexed with an exclusive end.

    Attributes:
        start: First line index covered by the span
        end: One past the last line index covered by the span
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"Span start must be non-negative, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"Span end {self.end} precedes start {self.start}")

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end == self.start

    def contains(self, row: int) -> bool:
        return self.start <= row < self.end

    def __repr__(self) -> str:
        return f"[{self.start},{self.end})"
