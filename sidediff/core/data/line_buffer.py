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


from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .span import Span


def split_lines(text: str) -> list[str]:
    """
    Split text into lines the way git counts them.

    Only "\\n" terminates a line, a trailing "\\r" is dropped from each line,
    and a final newline does not produce an extra empty line.
    """
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(frozen=True)
class LineBuffer:
    """
    Immutable, 0-indexed view over the lines of one side of a diff.

    An absent buffer stands for a file that does not exist on that side
    (the before side of an addition, the after side of a deletion). It has
    no lines, like an empty file, but `present` is False.
    """

    lines: tuple[str, ...] = ()
    present: bool = True

    @staticmethod
    def absent() -> "LineBuffer":
        return LineBuffer(lines=(), present=False)

    @staticmethod
    def from_lines(lines: Iterable[str]) -> "LineBuffer":
        return LineBuffer(lines=tuple(lines))

    @staticmethod
    def from_text(text: str | None) -> "LineBuffer":
        if text is None:
            return LineBuffer.absent()
        return LineBuffer(lines=tuple(split_lines(text)))

    @staticmethod
    def from_bytes(data: bytes | None, encoding: str = "utf-8") -> "LineBuffer":
        if data is None:
            return LineBuffer.absent()
        return LineBuffer.from_text(data.decode(encoding, errors="replace"))

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __getitem__(self, index):
        return self.lines[index]

    def __bool__(self) -> bool:
        # an empty-but-present file is still falsy, use `present` for existence
        return bool(self.lines)

    def slice(self, span: Span) -> tuple[str, ...]:
        return self.lines[span.start : span.end]
