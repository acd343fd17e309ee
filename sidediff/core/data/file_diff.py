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


from dataclasses import dataclass, field
from typing import Literal

from .alignment import Alignment
from .hunk import RawHunk
from .line_buffer import LineBuffer

ChangeKind = Literal["added", "modified", "deleted"]
FileStatus = Literal["added", "modified", "deleted", "renamed", "untracked"]


@dataclass(frozen=True)
class FileSide:
    path: str
    buffer: LineBuffer = field(default_factory=LineBuffer)


@dataclass(frozen=True)
class FileChange:
    """
    One file entry of a git diff, with its hunks fully collected.

    Paths are None on the side where the file does not exist.
    """

    old_path: str | None
    new_path: str | None
    status: FileStatus
    hunks: list[RawHunk] = field(default_factory=list)
    is_binary: bool = False

    @property
    def canonical_path(self) -> str:
        return self.new_path if self.new_path is not None else self.old_path


@dataclass(frozen=True)
class FileDiff:
    """
    The diff of a single file, ready for side-by-side display.

    Attributes:
        before: The file before the change, None if it was added
        after: The file after the change, None if it was deleted
        status: What git reported for this file
        is_binary: True if either side looked like binary content
        alignments: Exhaustive region mapping between before and after
        hunks: The raw git hunks the alignments were built from, if any
    """

    before: FileSide | None
    after: FileSide | None
    status: FileStatus
    is_binary: bool = False
    alignments: list[Alignment] = field(default_factory=list)
    hunks: list[RawHunk] = field(default_factory=list)

    @property
    def path(self) -> str:
        if self.after is not None:
            return self.after.path
        if self.before is not None:
            return self.before.path
        return ""

    @property
    def change_kind(self) -> ChangeKind:
        if self.before is None and self.after is not None:
            return "added"
        if self.before is not None and self.after is None:
            return "deleted"
        return "modified"

    @property
    def is_rename(self) -> bool:
        if self.before is None or self.after is None:
            return False
        return self.before.path != self.after.path

    @property
    def changed_alignments(self) -> list[Alignment]:
        return [a for a in self.alignments if a.changed]
