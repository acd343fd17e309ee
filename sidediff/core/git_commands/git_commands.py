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


import re
from dataclasses import dataclass, field
from typing import Literal

from loguru import logger

from sidediff.constants import SHORT_SHA_LEN, WORKING_TREE_REF

from ..data.file_diff import FileChange, FileStatus
from ..data.hunk import RawHunk
from ..exceptions import GitError, ValidationError, invalid_ref, not_git_repository
from ..git_interface.interface import GitInterface

RefType = Literal["branch", "tag", "special"]


@dataclass(frozen=True)
class GitRef:
    name: str
    ref_type: RefType


@dataclass
class _FileBlock:
    # mutable accumulator for one "diff --git" block while parsing
    old_path: str | None = None
    new_path: str | None = None
    status: FileStatus = "modified"
    is_binary: bool = False
    hunks: list[RawHunk] = field(default_factory=list)

    def freeze(self) -> FileChange:
        return FileChange(
            old_path=self.old_path,
            new_path=self.new_path,
            status=self.status,
            hunks=list(self.hunks),
            is_binary=self.is_binary,
        )


_C_ESCAPES = {
    b"a": b"\a",
    b"b": b"\b",
    b"t": b"\t",
    b"n": b"\n",
    b"v": b"\v",
    b"f": b"\f",
    b"r": b"\r",
    b'"': b'"',
    b"\\": b"\\",
}
_C_ESCAPE_RE = re.compile(rb"\\([0-7]{3}|.)", re.DOTALL)


def _unescape_c(m: re.Match) -> bytes:
    code = m.group(1)
    if len(code) == 3:
        return bytes([int(code, 8) & 0xFF])
    return _C_ESCAPES.get(code, code)


def _decode_path(raw: bytes, prefix: bytes = b"") -> str:
    """
    Decode a path as git prints it in diff headers.

    Paths holding quotes, backslashes or control characters are C-quoted by
    git even with core.quotePath=false; those are unescaped before the a/ or
    b/ prefix is removed.
    """
    raw = raw.rstrip(b"\t")
    if len(raw) >= 2 and raw.startswith(b'"') and raw.endswith(b'"'):
        raw = _C_ESCAPE_RE.sub(_unescape_c, raw[1:-1])
    if prefix and raw.startswith(prefix):
        raw = raw[len(prefix):]
    return raw.decode("utf-8", errors="replace")


def _path_pattern(prefix: bytes) -> bytes:
    # a C-quoted token or a plain one, prefix included
    return rb'("' + prefix + rb'(?:[^"\\]|\\.)*"|' + prefix + rb".+?)"


class GitCommands:
    """Read-only git queries the diff pipeline needs."""

    _DIFF_HEADER_RE = re.compile(rb"^diff --git ")
    _A_B_PATHS_RE = re.compile(
        rb"^diff --git " + _path_pattern(b"a/") + rb" " + _path_pattern(b"b/") + rb"$"
    )
    _MODE_RE = re.compile(rb"^(new|deleted) file mode (\d+)")
    _OLD_PATH_RE = re.compile(rb"^--- (?:" + _path_pattern(b"a/") + rb"|/dev/null)\t?$")
    _NEW_PATH_RE = re.compile(rb"^\+\+\+ (?:" + _path_pattern(b"b/") + rb"|/dev/null)\t?$")
    _RENAME_FROM_RE = re.compile(rb"^rename from (.+)$")
    _RENAME_TO_RE = re.compile(rb"^rename to (.+)$")
    _BINARY_RE = re.compile(rb"^Binary files .* differ$")
    _HUNK_HEADER_RE = re.compile(rb"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")

    def __init__(self, git: GitInterface):
        self.git = git

    # -------------------------------
    # Repository queries
    # -------------------------------

    def is_git_repository(self) -> bool:
        out = self.git.run_git_text_out(["rev-parse", "--is-inside-work-tree"])
        return out is not None and out.strip() == "true"

    def ensure_repository(self) -> None:
        if not self.is_git_repository():
            raise not_git_repository(str(self.git.repo_path))

    def current_branch(self) -> str | None:
        """Returns the checked out branch, or None on a detached HEAD or an unborn branch."""
        out = self.git.run_git_text_out(["rev-parse", "--abbrev-ref", "HEAD"])
        if out is None:
            return None
        branch = out.strip()
        return None if branch in ("", "HEAD") else branch

    def resolve_ref(self, ref: str) -> str:
        """
        Resolve a ref to a short SHA for display.

        Returns "working tree" for "@". Raises InvalidRefError if the ref does
        not name a commit.
        """
        if ref == WORKING_TREE_REF:
            return "working tree"

        out = self.git.run_git_text_out(["rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"])
        sha = out.strip() if out else ""
        if not sha:
            raise invalid_ref(ref)

        return sha[:SHORT_SHA_LEN]

    def list_refs(self) -> list[GitRef]:
        """Special refs first, then local branches, then tags."""
        refs = [
            GitRef(WORKING_TREE_REF, "special"),
            GitRef("HEAD", "special"),
            GitRef("HEAD~1", "special"),
        ]

        for namespace, ref_type in (("refs/heads", "branch"), ("refs/tags", "tag")):
            out = self.git.run_git_text_out(
                ["for-each-ref", "--format=%(refname:short)", namespace]
            )
            for line in (out or "").splitlines():
                if line.strip():
                    refs.append(GitRef(line.strip(), ref_type))

        return refs

    # -------------------------------
    # Diff collection
    # -------------------------------

    def get_changed_files(
        self,
        before_ref: str,
        after_ref: str = WORKING_TREE_REF,
        paths: list[str] | None = None,
        similarity: int = 50,
    ) -> list[FileChange]:
        """
        Collect every changed file between two refs with its hunks.

        "@" as after_ref diffs against the working tree and also reports
        untracked files as additions without hunks.
        """
        if before_ref == WORKING_TREE_REF:
            raise ValidationError(
                "The working tree can only be the after side of a diff",
                f"Swap the refs: sdf diff {after_ref} @",
            )

        self.resolve_ref(before_ref)
        self.resolve_ref(after_ref)

        args = [
            "-c",
            "core.quotePath=false",
            "diff",
            "--no-color",
            "--no-ext-diff",
            "--unified=0",
            f"-M{similarity}%",
            before_ref,
        ]
        if after_ref != WORKING_TREE_REF:
            args.append(after_ref)
        args.append("--")
        args.extend(paths or [])

        diff_output = self.git.run_git_binary_out(args)
        if diff_output is None:
            raise GitError(
                f"git diff failed for {before_ref}..{after_ref}",
                "Run with --verbose and check the log file for git's stderr",
            )

        changes = self.parse_diff(diff_output)

        if after_ref == WORKING_TREE_REF:
            known = {c.canonical_path for c in changes}
            for path in self.get_untracked_files(paths):
                if path not in known:
                    changes.append(FileChange(None, path, "untracked"))

        logger.debug(
            "Collected {count} changed files for {before}..{after}",
            count=len(changes),
            before=before_ref,
            after=after_ref,
        )
        return changes

    def get_untracked_files(self, paths: list[str] | None = None) -> list[str]:
        out = self.git.run_git_text_out(
            ["-c", "core.quotePath=false", "ls-files", "--others", "--exclude-standard", "--", *(paths or [])]
        )
        return [line for line in (out or "").splitlines() if line.strip()]

    def parse_diff(self, diff_output: bytes) -> list[FileChange]:
        """
        Fold `git diff --unified=0` output into one FileChange per file.

        Hunk bodies are skipped; only their headers matter for alignment.
        """
        changes: list[FileChange] = []
        block: _FileBlock | None = None

        for line in diff_output.split(b"\n"):
            if self._DIFF_HEADER_RE.match(line):
                if block is not None:
                    changes.append(block.freeze())
                block = _FileBlock()
                m = self._A_B_PATHS_RE.match(line)
                if m:
                    block.old_path = _decode_path(m.group(1), b"a/")
                    block.new_path = _decode_path(m.group(2), b"b/")
                continue

            if block is None:
                continue

            if line.startswith(b"@@"):
                hunk = self._parse_hunk_header(line)
                if hunk is not None:
                    block.hunks.append(hunk)
            elif block.hunks:
                # hunk body lines, never file metadata
                continue
            elif m := self._MODE_RE.match(line):
                if m.group(1) == b"new":
                    block.status = "added"
                    block.old_path = None
                else:
                    block.status = "deleted"
                    block.new_path = None
            elif m := self._RENAME_FROM_RE.match(line):
                block.status = "renamed"
                block.old_path = _decode_path(m.group(1))
            elif m := self._RENAME_TO_RE.match(line):
                block.new_path = _decode_path(m.group(1))
            elif m := self._OLD_PATH_RE.match(line):
                block.old_path = _decode_path(m.group(1), b"a/") if m.group(1) else None
            elif m := self._NEW_PATH_RE.match(line):
                block.new_path = _decode_path(m.group(1), b"b/") if m.group(1) else None
            elif self._BINARY_RE.match(line):
                block.is_binary = True

        if block is not None:
            changes.append(block.freeze())

        return changes

    def _parse_hunk_header(self, header_line: bytes) -> RawHunk | None:
        m = self._HUNK_HEADER_RE.match(header_line)
        if not m:
            logger.debug(f"Unparseable hunk header: {header_line!r}")
            return None

        old_start, old_len, new_start, new_len = m.groups()
        # a missing count means a single line
        return RawHunk(
            old_start=int(old_start),
            old_len=int(old_len) if old_len is not None else 1,
            new_start=int(new_start),
            new_len=int(new_len) if new_len is not None else 1,
        )
