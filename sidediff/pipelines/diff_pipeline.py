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


from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from loguru import logger

from sidediff.context import DiffContext, GlobalContext
from sidediff.core.checks.alignment_checks import alignments_valid
from sidediff.core.data.file_diff import FileChange, FileDiff
from sidediff.core.engine.diff_builder import build_file_diff
from sidediff.core.exceptions import path_not_found
from sidediff.core.file_reader.disk_file_reader import DiskFileReader
from sidediff.core.file_reader.protocol import FileReader
from sidediff.core.logging.utils import log_alignments, log_file_diffs, time_block


def _check_alignments(file_diff: FileDiff) -> None:
    if file_diff.is_binary:
        return

    before = file_diff.before.buffer.lines if file_diff.before else ()
    after = file_diff.after.buffer.lines if file_diff.after else ()
    if not alignments_valid(file_diff.alignments, before, after):
        logger.warning(f"Alignment self-check failed for {file_diff.path}")


class DiffPipeline:
    """
    Builds a FileDiff for every file changed between two refs.

    Mechanics:
    - git lists the changed files and their zero-context hunks.
    - Both sides of each file are loaded (git object or working tree).
    - Each file is aligned independently, optionally on a thread pool.
    - Results are sorted by path.
    """

    def __init__(self, global_context: GlobalContext, diff_context: DiffContext):
        self.global_context = global_context
        self.diff_context = diff_context

    def run(self) -> list[FileDiff]:
        git_commands = self.global_context.git_commands
        config = self.global_context.config
        before_ref = self.diff_context.before_ref
        after_ref = self.diff_context.after_ref

        with time_block("collecting changed files"):
            changes = git_commands.get_changed_files(
                before_ref,
                after_ref,
                self.diff_context.paths,
                similarity=config.rename_similarity,
            )

        self._check_requested_paths(changes)

        with time_block(f"aligning {len(changes)} files"):
            if config.parallel and len(changes) > 1:
                with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
                    results = list(executor.map(self._build_one, changes))
            else:
                results = [self._build_one(change) for change in changes]

        file_diffs = sorted((d for d in results if d is not None), key=lambda d: d.path)
        log_file_diffs("Diff pipeline", file_diffs)

        if config.verbose:
            for file_diff in file_diffs:
                _check_alignments(file_diff)

        return file_diffs

    def _build_one(self, change: FileChange) -> FileDiff | None:
        reader = self.global_context.file_reader
        before_ref = self.diff_context.before_ref
        after_ref = self.diff_context.after_ref

        before_data = (
            reader.read_bytes(change.old_path, before_ref) if change.old_path else None
        )
        after_data = (
            reader.read_bytes(change.new_path, after_ref) if change.new_path else None
        )

        if before_data is None and after_data is None:
            logger.debug(f"Skipping {change.canonical_path}: neither side could be loaded")
            return None

        # untracked files carry no hunks, the matcher aligns them
        raw_hunks = None if change.status == "untracked" else change.hunks

        file_diff = build_file_diff(
            change.old_path if before_data is not None else None,
            before_data,
            change.new_path if after_data is not None else None,
            after_data,
            status=change.status,
            raw_hunks=raw_hunks,
            fallback_line_limit=self.global_context.config.fallback_line_limit,
            is_binary=change.is_binary,
        )
        log_alignments("Built alignments", file_diff.path, file_diff.alignments)
        return file_diff

    def _check_requested_paths(self, changes: list[FileChange]) -> None:
        """Raise NotFoundError for a requested path that exists at neither ref."""
        reader = self.global_context.file_reader
        before_ref = self.diff_context.before_ref
        after_ref = self.diff_context.after_ref

        touched = set()
        for change in changes:
            touched.update(p for p in (change.old_path, change.new_path) if p)

        for path in self.diff_context.paths or []:
            prefix = path.rstrip("/") + "/"
            if path in touched or any(t.startswith(prefix) for t in touched):
                continue
            if not reader.exists(path, before_ref) and not reader.exists(path, after_ref):
                raise path_not_found(path, before_ref, after_ref)


def compare_files(
    old_path: str | Path,
    new_path: str | Path,
    fallback_line_limit: int | None = None,
    reader: FileReader | None = None,
) -> FileDiff:
    """
    Diff two files on disk with the content matcher.

    Raises NotFoundError if neither file exists.
    """
    reader = reader or DiskFileReader()
    old_data = reader.read_bytes(str(old_path))
    new_data = reader.read_bytes(str(new_path))

    if old_data is None and new_data is None:
        raise path_not_found(f"{old_path}, {new_path}")

    status = "modified"
    if old_data is None:
        status = "added"
    elif new_data is None:
        status = "deleted"

    with time_block(f"comparing {old_path} and {new_path}"):
        file_diff = build_file_diff(
            str(old_path) if old_data is not None else None,
            old_data,
            str(new_path) if new_data is not None else None,
            new_data,
            status=status,
            fallback_line_limit=fallback_line_limit,
        )

    log_alignments("Compared files", file_diff.path, file_diff.alignments)
    return file_diff
