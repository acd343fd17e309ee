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
Terminal and JSON rendering of FileDiffs.

Changed regions are printed side by side; unchanged regions are folded into
a single row with their line ranges.
"""

from collections.abc import Sequence

from pydantic import TypeAdapter
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..data.alignment import Alignment
from ..data.file_diff import FileDiff, FileStatus
from ..data.line_buffer import LineBuffer
from ..data.span import Span

STATUS_MARKERS: dict[FileStatus, tuple[str, str]] = {
    "added": ("A", "green"),
    "deleted": ("D", "red"),
    "modified": ("M", "yellow"),
    "renamed": ("R", "cyan"),
    "untracked": ("?", "green"),
}

_file_diffs_adapter = TypeAdapter(list[FileDiff])


def format_span(span: Span) -> str:
    """1-indexed inclusive line range, or a dash for an empty side."""
    if span.is_empty:
        return "-"
    if len(span) == 1:
        return str(span.start + 1)
    return f"{span.start + 1}-{span.end}"


def _region_text(buffer: LineBuffer | None, span: Span, max_lines: int) -> Text:
    # file content is never read as console markup
    if buffer is None or span.is_empty:
        return Text()
    lines = list(buffer.slice(span))
    if len(lines) > max_lines:
        hidden = len(lines) - max_lines
        lines = lines[:max_lines] + [f"... {hidden} more lines"]
    return Text("\n".join(lines))


def file_title(file_diff: FileDiff) -> Text:
    marker, color = STATUS_MARKERS.get(file_diff.status, ("M", "yellow"))
    title = Text()
    title.append(f"{marker} ", style=f"bold {color}")
    if file_diff.is_rename:
        title.append(f"{file_diff.before.path} -> {file_diff.after.path}", style="bold")
    else:
        title.append(file_diff.path, style="bold")
    return title


def build_alignment_table(file_diff: FileDiff, max_lines: int = 20) -> Table:
    table = Table(title=file_title(file_diff), show_lines=True, expand=True)
    table.add_column("Before", style="dim", no_wrap=True)
    table.add_column("Old", style="red", overflow="fold")
    table.add_column("After", style="dim", no_wrap=True)
    table.add_column("New", style="green", overflow="fold")

    before_buffer = file_diff.before.buffer if file_diff.before else None
    after_buffer = file_diff.after.buffer if file_diff.after else None

    for alignment in file_diff.alignments:
        table.add_row(*_alignment_row(alignment, before_buffer, after_buffer, max_lines))

    return table


def _alignment_row(
    alignment: Alignment,
    before_buffer: LineBuffer | None,
    after_buffer: LineBuffer | None,
    max_lines: int,
) -> tuple:
    before_range = format_span(alignment.before)
    after_range = format_span(alignment.after)

    if not alignment.changed:
        folded = Text(f"{len(alignment.before)} unchanged lines", style="dim italic")
        return before_range, folded, after_range, folded.copy()

    return (
        before_range,
        _region_text(before_buffer, alignment.before, max_lines),
        after_range,
        _region_text(after_buffer, alignment.after, max_lines),
    )


def print_file_diffs(file_diffs: Sequence[FileDiff], console: Console | None = None) -> None:
    console = console or Console()

    if not file_diffs:
        console.print("[dim]No changes.[/dim]")
        return

    for file_diff in file_diffs:
        if file_diff.is_binary:
            console.print(file_title(file_diff), Text("(binary, not aligned)", style="dim"))
            continue
        console.print(build_alignment_table(file_diff))

    changed = sum(len(d.changed_alignments) for d in file_diffs)
    console.print(f"[bold]{len(file_diffs)}[/bold] files, [bold]{changed}[/bold] changed regions")


def file_diffs_to_json(file_diffs: Sequence[FileDiff], indent: int | None = 2) -> str:
    return _file_diffs_adapter.dump_json(list(file_diffs), indent=indent).decode("utf-8")
