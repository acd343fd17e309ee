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


import typer
from loguru import logger
from rich.markup import escape

from sidediff.constants import DEFAULT_BEFORE_REF, WORKING_TREE_REF
from sidediff.context import DiffContext, GlobalContext
from sidediff.core.exceptions import handle_sidediff_exception
from sidediff.core.ui.diff_view import file_diffs_to_json, print_file_diffs
from sidediff.pipelines.diff_pipeline import DiffPipeline


def run_diff(global_context: GlobalContext, diff_context: DiffContext) -> None:
    git_commands = global_context.git_commands
    git_commands.ensure_repository()

    before_label = git_commands.resolve_ref(diff_context.before_ref)
    after_label = git_commands.resolve_ref(diff_context.after_ref)
    logger.debug(f"Diffing {before_label} against {after_label}")

    file_diffs = DiffPipeline(global_context, diff_context).run()

    if diff_context.as_json:
        typer.echo(file_diffs_to_json(file_diffs))
        return

    branch = git_commands.current_branch()
    header = f"{before_label} -> {after_label}"
    if branch:
        header += f" (on {branch})"
    logger.info(f"[bold]{escape(header)}[/bold]")
    print_file_diffs(file_diffs)


@handle_sidediff_exception
def main(
    ctx: typer.Context,
    before: str = typer.Argument(
        DEFAULT_BEFORE_REF, help="Ref to diff from (branch, tag, SHA, HEAD~N)."
    ),
    after: str = typer.Argument(
        WORKING_TREE_REF, help="Ref to diff to. '@' is the working tree."
    ),
    paths: list[str] | None = typer.Argument(
        None, help="Only diff these paths, relative to the repository root."
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the file diffs as JSON instead of tables."
    ),
) -> None:
    """
    Show the changes between two refs side by side.

    Examples:
        # Working tree against HEAD
        sdf diff

        # Last commit
        sdf diff HEAD~1 HEAD

        # One directory, as JSON
        sdf diff main @ src/ --json
    """
    global_context: GlobalContext = ctx.obj
    diff_context = DiffContext(
        before_ref=before,
        after_ref=after,
        paths=list(paths) if paths else None,
        as_json=as_json,
    )
    run_diff(global_context, diff_context)
