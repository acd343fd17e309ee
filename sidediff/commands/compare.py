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


from pathlib import Path

import typer

from sidediff.context import GlobalContext
from sidediff.core.exceptions import handle_sidediff_exception
from sidediff.core.ui.diff_view import file_diffs_to_json, print_file_diffs
from sidediff.pipelines.diff_pipeline import compare_files


@handle_sidediff_exception
def main(
    ctx: typer.Context,
    old: Path = typer.Argument(..., help="File to treat as the before side."),
    new: Path = typer.Argument(..., help="File to treat as the after side."),
    as_json: bool = typer.Option(
        False, "--json", help="Print the file diff as JSON instead of a table."
    ),
) -> None:
    """
    Align two files on disk by content, without git.

    Examples:
        sdf compare old_config.yaml new_config.yaml
    """
    global_context: GlobalContext = ctx.obj
    file_diff = compare_files(
        old, new, fallback_line_limit=global_context.config.fallback_line_limit
    )

    if as_json:
        typer.echo(file_diffs_to_json([file_diff]))
    else:
        print_file_diffs([file_diff])
