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


from collections.abc import Sequence

from ..data.alignment import Alignment
from ..exceptions import ValidationError


def revert_region(
    base_lines: Sequence[str],
    current_lines: Sequence[str],
    alignment: Alignment,
) -> list[str]:
    """
    Rebuild the current file with one region put back to its base content.

    Lines outside `alignment.after` are kept from the current file, the lines
    inside it are replaced by `alignment.before` taken from the base file.
    """
    if alignment.after.end > len(current_lines):
        raise ValidationError(
            f"Region {alignment.after} is outside the current file",
            f"current file has {len(current_lines)} lines",
        )
    if alignment.before.end > len(base_lines):
        raise ValidationError(
            f"Region {alignment.before} is outside the base file",
            f"base file has {len(base_lines)} lines",
        )

    return (
        list(current_lines[: alignment.after.start])
        + list(base_lines[alignment.before.start : alignment.before.end])
        + list(current_lines[alignment.after.end :])
    )


def render_lines(lines: Sequence[str], trailing_newline: bool = True) -> str:
    text = "\n".join(lines)
    if trailing_newline and lines:
        text += "\n"
    return text
