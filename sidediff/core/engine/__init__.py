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

from .assembler import (
    align_hunks,
    align_matches,
    assemble_alignments,
    compute_alignments,
    matches_from_alignments,
)
from .binary_gate import any_binary, is_binary_data
from .diff_builder import build_file_diff
from .hunk_normalizer import normalize_hunk, normalize_hunks
from .match_finder import find_matches

__all__ = [
    "align_hunks",
    "align_matches",
    "any_binary",
    "assemble_alignments",
    "build_file_diff",
    "compute_alignments",
    "find_matches",
    "is_binary_data",
    "matches_from_alignments",
    "normalize_hunk",
    "normalize_hunks",
]
