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


from sidediff.constants import BINARY_SNIFF_BYTES


def is_binary_data(data: bytes | None) -> bool:
    """
    Heuristic binary check: a NUL byte anywhere in the first 8 KiB.

    Missing content (None) is not binary. Exotic text encodings such as
    UTF-16 will be misclassified, which is accepted.
    """
    if not data:
        return False
    return b"\x00" in data[:BINARY_SNIFF_BYTES]


def any_binary(*sides: bytes | None) -> bool:
    return any(is_binary_data(side) for side in sides)
