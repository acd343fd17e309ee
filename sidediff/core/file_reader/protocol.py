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


from typing import Protocol


class FileReader(Protocol):
    """Loads the raw bytes of a file as it existed at a ref."""

    def read_bytes(self, path: str, ref: str) -> bytes | None:
        """
        Returns the file content, or None when the file does not exist at the
        ref or is not a regular file.
        """
        ...

    def exists(self, path: str, ref: str) -> bool:
        """True if the path names a file or directory at the ref."""
        ...