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

from ..exceptions import file_read_failed


class DiskFileReader:
    """Reads plain files from disk. The ref is ignored."""

    def __init__(self, root: str | Path = "."):
        self.root = Path(root)

    def read_bytes(self, path: str, ref: str = "") -> bytes | None:
        full_path = self.root / path
        if not full_path.is_file():
            return None

        try:
            return full_path.read_bytes()
        except OSError as e:
            raise file_read_failed(str(full_path), str(e)) from e

    def exists(self, path: str, ref: str = "") -> bool:
        return (self.root / path).exists()
