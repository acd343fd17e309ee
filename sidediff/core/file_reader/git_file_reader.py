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

from loguru import logger

from sidediff.constants import WORKING_TREE_REF

from ..exceptions import file_read_failed
from ..git_interface.interface import GitInterface


def _normalize_path(path: str) -> str:
    return path.replace("\\", "/").strip()


class GitFileReader:
    """
    Reads file content from git objects, or from disk for the working tree.

    Submodules and directories read as missing.
    """

    def __init__(self, git: GitInterface):
        self.git = git

    def read_bytes(self, path: str, ref: str) -> bytes | None:
        path = _normalize_path(path)

        if ref == WORKING_TREE_REF:
            return self._read_working_tree(path)

        obj = f"{ref}:{path}"
        obj_type = self.git.run_git_text_out(["cat-file", "-t", obj])
        if obj_type is None or obj_type.strip() != "blob":
            logger.debug(f"{obj} is not a blob ({obj_type.strip() if obj_type else 'missing'})")
            return None

        return self.git.run_git_binary_out(["cat-file", "blob", obj])

    def _read_working_tree(self, path: str) -> bytes | None:
        full_path = Path(self.git.repo_path) / path
        if not full_path.is_file():
            return None

        try:
            return full_path.read_bytes()
        except OSError as e:
            raise file_read_failed(path, str(e)) from e

    def read_text(self, path: str, ref: str) -> str | None:
        content = self.read_bytes(path, ref)
        if content is None:
            return None
        return content.decode("utf-8", errors="replace")

    def exists(self, path: str, ref: str) -> bool:
        """True if the path names a file or directory at the ref."""
        path = _normalize_path(path)

        if ref == WORKING_TREE_REF:
            return (Path(self.git.repo_path) / path).exists()

        return self.git.run_git_text_out(["cat-file", "-e", f"{ref}:{path}"]) is not None
