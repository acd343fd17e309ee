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


from abc import ABC, abstractmethod
from pathlib import Path


class GitInterface(ABC):
    """
    Abstract interface for running read-only git commands against one repository.
    """

    repo_path: Path

    @abstractmethod
    def run_git_text_out(self, args: list[str]) -> str | None:
        """Run a git command and return stdout as text. Returns None on error."""

    @abstractmethod
    def run_git_binary_out(self, args: list[str]) -> bytes | None:
        """Run a git command and return raw stdout. Returns None on error."""
