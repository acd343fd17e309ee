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


import subprocess
from pathlib import Path

from loguru import logger

from ..exceptions import git_not_found
from .interface import GitInterface


class SubprocessGitInterface(GitInterface):
    def __init__(self, repo_path: str | Path = ".") -> None:
        self.repo_path = Path(repo_path)

    def _run(self, args: list[str]) -> bytes | None:
        cmd = ["git", *args]
        logger.debug(f"Running git command: {' '.join(cmd)} cwd={self.repo_path}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                check=True,
                cwd=str(self.repo_path),
            )
        except FileNotFoundError as e:
            raise git_not_found() from e
        except subprocess.CalledProcessError as e:
            logger.debug(
                f"Git command failed: {' '.join(e.cmd)} code={e.returncode} "
                f"stderr={e.stderr.decode('utf-8', errors='ignore').strip()}"
            )
            return None

        logger.debug(f"git stdout: {len(result.stdout)} bytes")
        return result.stdout

    def run_git_text_out(self, args: list[str]) -> str | None:
        out = self._run(args)
        return out.decode("utf-8", errors="replace") if out is not None else None

    def run_git_binary_out(self, args: list[str]) -> bytes | None:
        return self._run(args)
