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


from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field

from sidediff.core.file_reader.git_file_reader import GitFileReader
from sidediff.core.file_reader.protocol import FileReader
from sidediff.core.git_commands.git_commands import GitCommands
from sidediff.core.git_interface.interface import GitInterface
from sidediff.core.git_interface.SubprocessGitInterface import (
    SubprocessGitInterface,
)


class GlobalConfig(BaseModel):
    verbose: bool = Field(default=False, description="Enable verbose logging output")
    silent: bool = Field(
        default=False, description="Only print errors and the diff itself"
    )
    rename_similarity: int = Field(
        default=50,
        ge=0,
        le=100,
        description="Similarity percentage git needs to report a rename (0-100)",
    )
    fallback_line_limit: int = Field(
        default=20000,
        ge=0,
        description="Largest file (in lines) aligned by content matching when git gives no hunks",
    )
    parallel: bool = Field(
        default=True, description="Build file diffs on a thread pool"
    )
    max_workers: int = Field(
        default=4, ge=1, description="Worker threads used when parallel is enabled"
    )


@dataclass(frozen=True)
class GlobalContext:
    repo_path: Path
    git_interface: GitInterface
    git_commands: GitCommands
    file_reader: FileReader
    config: GlobalConfig

    @classmethod
    def from_global_config(cls, config: GlobalConfig, repo_path: Path):
        git_interface = SubprocessGitInterface(repo_path)
        git_commands = GitCommands(git_interface)
        file_reader = GitFileReader(git_interface)

        return GlobalContext(repo_path, git_interface, git_commands, file_reader, config)


@dataclass(frozen=True)
class DiffContext:
    before_ref: str
    after_ref: str
    paths: list[str] | None = None
    as_json: bool = False
