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


"""
Logging configuration for the sidediff CLI.

Every command logs to two loguru sinks: the terminal, through a rich console,
and a timestamped debug log file under the user log directory.
"""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger
from platformdirs import user_log_path
from rich.console import Console

from sidediff.constants import APP_NAME

LOG_DIR = user_log_path(appname=APP_NAME)

LOG_LEVEL_ENV = "SIDEDIFF_LOG_LEVEL"
CONSOLE_LOG_LEVEL_ENV = "SIDEDIFF_CONSOLE_LOG_LEVEL"

FILE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class StructuredLogger:
    """Sets up the console and file sinks for one command run."""

    def __init__(self, command_name: str, silent: bool = False):
        self.command_name = command_name
        self.silent = silent
        self.console = Console()
        self._setup_logger()

    def _setup_logger(self) -> None:
        # Clear existing sinks to avoid duplicates
        logger.remove()

        log_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
        console_level = os.getenv(CONSOLE_LOG_LEVEL_ENV, log_level).upper()
        if self.silent:
            console_level = "ERROR"

        def console_sink(message):
            text = message.record["message"].rstrip("\n")
            self.console.print(text)

        logger.add(console_sink, level=console_level, format="{message}", catch=True)

        LOG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = LOG_DIR / f"{APP_NAME}_{timestamp}.log"

        logger.add(
            logfile,
            level="DEBUG",
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="14 days",
            compression="gz",
            catch=True,
            backtrace=True,
            diagnose=True,
        )

        logger.bind(
            command=self.command_name, logfile=str(logfile), log_level=log_level
        ).debug("Logger initialized")

        self.logfile = logfile

    def get_logfile(self) -> Path:
        return self.logfile


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Enable debug output on the console
        silent: Only errors reach the console

    Returns:
        Path to the log file
    """
    if debug:
        os.environ[LOG_LEVEL_ENV] = "DEBUG"
        os.environ[CONSOLE_LOG_LEVEL_ENV] = "DEBUG"

    structured_logger = StructuredLogger(command_name, silent=silent)
    return structured_logger.get_logfile()


def get_log_directory() -> Path:
    """Get the directory where log files are stored."""
    return LOG_DIR
