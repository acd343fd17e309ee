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

import os
from unittest.mock import patch

from loguru import logger

from sidediff.core.logging import logging as sidediff_logging


def test_setup_logger_writes_to_log_dir(tmp_path):
    with patch.object(sidediff_logging, "LOG_DIR", tmp_path), patch.dict(os.environ, {}, clear=False):
        logfile = sidediff_logging.setup_logger("diff", debug=True)
        logger.debug("hello from the test")
        logger.remove()

    assert logfile.parent == tmp_path
    assert logfile.name.startswith("sidediff_")
    assert "hello from the test" in logfile.read_text()


def test_get_log_directory():
    assert sidediff_logging.get_log_directory() == sidediff_logging.LOG_DIR
