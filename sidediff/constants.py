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

from platformdirs import user_config_dir

APP_NAME = "sidediff"

CONFIG_FILENAME = "sidediffconfig.toml"
LOCAL_CONFIG_FILE = Path(CONFIG_FILENAME)
GLOBAL_CONFIG_FILE = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME
ENV_APP_PREFIX = "SIDEDIFF_"

# the special ref naming the working tree
WORKING_TREE_REF = "@"
DEFAULT_BEFORE_REF = "HEAD"

# how much of a file the binary check looks at
BINARY_SNIFF_BYTES = 8192

SHORT_SHA_LEN = 8
