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

import tomllib
from unittest.mock import patch

import pytest
import typer

from sidediff.commands import config as config_command
from sidediff.core.exceptions import ConfigurationError


@pytest.fixture
def config_paths(tmp_path):
    local = tmp_path / "sidediffconfig.toml"
    global_ = tmp_path / "global" / "sidediffconfig.toml"
    with patch.object(config_command, "LOCAL_CONFIG_FILE", local), patch.object(
        config_command, "GLOBAL_CONFIG_FILE", global_
    ):
        yield local, global_


def test_set_local_value_is_typed(config_paths):
    local, _ = config_paths

    config_command.set_config("rename_similarity", "70", "local")
    config_command.set_config("parallel", "false", "local")

    with open(local, "rb") as f:
        assert tomllib.load(f) == {"rename_similarity": 70, "parallel": False}


def test_set_global_creates_directory(config_paths):
    _, global_ = config_paths

    config_command.set_config("max_workers", "2", "global")

    assert global_.exists()


def test_set_invalid_value(config_paths):
    with pytest.raises(ConfigurationError):
        config_command.set_config("max_workers", "0", "local")


def test_unknown_key_exits(config_paths):
    with pytest.raises(typer.Exit):
        config_command.set_config("model", "x", "local")


def test_delete_key_removes_empty_file(config_paths):
    local, _ = config_paths
    config_command.set_config("verbose", "true", "local")

    config_command.delete_config("verbose", "local")

    assert not local.exists()


def test_get_config_shows_source(config_paths, capsys):
    config_command.set_config("fallback_line_limit", "100", "local")
    capsys.readouterr()

    config_command.get_config("fallback_line_limit", None)

    out = capsys.readouterr().out
    assert "100" in out
    assert "Local Config" in out
