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
import tomllib
from pathlib import Path
from typing import NamedTuple

from loguru import logger
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigurationError


class ConfigSource(NamedTuple):
    name: str
    data: dict


class ConfigLoader:
    """Merges configuration from CLI args, TOML files and the environment into one model."""

    @staticmethod
    def collect_sources(
        input_args: dict,
        local_config_path: Path,
        env_app_prefix: str,
        global_config_path: Path,
        custom_config_path: Path | None = None,
    ) -> list[ConfigSource]:
        """Returns the config sources ordered from highest to lowest priority."""
        sources = [ConfigSource("Input Args", input_args)]

        if custom_config_path is not None:
            sources.append(
                ConfigSource("Custom Config", ConfigLoader.load_toml(custom_config_path))
            )

        sources.extend(
            [
                ConfigSource("Local Config", ConfigLoader.load_toml(local_config_path)),
                ConfigSource("Environment Variables", ConfigLoader.load_env(env_app_prefix)),
                ConfigSource("Global Config", ConfigLoader.load_toml(global_config_path)),
            ]
        )

        return sources

    @staticmethod
    def get_full_config(
        config_model: type[BaseModel],
        input_args: dict,
        local_config_path: Path,
        env_app_prefix: str,
        global_config_path: Path,
        custom_config_path: Path | None = None,
    ):
        """
        Build the config model.

        Priority: input args, custom config, local config, environment
        variables, global config.

        Returns:
            (model, names of the sources that contributed, whether any default was used)
        """
        sources = ConfigLoader.collect_sources(
            input_args,
            local_config_path,
            env_app_prefix,
            global_config_path,
            custom_config_path,
        )

        for source in sources:
            logger.debug(f"{source.name}: {source.data}")

        model, used_names, used_defaults = ConfigLoader.build(config_model, sources)
        return model, used_names, used_defaults

    @staticmethod
    def load_toml(path: Path) -> dict:
        """Loads a TOML file, returning an empty dict if it is missing or invalid."""
        if not path.exists():
            logger.debug(f"{path} does not exist")
            return {}

        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Failed to load {path}: {e}")
            return {}

    @staticmethod
    def load_env(app_prefix: str) -> dict:
        """Collects prefixed environment variables, with the prefix stripped and keys lowercased."""
        prefix = app_prefix.lower()
        return {
            k[len(app_prefix) :].lower(): v
            for k, v in os.environ.items()
            if k.lower().startswith(prefix)
        }

    @staticmethod
    def build(config_model: type[BaseModel], sources: list[ConfigSource]):
        """Takes each field from the highest priority source that sets it; the rest use defaults."""
        remaining_keys = set(config_model.model_fields.keys())
        final_data = {}
        used_names = []

        for source in sources:
            if not remaining_keys:
                break

            contributions = source.data.keys() & remaining_keys
            if not contributions:
                continue

            used_names.append(source.name)
            for key in contributions:
                final_data[key] = source.data[key]
            remaining_keys -= contributions

        try:
            model = TypeAdapter(config_model).validate_python(final_data)
        except PydanticValidationError as e:
            bad_keys = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise ConfigurationError(
                f"Invalid configuration value for: {bad_keys}",
                f"Sources used: {used_names}. {e}",
            ) from e

        return model, used_names, bool(remaining_keys)
