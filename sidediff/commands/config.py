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
from pathlib import Path
from textwrap import shorten
from typing import Any

import tomllib
import typer
from colorama import Fore, Style
from pydantic import ValidationError as PydanticValidationError

from sidediff.constants import (
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
)
from sidediff.context import GlobalConfig
from sidediff.core.exceptions import ConfigurationError, handle_sidediff_exception

SCOPES = (None, "local", "global", "env")


def display_config(data: list[dict], max_value_length: int = 50) -> None:
    """
    Display config rows in a two-line format:
    Key: Description
      Value (Source)
    """
    for item in data:
        value_display = shorten(str(item["Value"]), width=max_value_length, placeholder="...")

        print(
            f"{Fore.CYAN}{Style.BRIGHT}{item['Key']}{Style.RESET_ALL}: "
            f"{Fore.WHITE}{item['Description']}{Style.RESET_ALL}"
        )
        print(
            f"  {Fore.GREEN}{value_display}{Style.RESET_ALL} "
            f"{Fore.YELLOW}({item['Source']}){Style.RESET_ALL}"
        )
        print()


def _get_config_schema() -> dict[str, dict[str, Any]]:
    """Get the available config options from the GlobalConfig fields."""
    return {
        name: {
            "description": field.description or "No description available",
            "default": field.default,
            "type": field.annotation,
        }
        for name, field in GlobalConfig.model_fields.items()
    }


def print_describe_options():
    print(f"{Fore.WHITE}{Style.BRIGHT}Available configuration options:{Style.RESET_ALL}\n")

    table_data = [
        {
            "Key": key,
            "Description": info["description"],
            "Value": info["default"],
            "Source": f"Type: {getattr(info['type'], '__name__', info['type'])}",
        }
        for key, info in sorted(_get_config_schema().items())
    ]
    display_config(table_data, max_value_length=80)


def _check_key_exists(key: str) -> dict:
    """Check if a config key exists. If not, show available options and exit."""
    schema = _get_config_schema()

    if key not in schema:
        print(f"{Fore.RED}Error:{Style.RESET_ALL} Unknown configuration key '{key}'\n")
        print_describe_options()
        raise typer.Exit(1)

    return schema[key]


def _coerce_value(key: str, value: str):
    """Validate a CLI string against the GlobalConfig field and return the typed value."""
    try:
        model = GlobalConfig.model_validate({key: value})
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid value for {key}: {value}",
            str(e),
        ) from e
    return getattr(model, key)


def _read_toml(config_path: Path) -> dict:
    if not config_path.exists():
        return {}

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Failed to parse {config_path}", str(e)) from e


def _write_toml(config_path: Path, config_data: dict) -> None:
    # flat key = value tables only
    with open(config_path, "w") as f:
        for k, v in config_data.items():
            if isinstance(v, bool):
                f.write(f"{k} = {str(v).lower()}\n")
            elif isinstance(v, (int, float)):
                f.write(f"{k} = {v}\n")
            else:
                f.write(f"{k} = '{v}'\n")


def _config_path(scope: str) -> Path:
    return GLOBAL_CONFIG_FILE if scope == "global" else LOCAL_CONFIG_FILE


def _env_instructions(env_var: str, value: str | None) -> None:
    if value is None:
        print(f"  Windows (PowerShell): Remove-Item Env:\\{env_var}")
        print(f"  Linux/macOS: unset {env_var}")
    else:
        print(f"  Windows (PowerShell): $env:{env_var}='{value}'")
        print(f"  Linux/macOS: export {env_var}='{value}'")


def set_config(key: str, value: str, scope: str) -> None:
    """Set a configuration value in the specified scope."""
    _check_key_exists(key)
    final_value = _coerce_value(key, value)

    if scope == "env":
        print(f"{Fore.GREEN}To set this as an environment variable:{Style.RESET_ALL}")
        _env_instructions(f"{ENV_APP_PREFIX}{key.upper()}", value)
        return

    config_path = _config_path(scope)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_data = _read_toml(config_path)
    config_data[key] = final_value
    _write_toml(config_path, config_data)

    print(f"{Fore.GREEN}Set {key} = {final_value} ({scope}){Style.RESET_ALL}")
    print(f"Config file: {config_path.absolute()}")


def _collect_sources(scope: str | None) -> list[tuple[str, dict]]:
    # Priority order for display: Local > Env > Global
    sources = []

    if scope in (None, "local"):
        sources.append(("Local Config", _read_toml(LOCAL_CONFIG_FILE)))

    if scope in (None, "env"):
        sources.append(
            (
                "Environment",
                {
                    k[len(ENV_APP_PREFIX) :].lower(): v
                    for k, v in os.environ.items()
                    if k.lower().startswith(ENV_APP_PREFIX.lower())
                },
            )
        )

    if scope in (None, "global"):
        sources.append(("Global Config", _read_toml(GLOBAL_CONFIG_FILE)))

    return [(name, data) for name, data in sources if data]


def get_config(key: str | None, scope: str | None) -> None:
    """Show configuration value(s) from the specified scope or all scopes."""
    schema = _get_config_schema()

    if key is not None:
        _check_key_exists(key)

    sources = _collect_sources(scope)
    keys = [key] if key is not None else sorted(schema.keys())

    table_data = []
    for k in keys:
        row = {"Key": k, "Description": schema[k]["description"]}
        for source_name, config_data in sources:
            if k in config_data:
                row.update(Value=config_data[k], Source=source_name)
                break
        else:
            row.update(Value=schema[k]["default"], Source="Default")
        table_data.append(row)

    display_config(table_data)


def delete_config(key: str | None, scope: str) -> None:
    """Delete one key, or every key, from the specified scope."""
    if scope == "env":
        env_var = f"{ENV_APP_PREFIX}{key.upper() if key else '*'}"
        print(
            f"{Fore.YELLOW}Info:{Style.RESET_ALL} Cannot delete environment variables through sdf.\n"
            f"Please delete them through your terminal/OS:"
        )
        _env_instructions(env_var, None)
        return

    config_path = _config_path(scope)
    config_data = _read_toml(config_path)

    if not config_data:
        print(f"{Fore.YELLOW}Info:{Style.RESET_ALL} No {scope} config found at {config_path}")
        return

    if key is not None:
        if key not in config_data:
            print(f"{Fore.YELLOW}Info:{Style.RESET_ALL} Key '{key}' not found in {scope} config")
            return
        del config_data[key]
        print(f"{Fore.GREEN}Deleted {key} from {scope} config{Style.RESET_ALL}")
    else:
        if not typer.confirm(f"Delete ALL config from {scope} scope?"):
            print("Delete cancelled.")
            return
        config_data.clear()
        print(f"{Fore.GREEN}Deleted all config from {scope} scope{Style.RESET_ALL}")

    if config_data:
        _write_toml(config_path, config_data)
    else:
        config_path.unlink()
        print(f"Removed empty config file: {config_path}")


def describe_callback(ctx: typer.Context, param, value: bool):
    if not value or ctx.resilient_parsing:
        return

    print_describe_options()
    raise typer.Exit()


@handle_sidediff_exception
def main(
    ctx: typer.Context,
    describe: bool = typer.Option(
        False,
        "--describe",
        callback=describe_callback,
        is_eager=True,
        help="Describe available configuration options and exit.",
    ),
    key: str | None = typer.Argument(None, help="Configuration key to get or set."),
    value: str | None = typer.Argument(
        None, help="Value to set (omit to get current value)."
    ),
    scope: str | None = typer.Option(
        None,
        "--scope",
        help="Scope to modify. Defaults to local for setting/deleting, all for getting.",
    ),
    delete: bool = typer.Option(
        False,
        "--delete",
        help="Delete the key from the scope, or every key if none is given.",
    ),
) -> None:
    """
    Manage global and local sidediff configuration.

    Priority order: program arguments > custom config > local config > environment variables > global config

    Examples:
        # Show all configuration
        sdf config

        # Raise the rename threshold for this repository
        sdf config rename_similarity 70

        # Disable the thread pool everywhere
        sdf config parallel false --scope global
    """
    if scope not in SCOPES:
        raise ConfigurationError(
            f"Unknown scope '{scope}'", "Use one of: local, global, env"
        )

    if delete:
        if value is not None:
            raise ConfigurationError("Cannot specify a value when deleting")
        delete_config(key, scope or "local")
    elif value is not None:
        if key is None:
            raise ConfigurationError("Key is required when setting a value")
        set_config(key, value, scope or "local")
    else:
        get_config(key, scope)
