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

import typer
from colorama import init
from dotenv import load_dotenv
from loguru import logger
from rich.traceback import install

from sidediff.commands import compare, config, diff
from sidediff.constants import (
    APP_NAME,
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
)
from sidediff.context import GlobalConfig, GlobalContext
from sidediff.core.config.config_loader import ConfigLoader
from sidediff.core.exceptions import handle_sidediff_exception
from sidediff.core.logging.logging import setup_logger
from sidediff.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    setup_signal_handlers,
    version_callback,
)

# Initialize colorama (colored output in terminal)
init(autoreset=True)

app = typer.Typer(
    help=f"{APP_NAME}: review git changes side by side",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

app.command(name="diff")(diff.main)
app.command(name="compare")(compare.main)
app.command(name="config")(config.main)

# a broken config must not stop the config command from fixing it
config_override_command = "config"


def setup_config_args(**kwargs):
    return {key: item for key, item in kwargs.items() if item is not None}


@app.callback(invoke_without_command=True)
@handle_sidediff_exception
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        help="Show version and exit",
    ),
    log_path: bool = typer.Option(
        False,
        "--log-dir",
        "-LD",
        callback=get_log_dir_callback,
        help="Show log path (where logs for sidediff live) and exit",
    ),
    repo_path: str = typer.Option(
        ".",
        "--repo",
        help="Path to the git repository to operate on.",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
    silent: bool | None = typer.Option(
        None,
        "--silent",
        "-s",
        help="Only print errors and the diff output.",
    ),
) -> None:
    """
    Global setup callback. Loads the config and builds the global context.
    """
    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    # skip --help in subcommands
    if any(arg in ctx.help_option_names for arg in ctx.args):
        return

    # initial setup of logger, updated once the config is known
    setup_logger(ctx.invoked_subcommand, debug=verbose or False, silent=silent or False)

    if ctx.invoked_subcommand == config_override_command:
        return

    config_args = setup_config_args(verbose=verbose, silent=silent)

    global_config, used_configs, used_defaults = ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        LOCAL_CONFIG_FILE,
        ENV_APP_PREFIX,
        GLOBAL_CONFIG_FILE,
        Path(custom_config) if custom_config else None,
    )

    setup_logger(
        ctx.invoked_subcommand, debug=global_config.verbose, silent=global_config.silent
    )

    if used_defaults:
        logger.debug("Some settings were not configured, using default values.")
    logger.debug(f"Used {used_configs} to build global context.")

    ctx.obj = GlobalContext.from_global_config(global_config, Path(repo_path))


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8
    ensure_utf8_output()
    # graceful Ctrl+C
    setup_signal_handlers()
    # Disable showing locals in tracebacks
    install(show_locals=False)
    # load any .env files (config values possibly set through env)
    load_dotenv()
    app(prog_name="sdf")


if __name__ == "__main__":
    run_app()
