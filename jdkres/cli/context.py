from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from jdkres.core.config import Config, load_config_or_default
from jdkres.core.result import Err
from jdkres.output.console import ConsoleProtocol, RichConsole
from jdkres.output.errors import error_exit_code, print_error
from jdkres.platform.paths import user_cache_dir, user_config_dir

CONFIG_ENV_VAR = "JDKRES_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    cache_dir: Path


def default_config_path() -> Path:
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return user_config_dir() / "config.toml"


def build_context(config_path: Path | None = None, *, verbose: bool = False) -> CLIContext:
    console = RichConsole(verbose=verbose)
    path = config_path if config_path is not None else default_config_path()

    config_result = load_config_or_default(path)
    if isinstance(config_result, Err):
        print_error(config_result.error, console)
        raise typer.Exit(code=error_exit_code(config_result.error))

    config = config_result.value
    if config.manifest.cache_dir:
        cache_dir = Path(config.manifest.cache_dir).expanduser()
    else:
        cache_dir = user_cache_dir()

    return CLIContext(config=config, console=console, cache_dir=cache_dir)
