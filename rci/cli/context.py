from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from rci.core.config import Config, find_config_path, load_config
from rci.core.errors import ErrorCode
from rci.core.result import Err
from rci.output.console import ConsoleProtocol, RichConsole
from rci.platform.detection import PlatformInfo, detect


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    platform: PlatformInfo
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    console = RichConsole()

    path, required = find_config_path(config_path)
    config = Config()
    if path is not None:
        config_result = load_config(path)
        if isinstance(config_result, Err):
            if required:
                console.error(config_result.error.message)
                raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
            console.warning(f"ignoring {path}: {config_result.error.message}")
        else:
            config = config_result.value

    return CLIContext(config=config, platform=detect(), console=console)
