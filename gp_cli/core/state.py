"""Runtime state shared by gp commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from gp_cli.core.store import JsonSessionStore


@dataclass
class CLIState:
    """Global options, loaded configuration and the session store location."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    sessions_file: Path

    def open_store(self) -> JsonSessionStore:
        return JsonSessionStore(self.sessions_file)
