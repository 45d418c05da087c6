"""Shared command helpers."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, List, NoReturn, Optional

import typer

from gp_cli.core.models import SessionRecord
from gp_cli.core.state import CLIState
from gp_cli.core.store import SessionRepository, StoreError
from gp_cli.utils.dates import resolve_range_start


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
        return
    state.console.print_json(data=payload)


def fail(state: CLIState, message: str, code: int = 1) -> NoReturn:
    """Report an error in the active output mode and exit."""
    if state.json_output:
        print_json_payload(state, {"status": "error", "message": message})
    elif state.plain_output:
        typer.echo(f"error\t{message}")
    else:
        state.console.print(message, markup=False)
    raise typer.Exit(code=code)


def load_sessions(
    state: CLIState,
    store: SessionRepository,
    date_range: str = "all",
    now: Optional[datetime] = None,
) -> List[SessionRecord]:
    """Read sessions in range from the store, newest first."""
    try:
        sessions = store.list_all()
    except StoreError as exc:
        fail(state, str(exc))

    start = resolve_range_start(date_range, now=now)
    if start is not None:
        sessions = [session for session in sessions if session.date >= start]
    sessions.sort(key=lambda session: session.date, reverse=True)
    return sessions
