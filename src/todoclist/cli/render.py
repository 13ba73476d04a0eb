# src/todoclist/cli/render.py

"""
Console rendering helpers.

Everything is printed as rich Text so task names are never parsed as markup,
and with soft wrapping so long names stay on one line in pipes.
"""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo

from rich.console import Console
from rich.text import Text

from ..tasks.task_models import Task

ID_STYLE = "bold green"
NAME_STYLE = "bold cyan"
ARROW_STYLE = "bold magenta"
DATE_STYLE = "bold yellow"
ERROR_STYLE = "red"


def format_created(ts: int, tz: tzinfo | None = None) -> str:
    """E.g. 'Sat Oct 17 09:05:00 PM 2026' (local time unless tz is given)."""
    dt = datetime.fromtimestamp(ts, tz=UTC).astimezone(tz)
    return f"{dt:%a %b} {dt.day:>2} {dt:%I:%M:%S %p %Y}"


def task_text(task_id: int, task: Task, tz: tzinfo | None = None) -> Text:
    return Text.assemble(
        (f"#{task_id}: ", ID_STYLE),
        (task.name, NAME_STYLE),
        ("\n \\-> Created at ", ARROW_STYLE),
        (format_created(task.creation, tz), DATE_STYLE),
    )


def say(console: Console, message: str | Text, style: str = "") -> None:
    text = message if isinstance(message, Text) else Text(message, style=style)
    console.print(text, soft_wrap=True)


def say_error(console: Console, message: str) -> None:
    say(console, message, style=ERROR_STYLE)
