"""Console used by the guestbook CLI commands, plus a plain JSON printer."""

import json
from typing import Any

from rich.console import Console

# Guest tables keep their colours when piped or captured
console = Console(force_terminal=True, color_system="auto")


def print_json(data: Any) -> None:
    """Write ``data`` to stdout as indented JSON (``show --json``).

    Values json cannot encode, such as datetimes, are written with ``str``.
    """
    print(json.dumps(data, indent=2, default=str))
