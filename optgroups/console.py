# Optgroups — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance and user-facing error rendering for optgroups."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from optgroups.exceptions import UsageError

console = Console(stderr=True)


def render_usage_error(error: UsageError, target: Console | None = None) -> None:
    """Print a `UsageError` the way a command line user should see it."""
    target = target or console
    if error.context is not None:
        usage = escape(f"{error.context.command_path} [OPTIONS]")
        target.print(f"[bold]Usage:[/] {usage}", soft_wrap=True)
    target.print(f"[bold red]Error:[/] {escape(error.format_message())}", soft_wrap=True)
