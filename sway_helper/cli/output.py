"""Output formatting utilities for CLI commands.

Provides both rich formatted output (on stderr) and machine-readable JSON
output (on stdout, with --json).
"""

import json
import sys
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..errors import SwayHelperError
from ..models.geometry import OutputInfo


class OutputFormatter:
    """Format output as either rich text or JSON.

    Examples:
        >>> fmt = OutputFormatter(json_mode=False)
        >>> fmt.print_running("resize grow right")
        Running: resize grow right

        >>> fmt = OutputFormatter(json_mode=True)
        >>> fmt.print_running("resize grow right")
        >>> fmt.output()
        {"status": "success", "command": "resize grow right"}
    """

    def __init__(self, json_mode: bool = False, console: Optional[Console] = None):
        """Initialize output formatter.

        Args:
            json_mode: If True, output JSON instead of rich text
            console: Console for human readable output (default: stderr)
        """
        self.json_mode = json_mode
        self.console = console or Console(stderr=True)
        self._json_result: Dict[str, Any] = {}

    def set_result(self, **kwargs: Any) -> None:
        """Set JSON result fields."""
        self._json_result.update(kwargs)

    def print_running(self, command: str, dry_run: bool = False) -> None:
        """Report the command sent (or, with dry_run, the one that would be sent)."""
        if self.json_mode:
            self.set_result(status="dry-run" if dry_run else "success", command=command)
        elif dry_run:
            self.console.print(f"[yellow]Would run:[/yellow] {escape(command)}", highlight=False, soft_wrap=True)
        else:
            self.console.print(f"[cyan]Running:[/cyan] {escape(command)}", highlight=False, soft_wrap=True)

    def print_error(self, error: SwayHelperError) -> None:
        """Print an error together with its remediation."""
        if self.json_mode:
            self.set_result(status="error", error=error.to_dict())
            return

        self.console.print(f"[red]✗ Error:[/red] {escape(error.message)}", highlight=False, soft_wrap=True)
        if error.suggestion:
            self.console.print(f"[blue]  Remediation:[/blue] {escape(error.suggestion)}", highlight=False, soft_wrap=True)

    def display_output(self, output: OutputInfo) -> None:
        """Show a display's identity and position."""
        rect = output.rect
        if self.json_mode:
            self.set_result(status="success", output=output.model_dump(mode="json"))
            return

        table = Table(title=f"Display {output.name}", show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value")
        table.add_row("Name", output.name)
        table.add_row("Description", escape(output.description) if output.description else "[dim]unknown[/dim]")
        table.add_row("Active", "yes" if output.active else "no")
        table.add_row("Position", f"{rect.x},{rect.y}")
        table.add_row("Size", f"{rect.width}x{rect.height}")
        self.console.print(table)

    def output(self, file=None) -> None:
        """Emit the accumulated JSON result (no-op in rich mode)."""
        if not self.json_mode or not self._json_result:
            return
        print(json.dumps(self._json_result), file=file or sys.stdout)
