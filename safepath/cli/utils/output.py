"""Output formatting utilities for CLI."""

import json
from enum import Enum
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table


class OutputFormat(Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class OutputFormatter:
    """Handle output formatting for different formats."""

    def __init__(self, format_type: str = "table", console: Optional[Console] = None):
        """
        Initialize output formatter.

        Args:
            format_type: Output format (table, json, yaml)
            console: Console to print to (a new one by default)
        """
        self.console = console or Console()
        try:
            self.format = OutputFormat(format_type.lower())
        except ValueError:
            self.format = OutputFormat.TABLE

    def _print_structured(self, data: Any):
        # Plain print so rich does not wrap or re-highlight machine output
        if self.format == OutputFormat.JSON:
            self.console.print(
                json.dumps(data, indent=2, default=str),
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        else:
            self.console.print(
                yaml.safe_dump(data, default_flow_style=False, allow_unicode=True),
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )

    def print_list(
        self,
        items: List[Dict[str, Any]],
        columns: Optional[List[str]] = None,
        title: Optional[str] = None,
    ):
        """
        Print a list of items.

        Args:
            items: List of items to print
            columns: Column names to display (for table format)
            title: Table title (for table format)
        """
        if self.format != OutputFormat.TABLE:
            self._print_structured(items)
            return

        if not items:
            self.console.print("[dim]No items found[/dim]")
            return

        if not columns:
            columns = list(items[0].keys())

        table = Table(title=title)
        for col in columns:
            table.add_column(col.replace("_", " ").title())

        for item in items:
            row = []
            for col in columns:
                value = item.get(col, "")
                if value is None:
                    value = "[dim]-[/dim]"
                elif isinstance(value, bool):
                    value = "[green]✓[/green]" if value else "[red]✗[/red]"
                elif isinstance(value, list):
                    value = escape("\n".join(str(v) for v in value))
                else:
                    value = escape(str(value))
                row.append(value)
            table.add_row(*row)

        self.console.print(table)

    def print_detail(
        self,
        item: Dict[str, Any],
        title: Optional[str] = None,
    ):
        """
        Print detailed view of a single item.

        Args:
            item: Item to print
            title: Optional title
        """
        if self.format != OutputFormat.TABLE:
            self._print_structured(item)
            return

        if title:
            self.console.print(f"[bold]{escape(title)}[/bold]\n")

        for key, value in item.items():
            formatted_key = key.replace("_", " ").title()

            if value is None:
                formatted_value = "[dim]Not set[/dim]"
            elif isinstance(value, bool):
                formatted_value = "[green]Yes[/green]" if value else "[red]No[/red]"
            elif isinstance(value, (list, dict)):
                formatted_value = escape(json.dumps(value, indent=2, ensure_ascii=False))
            else:
                formatted_value = escape(str(value))

            self.console.print(f"[cyan]{formatted_key}:[/cyan] {formatted_value}")

    def print_text(self, text: str):
        """Print raw text such as file content."""
        if self.format != OutputFormat.TABLE:
            self._print_structured({"content": text})
        else:
            self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True, end="")

    def print_success(self, message: str):
        """Print success message."""
        if self.format != OutputFormat.TABLE:
            self._print_structured({"status": "success", "message": message})
        else:
            self.console.print(f"[green]✓[/green] {escape(message)}")

    def print_error(self, message: str, details: Optional[List[str]] = None):
        """Print error message with optional detail lines."""
        if self.format != OutputFormat.TABLE:
            payload: Dict[str, Any] = {"status": "error", "message": message}
            if details:
                payload["details"] = details
            self._print_structured(payload)
        else:
            self.console.print(f"[red]✗[/red] {escape(message)}")
            for detail in details or []:
                self.console.print(f"  [red]-[/red] {escape(detail)}")

    def print_warning(self, message: str):
        """Print warning message."""
        if self.format != OutputFormat.TABLE:
            self._print_structured({"status": "warning", "message": message})
        else:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
