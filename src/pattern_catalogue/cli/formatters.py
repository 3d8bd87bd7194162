"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for catalogue listings:
- JSON for scripting
- Rich tables with colors and borders
- Plain list formatting for detailed views
"""

import json
from typing import Any, Dict, List

from rich.console import Console
from rich.table import Table

FORMATS = ("json", "table", "list")


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    # Default to JSON
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    return json.dumps(data, indent=2, default=str)


def format_demos_table(demos: List[Dict[str, str]]) -> str:
    """Format demos as a table using the Rich library."""
    if not demos:
        return "No demos found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Family", style="green")
    table.add_column("Description", style="white")

    for entry in demos:
        table.add_row(
            entry.get("name", "N/A"),
            entry.get("family", "N/A"),
            entry.get("description", ""),
        )

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get()


def format_demos_list(demos: List[Dict[str, str]]) -> str:
    """Format demos as a list grouped under family headings."""
    if not demos:
        return "No demos found."

    lines = []
    current_family = None
    for entry in demos:
        family = entry.get("family", "N/A")
        if family != current_family:
            if current_family is not None:
                lines.append("")  # Blank line between families
            lines.append(f"{family}:")
            current_family = family
        description = entry.get("description")
        if description:
            lines.append(f"  {entry.get('name', 'N/A')} - {description}")
        else:
            lines.append(f"  {entry.get('name', 'N/A')}")

    return "\n".join(lines)
