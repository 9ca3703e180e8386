"""
Display helper functions for the hostblock CLI.

Everything here goes to stderr so that stdout only ever carries the report.
"""

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, soft_wrap=True)


def display_warning(message: str):
    """Display warning message"""
    console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")


def display_error(message: str):
    """Display error message"""
    console.print(f"[red]❌ {escape(message)}[/red]")
