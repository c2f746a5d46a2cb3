from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from histcomplete.core.trie import Suggestion

console = Console()

def print_suggestions(input_line: str, suggestions: list[Suggestion]):
    """
    Renders suggestions for an input line in a table, best first.
    """
    if not suggestions:
        console.print("[dim]No suggestions.[/dim]")
        return

    table = Table(title=f"[bold]Suggestions for[/bold] {escape(repr(input_line))}", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("Suggestion", style="cyan")
    table.add_column("Kind")

    for i, suggestion in enumerate(suggestions, 1):
        if suggestion.full_command:
            kind = "full command"
        elif suggestion.space:
            kind = "word (continues)"
        else:
            kind = "word"
        # repr keeps the trailing space of continuing words visible
        table.add_row(str(i), escape(repr(suggestion.text)), kind)

    console.print(table)

def print_history(commands: list[str]):
    """
    Renders the recorded commands, oldest first.
    """
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=6)
    table.add_column("Command")

    for i, command in enumerate(commands, 1):
        table.add_row(str(i), escape(command))

    console.print(table)

def print_error(message: str):
    """
    Renders an error message in a red panel.
    """
    console.print(Panel(message, title="Error", style="bold red"))
