import csv

from rich.console import Console
from rich.panel import Panel

from histcomplete.config import Config
from histcomplete.engine import SuggestionEngine
from histcomplete.history import HistoryLog

console = Console()


def load_engine(config: Config) -> SuggestionEngine:
    """
    Builds a suggestion engine and replays the history log into it.
    An unreadable log is reported and the engine starts empty.
    """
    engine = SuggestionEngine(max_suggestions=config.max_suggestions)
    log = HistoryLog(config.history_path)

    try:
        with console.status("Loading command history...", spinner="dots"):
            lines = log.load()
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        console.print(Panel(f"Could not read history from {log.path}:\n{e}", title="History Unavailable", style="bold red"))
        return engine

    count = engine.replay(lines)
    console.print(f"[dim]{count} commands loaded from {log.path}[/dim]")
    return engine
