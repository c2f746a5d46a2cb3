import csv
import subprocess
from dataclasses import asdict
from typing import Optional

import typer
from rich.console import Console

from histcomplete.config import Config
from histcomplete.history import HistoryLog
from histcomplete.startup import load_engine
from histcomplete.ui.render import print_suggestions, print_history, print_error

app = typer.Typer(help="History-based autocompletion for shell commands.")
console = Console()

EXIT_WORDS = ("exit", "quit")


@app.command()
def suggest(
    input_line: str = typer.Argument(..., help="Partially typed command line"),
    limit: Optional[int] = typer.Option(None, min=0, help="Maximum number of suggestions (0 = unlimited)")
):
    """
    Suggest continuations of a partially typed command.
    """
    config = Config.load()
    engine = load_engine(config)
    print_suggestions(input_line, engine.suggest(input_line, limit=limit))


@app.command()
def record(command: str = typer.Argument(..., help="Executed command line")):
    """
    Append a command to the history log.
    """
    config = Config.load()
    try:
        HistoryLog(config.history_path).append(command)
    except OSError as e:
        print_error(f"Could not write history: {e}")
        raise typer.Exit(code=1)


@app.command()
def history(clear: bool = typer.Option(False, "--clear", help="Erase the history log")):
    """
    Show (or clear) the recorded command history.
    """
    config = Config.load()
    log = HistoryLog(config.history_path)
    if clear:
        try:
            log.clear()
        except OSError as e:
            print_error(f"Could not clear history: {e}")
            raise typer.Exit(code=1)
        console.print("[blue]History cleared.[/blue]")
        return

    try:
        commands = log.load()
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        print_error(f"Could not read history from {log.path}:\n{e}")
        raise typer.Exit(code=1)
    if not commands:
        console.print("[dim]History is empty.[/dim]")
        return
    print_history(commands)


@app.command("config")
def config_command(
    key: Optional[str] = typer.Argument(None, help="Setting to change"),
    value: Optional[str] = typer.Argument(None, help="New value")
):
    """
    Show settings, or change one: `config max_suggestions 5`.
    """
    config = Config.load()
    if key is None:
        for name, current in asdict(config).items():
            console.print(f"[cyan]{name}[/cyan] = {current}")
        return

    if value is None:
        print_error(f"Usage: config {key} <value>")
        raise typer.Exit(code=1)

    try:
        config.set(key, value)
    except KeyError as e:
        print_error(e.args[0])
        raise typer.Exit(code=1)
    except ValueError:
        print_error(f"Invalid value for {key}: {value}")
        raise typer.Exit(code=1)
    console.print(f"[green]{key} updated to {getattr(config, key)}[/green]")


@app.command()
def shell():
    """
    Interactive prompt with history autocompletion. Commands are run and recorded.
    """
    from prompt_toolkit import PromptSession
    from prompt_toolkit.formatted_text import HTML
    from histcomplete.ui.completer import HistoryCompleter

    config = Config.load()
    engine = load_engine(config)
    log = HistoryLog(config.history_path)

    session = PromptSession(
        completer=HistoryCompleter(engine),
        complete_while_typing=config.complete_while_typing
    )

    console.print("[dim]Press Tab for suggestions. Type 'exit' to leave.[/dim]\n")

    while True:
        try:
            line = session.prompt(HTML("<ansigreen><b>$ </b></ansigreen>"))
        except (KeyboardInterrupt, EOFError):
            console.print("\n[blue]Goodbye![/blue]")
            break

        if line.strip().lower() in EXIT_WORDS:
            console.print("[blue]Goodbye![/blue]")
            break

        if not line.strip():
            continue

        try:
            subprocess.run(line, shell=True)
        except OSError as e:
            print_error(f"Could not run command: {e}")
            continue

        engine.record(line)
        try:
            log.append(line)
        except OSError as e:
            console.print(f"[dim]History not saved: {e}[/dim]")


def entry_point():
    """ Wrapper to invoke typer properly"""
    app()

if __name__ == "__main__":
    app()
