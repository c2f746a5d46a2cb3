"""
Persistent history log: one CSV row per executed command (command, directory).
"""
import csv
import os
from pathlib import Path
from typing import Optional


class HistoryLog:
    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> list[str]:
        """
        Returns recorded commands in chronological order.
        A missing file is an empty history.
        """
        if not self.path.exists():
            return []

        commands = []
        with open(self.path, "r", newline="", encoding="utf-8") as f:
            for row in csv.reader(f):
                if row and row[0].strip():
                    commands.append(row[0])
        return commands

    def append(self, command: str, directory: Optional[str] = None):
        """Appends one executed command. Blank commands are ignored."""
        if not command.strip():
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow([command, directory or os.getcwd()])

    def clear(self):
        if self.path.exists():
            self.path.write_text("", encoding="utf-8")
