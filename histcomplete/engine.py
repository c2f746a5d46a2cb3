from typing import Iterable

from histcomplete.core.trie import HistoryTrie, Suggestion


class SuggestionEngine:
    """
    Entry point used by the shell and the editor: record executed commands,
    suggest continuations of the line being typed.
    """

    def __init__(self, max_suggestions: int = 0):
        self.trie = HistoryTrie()
        self.max_suggestions = max_suggestions  # 0 means unlimited

    def record(self, command_line: str):
        """Called once per executed command, in execution order."""
        self.trie.add(command_line)

    def replay(self, lines: Iterable[str]) -> int:
        """
        Records historical lines in chronological order.
        Returns the number of non-blank lines recorded.
        """
        before = len(self.trie)
        for line in lines:
            self.trie.add(line)
        return len(self.trie) - before

    def suggest(self, current_input_line: str, limit: int | None = None) -> list[Suggestion]:
        """
        Ordered continuations for the in-progress input line.
        An empty list is a normal answer, not a failure.

        The limit counts word suggestions: a full-command suggestion stays
        with the word it extends, so the result can hold limit + 1 entries.
        """
        suggestions = self.trie.get_continuations_for(current_input_line)
        if limit is None:
            limit = self.max_suggestions
        if 0 < limit < len(suggestions):
            if suggestions[limit].full_command:
                limit += 1
            suggestions = suggestions[:limit]
        return suggestions
