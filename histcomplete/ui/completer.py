from prompt_toolkit.completion import Completer, Completion

from histcomplete.core.tokenizer import split_input
from histcomplete.engine import SuggestionEngine


class HistoryCompleter(Completer):
    """
    Custom completer backed by the command history.
    Each suggestion replaces the word currently being typed.
    """

    def __init__(self, engine: SuggestionEngine):
        self.engine = engine

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor

        _, partial = split_input(text)

        for suggestion in self.engine.suggest(text):
            yield Completion(
                suggestion.text,
                start_position=-len(partial),
                display=suggestion.value,
                display_meta="full command" if suggestion.full_command else "history"
            )
