"""
Quote-aware tokenizer for shell command lines.
"""

NORMAL = "normal"
IN_SINGLE_QUOTE = "in_single_quote"
IN_DOUBLE_QUOTE = "in_double_quote"

QUOTE_STATES = {
    "'": IN_SINGLE_QUOTE,
    '"': IN_DOUBLE_QUOTE,
}


def _scan(line: str) -> tuple[list[str], str]:
    """
    Walks the line once and returns (tokens, state at end of line).
    """
    tokens = []
    current = []
    in_token = False
    state = NORMAL

    for ch in line:
        if state == NORMAL:
            if ch.isspace():
                if in_token:
                    tokens.append("".join(current))
                    current = []
                    in_token = False
                continue
            in_token = True
            current.append(ch)
            if ch in QUOTE_STATES:
                state = QUOTE_STATES[ch]
        else:
            current.append(ch)
            # Quotes don't nest: only the opening character closes the literal
            if (state == IN_SINGLE_QUOTE and ch == "'") or (state == IN_DOUBLE_QUOTE and ch == '"'):
                state = NORMAL

    # Unterminated literals run to end of line
    if in_token:
        tokens.append("".join(current))

    return tokens, state


def tokenize(line: str) -> list[str]:
    """
    Splits a command line on runs of whitespace, keeping quoted literals
    (quote characters included) as single tokens.

    Examples:
        tokenize("git commit -m 'first message'")
        -> ["git", "commit", "-m", "'first message'"]
    """
    tokens, _ = _scan(line)
    return tokens


def split_input(line: str) -> tuple[list[str], str]:
    """
    Splits an in-progress input line into (complete_tokens, partial).

    The partial is the word currently being typed. It is "" when the line
    ends in whitespace outside of a quoted literal. A line with no tokens
    gives ([], "").
    """
    tokens, state = _scan(line)
    if not tokens:
        return [], ""

    if state == NORMAL and line[-1].isspace():
        return tokens, ""

    return tokens[:-1], tokens[-1]
