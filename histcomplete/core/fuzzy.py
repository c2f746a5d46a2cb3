import re

SUB_TOKEN_SEPARATORS = re.compile(r"[-_:/]")


def fuzzy_match(partial: str, candidate: str) -> bool:
    """
    Case-insensitive match of a partially typed word against a candidate token.
    """
    lowered = partial.lower()

    # Exact prefix, ignoring case
    if candidate.lower().startswith(lowered):
        return True

    # Prefix of any part of the word, e.g. "chr" for "google-chrome"
    return any(part.lower().startswith(lowered) for part in SUB_TOKEN_SEPARATORS.split(candidate))
