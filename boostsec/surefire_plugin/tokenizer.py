"""Split delimited option strings into tokens."""

import re

WHITESPACE = " \t\n\r\f"


def split(
    raw: str, separator: str | None = None, max: int = -1  # noqa: A002
) -> list[str]:
    """Split a string into tokens.

    Args:
        raw: String to split
        separator: Delimiter characters, each one a delimiter on its own.
            None splits on whitespace.
        max: Maximum number of tokens. When the string holds more, the last
            token is the rest of the string, delimiters included. Values
            <= 0 mean no limit.

    Returns:
        List of tokens; empty for an empty string

    """
    delimiters = WHITESPACE if separator is None else separator
    if delimiters:
        pattern = re.compile(f"[^{re.escape(delimiters)}]+")
        tokens = [(m.start(), m.group()) for m in pattern.finditer(raw)]
    else:
        tokens = [(0, raw)] if raw else []

    if max <= 0 or len(tokens) <= max:
        return [token for _, token in tokens]

    head = [token for _, token in tokens[: max - 1]]
    remainder_start = tokens[max - 1][0]
    return [*head, raw[remainder_start:]]
