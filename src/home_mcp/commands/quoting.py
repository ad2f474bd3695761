"""Single-quote shell literals for caller-supplied text."""

_CLOSE_ESCAPE_REOPEN = "'\"'\"'"


def quote(raw: str) -> str:
    """Turn any string into a POSIX-shell single-quoted literal.

    Inside single quotes the shell interprets nothing, so the only character
    needing treatment is the single quote itself: it closes the literal, emits
    a double-quoted ``'`` and reopens (``'`` -> ``'"'"'``).

    Args:
        raw: The text to protect.

    Returns:
        A literal that a POSIX shell evaluates to exactly ``raw``.
    """
    return "'" + raw.replace("'", _CLOSE_ESCAPE_REOPEN) + "'"
