"""Guarantee that a string starts or ends with a given substring."""

import pydash


def insert_at(text: str, target: str, position: int) -> str:
    """Insert `target` in `text` at `position`.

    No bounds validation: a `position` past the end appends `target`.
    """
    return text[:position] + target + text[position:]


def ensure_starts_with(text: str = "", target: str = "", position: int = 0) -> str:
    """Ensure that `text` starts with `target` at `position`.

    Args:
        text: The string to check.
        target: The expected prefix.
        position: Where `target` is expected (and inserted if missing).

    Returns:
        str: `text` unchanged if it already starts with `target` at
        `position`, otherwise `text` with `target` inserted there.
    """
    if pydash.starts_with(text, target, position):
        return text
    return insert_at(text, target, position)


def ensure_ends_with(
    text: str = "", target: str = "", position: int | None = None
) -> str:
    """Ensure that `text` ends with `target`.

    Args:
        text: The string to check.
        target: The expected suffix.
        position: Where `target` is expected to end; defaults to the end of
            `text`, which is also where a missing `target` gets inserted.

    Returns:
        str: `text` unchanged if it already ends with `target`, otherwise
        `text` with `target` inserted.
    """
    if position is None:
        position = len(text)
    if pydash.ends_with(text, target, position):
        return text
    return insert_at(text, target, position)
