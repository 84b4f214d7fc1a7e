"""Resolve a human-readable message from heterogeneous error shapes.

Handles exceptions, HTTP responses (``requests``/``httpx`` style objects or
decoded dicts) and API error payloads of the form ``{"data": {...}}``.
"""

from typing import Any

from dashup.kinds import get_field, is_object


def _own_message(err: Any) -> Any:
    if message := get_field(err, "message"):
        return message
    if isinstance(err, BaseException):
        return str(err)
    return None


def _data_message(data: Any) -> Any:
    if message := get_field(data, "message"):
        return message
    error = get_field(data, "error")
    if isinstance(error, str):
        return error
    if is_object(error):
        return get_field(error, "message") or None
    return None


def extract_error_message(err: Any) -> Any:
    """Resolve and return an error message.

    Candidates are checked in order and the first truthy one wins:

    1. ``err.message`` (``str(err)`` for exceptions without one);
    2. ``err.data.message``;
    3. ``err.data.error`` when it is a string;
    4. ``err.data.error.message`` when ``error`` is an object;
    5. ``err.statusText``, or ``err.reason`` for Python HTTP clients;
    6. ``err.status``, or ``err.status_code``.

    Never raises: this is best effort.

    Args:
        err: An exception, an HTTP response, an error payload or a string.

    Returns:
        The resolved message; `err` itself when it is not an object or when
        nothing resolves.
    """
    if not is_object(err):
        return err

    if message := _own_message(err):
        return message

    if (data := get_field(err, "data")) and (message := _data_message(data)):
        return message

    for name in ("statusText", "reason", "status", "status_code"):
        if value := get_field(err, name):
            return value

    return err
