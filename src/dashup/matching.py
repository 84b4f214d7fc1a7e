"""Case-insensitive substring matching."""

from typing import Any


def matches_subject(subject: Any, input_value: Any) -> bool:
    """Check if `input_value` matches `subject`.

    Both values are converted with ``str()``. Equal strings always match;
    otherwise a non-empty input matches when it is found, ignoring case,
    inside the subject.

    Args:
        subject: The search base.
        input_value: The value to look for.

    Returns:
        bool: True if `input_value` matches, False otherwise.
    """
    subject, input_value = str(subject), str(input_value)
    if subject == input_value:
        return True
    return bool(input_value) and input_value.lower() in subject.lower()
