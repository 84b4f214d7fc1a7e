"""Case conversions and slug generation.

Word splitting for the camel/snake based conversions is delegated to pydash,
which mirrors lodash tokenization (case transitions, digits, separators).
"""

import re

import pydash

from dashup.errors import ArgumentError


def upper_first(text: str) -> str:
    """Uppercase the first character of `text`, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def lower_first(text: str) -> str:
    """Lowercase the first character of `text`, leaving the rest untouched."""
    return text[:1].lower() + text[1:]


def pascal_case(text: str) -> str:
    """Convert `text` to upper camel case (``fooBar baz`` -> ``FooBarBaz``)."""
    return upper_first(pydash.camel_case(text))


def dot_case(text: str) -> str:
    """Convert `text` to dot.case notation.

    Only the first underscore of the snake-cased text becomes a dot:
    ``dot_case("foo bar baz") == "foo.bar_baz"``.
    """
    return pydash.snake_case(text).replace("_", ".", 1)


def _slug_pattern(min_len: int | None, max_len: int | None) -> re.Pattern[str] | None:
    if not min_len and not max_len:
        return re.compile(r"[a-z0-9]+")
    if min_len and max_len:
        if min_len > max_len:
            return None
        return re.compile(rf"[a-z0-9]{{{min_len},{max_len}}}")
    if min_len and not max_len:
        return re.compile(rf"[a-z0-9]{{{min_len},}}")
    if min_len is None and max_len:
        return re.compile(rf"[a-z0-9]{{1,{max_len}}}")
    return None


def slugify(
    text: str | None, min_len: int | None = None, max_len: int | None = None
) -> str:
    """Slugify `text`.

    The text is lowercased and stripped of diacritics, then runs of
    ``[a-z0-9]`` are joined with ``-``. `min_len` and `max_len` bound the
    length of each run:

    - neither given: any run length;
    - both given: runs of ``min_len`` to ``max_len`` characters;
    - `min_len` only: runs of at least ``min_len`` characters;
    - `max_len` only, with `min_len` left as ``None``: runs of at most
      ``max_len`` characters.

    Args:
        text: Free text. Empty or ``None`` yields ``""``.
        min_len: Minimum run length.
        max_len: Maximum run length.

    Returns:
        str: The slug, e.g. ``slugify("Héllo World!") == "hello-world"``.

    Raises:
        ArgumentError: For any other combination, e.g. ``min_len=0`` with a
            `max_len`, or a `min_len` above `max_len`.
    """
    if not text:
        return ""

    if (pattern := _slug_pattern(min_len, max_len)) is None:
        raise ArgumentError(
            "slugify", f"unsupported bounds min_len={min_len!r}, max_len={max_len!r}"
        )

    return "-".join(pattern.findall(pydash.deburr(text.lower())))
