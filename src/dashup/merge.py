"""Recursive, in-place merge of mappings."""

from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

from dashup.errors import ArgumentError
from dashup.kinds import ValueKind, classify

M = TypeVar("M", bound=MutableMapping[Any, Any])


def merge_recursive(target: M, *sources: Mapping[Any, Any] | None) -> M:
    """Deep-merge `sources` into `target`, mutating and returning `target`.

    Ownership: `target` is modified in place, never copied. Nested mappings of
    `target` are mutated too, so callers sharing them will observe the change.

    For each source, in order, and each of its keys, in insertion order:
    if ``target[key]`` is a mutable mapping, ``source[key]`` is merged into it
    recursively (a non-mapping ``source[key]`` adds nothing and leaves it
    as-is); otherwise ``target[key]`` is replaced by ``source[key]`` (the last
    source wins, sequences are replaced wholesale).

    There is no cycle detection: a source that references `target` recurses
    without bound.

    Args:
        target: The mapping to merge into.
        *sources: One or more mappings. ``None`` sources are skipped.

    Returns:
        The same `target` object.

    Raises:
        ArgumentError: If no source is given or a source is not a mapping.
    """
    if not sources:
        raise ArgumentError("merge_recursive", "at least one source is required")

    for source in sources:
        kind = classify(source)
        if kind is ValueKind.NULL:
            continue
        if kind is not ValueKind.MAPPING:
            raise ArgumentError(
                "merge_recursive", f"cannot merge a {type(source).__name__}"
            )
        for key, value in source.items():
            current = target.get(key)
            if not isinstance(current, MutableMapping):
                target[key] = value
            elif isinstance(value, Mapping):
                merge_recursive(current, value)
            # a non-mapping value has no keys to merge into an existing mapping

    return target
