"""DASHUP

Value normalization and text transformation helpers layered onto pydash:
type coercion, recursive merge, case and slug conversions, placeholder
substitution, string edge guarantees, substring matching, time/byte unit
conversions and error message extraction.
"""

import logging

from dashup.case import dot_case, lower_first, pascal_case, slugify, upper_first
from dashup.coercion import (
    coerce_to_object,
    coerce_to_string,
    compare_with_operator,
    resolve_id,
    resolve_payload,
    resolve_type_name,
)
from dashup.edges import ensure_ends_with, ensure_starts_with, insert_at
from dashup.matching import matches_subject
from dashup.merge import merge_recursive
from dashup.messages import extract_error_message
from dashup.namespace import extend
from dashup.placeholders import substitute_placeholders
from dashup.units import (
    bytes_rate_to_human_units,
    bytes_to_human_units,
    milliseconds_to_time_string,
    seconds_to_time_string,
    time_string_to_seconds,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "bytes_rate_to_human_units",
    "bytes_to_human_units",
    "coerce_to_object",
    "coerce_to_string",
    "compare_with_operator",
    "dot_case",
    "ensure_ends_with",
    "ensure_starts_with",
    "extend",
    "extract_error_message",
    "insert_at",
    "lower_first",
    "matches_subject",
    "merge_recursive",
    "milliseconds_to_time_string",
    "pascal_case",
    "resolve_id",
    "resolve_payload",
    "resolve_type_name",
    "seconds_to_time_string",
    "slugify",
    "substitute_placeholders",
    "time_string_to_seconds",
    "upper_first",
]
__version__ = "0.1.0"
