""" Utility functions
"""
from re import compile as re_compile

from . import constants

# https://tools.ietf.org/html/rfc7230#section-3.2.6 token characters
_HEADER_NAME = re_compile(r"[\^_`a-zA-Z\-0-9!#$%&'*+.|~]+")
# https://tools.ietf.org/html/rfc7230#section-3.2 field-value characters
_INVALID_HEADER_VALUE_CHAR = re_compile(r"[^\t\x20-\x7e\x80-\xff]")

# The host API accepts either case for hex digits
_TRACE_ID = re_compile(
    r"[0-9a-fA-F]{{{0}}}".format(constants.TRACE_ID_HEX_LEN)
)
_SPAN_ID = re_compile(
    r"[0-9a-fA-F]{{{0}}}".format(constants.SPAN_ID_HEX_LEN)
)


def is_valid_header_name(name):
    """
    True if every character of the non-empty `name` is a header token
    character.
    """
    return _HEADER_NAME.fullmatch(name) is not None


def is_valid_header_value(value):
    return _INVALID_HEADER_VALUE_CHAR.search(value) is None


def read_header(carrier, getter, key):
    """
    Read the value for `key` from `carrier` through `getter`.

    Getters may return a single string or a sequence of strings, only the
    first element of a sequence is used. Absent or empty values come back as
    an empty string.
    """
    header = getter.get(carrier, key)
    if header is not None and not isinstance(header, str):
        header = next(iter(header), None)
    return header or ''


def pad_trace_id(trace_id):
    """Left-pad a 16 character (8-byte) trace id to the canonical length."""
    if len(trace_id) == constants.SPAN_ID_HEX_LEN:
        return constants.TRACE_ID_PADDING + trace_id
    return trace_id


def is_valid_trace_id(trace_id):
    return (
        _TRACE_ID.fullmatch(trace_id) is not None
        and int(trace_id, 16) != 0
    )


def is_valid_span_id(span_id):
    return (
        _SPAN_ID.fullmatch(span_id) is not None
        and int(span_id, 16) != 0
    )
