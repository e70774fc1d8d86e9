"""Miscellaneous utilities."""
import re

__all__ = ["split_words", "camelize", "is_number", "coerce_number"]


_number_re = re.compile(r'[-+]?(?:(?P<int>\d+)|\d+\.\d*|\.\d+)(?:[eE][-+]?\d+)?')


def split_words(text):
    """
    Splits a comma and/or whitespace separated list of words.

    split_words("-h, --help") -> ["-h", "--help"]
    split_words("") -> []
    """
    return [word for word in re.split(r'[\s,]+', text or '') if word]


def camelize(name):
    """
    Converts a hyphenated name into camel case.

    camelize("foo-bar-baz") -> "fooBarBaz"
    camelize("foo") -> "foo"
    """
    first, *rest = name.split('-')
    return first + "".join(segment[:1].upper() + segment[1:] for segment in rest)


def is_number(value):
    """Returns True if `value` is a str that is entirely a numeric literal (int or float)."""
    return isinstance(value, str) and _number_re.fullmatch(value) is not None


def coerce_number(value):
    """
    Returns `value` converted to an int or float if it looks like a number, otherwise returns it unchanged.

    coerce_number("10") -> 10
    coerce_number("-1.5") -> -1.5
    coerce_number("1e3") -> 1000.0
    coerce_number("10px") -> "10px"
    """
    if not isinstance(value, str):
        return value
    match = _number_re.fullmatch(value)
    if match is None:
        return value
    if match.group('int') is not None and 'e' not in value.lower():
        return int(value)
    return float(value)
