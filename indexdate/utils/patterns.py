"""Date pattern dialects.

Patterns reach us in two spellings: Python strftime patterns ("%Y-%m-%d")
and PHP date() patterns ("Y-m-d\\TH:i:s\\Z"), the latter being what site
configuration values are usually written in. Everything below the service
works with strftime patterns only, so PHP patterns are translated here.
"""

from functools import lru_cache

from ..exceptions import PatternError


# PHP date() letters with an exact strftime counterpart.
PHP_DIRECTIVES = {
    "d": "%d",
    "D": "%a",
    "l": "%A",
    "m": "%m",
    "M": "%b",
    "F": "%B",
    "y": "%y",
    "Y": "%Y",
    "H": "%H",
    "h": "%I",
    "i": "%M",
    "s": "%S",
    "A": "%p",
    "T": "%Z",
    "O": "%z",
    "u": "%f",
}

# Unpadded PHP letters. strptime reads one or two digits for the padded
# directives, so these work for parsing but cannot be rendered portably.
PARSE_ONLY_DIRECTIVES = {
    "j": "%d",
    "n": "%m",
    "G": "%H",
    "g": "%I",
}

# PHP date() letters that strftime cannot express portably.
UNSUPPORTED_DIRECTIVES = frozenset("NSwzWtLoXxaBvePpZcrUI")


def is_strftime(pattern: str) -> bool:
    """Return True if pattern is already a strftime pattern."""
    return "%" in pattern


def php_to_strftime(pattern: str, parsing: bool = False) -> str:
    """Translate a PHP date() pattern to a strftime pattern.

    A backslash makes the following character literal. Characters that are
    not PHP format letters are copied through as literals. With parsing=True
    the unpadded letters j, n, G and g are accepted as well.

    Two-digit years (y) follow Python's pivot: 00-68 is 20xx and 69-99 is
    19xx. PHP puts 69 in 2069.

    Raises:
        PatternError: If the pattern uses a letter strftime cannot express,
            or ends with a dangling backslash.
    """
    parts = []
    chars = iter(pattern)
    for char in chars:
        if char == "\\":
            literal = next(chars, None)
            if literal is None:
                raise PatternError(
                    "Pattern ends with an escape character",
                    details={"pattern": pattern}
                )
            parts.append("%%" if literal == "%" else literal)
        elif char in PHP_DIRECTIVES:
            parts.append(PHP_DIRECTIVES[char])
        elif parsing and char in PARSE_ONLY_DIRECTIVES:
            parts.append(PARSE_ONLY_DIRECTIVES[char])
        elif char in UNSUPPORTED_DIRECTIVES or char in PARSE_ONLY_DIRECTIVES:
            raise PatternError(
                f"Unsupported format character '{char}'",
                details={"pattern": pattern, "character": char}
            )
        else:
            parts.append("%%" if char == "%" else char)
    return "".join(parts)


@lru_cache(maxsize=128)
def to_strftime(pattern: str, parsing: bool = False) -> str:
    """Return pattern as a strftime pattern, translating PHP style if needed."""
    if is_strftime(pattern):
        return pattern
    return php_to_strftime(pattern, parsing)
