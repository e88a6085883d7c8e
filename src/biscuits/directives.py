"""Reserved cookie directives.

A directive is one of the attributes with protocol-defined meaning. Keys
are the lowercase wire names; classification is a single lookup against
``RESERVED`` after lowercasing the token key.
"""

DOMAIN = "domain"
PATH = "path"
EXPIRES = "expires"
MAX_AGE = "max-age"
SECURE = "secure"
HTTPONLY = "httponly"

# Directives carrying a string value, in serialization order
VALUE_DIRECTIVES: tuple[str, ...] = (DOMAIN, PATH, EXPIRES, MAX_AGE)

# Boolean directives, in serialization order
FLAG_DIRECTIVES: tuple[str, ...] = (SECURE, HTTPONLY)

RESERVED: frozenset[str] = frozenset(VALUE_DIRECTIVES + FLAG_DIRECTIVES)


def is_reserved(key: str) -> bool:
    """True if *key* names a directive, compared case-insensitively."""
    return key.lower() in RESERVED


def flag_value(value: str) -> bool:
    """Interpret the value of a ``secure=...`` or ``httponly=...`` token.

    Only ``false`` (any casing) turns the flag off; every other value,
    including the empty string, turns it on.
    """
    return value.lower() != "false"
