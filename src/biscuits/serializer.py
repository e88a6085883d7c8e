"""Biscuit serialization.

Renders data pairs first, then directives in a fixed order::

    key=value; domain=...; path=...; expires=...; max-age=...; secure; HttpOnly

The same text works as a ``Cookie`` request value or, with the header name
prepended, as a ``Set-Cookie`` response line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from biscuits.directives import DOMAIN, EXPIRES, MAX_AGE, PATH

if TYPE_CHECKING:
    from biscuits.cookie import Biscuit

SET_COOKIE_PREFIX = "Set-Cookie: "


def to_string(c: Biscuit, include_name: bool = False) -> str:
    """Serialize *c* to a cookie string.

    Unset directives and false flags are omitted. With *include_name*,
    the result is prefixed with ``Set-Cookie: ``.
    """
    fields = [f"{key}={value}" for key, value in c.items()]
    for name, value in (
        (DOMAIN, c.get_domain()),
        (PATH, c.get_path()),
        (EXPIRES, c.get_expires()),
        (MAX_AGE, c.get_max_age()),
    ):
        if value:
            fields.append(f"{name}={value}")
    if c.is_secure():
        fields.append("secure")
    if c.is_http_only():
        fields.append("HttpOnly")

    s = "".join(f"{field}; " for field in fields)
    if include_name:
        s = SET_COOKIE_PREFIX + s
    s = s.rstrip()
    if s.endswith(";"):
        s = s[:-1]
    return s
