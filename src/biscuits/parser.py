"""Cookie string parsing.

Turns a raw ``Cookie`` / ``Set-Cookie`` header value into a ``Biscuit``.
Parsing is permissive by default: tokens that are neither ``key=value``
nor a bare ``secure`` / ``httponly`` flag are dropped and logged at DEBUG
on the ``biscuits.parser`` logger. Pass ``ParseConfig(strict=True)`` to get
a ``ParseError`` instead.
"""

import logging
from collections.abc import Callable

from biscuits._internal.pairs import iter_tokens, split_pair
from biscuits.config import DEFAULT_CONFIG, ParseConfig
from biscuits.cookie import Biscuit
from biscuits.directives import DOMAIN, EXPIRES, HTTPONLY, MAX_AGE, PATH, SECURE, flag_value
from biscuits.errors import ParseError

logger = logging.getLogger("biscuits.parser")


def _set_secure(biscuit: Biscuit, value: str) -> None:
    biscuit.set_secure(flag_value(value))


def _set_http_only(biscuit: Biscuit, value: str) -> None:
    biscuit.set_http_only(flag_value(value))


# Lowercase wire name -> how a ``name=value`` token is stored
_DIRECTIVE_SETTERS: dict[str, Callable[[Biscuit, str], object]] = {
    DOMAIN: Biscuit.set_domain,
    PATH: Biscuit.set_path,
    EXPIRES: Biscuit.set_expires,
    MAX_AGE: Biscuit.set_max_age,
    SECURE: _set_secure,
    HTTPONLY: _set_http_only,
}

# Flags that may appear without ``=value``
_BARE_FLAGS: dict[str, Callable[[Biscuit, bool], bool]] = {
    SECURE: Biscuit.set_secure,
    HTTPONLY: Biscuit.set_http_only,
}


def parse_biscuit(s: str, config: ParseConfig | None = None) -> Biscuit:
    """Parse a cookie string into a ``Biscuit``.

    ``key=value`` tokens whose key is a directive (any casing) fill the
    directive fields; the rest become data with their key casing kept.
    A later duplicate overwrites an earlier one.

    Raises:
        ParseError: only with ``strict=True``, for a token with no ``=``
            that is not a bare flag, or one with an empty key.
    """
    cfg = config or DEFAULT_CONFIG
    biscuit = Biscuit()
    tokens = list(iter_tokens(s))

    for position, token in tokens:
        if not token:
            continue
        pair = split_pair(token)
        if pair is None:
            if token.lower() not in _BARE_FLAGS:
                _drop(token, position, cfg)
            continue
        key, value = pair
        if not key:
            _drop(token, position, cfg)
            continue
        setter = _DIRECTIVE_SETTERS.get(key.lower())
        if setter is not None:
            setter(biscuit, value)
        else:
            biscuit.set_key(key, value)

    # Bare flags have no value, so the pass above cannot assign them.
    # This pass only ever turns a flag on.
    for _, token in tokens:
        set_flag = _BARE_FLAGS.get(token.lower())
        if set_flag is not None:
            set_flag(biscuit, True)

    return biscuit


def _drop(token: str, position: int, config: ParseConfig) -> None:
    if config.strict:
        raise ParseError(token, position)
    logger.debug("Dropping cookie token %r at position %d", token, position)
