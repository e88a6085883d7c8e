"""Low-level cookie tokenizer.

Splits a raw header value on ``;`` and each token on its first ``=``.
Knows nothing about directives; ``biscuits.parser`` layers the
classification on top.
"""

from collections.abc import Iterator


def iter_tokens(header: str) -> Iterator[tuple[int, str]]:
    """Yield ``(position, token)`` for every ``;``-delimited segment.

    Tokens are stripped of surrounding whitespace. Empty segments (from
    ``;;`` or a trailing ``;``) are yielded as empty strings so positions
    match the raw input.
    """
    for position, token in enumerate(header.split(";")):
        yield position, token.strip()


def split_pair(token: str) -> tuple[str, str] | None:
    """Split ``key=value`` at the first ``=``, stripping both sides.

    Values can contain ``=`` (e.g. base64). Returns ``None`` for tokens
    without ``=``.
    """
    if "=" not in token:
        return None
    key, _, value = token.partition("=")
    return key.strip(), value.strip()
